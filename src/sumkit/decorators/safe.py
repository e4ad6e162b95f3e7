"""@safe decorator: run a function under try_of and return a Try."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

import wrapt

from sumkit._config import current_settings
from sumkit._logging import get_logger
from sumkit.try_ import DEFAULT_EXCEPTIONS, Failure, Success, try_of

__all__ = ['safe']

logger = get_logger(__name__)


@overload
def safe[**P, T](func: Callable[P, T]) -> Callable[P, Success[T] | Failure]: ...


@overload
def safe[**P, T](
    func: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Success[T] | Failure]]: ...


def safe(
    func: Callable[..., Any] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator that captures exceptions and returns a Try.

    The wrapped function returns Success(value) when it returns normally and
    Failure(exception) when it raises one of ``exceptions``. Each capture is
    logged at DEBUG level as ``safe.captured`` unless ``init(log_captures=False)``
    turned that off.

    A function that returns None comes back as ``Failure(InvalidArgumentError)``,
    because a Success cannot hold None. Wrap procedures that run only for
    their side effects with ``try_run`` instead, which yields ``Success(UNIT)``.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, KeyError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Exception types to capture. Defaults to (Exception,).

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b
        divide(10, 2)
        # Success(value=5.0)
        divide(10, 0)
        # Failure(error=ZeroDivisionError('division by zero'))
        ```
    """
    catch = exceptions if exceptions is not None else DEFAULT_EXCEPTIONS

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Success[Any] | Failure:
        outcome = try_of(lambda: wrapped(*args, **kwargs), exceptions=catch)
        if current_settings().log_captures:
            outcome.on_failure(
                lambda exc: logger.debug(
                    'safe.captured',
                    function=getattr(wrapped, '__qualname__', repr(wrapped)),
                    error=repr(exc),
                )
            )
        return outcome

    if func is not None:
        return wrapper(func)
    return wrapper
