"""Try type: Success[T] | Failure for computations that may raise.

``try_of`` is the only guarded call in the library: it runs a supplier and
turns whatever it raises into a ``Failure``. After that the exception is
plain data - no operator re-raises it.

Example:
    ```python
    from sumkit.try_ import try_of

    parsed = try_of(lambda: int('42'))       # Success(value=42)
    broken = try_of(lambda: int('forty'))    # Failure(error=ValueError(...))

    broken.map(lambda n: n + 1).to_result()  # Err(error=ValueError(...))
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeIs

import msgspec

from sumkit.either import Left, Right
from sumkit.errors import InvalidArgumentError, require_present
from sumkit.option import Nothing, Some
from sumkit.result import Err, Ok
from sumkit.unit import UNIT, Unit

__all__ = ['Failure', 'Success', 'Try', 'failure', 'success', 'try_of', 'try_run']

DEFAULT_EXCEPTIONS: tuple[type[BaseException], ...] = (Exception,)


class Success[T](msgspec.Struct, frozen=True):
    """Success variant of Try holding the supplier's return value."""

    value: T

    def __post_init__(self) -> None:
        require_present(self.value, 'value')

    def is_success(self) -> TypeIs[Success[T]]:
        """Return True since this is Success."""
        return True

    def is_failure(self) -> TypeIs[Failure]:
        """Return False since this is Success."""
        return False

    def unwrap_or(self, _default: T) -> T:
        """Return the contained value, ignoring the default."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Success[U]:
        """Apply a function to the contained value.

        The function is not guarded: anything it raises propagates.

        Raises:
            InvalidArgumentError: If f returns None.
        """
        mapped = f(self.value)
        if mapped is None:
            raise InvalidArgumentError('mapped success value')
        return Success(mapped)

    def flat_map[U](self, f: Callable[[T], Success[U] | Failure]) -> Success[U] | Failure:
        """Apply a Try-returning function to the contained value."""
        return f(self.value)

    def and_then[U](self, f: Callable[[T], Success[U] | Failure]) -> Success[U] | Failure:
        """Alias for flat_map()."""
        return self.flat_map(f)

    def on_success(self, consumer: Callable[[T], Any]) -> None:
        """Call consumer with the contained value."""
        consumer(self.value)

    def on_failure(self, _consumer: Callable[[BaseException], Any]) -> None:
        """Do nothing since this is Success."""

    def fold[U](self, _on_failure: Callable[[BaseException], U], on_success: Callable[[T], U]) -> U:
        """Dispatch on the variant: call on_success with the value."""
        return on_success(self.value)

    def to_option_success(self) -> Some[T]:
        """Project the success side: Some(value)."""
        return Some(self.value)

    def to_option_failure(self) -> Nothing:
        """Project the failure side: Nothing."""
        return Nothing()

    def to_either(self) -> Right[T]:
        """Convert to Either: Success(v) becomes Right(v)."""
        return Right(self.value)

    def to_result(self) -> Ok[T]:
        """Convert to Result: Success(v) becomes Ok(v)."""
        return Ok(self.value)


class Failure(msgspec.Struct, frozen=True):
    """Failure variant of Try holding the captured exception.

    Equality follows the exception objects themselves, so two Failures are
    equal only when they wrap the same exception instance.
    """

    error: BaseException

    def __post_init__(self) -> None:
        require_present(self.error, 'error')
        if not isinstance(self.error, BaseException):
            raise InvalidArgumentError('error', f'must be an exception, got {type(self.error).__name__}')

    def is_success(self) -> TypeIs[Success[Any]]:
        """Return False since this is Failure."""
        return False

    def is_failure(self) -> TypeIs[Failure]:
        """Return True since this is Failure."""
        return True

    def unwrap_or[T](self, default: T) -> T:
        """Return the default since the computation failed."""
        return default

    def map(self, _f: Callable[[Any], Any]) -> Failure:
        """Return self unchanged since this is Failure."""
        return self

    def flat_map(self, _f: Callable[[Any], Any]) -> Failure:
        """Return self unchanged since this is Failure."""
        return self

    def and_then(self, f: Callable[[Any], Any]) -> Failure:
        """Alias for flat_map()."""
        return self.flat_map(f)

    def on_success(self, _consumer: Callable[[Any], Any]) -> None:
        """Do nothing since this is Failure."""

    def on_failure(self, consumer: Callable[[BaseException], Any]) -> None:
        """Call consumer with the captured exception."""
        consumer(self.error)

    def fold[U](self, on_failure: Callable[[BaseException], U], _on_success: Callable[[Any], U]) -> U:
        """Dispatch on the variant: call on_failure with the exception."""
        return on_failure(self.error)

    def to_option_success(self) -> Nothing:
        """Project the success side: Nothing."""
        return Nothing()

    def to_option_failure(self) -> Some[BaseException]:
        """Project the failure side: Some(error)."""
        return Some(self.error)

    def to_either(self) -> Left[BaseException]:
        """Convert to Either: Failure(e) becomes Left(e)."""
        return Left(self.error)

    def to_result(self) -> Err[BaseException]:
        """Convert to Result: Failure(e) becomes Err(e)."""
        return Err(self.error)


type Try[T] = Success[T] | Failure


def success[T](value: T) -> Success[T]:
    """Build ``Success(value)``.

    Raises:
        InvalidArgumentError: If ``value`` is None.
    """
    return Success(value)


def failure(error: BaseException) -> Failure:
    """Build ``Failure(error)``.

    Raises:
        InvalidArgumentError: If ``error`` is None or not an exception.
    """
    return Failure(error)


def try_of[T](
    supplier: Callable[[], T],
    *,
    exceptions: tuple[type[BaseException], ...] = DEFAULT_EXCEPTIONS,
) -> Success[T] | Failure:
    """Run ``supplier`` and capture what it raises.

    The Success is built inside the guarded block, so a supplier returning
    None produces ``Failure(InvalidArgumentError(...))``.

    Args:
        supplier: Zero-argument computation.
        exceptions: Exception types to capture. Defaults to ``(Exception,)``;
            pass ``(BaseException,)`` to also capture ``KeyboardInterrupt``
            and ``SystemExit``.

    Returns:
        Success(value) when supplier returns, Failure(exc) when it raises.

    Raises:
        InvalidArgumentError: If ``supplier`` is None.
    """
    require_present(supplier, 'supplier')
    try:
        return Success(supplier())
    except exceptions as exc:
        return Failure(exc)


def try_run(
    procedure: Callable[[], object],
    *,
    exceptions: tuple[type[BaseException], ...] = DEFAULT_EXCEPTIONS,
) -> Success[Unit] | Failure:
    """Run an effect for its side effects and capture what it raises.

    Returns:
        Success(UNIT) on normal completion, Failure(exc) when it raises.

    Raises:
        InvalidArgumentError: If ``procedure`` is None.
    """
    require_present(procedure, 'procedure')
    try:
        procedure()
    except exceptions as exc:
        return Failure(exc)
    return Success(UNIT)
