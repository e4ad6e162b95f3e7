"""@optional decorator: turn a ``T | None`` return into an Option."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import wrapt

from sumkit.option import Nothing, Some, from_nullable

__all__ = ['optional']


def optional[**P, T](func: Callable[P, T | None]) -> Callable[P, Some[T] | Nothing]:
    """Wrap a function so that a None return becomes Nothing.

    Exceptions raised by the function propagate unchanged.

    Example:
        ```python
        @optional
        def lookup(key: str) -> str | None:
            return {'a': 'x'}.get(key)
        lookup('a')  # Some(value='x')
        lookup('b')  # Nothing()
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Some[Any] | Nothing:
        return from_nullable(wrapped(*args, **kwargs))

    return wrapper(func)
