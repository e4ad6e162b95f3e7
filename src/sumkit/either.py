"""Either type: Left[L] | Right[R], a right-biased two-sided union."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeIs

import msgspec

from sumkit.errors import InvalidArgumentError, require_present
from sumkit.option import Nothing, Some

if TYPE_CHECKING:
    from sumkit.result import Err, Ok

__all__ = ['Either', 'Left', 'Right', 'left', 'right']


class Left[L](msgspec.Struct, frozen=True):
    """Left variant of Either - the non-primary side.

    ``map`` and ``flat_map`` pass a Left through untouched; use
    ``map_left`` to transform it.

    Examples:
        >>> Left('boom').map(lambda x: x + 1)
        Left(value='boom')
        >>> Left('boom').swap()
        Right(value='boom')
    """

    value: L

    def __post_init__(self) -> None:
        require_present(self.value, 'value')

    def is_left(self) -> TypeIs[Left[L]]:
        """Return True since this is Left."""
        return True

    def is_right(self) -> TypeIs[Right[Any]]:
        """Return False since this is Left."""
        return False

    def map(self, _f: Callable[[Any], Any]) -> Left[L]:
        """Return self unchanged since this is Left."""
        return self

    def map_left[L2](self, f: Callable[[L], L2]) -> Left[L2]:
        """Apply a function to the Left value.

        Raises:
            InvalidArgumentError: If f returns None.
        """
        mapped = f(self.value)
        if mapped is None:
            raise InvalidArgumentError('mapped left value')
        return Left(mapped)

    def flat_map(self, _f: Callable[[Any], Any]) -> Left[L]:
        """Return self unchanged since this is Left."""
        return self

    def and_then(self, f: Callable[[Any], Any]) -> Left[L]:
        """Alias for flat_map()."""
        return self.flat_map(f)

    def if_right(self, _consumer: Callable[[Any], Any]) -> None:
        """Do nothing since this is Left."""

    def if_left(self, consumer: Callable[[L], Any]) -> None:
        """Call consumer with the Left value."""
        consumer(self.value)

    def swap(self) -> Right[L]:
        """Exchange sides: Left(v) becomes Right(v)."""
        return Right(self.value)

    def to_option_right(self) -> Nothing:
        """Project the Right side: Nothing, since this is Left."""
        return Nothing()

    def to_option_left(self) -> Some[L]:
        """Project the Left side: Some(value)."""
        return Some(self.value)

    def unwrap_or[R](self, default: R) -> R:
        """Return the default since there is no Right value."""
        return default

    def fold[U](self, on_left: Callable[[L], U], _on_right: Callable[[Any], U]) -> U:
        """Dispatch on the variant: call on_left with the value."""
        return on_left(self.value)

    def to_result(self) -> Err[L]:
        """Convert to Result: Left(v) becomes Err(v)."""
        from sumkit.result import Err

        return Err(self.value)


class Right[R](msgspec.Struct, frozen=True):
    """Right variant of Either - the primary side targeted by map/flat_map.

    Examples:
        >>> Right(2).map(lambda x: x * 10)
        Right(value=20)
        >>> Right(2).to_option_left()
        Nothing()
    """

    value: R

    def __post_init__(self) -> None:
        require_present(self.value, 'value')

    def is_left(self) -> TypeIs[Left[Any]]:
        """Return False since this is Right."""
        return False

    def is_right(self) -> TypeIs[Right[R]]:
        """Return True since this is Right."""
        return True

    def map[R2](self, f: Callable[[R], R2]) -> Right[R2]:
        """Apply a function to the Right value.

        Raises:
            InvalidArgumentError: If f returns None.
        """
        mapped = f(self.value)
        if mapped is None:
            raise InvalidArgumentError('mapped right value')
        return Right(mapped)

    def map_left(self, _f: Callable[[Any], Any]) -> Right[R]:
        """Return self unchanged since this is Right."""
        return self

    def flat_map[L, R2](self, f: Callable[[R], Left[L] | Right[R2]]) -> Left[L] | Right[R2]:
        """Apply an Either-returning function to the Right value.

        Returns:
            The Either returned by f.
        """
        return f(self.value)

    def and_then[L, R2](self, f: Callable[[R], Left[L] | Right[R2]]) -> Left[L] | Right[R2]:
        """Alias for flat_map()."""
        return self.flat_map(f)

    def if_right(self, consumer: Callable[[R], Any]) -> None:
        """Call consumer with the Right value."""
        consumer(self.value)

    def if_left(self, _consumer: Callable[[Any], Any]) -> None:
        """Do nothing since this is Right."""

    def swap(self) -> Left[R]:
        """Exchange sides: Right(v) becomes Left(v)."""
        return Left(self.value)

    def to_option_right(self) -> Some[R]:
        """Project the Right side: Some(value)."""
        return Some(self.value)

    def to_option_left(self) -> Nothing:
        """Project the Left side: Nothing, since this is Right."""
        return Nothing()

    def unwrap_or(self, _default: R) -> R:
        """Return the Right value, ignoring the default."""
        return self.value

    def fold[U](self, _on_left: Callable[[Any], U], on_right: Callable[[R], U]) -> U:
        """Dispatch on the variant: call on_right with the value."""
        return on_right(self.value)

    def to_result(self) -> Ok[R]:
        """Convert to Result: Right(v) becomes Ok(v)."""
        from sumkit.result import Ok

        return Ok(self.value)


type Either[L, R] = Left[L] | Right[R]


def left[L](value: L) -> Left[L]:
    """Build ``Left(value)``.

    Raises:
        InvalidArgumentError: If ``value`` is None.
    """
    return Left(value)


def right[R](value: R) -> Right[R]:
    """Build ``Right(value)``.

    Raises:
        InvalidArgumentError: If ``value`` is None.
    """
    return Right(value)
