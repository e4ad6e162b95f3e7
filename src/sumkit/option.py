"""Option type: Some[T] | Nothing for values that may be absent."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from sumkit.errors import UnwrapError, require_present

if TYPE_CHECKING:
    from sumkit.result import Err, Ok

__all__ = ['Nothing', 'Option', 'Some', 'from_nullable', 'from_optional', 'nothing', 'some']


class Some[T](msgspec.Struct, frozen=True):
    """Some variant of Option containing a present value of type T.

    ``Some(None)`` is rejected - use ``from_nullable`` to treat None as absence.

    Examples:
        >>> Some(21).map(lambda x: x * 2)
        Some(value=42)
        >>> Some(3).filter(lambda x: x > 5)
        Nothing()
    """

    value: T

    def __post_init__(self) -> None:
        require_present(self.value, 'value')

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some."""
        return True

    def is_nothing(self) -> TypeIs[Nothing]:
        """Return False since this is Some."""
        return False

    def iter(self) -> Iterator[T]:
        """Return an iterator over the single contained value."""
        return iter(self)

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def unwrap_or(self, _default: T) -> T:
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, _f: Callable[[], T]) -> T:
        """Return the contained value, ignoring the fallback function."""
        return self.value

    def map[U](self, f: Callable[[T], U | None]) -> Some[U] | Nothing:
        """Apply a function to the contained value.

        A None result collapses to Nothing, mirroring nullable-map conventions.

        Args:
            f: Function to apply to the value.

        Returns:
            Some(f(value)), or Nothing if f returned None.
        """
        return from_nullable(f(self.value))

    def flat_map[U](self, f: Callable[[T], Some[U] | Nothing]) -> Some[U] | Nothing:
        """Apply a function that returns an Option to the contained value.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    def and_then[U](self, f: Callable[[T], Some[U] | Nothing]) -> Some[U] | Nothing:
        """Alias for flat_map()."""
        return self.flat_map(f)

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | Nothing:
        """Return self if the predicate holds for the value, else Nothing."""
        if predicate(self.value):
            return self
        return Nothing()

    def or_else(self, _f: Callable[[], Some[T] | Nothing]) -> Some[T]:
        """Return self unchanged since this is Some."""
        return self

    def if_present(self, consumer: Callable[[T], Any]) -> None:
        """Call consumer with the contained value."""
        consumer(self.value)

    def fold[U](self, _on_nothing: Callable[[], U], on_some: Callable[[T], U]) -> U:
        """Dispatch on the variant: call on_some with the value."""
        return on_some(self.value)

    def to_optional(self) -> T | None:
        """Convert to a plain optional value: the contained value."""
        return self.value

    def ok_or[E](self, _error: E) -> Ok[T]:
        """Convert to Result, returning Ok(value)."""
        from sumkit.result import Ok

        return Ok(self.value)


class Nothing(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing the absence of a value.

    Nothing is not a singleton: ``nothing()`` builds a new instance every
    call, and all instances compare equal.

    Examples:
        >>> Nothing() == Nothing()
        True
        >>> Nothing().unwrap_or(0)
        0
    """

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def is_some(self) -> TypeIs[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_nothing(self) -> TypeIs[Nothing]:
        """Return True since this is Nothing."""
        return True

    def iter(self) -> Iterator[Any]:
        """Return an empty iterator."""
        return iter(self)

    def unwrap(self) -> NoReturn:
        """Raise since there is no value to unwrap.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError('called unwrap() on Nothing')

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Raises:
            UnwrapError: Always, with ``msg``.
        """
        raise UnwrapError(msg)

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Nothing."""
        return f()

    def map(self, _f: Callable[[Any], Any]) -> Nothing:
        """Return Nothing without calling the function."""
        return self

    def flat_map(self, _f: Callable[[Any], Any]) -> Nothing:
        """Return Nothing without calling the function."""
        return self

    def and_then(self, f: Callable[[Any], Any]) -> Nothing:
        """Alias for flat_map()."""
        return self.flat_map(f)

    def filter(self, _predicate: Callable[[Any], bool]) -> Nothing:
        """Return Nothing since there's no value to test."""
        return self

    def or_else[T](self, f: Callable[[], Some[T] | Nothing]) -> Some[T] | Nothing:
        """Return the Option produced by the recovery function."""
        return f()

    def if_present(self, _consumer: Callable[[Any], Any]) -> None:
        """Do nothing since there's no value."""

    def fold[U](self, on_nothing: Callable[[], U], _on_some: Callable[[Any], U]) -> U:
        """Dispatch on the variant: call on_nothing."""
        return on_nothing()

    def to_optional(self) -> None:
        """Convert to a plain optional value: None."""
        return None

    def ok_or[E](self, error: E) -> Err[E]:
        """Convert to Result, returning Err(error)."""
        from sumkit.result import Err

        return Err(error)


type Option[T] = Some[T] | Nothing


def some[T](value: T) -> Some[T]:
    """Build ``Some(value)``.

    Raises:
        InvalidArgumentError: If ``value`` is None.
    """
    return Some(value)


def nothing() -> Nothing:
    """Build a fresh ``Nothing()``."""
    return Nothing()


def from_nullable[T](value: T | None) -> Some[T] | Nothing:
    """Map None to Nothing and anything else to Some."""
    if value is None:
        return Nothing()
    return Some(value)


def from_optional[T](value: T | None) -> Some[T] | Nothing:
    """Convert a plain ``T | None`` into an Option."""
    return from_nullable(value)
