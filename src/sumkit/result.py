"""Result type: Ok[T] | Err[E] for the outcome of a fallible operation.

Result has the same shape as Either but speaks the vocabulary of success and
failure. Chaining ``flat_map`` gives railway-style composition: the first Err
short-circuits every later step.

Example:
    ```python
    from sumkit.result import Err, Ok, err, ok

    def not_blank(s: str):
        return err('empty') if not s.strip() else ok(s)

    def require_even(n: int):
        return ok(f'even:{n}') if n % 2 == 0 else err(f'odd:{n}')

    ok('abcd').flat_map(not_blank).map(len).flat_map(require_even)  # Ok('even:4')
    ok('abc').flat_map(not_blank).map(len).flat_map(require_even)   # Err('odd:3')
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, NoReturn, TypeIs

import msgspec

from sumkit.either import Left, Right
from sumkit.errors import InvalidArgumentError, UnwrapError, require_present
from sumkit.option import Nothing, Some

__all__ = ['Err', 'Ok', 'Result', 'collect', 'err', 'ok']


class Ok[T](msgspec.Struct, frozen=True):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> Ok(2).map(lambda x: x + 1)
        Ok(value=3)
        >>> Ok(2).map_failure(len)
        Ok(value=2)
    """

    value: T

    def __post_init__(self) -> None:
        require_present(self.value, 'value')

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok."""
        return True

    def is_err(self) -> TypeIs[Err[Any]]:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained Ok value."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise since there is no error to unwrap.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError(f'called unwrap_err() on Ok({self.value!r})', self.value)

    def unwrap_or(self, _default: T) -> T:
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, _f: Callable[[Any], T]) -> T:
        """Return the contained Ok value, ignoring the fallback function."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Raises:
            InvalidArgumentError: If f returns None.
        """
        mapped = f(self.value)
        if mapped is None:
            raise InvalidArgumentError('mapped ok value')
        return Ok(mapped)

    def map_failure(self, _f: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def flat_map[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Apply a Result-returning function to the contained value.

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Alias for flat_map()."""
        return self.flat_map(f)

    def or_else(self, _f: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def on_success(self, consumer: Callable[[T], Any]) -> None:
        """Call consumer with the Ok value."""
        consumer(self.value)

    def on_failure(self, _consumer: Callable[[Any], Any]) -> None:
        """Do nothing since this is Ok."""

    def to_option_success(self) -> Some[T]:
        """Project the success side: Some(value)."""
        return Some(self.value)

    def to_option_failure(self) -> Nothing:
        """Project the failure side: Nothing, since this is Ok."""
        return Nothing()

    def to_either(self) -> Right[T]:
        """Convert to Either: Ok(v) becomes Right(v)."""
        return Right(self.value)

    def fold[U](self, _on_err: Callable[[Any], U], on_ok: Callable[[T], U]) -> U:
        """Dispatch on the variant: call on_ok with the value."""
        return on_ok(self.value)


class Err[E](msgspec.Struct, frozen=True):
    """Failure variant of Result containing an error of type E.

    Examples:
        >>> Err('bad').map(lambda x: x + 1)
        Err(error='bad')
        >>> Err('e').map_failure(len)
        Err(error=1)
    """

    error: E

    def __post_init__(self) -> None:
        require_present(self.error, 'error')

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True since this is Err."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise since there is no Ok value to unwrap.

        Raises:
            UnwrapError: Always; the error is kept on ``payload``.
        """
        raise UnwrapError(f'called unwrap() on Err({self.error!r})', self.error)

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError(f'{msg}: {self.error!r}', self.error)

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute a value from the error."""
        return f(self.error)

    def map(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_failure[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Raises:
            InvalidArgumentError: If f returns None.
        """
        mapped = f(self.error)
        if mapped is None:
            raise InvalidArgumentError('mapped failure value')
        return Err(mapped)

    def flat_map(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def and_then(self, f: Callable[[Any], Any]) -> Err[E]:
        """Alias for flat_map()."""
        return self.flat_map(f)

    def or_else[T, F](self, f: Callable[[E], Ok[T] | Err[F]]) -> Ok[T] | Err[F]:
        """Apply a recovery function to the error.

        Returns:
            The Result returned by f.
        """
        return f(self.error)

    def on_success(self, _consumer: Callable[[Any], Any]) -> None:
        """Do nothing since this is Err."""

    def on_failure(self, consumer: Callable[[E], Any]) -> None:
        """Call consumer with the error."""
        consumer(self.error)

    def to_option_success(self) -> Nothing:
        """Project the success side: Nothing, since this is Err."""
        return Nothing()

    def to_option_failure(self) -> Some[E]:
        """Project the failure side: Some(error)."""
        return Some(self.error)

    def to_either(self) -> Left[E]:
        """Convert to Either: Err(e) becomes Left(e)."""
        return Left(self.error)

    def fold[U](self, on_err: Callable[[E], U], _on_ok: Callable[[Any], U]) -> U:
        """Dispatch on the variant: call on_err with the error."""
        return on_err(self.error)


type Result[T, E = Exception] = Ok[T] | Err[E]


def ok[T](value: T) -> Ok[T]:
    """Build ``Ok(value)``.

    Raises:
        InvalidArgumentError: If ``value`` is None.
    """
    return Ok(value)


def err[E](error: E) -> Err[E]:
    """Build ``Err(error)``.

    Raises:
        InvalidArgumentError: If ``error`` is None.
    """
    return Err(error)


def collect[T, E](results: Iterable[Ok[T] | Err[E]]) -> Ok[list[T]] | Err[E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Err encountered; later results are not
    consumed.

    Examples:
        >>> collect([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
        >>> collect([Ok(1), Err('fail'), Ok(3)])
        Err(error='fail')
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)
