"""Library error types: contract violations and wrong-variant unwraps."""

from __future__ import annotations

__all__ = [
    'InvalidArgumentError',
    'SumkitError',
    'UnwrapError',
    'require_present',
]


class SumkitError(Exception):
    """Base class for errors raised by sumkit itself."""


class InvalidArgumentError(SumkitError, ValueError):
    """A required payload was missing - raised at construction or mapping time.

    Attributes:
        argument: Name of the offending argument (e.g. ``'value'`` or
            ``'mapped right value'``).
        reason: Human-readable description of the violated contract.
    """

    def __init__(self, argument: str, reason: str | None = None) -> None:
        self.argument = argument
        self.reason = reason or 'must not be None'
        super().__init__(f'{argument} {self.reason}')


class UnwrapError(SumkitError, RuntimeError):
    """A value was unwrapped from the wrong variant."""

    def __init__(self, message: str, payload: object = None) -> None:
        self.payload = payload
        super().__init__(message)


def require_present[T](value: T | None, argument: str) -> T:
    """Return ``value`` unchanged, or raise if it is None.

    Args:
        value: The payload to check.
        argument: Name used in the error message.

    Raises:
        InvalidArgumentError: If ``value`` is None.
    """
    if value is None:
        raise InvalidArgumentError(argument)
    return value
