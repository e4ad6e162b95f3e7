"""Unit sentinel for computations that complete without a payload."""

from __future__ import annotations

from enum import Enum

__all__ = ['UNIT', 'Unit']


class Unit(Enum):
    """Marker standing in for "ran with no payload".

    ``try_run`` wraps a successful effect as ``Success(Unit.UNIT)``.
    """

    UNIT = 'unit'

    def __repr__(self) -> str:
        return 'UNIT'


UNIT = Unit.UNIT
