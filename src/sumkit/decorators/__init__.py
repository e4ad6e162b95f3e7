"""Decorators that adapt plain functions to sumkit containers."""

from sumkit.decorators.optional import optional
from sumkit.decorators.safe import safe

__all__ = ['optional', 'safe']
