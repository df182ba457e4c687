"""Exception hierarchy of the core engine."""

from __future__ import annotations


class ChessError(Exception):
    """Base class for every error raised by :mod:`chesswalk`."""


class OutOfBoundsError(ChessError):
    """A coordinate step left the 8x8 board."""


class InvalidActionError(ChessError):
    """An action is not a member of the board's current legal set."""
