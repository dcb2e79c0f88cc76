"""Exception types raised by the Connect-4 engine."""

from __future__ import annotations


class Connect4Error(Exception):
    """Base class for all engine errors."""


class OutOfRangeError(Connect4Error, ValueError):
    """A row, column, depth or difficulty tier outside the recognized range."""


class InvalidStateError(Connect4Error, ValueError):
    """An operation was requested on a board that cannot support it (e.g. no legal moves)."""
