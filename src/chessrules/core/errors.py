"""Construction errors raised by the core domain layer."""

from __future__ import annotations


class ChessError(ValueError):
    """Base class for malformed input handed to the engine."""


class OutOfRange(ChessError):
    """Board coordinates outside 0–7."""


class InvalidNotation(ChessError):
    """Malformed square name or coordinate move text."""


class InvalidFEN(ChessError):
    """Malformed FEN string."""
