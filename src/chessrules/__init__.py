"""Chess rules engine: board state, move legality, game end detection, FEN."""

__version__ = "0.1.0"
