"""Enumerations and flags shared by the rules engine."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a pawn step (row 0 is rank 8)."""
        return -1 if self == Color.WHITE else 1

    @property
    def home_row(self) -> int:
        return 7 if self == Color.WHITE else 0

    @property
    def pawn_row(self) -> int:
        return 6 if self == Color.WHITE else 1

    @property
    def promotion_row(self) -> int:
        return 0 if self == Color.WHITE else 7

    def __str__(self) -> str:
        return self.name.lower()


_MATERIAL: dict[int, int] = {1: 100, 2: 320, 3: 330, 4: 500, 5: 900, 6: 10000}


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def material_value(self) -> int:
        """Centipawn value; the king gets a large sentinel."""
        return _MATERIAL[self.value]


class MoveType(IntEnum):
    """Special move classification."""

    NORMAL = 0
    CASTLE_KINGSIDE = 1
    CASTLE_QUEENSIDE = 2
    EN_PASSANT = 3
    PROMOTION = 4


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH

    @classmethod
    def for_side(cls, color: Color, kingside: bool) -> CastlingRights:
        if color == Color.WHITE:
            return cls.WHITE_KINGSIDE if kingside else cls.WHITE_QUEENSIDE
        return cls.BLACK_KINGSIDE if kingside else cls.BLACK_QUEENSIDE

    @classmethod
    def for_color(cls, color: Color) -> CastlingRights:
        return cls.WHITE_BOTH if color == Color.WHITE else cls.BLACK_BOTH


class GameEnding(IntEnum):
    """Terminal condition for the side to move.

    ``CHECKMATE_WHITE`` means White delivered mate (White wins).
    """

    NONE = 0
    CHECKMATE_WHITE = 1
    CHECKMATE_BLACK = 2
    STALEMATE = 3
    DRAW = 4

    @property
    def winner(self) -> Color | None:
        if self == GameEnding.CHECKMATE_WHITE:
            return Color.WHITE
        if self == GameEnding.CHECKMATE_BLACK:
            return Color.BLACK
        return None


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
