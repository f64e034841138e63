"""Coordinate (long algebraic) move text, e.g. ``e2e4`` or ``e7e8q``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import PieceType
from chessrules.core.errors import InvalidNotation
from chessrules.core.position import Position

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.move import Move

_PROMO_MAP: dict[str, PieceType] = {
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
}


def parse_coordinate(text: str) -> tuple[Position, Position, PieceType | None]:
    """Split coordinate text into origin, destination and promotion kind.

    The exchanged form is four characters; a trailing promotion letter as
    sent by external engines is accepted too.
    """
    if not isinstance(text, str) or len(text) not in (4, 5):
        raise InvalidNotation(f"Invalid coordinate move: {text!r}")

    from_sq = Position.from_notation(text[0:2])
    to_sq = Position.from_notation(text[2:4])
    promotion: PieceType | None = None
    if len(text) == 5:
        promotion = _PROMO_MAP.get(text[4].lower())
        if promotion is None:
            raise InvalidNotation(f"Invalid promotion in coordinate move: {text!r}")
    return from_sq, to_sq, promotion


def move_from_coordinate(board: Board, text: str) -> Move | None:
    """Resolve coordinate text against *board*; ``None`` if the origin is empty.

    The returned move is still only a proposal: callers validate it.
    """
    from_sq, to_sq, promotion = parse_coordinate(text)
    return board.build_move(from_sq, to_sq, promotion)
