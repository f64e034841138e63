"""Move value object with derived algebraic and coordinate notation."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessrules.core.enums import MoveType, PieceType
from chessrules.core.piece import Piece
from chessrules.core.position import Position

_SAN_PIECE: dict[PieceType, str] = {
    PieceType.PAWN: "",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable proposal for a state transition.

    ``piece`` is a snapshot of the mover (color + kind), never a live
    reference into a board.  Equality ignores the captured piece and the
    check annotations so an annotated history entry still equals the
    proposal it was built from.
    """

    from_sq: Position
    to_sq: Position
    piece: Piece
    captured: Piece | None = field(default=None, compare=False)
    move_type: MoveType = MoveType.NORMAL
    promotion: PieceType | None = None
    is_check: bool = field(default=False, compare=False)
    is_checkmate: bool = field(default=False, compare=False)

    # ── Classification ───────────────────────────────────────────────────

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    @property
    def is_castling(self) -> bool:
        return self.move_type in (MoveType.CASTLE_KINGSIDE, MoveType.CASTLE_QUEENSIDE)

    @property
    def is_en_passant(self) -> bool:
        return self.move_type == MoveType.EN_PASSANT

    @property
    def is_promotion(self) -> bool:
        return self.move_type == MoveType.PROMOTION

    # ── Display ──────────────────────────────────────────────────────────

    @property
    def notation(self) -> str:
        """Short algebraic notation, e.g. ``Nf3``, ``exd5``, ``e8=Q#``, ``O-O``."""
        if self.move_type == MoveType.CASTLE_KINGSIDE:
            text = "O-O"
        elif self.move_type == MoveType.CASTLE_QUEENSIDE:
            text = "O-O-O"
        else:
            text = _SAN_PIECE[self.piece.piece_type]
            if self.captured is not None:
                if self.piece.piece_type == PieceType.PAWN:
                    text += self.from_sq.to_notation()[0]
                text += "x"
            text += self.to_sq.to_notation()
            if self.move_type == MoveType.PROMOTION:
                text += "=" + _SAN_PIECE[self.promotion or PieceType.QUEEN]

        if self.is_checkmate:
            text += "#"
        elif self.is_check:
            text += "+"
        return text

    @property
    def uci(self) -> str:
        """Four-character coordinate form, e.g. ``e2e4``."""
        return f"{self.from_sq.to_notation()}{self.to_sq.to_notation()}"

    def __str__(self) -> str:
        return self.notation
