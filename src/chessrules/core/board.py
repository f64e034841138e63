"""Board: the mutable game aggregate and its move state machine."""

from __future__ import annotations

import logging
from dataclasses import replace

from chessrules.core.enums import CastlingRights, Color, MoveType, PieceType
from chessrules.core.move import PROMOTION_TYPES, Move
from chessrules.core.move_generator import (
    KING_HOME_COL,
    KINGSIDE_ROOK_COL,
    QUEENSIDE_ROOK_COL,
    MoveGenerator,
)
from chessrules.core.piece import Piece
from chessrules.core.position import ALL_SQUARES, Position
from chessrules.core.rules import Rules

_LOGGER = logging.getLogger(__name__)

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

# kingside flag -> (rook origin col, rook target col, cols that must be empty)
_CASTLE_LAYOUT: dict[bool, tuple[int, int, tuple[int, ...]]] = {
    True: (KINGSIDE_ROOK_COL, 5, (5, 6)),
    False: (QUEENSIDE_ROOK_COL, 3, (1, 2, 3)),
}


class Board:
    """8x8 grid plus turn, castling rights, en passant target, clocks and history.

    Mutated only through :meth:`apply_move` (or :meth:`make_move`, which
    validates first).  Use :meth:`clone` for any speculative continuation.
    """

    __slots__ = (
        "_grid",
        "current_turn",
        "castling",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
        "_history",
        "_captured",
    )

    def __init__(self) -> None:
        self._grid: list[Piece | None] = [None] * 64
        self.current_turn = Color.WHITE
        self.castling = CastlingRights.NONE
        self.en_passant: Position | None = None
        self.halfmove_clock = 0
        self.fullmove_number = 1
        self._history: list[Move] = []
        # [color] -> pieces captured BY that color
        self._captured: tuple[list[Piece], list[Piece]] = ([], [])

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for color in (Color.WHITE, Color.BLACK):
            for col, pt in enumerate(_BACK_RANK):
                home = Position(color.home_row, col)
                pawn_home = Position(color.pawn_row, col)
                b[home] = Piece(color, pt, home)
                b[pawn_home] = Piece(color, PieceType.PAWN, pawn_home)
        b.castling = CastlingRights.ALL
        return b

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Position) -> Piece | None:
        return self._grid[sq.index]

    def __setitem__(self, sq: Position, piece: Piece | None) -> None:
        """Place *piece* on *sq* (its position is rewritten to *sq*)."""
        if piece is not None and piece.position != sq:
            piece = replace(piece, position=sq)
        self._grid[sq.index] = piece

    def is_empty(self, sq: Position) -> bool:
        return self._grid[sq.index] is None

    def pieces(self, color: Color | None = None) -> list[Piece]:
        """All pieces on the board, optionally restricted to *color*."""
        return [
            p for p in self._grid if p is not None and (color is None or p.color == color)
        ]

    def find_king(self, color: Color) -> Position | None:
        for piece in self._grid:
            if (
                piece is not None
                and piece.piece_type == PieceType.KING
                and piece.color == color
            ):
                return piece.position
        return None

    def has_castling_right(self, color: Color, kingside: bool) -> bool:
        return bool(self.castling & CastlingRights.for_side(color, kingside))

    @property
    def history(self) -> list[Move]:
        return self._history.copy()

    def history_notation(self) -> list[str]:
        """Move history in algebraic notation."""
        return [move.notation for move in self._history]

    def captured_pieces(self, color: Color) -> list[Piece]:
        """Pieces captured *by* *color*, in capture order."""
        return self._captured[int(color)].copy()

    def is_in_check(self, color: Color) -> bool:
        return MoveGenerator(self).is_in_check(color)

    # -- Move construction --------------------------------------------------

    def build_move(
        self,
        from_sq: Position,
        to_sq: Position,
        promotion: PieceType | None = None,
    ) -> Move | None:
        """Describe moving whatever stands on *from_sq* to *to_sq*.

        The move type and captured piece are derived from the board.  Returns
        ``None`` when *from_sq* is empty.  The result is only a proposal.
        """
        piece = self[from_sq]
        if piece is None:
            return None

        move_type = self._infer_move_type(piece, from_sq, to_sq)
        if move_type == MoveType.EN_PASSANT:
            captured = self[Position(from_sq.row, to_sq.col)]
        else:
            captured = self[to_sq]

        if move_type == MoveType.PROMOTION:
            promotion = promotion or PieceType.QUEEN
        else:
            promotion = None
        return Move(from_sq, to_sq, piece, captured, move_type, promotion)

    def _infer_move_type(
        self, piece: Piece, from_sq: Position, to_sq: Position
    ) -> MoveType:
        if piece.piece_type == PieceType.KING:
            if from_sq.row == to_sq.row and abs(to_sq.col - from_sq.col) == 2:
                if to_sq.col > from_sq.col:
                    return MoveType.CASTLE_KINGSIDE
                return MoveType.CASTLE_QUEENSIDE
        elif piece.piece_type == PieceType.PAWN:
            if to_sq.row == piece.color.promotion_row:
                return MoveType.PROMOTION
            if (
                to_sq.col != from_sq.col
                and MoveGenerator(self).en_passant_victim(piece, to_sq) is not None
            ):
                return MoveType.EN_PASSANT
        return MoveType.NORMAL

    # -- Validation ---------------------------------------------------------

    def is_valid_move(self, move: Move) -> bool:
        """Full legality gate for the side to move; never raises."""
        reason = self._rejection_reason(move)
        if reason is not None:
            _LOGGER.debug("Rejected move %s: %s", move.uci, reason)
            return False
        return True

    def _rejection_reason(self, move: Move) -> str | None:
        piece = self[move.from_sq]
        if piece is None or not piece.same_kind(move.piece):
            return "no matching piece on origin square"
        if move.from_sq == move.to_sq:
            return "origin equals destination"
        if piece.color != self.current_turn:
            return f"not {piece.color}'s turn"

        target = self[move.to_sq]
        if target is not None and target.color == piece.color:
            return "destination occupied by own piece"

        if move.to_sq not in MoveGenerator(self).possible_moves(piece):
            return "destination not reachable"

        return self._rule_rejection(piece, move)

    def _rule_rejection(self, piece: Piece, move: Move) -> str | None:
        """Special-move rules and the king-safety simulation."""
        expected = self._infer_move_type(piece, move.from_sq, move.to_sq)
        if move.move_type != expected:
            return f"move type {move.move_type.name} does not fit the move"
        if move.promotion is not None and move.move_type != MoveType.PROMOTION:
            return "promotion kind on a non-promotion move"

        if move.is_castling:
            reason = self._castle_rejection(
                piece.color, move.move_type == MoveType.CASTLE_KINGSIDE
            )
            if reason is not None:
                return reason
        elif move.move_type == MoveType.EN_PASSANT:
            if self.en_passant is None or move.to_sq != self.en_passant:
                return "no en passant target there"
            if piece.piece_type != PieceType.PAWN:
                return "only pawns capture en passant"
        elif move.move_type == MoveType.PROMOTION:
            if piece.piece_type != PieceType.PAWN:
                return "only pawns promote"
            if move.to_sq.row != piece.color.promotion_row:
                return "promotion off the far rank"
            if move.promotion is not None and move.promotion not in PROMOTION_TYPES:
                return f"cannot promote to {move.promotion.name}"

        if self._leaves_king_in_check(move):
            return "own king left in check"
        return None

    def _castle_rejection(self, color: Color, kingside: bool) -> str | None:
        if not self.has_castling_right(color, kingside):
            return "castling right lost"

        row = color.home_row
        rook_col, _, between = _CASTLE_LAYOUT[kingside]
        king = self[Position(row, KING_HOME_COL)]
        rook = self[Position(row, rook_col)]
        if king is None or king.piece_type != PieceType.KING or king.color != color:
            return "king not on its home square"
        if rook is None or rook.piece_type != PieceType.ROOK or rook.color != color:
            return "rook not on its home square"
        if any(not self.is_empty(Position(row, col)) for col in between):
            return "castling path blocked"

        gen = MoveGenerator(self)
        if gen.is_in_check(color):
            return "cannot castle out of check"
        step = 1 if kingside else -1
        for col in (KING_HOME_COL, KING_HOME_COL + step, KING_HOME_COL + 2 * step):
            if gen.is_square_attacked(Position(row, col), color.opposite):
                return "king passes through an attacked square"
        return None

    def _leaves_king_in_check(self, move: Move) -> bool:
        trial = self.clone()
        trial._move_pieces(move)
        return MoveGenerator(trial).is_in_check(move.piece.color)

    # -- Legal move enumeration --------------------------------------------

    def valid_moves(self, piece: Piece) -> list[Position]:
        """Destinations of *piece* that pass every rule, regardless of turn."""
        legal: list[Position] = []
        for to_sq in MoveGenerator(self).possible_moves(piece):
            move = self.build_move(piece.position, to_sq)
            if move is not None and self._rule_rejection(piece, move) is None:
                legal.append(to_sq)
        return legal

    def legal_moves(self, color: Color | None = None) -> list[Move]:
        """Every legal move for *color* (default: side to move)."""
        moves: list[Move] = []
        for piece in self.pieces(self.current_turn if color is None else color):
            for to_sq in self.valid_moves(piece):
                move = self.build_move(piece.position, to_sq)
                assert move is not None
                if move.move_type == MoveType.PROMOTION:
                    moves.extend(replace(move, promotion=pt) for pt in PROMOTION_TYPES)
                else:
                    moves.append(move)
        return moves

    # -- Mutation -----------------------------------------------------------

    def make_move(self, move: Move) -> bool:
        """Validate and apply *move*.  Returns False (board untouched) if illegal."""
        if not self.is_valid_move(move):
            return False
        self.apply_move(move)
        return True

    def apply_move(self, move: Move) -> None:
        """Apply an already validated *move*.  Performs no checks."""
        piece = self[move.from_sq] or move.piece
        if move.move_type == MoveType.EN_PASSANT:
            captured = self[Position(move.from_sq.row, move.to_sq.col)]
        else:
            captured = self[move.to_sq]

        if captured is not None:
            self._captured[int(piece.color)].append(captured)

        self._history.append(move)

        if captured is not None or piece.piece_type == PieceType.PAWN:
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1

        self._move_pieces(move)
        self._update_castling(move, piece, captured)

        if (
            piece.piece_type == PieceType.PAWN
            and abs(move.to_sq.row - move.from_sq.row) == 2
        ):
            self.en_passant = Position(
                (move.from_sq.row + move.to_sq.row) // 2, move.from_sq.col
            )
        else:
            self.en_passant = None

        self.current_turn = self.current_turn.opposite
        if piece.color == Color.BLACK:
            self.fullmove_number += 1

        self._history[-1] = self._annotate(move)

    def _move_pieces(self, move: Move) -> None:
        """Grid-only relocation for every move type."""
        if move.is_castling:
            kingside = move.move_type == MoveType.CASTLE_KINGSIDE
            row = move.from_sq.row
            rook_col, rook_to_col, _ = _CASTLE_LAYOUT[kingside]
            self._relocate(move.from_sq, move.to_sq)
            self._relocate(Position(row, rook_col), Position(row, rook_to_col))
        elif move.move_type == MoveType.EN_PASSANT:
            self._relocate(move.from_sq, move.to_sq)
            self[Position(move.from_sq.row, move.to_sq.col)] = None
        elif move.move_type == MoveType.PROMOTION:
            pawn = self[move.from_sq] or move.piece
            promoted = pawn.promoted_to(move.promotion or PieceType.QUEEN)
            self[move.from_sq] = None
            self[move.to_sq] = promoted
        else:
            self._relocate(move.from_sq, move.to_sq)

    def _relocate(self, from_sq: Position, to_sq: Position) -> None:
        piece = self[from_sq]
        if piece is None:
            return
        self._grid[from_sq.index] = None
        self._grid[to_sq.index] = piece.moved_to(to_sq)

    # -- Castling bookkeeping -----------------------------------------------

    _ROOK_CORNERS: dict[Position, CastlingRights] = {
        Position(7, QUEENSIDE_ROOK_COL): CastlingRights.WHITE_QUEENSIDE,
        Position(7, KINGSIDE_ROOK_COL): CastlingRights.WHITE_KINGSIDE,
        Position(0, QUEENSIDE_ROOK_COL): CastlingRights.BLACK_QUEENSIDE,
        Position(0, KINGSIDE_ROOK_COL): CastlingRights.BLACK_KINGSIDE,
    }

    def _update_castling(
        self, move: Move, piece: Piece, captured: Piece | None
    ) -> None:
        castling = self.castling
        if piece.piece_type == PieceType.KING:
            castling &= ~CastlingRights.for_color(piece.color)
        elif piece.piece_type == PieceType.ROOK and move.from_sq in self._ROOK_CORNERS:
            castling &= ~self._ROOK_CORNERS[move.from_sq]

        if (
            captured is not None
            and captured.piece_type == PieceType.ROOK
            and move.to_sq in self._ROOK_CORNERS
        ):
            castling &= ~self._ROOK_CORNERS[move.to_sq]
        self.castling = castling

    def _annotate(self, move: Move) -> Move:
        """Re-record *move* with check / checkmate for the side now to move."""
        side = self.current_turn
        if not self.is_in_check(side):
            return move
        mated = not Rules.has_any_legal_move(self, side)
        return replace(move, is_check=True, is_checkmate=mated)

    # -- Copying ------------------------------------------------------------

    def clone(self) -> Board:
        """Independent copy: mutating it never affects this board."""
        b = Board()
        b._grid = self._grid.copy()
        b.current_turn = self.current_turn
        b.castling = self.castling
        b.en_passant = self.en_passant
        b.halfmove_clock = self.halfmove_clock
        b.fullmove_number = self.fullmove_number
        b._history = self._history.copy()
        b._captured = (self._captured[0].copy(), self._captured[1].copy())
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._grid == other._grid
            and self.current_turn == other.current_turn
            and self.castling == other.castling
            and self.en_passant == other.en_passant
        )

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(8):
            cells = []
            for sq in ALL_SQUARES[row * 8 : row * 8 + 8]:
                p = self[sq]
                cells.append(str(p) if p else ".")
            rows.append(f"{8 - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        rows.append(f"Current turn: {self.current_turn}")
        return "\n".join(rows)
