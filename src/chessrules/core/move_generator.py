"""Pseudo-legal move generation + attack detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.position import Position

if TYPE_CHECKING:
    from chessrules.core.board import Board


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# piece type -> (direction table, slides)
MOVEMENT: dict[PieceType, tuple[tuple[tuple[int, int], ...], bool]] = {
    PieceType.KNIGHT: (KNIGHT_OFFSETS, False),
    PieceType.KING: (KING_OFFSETS, False),
    PieceType.BISHOP: (BISHOP_DIRS, True),
    PieceType.ROOK: (ROOK_DIRS, True),
    PieceType.QUEEN: (QUEEN_DIRS, True),
}

KINGSIDE_ROOK_COL = 7
QUEENSIDE_ROOK_COL = 0
KING_HOME_COL = 4


class MoveGenerator:
    """Destination squares and attacked squares for pieces on a :class:`Board`.

    Everything here is pseudo-legal: king safety is the board's concern.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def possible_moves(self, piece: Piece) -> list[Position]:
        """Pseudo-legal destinations for *piece* (may leave own king in check)."""
        if piece.piece_type == PieceType.PAWN:
            return self._pawn_moves(piece)
        moves = self._walk(piece)
        if piece.piece_type == PieceType.KING:
            moves.extend(self.castling_destinations(piece))
        return moves

    def attack_moves(self, piece: Piece) -> list[Position]:
        """Squares *piece* threatens.

        Pawns threaten both forward diagonals whether or not anything stands
        there; every other kind threatens exactly its ordinary destinations.
        """
        if piece.piece_type == PieceType.PAWN:
            return self._pawn_attacks(piece)
        return self._walk(piece)

    def castling_destinations(self, king: Piece) -> list[Position]:
        """King targets two files away for each castling right still held."""
        color = king.color
        row = color.home_row
        if king.position != Position(row, KING_HOME_COL):
            return []

        castling = self._board.castling
        destinations: list[Position] = []
        if castling & CastlingRights.for_side(color, kingside=True):
            destinations.append(Position(row, KING_HOME_COL + 2))
        if castling & CastlingRights.for_side(color, kingside=False):
            destinations.append(Position(row, KING_HOME_COL - 2))
        return destinations

    # -- Attack detection ---------------------------------------------------

    def is_square_attacked(self, square: Position, by_color: Color) -> bool:
        """Is *square* attacked by any piece of *by_color*?"""
        for piece in self._board.pieces(by_color):
            if square in self.attack_moves(piece):
                return True
        return False

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?  No king → False."""
        king_sq = self._board.find_king(color)
        if king_sq is None:
            return False
        return self.is_square_attacked(king_sq, color.opposite)

    def en_passant_victim(self, pawn: Piece, target_sq: Position) -> Piece | None:
        """Enemy pawn *pawn* would take by moving onto the en passant *target_sq*."""
        board = self._board
        if target_sq != board.en_passant or not board.is_empty(target_sq):
            return None
        victim = board[Position(pawn.position.row, target_sq.col)]
        if (
            victim is None
            or victim.piece_type != PieceType.PAWN
            or victim.color == pawn.color
        ):
            return None
        return victim

    # -- Piece-specific generators (private) -------------------------------

    def _walk(self, piece: Piece) -> list[Position]:
        board = self._board
        directions, slides = MOVEMENT[piece.piece_type]
        moves: list[Position] = []
        for d_row, d_col in directions:
            current = piece.position.offset(d_row, d_col)
            while current is not None:
                target = board[current]
                if target is None:
                    moves.append(current)
                elif target.color != piece.color:
                    moves.append(current)
                    break
                else:
                    break
                if not slides:
                    break
                current = current.offset(d_row, d_col)
        return moves

    def _pawn_moves(self, pawn: Piece) -> list[Position]:
        board = self._board
        forward = pawn.color.forward
        moves: list[Position] = []

        one_step = pawn.position.offset(forward, 0)
        if one_step is not None and board.is_empty(one_step):
            moves.append(one_step)
            if pawn.position.row == pawn.color.pawn_row:
                two_step = pawn.position.offset(2 * forward, 0)
                if two_step is not None and board.is_empty(two_step):
                    moves.append(two_step)

        for target_sq in self._pawn_attacks(pawn):
            target = board[target_sq]
            if target is not None and target.color != pawn.color:
                moves.append(target_sq)
            elif self.en_passant_victim(pawn, target_sq) is not None:
                moves.append(target_sq)
        return moves

    def _pawn_attacks(self, pawn: Piece) -> list[Position]:
        forward = pawn.color.forward
        attacks: list[Position] = []
        for d_col in (-1, 1):
            target_sq = pawn.position.offset(forward, d_col)
            if target_sq is not None:
                attacks.append(target_sq)
        return attacks
