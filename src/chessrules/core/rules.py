"""Game-end classification for the side to move."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from chessrules.core.enums import Color, GameEnding, PieceType
from chessrules.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chessrules.core.board import Board

FIFTY_MOVE_LIMIT: Final = 50  # half-moves without capture or pawn move

_MATING_MATERIAL: Final = frozenset({PieceType.PAWN, PieceType.ROOK, PieceType.QUEEN})


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # Draw policy (simplified, no claims):
    # - stalemate
    # - halfmove clock reaching FIFTY_MOVE_LIMIT
    # - K vs K, K+minor vs K (bishop square colours are not considered)
    # Threefold repetition is not tracked.

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def has_any_legal_move(board: Board, color: Color) -> bool:
        return any(board.valid_moves(piece) for piece in board.pieces(color))

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        if not Rules.is_in_check(board, color):
            return False
        return not Rules.has_any_legal_move(board, color)

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        if Rules.is_in_check(board, color):
            return False
        return not Rules.has_any_legal_move(board, color)

    @staticmethod
    def is_insufficient_material(board: Board) -> bool:
        """K vs K, or K+B / K+N vs K."""
        pieces = board.pieces()
        if any(p.piece_type in _MATING_MATERIAL for p in pieces):
            return False

        white = sum(1 for p in pieces if p.color == Color.WHITE)
        black = len(pieces) - white
        return (white, black) in ((1, 1), (2, 1), (1, 2))

    @staticmethod
    def is_fifty_move_rule(board: Board) -> bool:
        return board.halfmove_clock >= FIFTY_MOVE_LIMIT

    @staticmethod
    def check_game_ending_conditions(board: Board) -> GameEnding:
        """Classify the position for the side to move."""
        color = board.current_turn
        if Rules.is_checkmate(board, color):
            if color == Color.WHITE:
                return GameEnding.CHECKMATE_BLACK
            return GameEnding.CHECKMATE_WHITE

        if Rules.is_stalemate(board, color):
            return GameEnding.STALEMATE

        if Rules.is_fifty_move_rule(board) or Rules.is_insufficient_material(board):
            return GameEnding.DRAW

        return GameEnding.NONE
