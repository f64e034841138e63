"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Board, Position, Rules

    board = Board.initial()
    move = board.build_move(Position.from_notation("e2"), Position.from_notation("e4"))
    if board.make_move(move):
        print(Rules.check_game_ending_conditions(board))
"""

from chessrules.core.board import Board
from chessrules.core.enums import (
    CastlingRights,
    Color,
    GameEnding,
    GameResult,
    MoveType,
    PieceType,
)
from chessrules.core.errors import ChessError, InvalidFEN, InvalidNotation, OutOfRange
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    move_from_coordinate,
    parse_coordinate,
)
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.rules import Rules

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameEnding",
    "GameResult",
    "MoveType",
    "PieceType",
    # Errors
    "ChessError",
    "InvalidFEN",
    "InvalidNotation",
    "OutOfRange",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    # Notation
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
    "move_from_coordinate",
    "parse_coordinate",
]
