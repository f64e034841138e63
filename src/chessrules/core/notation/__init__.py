"""Notation package: FEN and coordinate move text."""

from chessrules.core.notation.coordinate import move_from_coordinate, parse_coordinate
from chessrules.core.notation.fen import STARTING_FEN, board_from_fen, board_to_fen

__all__ = [
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
    "move_from_coordinate",
    "parse_coordinate",
]
