"""Save record exchanged with the persistence layer."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from chessrules.core.board import Board
from chessrules.core.notation.fen import board_from_fen, board_to_fen


@dataclass(frozen=True, slots=True)
class SaveRecord:
    """Current FEN plus the move history in algebraic notation.

    Only the FEN is authoritative: :meth:`restore` never replays ``moves``.
    """

    fen: str
    moves: tuple[str, ...] = ()

    @classmethod
    def from_board(cls, board: Board) -> SaveRecord:
        return cls(fen=board_to_fen(board), moves=tuple(board.history_notation()))

    def restore(self) -> Board:
        """Rebuild a board from the FEN field (raises ``InvalidFEN``)."""
        return board_from_fen(self.fen)

    def to_dict(self) -> dict[str, object]:
        """JSON-ready mapping."""
        return {"fen": self.fen, "moves": list(self.moves)}

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> SaveRecord:
        fen = data.get("fen")
        if not isinstance(fen, str):
            raise ValueError(f"Save record has no FEN string: {fen!r}")
        moves = data.get("moves", [])
        if not isinstance(moves, list) or not all(isinstance(m, str) for m in moves):
            raise ValueError(f"Save record move list is malformed: {moves!r}")
        return cls(fen=fen, moves=tuple(moves))
