"""Game state machine tracking phase transitions and move history."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameEnding, GameResult
from chessrules.core.move import Move
from chessrules.core.notation import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    move_from_coordinate,
)
from chessrules.core.rules import Rules
from chessrules.game.interfaces import GamePhase
from chessrules.game.record import SaveRecord

_LOGGER = logging.getLogger(__name__)


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    notation: str
    fen_after: str


@dataclass
class GameState:
    """Owns the authoritative :class:`Board` of one game.

    Pure data and logic with no threading or UI.  Callers poll
    ``phase`` / ``ending`` after every submission.
    """

    board: Board = field(init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    ending: GameEnding = field(default=GameEnding.NONE, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    start_fen: str = field(default=STARTING_FEN, init=False)
    # Algebraic moves carried over from a loaded save record.
    earlier_moves: tuple[str, ...] = field(default=(), init=False)

    def __post_init__(self) -> None:
        self.board = Board.initial()

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, fen: str | None = None) -> None:
        """Initialise (or reset) the game."""
        self.start_fen = fen or STARTING_FEN
        self.board = board_from_fen(self.start_fen)
        self.phase = GamePhase.AWAITING_MOVE
        self.ending = GameEnding.NONE
        self.result = GameResult.IN_PROGRESS
        self.move_history.clear()
        self.earlier_moves = ()
        self._check_game_over()

    def load_record(self, record: SaveRecord) -> None:
        """Resume from a save record; only its FEN shapes the board."""
        self.setup(record.fen)
        self.earlier_moves = record.moves

    def to_record(self) -> SaveRecord:
        return SaveRecord(
            fen=board_to_fen(self.board),
            moves=self.earlier_moves + tuple(r.notation for r in self.move_history),
        )

    # ── Move submission ──────────────────────────────────────────────────

    def submit_move(self, move: Move) -> bool:
        """Validate and apply *move*.  Returns True if it was legal."""
        if self.phase != GamePhase.AWAITING_MOVE:
            _LOGGER.warning(
                "Move %s submitted while game is %s", move.uci, self.phase.name
            )
            return False

        if not self.board.make_move(move):
            return False

        applied = self.board.history[-1]
        self.move_history.append(
            MoveRecord(
                move=applied,
                notation=applied.notation,
                fen_after=board_to_fen(self.board),
            )
        )
        self._check_game_over()
        return True

    def submit_coordinate(self, text: str) -> bool:
        """Submit a move given as ``e2e4`` text (raises on malformed text)."""
        move = move_from_coordinate(self.board, text)
        if move is None:
            return False
        return self.submit_move(move)

    # ── Resignation ──────────────────────────────────────────────────────

    def resign(self, color: Color) -> None:
        if self.phase == GamePhase.GAME_OVER:
            return
        self.result = (
            GameResult.BLACK_WINS if color == Color.WHITE else GameResult.WHITE_WINS
        )
        self.phase = GamePhase.GAME_OVER
        _LOGGER.info("%s resigned", color)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.board.current_turn

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of half-moves played since setup."""
        return len(self.move_history)

    @property
    def winner(self) -> Color | None:
        if self.result == GameResult.WHITE_WINS:
            return Color.WHITE
        if self.result == GameResult.BLACK_WINS:
            return Color.BLACK
        return None

    def legal_moves(self) -> list[Move]:
        """Legal moves in the current position."""
        return self.board.legal_moves()

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        ending = Rules.check_game_ending_conditions(self.board)
        if ending == GameEnding.NONE:
            return

        self.ending = ending
        winner = ending.winner
        if winner == Color.WHITE:
            self.result = GameResult.WHITE_WINS
        elif winner == Color.BLACK:
            self.result = GameResult.BLACK_WINS
        else:
            self.result = GameResult.DRAW
        self.phase = GamePhase.GAME_OVER
        _LOGGER.info("Game over: %s", ending.name)
