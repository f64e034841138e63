"""Qt bridge to query a move suggester in a worker thread."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chessrules.core.board import Board
from chessrules.core.notation import board_to_fen
from chessrules.engine.suggest import (
    IMoveSuggester,
    SuggestionLimits,
    is_no_move,
    resolve_suggestion,
)


class SuggestionWorker(QObject):
    """Thread-affine worker that asks a suggester for moves on demand.

    Every request works on a clone of the board it receives; the caller's
    board is only read while cloning, so the caller must not mutate it
    concurrently with the ``request_suggestion`` call.
    """

    suggestion_ready = pyqtSignal(int, object)
    no_suggestion = pyqtSignal(int)
    suggestion_rejected = pyqtSignal(int, str)
    suggestion_error = pyqtSignal(int, str)

    __slots__ = ("_suggester", "_limits")

    def __init__(
        self,
        suggester: IMoveSuggester,
        *,
        max_depth: int = 10,
        time_limit_ms: int | None = 1000,
    ) -> None:
        super().__init__()
        self._suggester = suggester
        self._limits = SuggestionLimits(max_depth=max_depth, time_limit_ms=time_limit_ms)

    @pyqtSlot(object, int)
    def request_suggestion(self, board_obj: object, request_id: int) -> None:
        """Ask for a move in *board_obj* and emit exactly one result signal."""
        if not isinstance(board_obj, Board):
            self.suggestion_error.emit(request_id, "Suggester received invalid board")
            return

        board = board_obj.clone()
        try:
            text = self._suggester.suggest(board_to_fen(board), self._limits)
        except Exception as exc:
            self.suggestion_error.emit(request_id, str(exc))
            return

        if is_no_move(text):
            self.no_suggestion.emit(request_id)
            return

        move = resolve_suggestion(board, text)
        if move is None:
            self.suggestion_rejected.emit(request_id, str(text))
            return

        self.suggestion_ready.emit(request_id, move)

    @pyqtSlot(int, int)
    def set_limits(self, max_depth: int, time_limit_ms: int) -> None:
        """Update the budget (takes effect on the next request)."""
        self._limits = SuggestionLimits(max_depth=max_depth, time_limit_ms=time_limit_ms)
