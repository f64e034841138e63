"""Tests for resolving external move suggestions."""

import logging

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import MoveType, PieceType
from chessrules.core.notation import board_from_fen
from chessrules.core.position import E2, E4
from chessrules.engine.suggest import (
    SuggestionLimits,
    is_no_move,
    resolve_suggestion,
)


class TestIsNoMove:
    @pytest.mark.parametrize("text", [None, "", "  ", "(none)", "0000"])
    def test_no_move_tokens(self, text: str | None) -> None:
        assert is_no_move(text)

    def test_real_move(self) -> None:
        assert not is_no_move("e2e4")


class TestResolveSuggestion:
    def test_legal_suggestion(self, start_board: Board) -> None:
        move = resolve_suggestion(start_board, "e2e4")
        assert move is not None
        assert (move.from_sq, move.to_sq) == (E2, E4)

    def test_surrounding_whitespace_is_ignored(self, start_board: Board) -> None:
        assert resolve_suggestion(start_board, " e2e4\n") is not None

    def test_no_move(self, start_board: Board) -> None:
        assert resolve_suggestion(start_board, "(none)") is None

    def test_illegal_suggestion_is_dropped(
        self, start_board: Board, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="chessrules.engine.suggest"):
            assert resolve_suggestion(start_board, "e2e5") is None
        assert "not legal" in caplog.text

    def test_garbage_suggestion_is_dropped(
        self, start_board: Board, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="chessrules.engine.suggest"):
            assert resolve_suggestion(start_board, "hello") is None
        assert "Unparseable" in caplog.text

    def test_empty_origin_is_dropped(self, start_board: Board) -> None:
        assert resolve_suggestion(start_board, "e4e5") is None

    def test_promotion_suffix(self) -> None:
        board = board_from_fen("8/4P3/8/8/8/8/k7/4K3 w - - 0 1")
        move = resolve_suggestion(board, "e7e8r")
        assert move is not None
        assert move.move_type == MoveType.PROMOTION
        assert move.promotion == PieceType.ROOK

    def test_board_is_not_mutated(self, start_board: Board) -> None:
        before = start_board.clone()
        resolve_suggestion(start_board, "e2e4")
        assert start_board == before


class TestSuggestionLimits:
    def test_defaults(self) -> None:
        limits = SuggestionLimits()
        assert limits.max_depth == 10
        assert limits.time_limit_ms == 1000
