"""Tests for GameState."""

import logging

import pytest

from chessrules.core.enums import Color, GameEnding, GameResult
from chessrules.core.errors import InvalidNotation
from chessrules.core.notation import STARTING_FEN, board_to_fen, move_from_coordinate
from chessrules.game.interfaces import GamePhase
from chessrules.game.record import SaveRecord
from chessrules.game.state import GameState

STALEMATE_FEN = "8/8/8/8/8/1qk5/8/K7 w - - 0 1"


def _fools_mate(gs: GameState) -> None:
    for text in ("f2f3", "e7e5", "g2g4", "d8h4"):
        assert gs.submit_coordinate(text), text


class TestGameStateSetup:
    def test_board_is_available_before_setup(self) -> None:
        gs = GameState()
        assert gs.phase == GamePhase.NOT_STARTED
        assert gs.side_to_move == Color.WHITE
        assert board_to_fen(gs.board) == STARTING_FEN

    def test_setup_default(self) -> None:
        gs = GameState()
        gs.setup()
        assert gs.phase == GamePhase.AWAITING_MOVE
        assert gs.result == GameResult.IN_PROGRESS
        assert gs.ending == GameEnding.NONE
        assert gs.ply_count == 0

    def test_setup_custom_fen(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        gs = GameState()
        gs.setup(fen)
        assert gs.side_to_move == Color.BLACK
        assert gs.start_fen == fen

    def test_setup_resets(self) -> None:
        gs = GameState()
        gs.setup()
        assert gs.submit_coordinate("e2e4")
        gs.setup()
        assert gs.ply_count == 0
        assert gs.side_to_move == Color.WHITE

    def test_setup_in_terminal_position(self) -> None:
        gs = GameState()
        gs.setup(STALEMATE_FEN)
        assert gs.is_game_over
        assert gs.ending == GameEnding.STALEMATE
        assert gs.result == GameResult.DRAW
        assert gs.winner is None


class TestGameStateMoves:
    def test_submit_records_move(self) -> None:
        gs = GameState()
        gs.setup()
        assert gs.submit_coordinate("e2e4")
        record = gs.move_history[-1]
        assert record.notation == "e4"
        assert record.move.uci == "e2e4"
        assert record.fen_after == board_to_fen(gs.board)
        assert gs.side_to_move == Color.BLACK

    def test_illegal_move_is_refused(self) -> None:
        gs = GameState()
        gs.setup()
        assert not gs.submit_coordinate("e2e5")
        assert gs.ply_count == 0
        assert gs.side_to_move == Color.WHITE

    def test_empty_origin_is_refused(self) -> None:
        gs = GameState()
        gs.setup()
        assert not gs.submit_coordinate("e3e4")

    def test_malformed_text_raises(self) -> None:
        gs = GameState()
        gs.setup()
        with pytest.raises(InvalidNotation):
            gs.submit_coordinate("e2-e4")

    def test_move_before_setup_is_refused(self, caplog: pytest.LogCaptureFixture) -> None:
        gs = GameState()
        move = move_from_coordinate(gs.board, "e2e4")
        assert move is not None
        with caplog.at_level(logging.WARNING, logger="chessrules.game.state"):
            assert not gs.submit_move(move)
        assert "NOT_STARTED" in caplog.text

    def test_legal_moves(self) -> None:
        gs = GameState()
        gs.setup()
        assert len(gs.legal_moves()) == 20


class TestGameOver:
    def test_checkmate_ends_game(self) -> None:
        gs = GameState()
        gs.setup()
        _fools_mate(gs)
        assert gs.phase == GamePhase.GAME_OVER
        assert gs.ending == GameEnding.CHECKMATE_BLACK
        assert gs.result == GameResult.BLACK_WINS
        assert gs.winner == Color.BLACK
        assert gs.move_history[-1].notation == "Qh4#"

    def test_no_moves_after_game_over(self) -> None:
        gs = GameState()
        gs.setup()
        _fools_mate(gs)
        fen = board_to_fen(gs.board)
        assert not gs.submit_coordinate("e1f2")
        assert board_to_fen(gs.board) == fen

    def test_game_over_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        gs = GameState()
        gs.setup()
        with caplog.at_level(logging.INFO, logger="chessrules.game.state"):
            _fools_mate(gs)
        assert "CHECKMATE_BLACK" in caplog.text

    def test_resign(self) -> None:
        gs = GameState()
        gs.setup()
        gs.resign(Color.WHITE)
        assert gs.is_game_over
        assert gs.result == GameResult.BLACK_WINS
        assert gs.winner == Color.BLACK

    def test_resign_after_game_over_is_ignored(self) -> None:
        gs = GameState()
        gs.setup()
        _fools_mate(gs)
        gs.resign(Color.BLACK)
        assert gs.result == GameResult.BLACK_WINS


class TestGameStateRecords:
    def test_to_record(self) -> None:
        gs = GameState()
        gs.setup()
        assert gs.submit_coordinate("e2e4")
        record = gs.to_record()
        assert record.fen == board_to_fen(gs.board)
        assert record.moves == ("e4",)

    def test_load_record_keeps_earlier_moves(self) -> None:
        source = GameState()
        source.setup()
        assert source.submit_coordinate("e2e4")

        gs = GameState()
        gs.load_record(source.to_record())
        assert board_to_fen(gs.board) == board_to_fen(source.board)
        assert gs.side_to_move == Color.BLACK
        assert gs.submit_coordinate("e7e5")
        assert gs.to_record().moves == ("e4", "e5")

    def test_load_record_ignores_moves_for_board(self) -> None:
        gs = GameState()
        gs.load_record(SaveRecord(fen=STARTING_FEN, moves=("e4", "e5")))
        assert gs.board == GameState().board
        assert gs.ply_count == 0
        assert gs.earlier_moves == ("e4", "e5")

