"""Tests for check, mate and draw detection."""

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameEnding
from chessrules.core.notation import board_from_fen, board_to_fen, move_from_coordinate
from chessrules.core.rules import FIFTY_MOVE_LIMIT, Rules


def _play(board: Board, *moves: str) -> None:
    for text in moves:
        move = move_from_coordinate(board, text)
        assert move is not None
        assert board.make_move(move), text


class TestCheckmate:
    def test_fools_mate(self, start_board: Board) -> None:
        _play(start_board, "f2f3", "e7e5", "g2g4", "d8h4")
        assert Rules.is_in_check(start_board, Color.WHITE)
        assert Rules.is_checkmate(start_board, Color.WHITE)
        assert not Rules.has_any_legal_move(start_board, Color.WHITE)
        ending = Rules.check_game_ending_conditions(start_board)
        assert ending == GameEnding.CHECKMATE_BLACK
        assert ending.winner == Color.BLACK

    def test_back_rank_mate(self) -> None:
        board = board_from_fen("8/8/8/8/8/8/PP6/K6r w - - 0 1")
        assert Rules.is_checkmate(board, Color.WHITE)
        assert not Rules.is_stalemate(board, Color.WHITE)
        assert Rules.check_game_ending_conditions(board) == GameEnding.CHECKMATE_BLACK

    def test_white_delivers_mate(self) -> None:
        board = board_from_fen("7k/6pp/8/8/8/8/8/K3R3 w - - 0 1")
        _play(board, "e1e8")
        assert Rules.is_checkmate(board, Color.BLACK)
        assert Rules.check_game_ending_conditions(board) == GameEnding.CHECKMATE_WHITE

    def test_check_that_can_be_escaped(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/R3K3 b - - 0 1")
        assert not Rules.is_checkmate(board, Color.BLACK)
        board = board_from_fen("R3k3/8/8/8/8/8/8/4K3 b - - 0 1")
        assert Rules.is_in_check(board, Color.BLACK)
        assert not Rules.is_checkmate(board, Color.BLACK)
        assert Rules.check_game_ending_conditions(board) == GameEnding.NONE


class TestRepeatedClassification:
    @pytest.mark.parametrize(
        "moves, expected",
        [
            ((), GameEnding.NONE),
            (("e2e4", "e7e5"), GameEnding.NONE),
            (("f2f3", "e7e5", "g2g4", "d8h4"), GameEnding.CHECKMATE_BLACK),
        ],
    )
    def test_same_result_without_a_move(
        self, start_board: Board, moves: tuple[str, ...], expected: GameEnding
    ) -> None:
        _play(start_board, *moves)
        fen = board_to_fen(start_board)
        first = Rules.check_game_ending_conditions(start_board)
        second = Rules.check_game_ending_conditions(start_board)
        assert first == second == expected
        assert board_to_fen(start_board) == fen

    def test_stalemate_is_stable(self) -> None:
        board = board_from_fen("8/8/8/8/8/1qk5/8/K7 w - - 0 1")
        results = {Rules.check_game_ending_conditions(board) for _ in range(2)}
        assert results == {GameEnding.STALEMATE}
        assert board_to_fen(board) == "8/8/8/8/8/1qk5/8/K7 w - - 0 1"


class TestStalemate:
    def test_cornered_king(self) -> None:
        board = board_from_fen("8/8/8/8/8/1qk5/8/K7 w - - 0 1")
        assert not Rules.is_in_check(board, Color.WHITE)
        assert Rules.is_stalemate(board, Color.WHITE)
        assert not Rules.is_checkmate(board, Color.WHITE)
        assert Rules.check_game_ending_conditions(board) == GameEnding.STALEMATE

    def test_only_side_to_move_matters(self) -> None:
        board = board_from_fen("8/8/8/8/8/1qk5/8/K7 b - - 0 1")
        assert Rules.check_game_ending_conditions(board) == GameEnding.NONE

    def test_start_is_not_stalemate(self, start_board: Board) -> None:
        assert not Rules.is_stalemate(start_board, Color.WHITE)
        assert Rules.check_game_ending_conditions(start_board) == GameEnding.NONE


class TestDraws:
    @pytest.mark.parametrize(
        "fen",
        [
            "8/8/8/4k3/8/8/8/4K3 w - - 0 1",
            "8/8/8/4k3/8/8/8/4KN2 w - - 0 1",
            "8/8/8/4k3/8/8/8/4KB2 w - - 0 1",
            "8/8/2n5/4k3/8/8/8/4K3 w - - 0 1",
        ],
    )
    def test_insufficient_material(self, fen: str) -> None:
        board = board_from_fen(fen)
        assert Rules.is_insufficient_material(board)
        assert Rules.check_game_ending_conditions(board) == GameEnding.DRAW

    @pytest.mark.parametrize(
        "fen",
        [
            "8/8/8/4k3/8/8/8/4KR2 w - - 0 1",
            "8/8/8/4k3/8/8/4P3/4K3 w - - 0 1",
            "8/8/8/4k3/8/8/8/3NKN2 w - - 0 1",
        ],
    )
    def test_sufficient_material(self, fen: str) -> None:
        board = board_from_fen(fen)
        assert not Rules.is_insufficient_material(board)

    def test_fifty_move_rule(self) -> None:
        board = board_from_fen(f"4k3/8/8/8/8/8/8/R3K3 w - - {FIFTY_MOVE_LIMIT} 80")
        assert Rules.is_fifty_move_rule(board)
        assert Rules.check_game_ending_conditions(board) == GameEnding.DRAW

    def test_below_fifty_moves(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/R3K3 w - - 49 80")
        assert not Rules.is_fifty_move_rule(board)
        assert Rules.check_game_ending_conditions(board) == GameEnding.NONE

    def test_mate_beats_fifty_move_draw(self) -> None:
        board = board_from_fen("8/8/8/8/8/8/PP6/K6r w - - 75 90")
        assert Rules.check_game_ending_conditions(board) == GameEnding.CHECKMATE_BLACK
