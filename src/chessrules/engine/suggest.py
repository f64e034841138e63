"""External move-suggestion collaborator: protocol, limits and resolution."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from chessrules.core.errors import InvalidNotation
from chessrules.core.notation.coordinate import move_from_coordinate

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.move import Move

_LOGGER = logging.getLogger(__name__)

NO_MOVE_TOKENS: frozenset[str] = frozenset({"", "(none)", "0000"})


@dataclass(slots=True, frozen=True)
class SuggestionLimits:
    """Budget handed to the suggester for a single query."""

    max_depth: int = 10
    time_limit_ms: int | None = 1000


class IMoveSuggester(Protocol):
    """Anything that proposes a move for a FEN position (e.g. a UCI process)."""

    def suggest(self, fen: str, limits: SuggestionLimits) -> str | None: ...


def is_no_move(text: str | None) -> bool:
    """Whether *text* is the suggester's way of saying there is no move."""
    return text is None or text.strip() in NO_MOVE_TOKENS


def resolve_suggestion(board: Board, text: str | None) -> Move | None:
    """Turn suggester output into a move legal on *board*, or ``None``.

    The suggestion goes through the ordinary :meth:`Board.is_valid_move`
    gate; nothing the collaborator says is trusted.
    """
    if is_no_move(text):
        return None
    assert text is not None

    try:
        move = move_from_coordinate(board, text.strip())
    except InvalidNotation:
        _LOGGER.warning("Unparseable move suggestion: %r", text)
        return None

    if move is None or not board.is_valid_move(move):
        _LOGGER.warning("Suggested move %r is not legal here", text)
        return None
    return move
