"""Move-suggestion collaborator package: protocol and Qt worker bridge."""

from chessrules.engine.qt_bridge import SuggestionWorker
from chessrules.engine.suggest import (
    IMoveSuggester,
    SuggestionLimits,
    is_no_move,
    resolve_suggestion,
)

__all__ = [
    "IMoveSuggester",
    "SuggestionLimits",
    "SuggestionWorker",
    "is_no_move",
    "resolve_suggestion",
]
