"""Game management layer: lifecycle state machine and save records.

Quick start::

    from chessrules.game import GameState

    game = GameState()
    game.setup()
    game.submit_coordinate("e2e4")
"""

from chessrules.game.interfaces import GamePhase
from chessrules.game.record import SaveRecord
from chessrules.game.state import GameState, MoveRecord

__all__ = [
    "GamePhase",
    "GameState",
    "MoveRecord",
    "SaveRecord",
]
