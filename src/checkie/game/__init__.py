"""Game management layer: turn controller, state, observers.

Quick start::

    from checkie.game import apply_move, legal_moves, new_game

    state = new_game()
    print(legal_moves(state, (2, 1)))
    apply_move(state, (2, 1), (3, 2))
"""

from checkie.game.controller import GameController, GameEvents
from checkie.game.history import MoveHistory, MoveLogEntry, TranscriptLogger
from checkie.game.state import CommittedMove, GameState
from checkie.game.turn import (
    all_legal_moves,
    apply_move,
    check_move,
    has_forced_capture,
    legal_moves,
    new_game,
    play,
    reset,
    winner,
)

__all__ = [
    # State
    "CommittedMove",
    "GameState",
    # Turn interface
    "all_legal_moves",
    "apply_move",
    "check_move",
    "has_forced_capture",
    "legal_moves",
    "new_game",
    "play",
    "reset",
    "winner",
    # Controller / observers
    "GameController",
    "GameEvents",
    "MoveHistory",
    "MoveLogEntry",
    "TranscriptLogger",
]
