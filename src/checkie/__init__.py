"""Checkie: a rules engine for 8x8 checkers with forced multi-jump captures."""

from checkie.core import Board, Move, MoveKind, Piece, Rank, Rejection, RuleSet, Side
from checkie.game import (
    GameController,
    GameState,
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

__version__ = "0.1.0"

__all__ = [
    "Board",
    "GameController",
    "GameState",
    "Move",
    "MoveKind",
    "Piece",
    "Rank",
    "Rejection",
    "RuleSet",
    "Side",
    "all_legal_moves",
    "apply_move",
    "check_move",
    "has_forced_capture",
    "legal_moves",
    "new_game",
    "play",
    "reset",
    "winner",
]
