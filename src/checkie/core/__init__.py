"""Core domain layer: pure draughts logic with zero external dependencies.

Quick start::

    from checkie.core import Board, Side, captures_from

    board = Board.initial()
    for sq in board.squares_of(Side.WHITE):
        print(sq, captures_from(board, sq))
"""

from checkie.core.board import Board
from checkie.core.capture_search import (
    can_capture,
    captures_from,
    find_best_capture,
    has_capture,
    quiet_moves_from,
)
from checkie.core.enums import MoveKind, Rank, Rejection, Side
from checkie.core.move import Move
from checkie.core.notation import board_from_text, board_to_text
from checkie.core.piece import Piece
from checkie.core.rules import Rules
from checkie.core.ruleset import RuleSet
from checkie.core.types import (
    Square,
    in_bounds,
    is_playable,
    parse_square,
    square_name,
)
from checkie.core.validator import classify, diagnose, validate

__all__ = [
    # Enums
    "MoveKind",
    "Rank",
    "Rejection",
    "Side",
    # Types / helpers
    "Square",
    "in_bounds",
    "is_playable",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "Piece",
    "RuleSet",
    "Rules",
    # Validation / search
    "can_capture",
    "captures_from",
    "classify",
    "diagnose",
    "find_best_capture",
    "has_capture",
    "quiet_moves_from",
    "validate",
    # Notation
    "board_from_text",
    "board_to_text",
]
