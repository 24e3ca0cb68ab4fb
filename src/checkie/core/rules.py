"""High-level draughts rules: terminal-state and winner detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from checkie.core.capture_search import can_capture, quiet_moves_from
from checkie.core.enums import Side
from checkie.core.ruleset import RuleSet

if TYPE_CHECKING:
    from checkie.core.board import Board


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # Product policy:
    # - A side loses the moment it has no pieces left.
    # - "No legal move loses" applies only when the rule set asks for it.

    @staticmethod
    def eliminated(board: Board) -> Side | None:
        """The side with zero pieces, if any."""
        for side in Side:
            if board.count(side) == 0:
                return side
        return None

    @staticmethod
    def has_any_move(board: Board, side: Side, rules: RuleSet) -> bool:
        for sq in board.squares_of(side):
            if can_capture(board, sq, rules) or quiet_moves_from(board, sq):
                return True
        return False

    @staticmethod
    def is_blocked(board: Board, side: Side, rules: RuleSet) -> bool:
        """*side* still has pieces but cannot move, and the rule set punishes it."""
        return (
            rules.no_moves_loses
            and board.count(side) > 0
            and not Rules.has_any_move(board, side, rules)
        )

    @staticmethod
    def winner(board: Board, side_to_move: Side, rules: RuleSet) -> Side | None:
        """The winning side, or ``None`` while the game is still open."""
        loser = Rules.eliminated(board)
        if loser is None and Rules.is_blocked(board, side_to_move, rules):
            loser = side_to_move
        return loser.opposite if loser is not None else None
