"""Game state aggregate: one owned value per game."""

from __future__ import annotations

from dataclasses import dataclass, field

from checkie.core.board import Board
from checkie.core.enums import MoveKind, Side
from checkie.core.move import Move
from checkie.core.notation import board_from_text
from checkie.core.ruleset import RuleSet
from checkie.core.types import Square


@dataclass(frozen=True, slots=True)
class CommittedMove:
    """What a successful move did, handed to observers after the fact."""

    move: Move
    side: Side
    kind: MoveKind
    turn_retained: bool = False
    game_over: bool = False

    @property
    def promoted(self) -> bool:
        return self.kind in (MoveKind.PROMOTION, MoveKind.CAPTURE_WITH_PROMOTION)


@dataclass
class GameState:
    """Board, side to move, terminal flag and capture-continuation marker.

    This is a pure data class: all mutation goes through
    :mod:`checkie.game.turn`. Equality is structural, so a rejected move
    can be checked to leave the state untouched.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Side = Side.WHITE
    rules: RuleSet = field(default_factory=RuleSet.standard)
    is_over: bool = False
    last_move: Move | None = None
    # Square of the piece that must keep capturing before the turn passes.
    pending: Square | None = None

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def from_board(
        cls,
        board: Board,
        side_to_move: Side = Side.WHITE,
        rules: RuleSet | None = None,
    ) -> GameState:
        """Wrap an arbitrary position as a game in progress.

        The terminal flag starts cleared even if a side has no pieces: it is
        only ever raised by a committed move.
        """
        return cls(board=board, side_to_move=side_to_move, rules=rules or RuleSet.standard())

    @classmethod
    def from_text(
        cls,
        text: str,
        side_to_move: Side = Side.WHITE,
        rules: RuleSet | None = None,
    ) -> GameState:
        return cls.from_board(board_from_text(text), side_to_move, rules)

    def setup(self, rules: RuleSet | None = None) -> None:
        """Reinitialise in place to the standard starting position."""
        self.board = Board.initial()
        self.side_to_move = Side.WHITE
        if rules is not None:
            self.rules = rules
        self.is_over = False
        self.last_move = None
        self.pending = None

    def copy(self) -> GameState:
        return GameState(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            rules=self.rules,
            is_over=self.is_over,
            last_move=self.last_move,
            pending=self.pending,
        )

    # ── Query helpers ────────────────────────────────────────────────────

    def piece_count(self, side: Side) -> int:
        return self.board.count(side)
