"""GameController: one game plus the observers watching it.

Wraps a :class:`GameState` and the functional turn interface, and emits
events via simple callbacks so a UI, a transcript or a move history can
subscribe. Callbacks run only after a move has been committed.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from checkie.core.enums import Rejection, Side
from checkie.core.move import Move
from checkie.core.ruleset import RuleSet
from checkie.core.types import Square
from checkie.game import turn
from checkie.game.state import CommittedMove, GameState

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[CommittedMove, GameState], None]
GameOverCallback = Callable[["Side | None"], None]
ResetCallback = Callable[[GameState], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Orchestrates a single game: forwards requests to the turn controller
    and notifies listeners of what was committed.

    Thread-safety: not reentrant. Callers sharing a controller between
    threads must serialise access to it.
    """

    __slots__ = ("_state", "events")

    def __init__(self, rules: RuleSet | None = None) -> None:
        self._state = turn.new_game(rules)
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def side_to_move(self) -> Side:
        return self._state.side_to_move

    @property
    def is_over(self) -> bool:
        return self._state.is_over

    # ── Queries ──────────────────────────────────────────────────────────

    def legal_moves(self, sq: Square) -> list[Move]:
        return turn.legal_moves(self._state, sq)

    def all_legal_moves(self) -> list[Move]:
        return turn.all_legal_moves(self._state)

    def has_forced_capture(self) -> bool:
        return turn.has_forced_capture(self._state)

    def winner(self) -> Side | None:
        return turn.winner(self._state)

    def check_move(self, origin: Square, destination: Square) -> Rejection | None:
        return turn.check_move(self._state, origin, destination)

    # ── Commands ─────────────────────────────────────────────────────────

    def new_game(self, rules: RuleSet | None = None, state: GameState | None = None) -> None:
        """Start over, optionally from a prepared *state*."""
        self._state = state if state is not None else turn.new_game(rules)
        self._emit_reset()

    def reset(self) -> None:
        turn.reset(self._state)
        self._emit_reset()

    def submit_move(self, origin: Square, destination: Square) -> bool:
        """Play a single step. Returns True if legal and applied."""
        return self._after_commit(turn.commit_step(self._state, origin, destination))

    def submit(self, move: Move) -> bool:
        """Play a whole move from :meth:`legal_moves`. Returns True if applied."""
        return self._after_commit(turn.commit(self._state, move))

    # ── Internal helpers ─────────────────────────────────────────────────

    def _after_commit(self, committed: CommittedMove | None) -> bool:
        if committed is None:
            return False
        self._emit_move(committed)
        if committed.game_over:
            self._emit_game_over(turn.winner(self._state))
        return True

    def _emit_move(self, committed: CommittedMove) -> None:
        for cb in self.events.on_move:
            cb(committed, self._state)

    def _emit_game_over(self, winner: Side | None) -> None:
        for cb in self.events.on_game_over:
            cb(winner)

    def _emit_reset(self) -> None:
        for cb in self.events.on_reset:
            cb(self._state)
