"""Passive observers: move history and the logging transcript."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from checkie.core.enums import MoveKind, Side
from checkie.core.notation import board_to_text
from checkie.core.types import Square, square_name

if TYPE_CHECKING:
    from checkie.game.controller import GameController
    from checkie.game.state import CommittedMove, GameState

_LOGGER = logging.getLogger(__name__)

_KIND_LABELS: dict[MoveKind, str] = {
    MoveKind.QUIET: "move",
    MoveKind.CAPTURE: "capture",
    MoveKind.PROMOTION: "promotion",
    MoveKind.CAPTURE_WITH_PROMOTION: "capture with promotion",
}


@dataclass(frozen=True, slots=True)
class MoveLogEntry:
    """A single entry in the move history."""

    number: int
    side: Side
    origin: Square
    destination: Square
    kind: MoveKind
    captured: tuple[Square, ...]
    board_after: str

    def describe(self) -> str:
        text = (
            f"#{self.number} {self.side!s}: {square_name(self.origin)} -> "
            f"{square_name(self.destination)} ({_KIND_LABELS[self.kind]})"
        )
        if self.captured:
            text += " captured " + ", ".join(square_name(sq) for sq in self.captured)
        return text


class MoveHistory:
    """Append-only list of :class:`MoveLogEntry`, fed by controller events."""

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: list[MoveLogEntry] = []

    def attach(self, controller: GameController) -> None:
        controller.events.on_move.append(self.record)
        controller.events.on_reset.append(self.clear)

    def record(self, committed: CommittedMove, state: GameState) -> MoveLogEntry:
        move = committed.move
        entry = MoveLogEntry(
            number=len(self._entries) + 1,
            side=committed.side,
            origin=move.origin,
            destination=move.destination,
            kind=committed.kind,
            captured=move.captures,
            board_after=board_to_text(state.board),
        )
        self._entries.append(entry)
        return entry

    def clear(self, _state: GameState | None = None) -> None:
        self._entries.clear()

    @property
    def entries(self) -> tuple[MoveLogEntry, ...]:
        return tuple(self._entries)

    @property
    def last(self) -> MoveLogEntry | None:
        return self._entries[-1] if self._entries else None

    def __len__(self) -> int:
        return len(self._entries)


class TranscriptLogger:
    """Writes one INFO line per committed move and one on game over."""

    __slots__ = ("_logger", "_count")

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or _LOGGER
        self._count = 0

    def attach(self, controller: GameController) -> None:
        controller.events.on_move.append(self.on_move)
        controller.events.on_game_over.append(self.on_game_over)
        controller.events.on_reset.append(self.on_reset)

    def on_move(self, committed: CommittedMove, state: GameState) -> None:
        self._count += 1
        move = committed.move
        self._logger.info(
            "Move %d: %s %s (%s)%s",
            self._count,
            committed.side,
            move,
            _KIND_LABELS[committed.kind],
            ", continues capturing" if committed.turn_retained else "",
        )
        self._logger.debug("Board after move %d:\n%r", self._count, state.board)

    def on_game_over(self, winner: Side | None) -> None:
        if winner is None:
            self._logger.info("Game over")
        else:
            self._logger.info("Game over: %s wins", winner)

    def on_reset(self, _state: GameState) -> None:
        self._count = 0
        self._logger.info("Game reset")
