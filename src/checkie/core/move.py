"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable description of a quiet move or a (chained) capture.

    ``captures`` lists the victim squares in the order they are jumped.
    A move does not reference the board it was generated from.
    """

    origin: Square
    destination: Square
    captures: tuple[Square, ...] = ()

    @property
    def is_capture(self) -> bool:
        return bool(self.captures)

    @property
    def capture_count(self) -> int:
        return len(self.captures)

    def extend(self, victim: Square, landing: Square) -> Move:
        """This chain continued over *victim* onto *landing*."""
        return Move(self.origin, landing, self.captures + (victim,))

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        sep = "x" if self.captures else "-"
        return f"{square_name(self.origin)}{sep}{square_name(self.destination)}"
