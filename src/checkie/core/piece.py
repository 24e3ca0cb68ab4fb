"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.enums import Rank, Side

# Text character <-> (Side, Rank)
_CHAR_MAP: dict[str, tuple[Side, Rank]] = {
    "w": (Side.WHITE, Rank.REGULAR),
    "W": (Side.WHITE, Rank.KING),
    "b": (Side.BLACK, Rank.REGULAR),
    "B": (Side.BLACK, Rank.KING),
}

_SYMBOLS: dict[tuple[Side, Rank], str] = {
    (Side.WHITE, Rank.REGULAR): "⛀",
    (Side.WHITE, Rank.KING): "⛁",
    (Side.BLACK, Rank.REGULAR): "⛂",
    (Side.BLACK, Rank.KING): "⛃",
}

_TEXT_CHARS: dict[tuple[Side, Rank], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a draughts piece."""

    side: Side
    rank: Rank = Rank.REGULAR

    @property
    def is_king(self) -> bool:
        return self.rank == Rank.KING

    def promoted(self) -> Piece:
        """The king version of this piece (itself if already a king)."""
        if self.is_king:
            return self
        return Piece(self.side, Rank.KING)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Text character (lowercase = regular, uppercase = king)."""
        return _TEXT_CHARS[(self.side, self.rank)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from text character, e.g. 'B' -> black king."""
        try:
            side, rank = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(side, rank)

    @property
    def symbol(self) -> str:
        """Unicode draughts symbol, e.g. ⛃."""
        return _SYMBOLS[(self.side, self.rank)]
