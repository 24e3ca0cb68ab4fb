"""Core enumerations for the draughts domain."""

from __future__ import annotations

from enum import IntEnum, auto


class Side(IntEnum):
    """Side owning a piece. White moves first."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    @property
    def forward(self) -> int:
        """Row step of a regular piece: white climbs, black descends."""
        return 1 if self is Side.WHITE else -1

    @property
    def promotion_row(self) -> int:
        return 7 if self is Side.WHITE else 0

    def __str__(self) -> str:
        return self.name.lower()


class Rank(IntEnum):
    """Piece rank. Promotion is one-way."""

    REGULAR = 1
    KING = 2


class MoveKind(IntEnum):
    """Classification of a committed move for observers."""

    QUIET = 0
    CAPTURE = 1
    PROMOTION = 2
    CAPTURE_WITH_PROMOTION = 3

    @classmethod
    def of(cls, captured: bool, promoted: bool) -> MoveKind:
        if captured:
            return cls.CAPTURE_WITH_PROMOTION if promoted else cls.CAPTURE
        return cls.PROMOTION if promoted else cls.QUIET


class Rejection(IntEnum):
    """Why a move request was turned down."""

    GAME_OVER = auto()
    OUT_OF_BOUNDS = auto()
    NOT_YOUR_PIECE = auto()
    DESTINATION_BLOCKED = auto()
    MUST_CONTINUE_CAPTURE = auto()
    CAPTURE_REQUIRED = auto()
    ILLEGAL_GEOMETRY = auto()
