"""Square type alias and coordinate helpers.

Board layout (row, column), both 0-7::

    row 0: white's home row   (white moves toward row 7)
    row 7: black's home row   (black moves toward row 0)

Only dark squares, where ``(row + col) % 2 == 1``, are ever occupied.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = tuple[int, int]

BOARD_SIZE = 8

DIAGONALS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def in_bounds(sq: Square) -> bool:
    """Whether both coordinates fall inside the 8x8 board."""
    row, col = sq
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_playable(sq: Square) -> bool:
    """Dark-square parity test. Does not check bounds."""
    row, col = sq
    return (row + col) % 2 == 1


def offset(sq: Square, d_row: int, d_col: int, steps: int = 1) -> Square:
    return (sq[0] + d_row * steps, sq[1] + d_col * steps)


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (2, 1) -> '2,1'."""
    return f"{sq[0]},{sq[1]}"


def parse_square(name: str) -> Square:
    """Parse a square name, e.g. '2,1' -> (2, 1)."""
    parts = name.replace(" ", "").split(",")
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise ValueError(f"Invalid square name: {name!r}")
    sq = (int(parts[0]), int(parts[1]))
    if not in_bounds(sq):
        raise ValueError(f"Square out of bounds: {name!r}")
    return sq
