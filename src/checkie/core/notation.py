"""Plain-text board snapshots.

One line per row, row 0 first, one character per column::

    .w.w.w.w
    w.w.w.w.
    ...

``w``/``b`` are regular pieces, ``W``/``B`` kings and ``.`` an empty
square. Blank lines and surrounding whitespace are ignored on input.
"""

from __future__ import annotations

from checkie.core.board import Board
from checkie.core.piece import Piece
from checkie.core.types import BOARD_SIZE, is_playable

EMPTY = "."


def board_to_text(board: Board) -> str:
    """Serialise *board* to the eight-line text form."""
    rows: list[str] = []
    for row in range(BOARD_SIZE):
        line = ""
        for col in range(BOARD_SIZE):
            piece = board[(row, col)]
            line += str(piece) if piece is not None else EMPTY
        rows.append(line)
    return "\n".join(rows)


def board_from_text(text: str) -> Board:
    """Parse the eight-line text form into a :class:`Board`."""
    lines = [line.strip() for line in text.strip().splitlines() if line.strip()]
    if len(lines) != BOARD_SIZE:
        raise ValueError(f"Board text must contain {BOARD_SIZE} rows, got {len(lines)}")

    board = Board()
    for row, line in enumerate(lines):
        if len(line) != BOARD_SIZE:
            raise ValueError(f"Invalid row width on row {row}: {line!r}")
        for col, ch in enumerate(line):
            if ch == EMPTY:
                continue
            if not is_playable((row, col)):
                raise ValueError(f"Piece on non-playable square ({row}, {col}): {ch!r}")
            board.place((row, col), Piece.from_char(ch))
    return board
