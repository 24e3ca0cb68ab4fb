"""Board - piece placement on an 8x8 draughts board."""

from __future__ import annotations

from collections.abc import Iterator

from checkie.core.enums import Side
from checkie.core.piece import Piece
from checkie.core.types import BOARD_SIZE, Square, in_bounds, is_playable

_SIDE_COUNT = 2
_HOME_ROWS = 3


def _index(sq: Square) -> int:
    return sq[0] * BOARD_SIZE + sq[1]


class Board:
    """Mutable 64-square board with incremental per-side piece counts.

    Non-playable squares are always empty. Reads never fail: an
    out-of-bounds square is reported as empty.
    """

    __slots__ = ("_squares", "_counts")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * (BOARD_SIZE * BOARD_SIZE)
        # [side] -> number of pieces on the board.
        self._counts: list[int] = [0] * _SIDE_COUNT

    # -- Geometry -------------------------------------------------------------

    in_bounds = staticmethod(in_bounds)
    is_playable = staticmethod(is_playable)

    # -- Element access -------------------------------------------------------

    def occupant(self, sq: Square) -> Piece | None:
        if not in_bounds(sq):
            return None
        return self._squares[_index(sq)]

    def __getitem__(self, sq: Square) -> Piece | None:
        return self.occupant(sq)

    def place(self, sq: Square, piece: Piece | None) -> None:
        """Put *piece* on *sq* (or clear it). Engine-internal mutation path."""
        if not in_bounds(sq):
            raise ValueError(f"Square out of bounds: {sq}")
        if piece is not None and not is_playable(sq):
            raise ValueError(f"Square {sq} is not playable")

        idx = _index(sq)
        old_piece = self._squares[idx]
        if old_piece == piece:
            return
        if old_piece is not None:
            self._counts[int(old_piece.side)] -= 1
        self._squares[idx] = piece
        if piece is not None:
            self._counts[int(piece.side)] += 1

    def is_empty(self, sq: Square) -> bool:
        return self.occupant(sq) is None

    # -- Query helpers --------------------------------------------------------

    def count(self, side: Side) -> int:
        """Number of *side*'s pieces on the board."""
        return self._counts[int(side)]

    def squares_of(self, side: Side) -> list[Square]:
        """Occupied squares of *side*, row-major order."""
        return [sq for sq, piece in self.items() if piece.side == side]

    def items(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares with their pieces, row-major order."""
        for idx, piece in enumerate(self._squares):
            if piece is not None:
                yield divmod(idx, BOARD_SIZE), piece

    # -- Mutation / copying ---------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        b._counts = self._counts.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * (BOARD_SIZE * BOARD_SIZE)
        self._counts = [0] * _SIDE_COUNT

    # -- Factory --------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position: three rows of regulars per side."""
        b = cls()
        for row in range(BOARD_SIZE):
            if row < _HOME_ROWS:
                side = Side.WHITE
            elif row >= BOARD_SIZE - _HOME_ROWS:
                side = Side.BLACK
            else:
                continue
            for col in range(BOARD_SIZE):
                if is_playable((row, col)):
                    b.place((row, col), Piece(side))
        return b

    # -- Dunder helpers -------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE - 1, -1, -1):
            cells = []
            for col in range(BOARD_SIZE):
                p = self._squares[row * BOARD_SIZE + col]
                cells.append(str(p) if p else ".")
            rows.append(f"{row} {' '.join(cells)}")
        rows.append("  0 1 2 3 4 5 6 7")
        return "\n".join(rows)
