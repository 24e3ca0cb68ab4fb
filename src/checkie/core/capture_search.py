"""Capture-chain search and quiet-move enumeration.

The search is a depth-first walk over jump sequences. Each recursive call
receives the chain built so far as an immutable :class:`Move`, whose
``captures`` tuple doubles as the set of victims that may not be jumped
again. Sibling branches therefore never see each other's victims.

While a chain is being explored the moving piece's origin counts as
vacated, and victims already jumped stay on the board as obstacles until
the whole move is committed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from checkie.core.enums import Side
from checkie.core.move import Move
from checkie.core.piece import Piece
from checkie.core.ruleset import RuleSet
from checkie.core.types import DIAGONALS, Square, in_bounds, is_playable, offset

if TYPE_CHECKING:
    from checkie.core.board import Board

_STANDARD = RuleSet.standard()


def jump_directions(piece: Piece, rules: RuleSet = _STANDARD) -> tuple[tuple[int, int], ...]:
    """Diagonals along which *piece* may capture."""
    if piece.is_king or rules.backward_capture:
        return DIAGONALS
    return _forward_pair(piece.side)


def step_directions(piece: Piece) -> tuple[tuple[int, int], ...]:
    """Diagonals along which *piece* may make a quiet move."""
    if piece.is_king:
        return DIAGONALS
    return _forward_pair(piece.side)


def _forward_pair(side: Side) -> tuple[tuple[int, int], ...]:
    return ((side.forward, -1), (side.forward, 1))


# -- Captures -----------------------------------------------------------------


def captures_from(board: Board, sq: Square, rules: RuleSet = _STANDARD) -> list[Move]:
    """Every single and chained capture for the piece on *sq*.

    Intermediate chain nodes are returned as well as maximal ones: each is
    an independently playable move. A regular piece's chain stops on its
    promotion row. Empty if *sq* holds no piece.
    """
    piece = board.occupant(sq)
    if piece is None:
        return []

    view = board.copy()
    view.place(sq, None)

    found: list[Move] = []
    _extend_chain(view, piece, Move(sq, sq), jump_directions(piece, rules), found)
    return found


def _extend_chain(
    board: Board,
    piece: Piece,
    chain: Move,
    directions: tuple[tuple[int, int], ...],
    found: list[Move],
) -> None:
    here = chain.destination
    for d_row, d_col in directions:
        victim = offset(here, d_row, d_col)
        if not _is_victim(board, piece, victim, chain.captures):
            continue
        for landing in _landings(board, piece, victim, d_row, d_col):
            step = chain.extend(victim, landing)
            found.append(step)
            if not piece.is_king and landing[0] == piece.side.promotion_row:
                # Promotion ends the chain; a king continues as a new step.
                continue
            _extend_chain(board, piece, step, directions, found)


def _is_victim(board: Board, piece: Piece, sq: Square, taken: tuple[Square, ...]) -> bool:
    target = board.occupant(sq)
    return target is not None and target.side != piece.side and sq not in taken


def _landings(
    board: Board, piece: Piece, victim: Square, d_row: int, d_col: int
) -> list[Square]:
    """Empty squares beyond *victim*: one for a regular, the open ray for a king."""
    landings: list[Square] = []
    sq = offset(victim, d_row, d_col)
    while in_bounds(sq) and is_playable(sq) and board.is_empty(sq):
        landings.append(sq)
        if not piece.is_king:
            break
        sq = offset(sq, d_row, d_col)
    return landings


def can_capture(board: Board, sq: Square, rules: RuleSet = _STANDARD) -> bool:
    """Whether the piece on *sq* has at least one capture.

    Only first jumps are inspected: a chain exists iff its first step does.
    """
    piece = board.occupant(sq)
    if piece is None:
        return False
    for d_row, d_col in jump_directions(piece, rules):
        victim = offset(sq, d_row, d_col)
        if _is_victim(board, piece, victim, ()) and _landings(board, piece, victim, d_row, d_col):
            return True
    return False


def has_capture(board: Board, side: Side, rules: RuleSet = _STANDARD) -> bool:
    """Whether any piece of *side* can capture."""
    return any(can_capture(board, sq, rules) for sq in board.squares_of(side))


def find_best_capture(board: Board, side: Side, rules: RuleSet = _STANDARD) -> Move | None:
    """The capture taking the most pieces among all of *side*'s pieces.

    Advisory only: legal play accepts any capture. Ties keep the first
    move found in row-major order.
    """
    best: Move | None = None
    for sq in board.squares_of(side):
        for move in captures_from(board, sq, rules):
            if best is None or move.capture_count > best.capture_count:
                best = move
    return best


# -- Quiet moves --------------------------------------------------------------


def quiet_moves_from(board: Board, sq: Square) -> list[Move]:
    """Non-capturing moves: one step forward for a regular, open slides for a king."""
    piece = board.occupant(sq)
    if piece is None:
        return []

    moves: list[Move] = []
    for d_row, d_col in step_directions(piece):
        target = offset(sq, d_row, d_col)
        while in_bounds(target) and board.is_empty(target):
            moves.append(Move(sq, target))
            if not piece.is_king:
                break
            target = offset(target, d_row, d_col)
    return moves
