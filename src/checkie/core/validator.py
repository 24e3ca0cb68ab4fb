"""Single-step move validation.

Covers quiet moves and captures of exactly one victim. Chained captures
are never validated freely: their legality only exists as an output of
:mod:`checkie.core.capture_search`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from checkie.core.enums import Rejection, Side
from checkie.core.move import Move
from checkie.core.ruleset import RuleSet
from checkie.core.types import Square, in_bounds, is_playable, offset

if TYPE_CHECKING:
    from checkie.core.board import Board

_STANDARD = RuleSet.standard()


def _sign(value: int) -> int:
    return 1 if value > 0 else -1


def is_capture_attempt(board: Board, origin: Square, destination: Square) -> bool:
    """Geometric classification of a request as a capture.

    A diagonal move of two or more squares whose first square is occupied.
    For a regular piece that is the classic distance-2 jump; for a king it
    also covers flying landings beyond an adjacent piece.
    """
    d_row = destination[0] - origin[0]
    d_col = destination[1] - origin[1]
    if abs(d_row) != abs(d_col) or abs(d_row) < 2:
        return False
    first = offset(origin, _sign(d_row), _sign(d_col))
    return board.occupant(first) is not None


def resolve(
    board: Board,
    origin: Square,
    destination: Square,
    mover: Side,
    rules: RuleSet,
) -> tuple[Move | None, Rejection | None]:
    """Exactly one of the returned pair is set."""
    if not in_bounds(origin) or not in_bounds(destination):
        return None, Rejection.OUT_OF_BOUNDS

    piece = board.occupant(origin)
    if piece is None or piece.side != mover:
        return None, Rejection.NOT_YOUR_PIECE

    if not is_playable(destination) or not board.is_empty(destination):
        return None, Rejection.DESTINATION_BLOCKED

    d_row = destination[0] - origin[0]
    d_col = destination[1] - origin[1]
    distance = abs(d_row)
    if distance == 0 or distance != abs(d_col):
        return None, Rejection.ILLEGAL_GEOMETRY

    capture = is_capture_attempt(board, origin, destination)
    forward = mover.forward

    if not piece.is_king:
        if capture:
            backward_ok = rules.backward_capture and d_row == -2 * forward
            if distance != 2 or (d_row != 2 * forward and not backward_ok):
                return None, Rejection.ILLEGAL_GEOMETRY
        elif distance != 1 or d_row != forward:
            return None, Rejection.ILLEGAL_GEOMETRY

    step_row, step_col = _sign(d_row), _sign(d_col)

    if capture:
        victim = offset(origin, step_row, step_col)
        target = board.occupant(victim)
        if target is None or target.side == mover:
            return None, Rejection.ILLEGAL_GEOMETRY
        beyond = range(2, distance)
        captures: tuple[Square, ...] = (victim,)
    else:
        beyond = range(1, distance)
        captures = ()

    for steps in beyond:
        if not board.is_empty(offset(origin, step_row, step_col, steps)):
            return None, Rejection.ILLEGAL_GEOMETRY

    return Move(origin, destination, captures), None


def classify(
    board: Board,
    origin: Square,
    destination: Square,
    mover: Side,
    rules: RuleSet = _STANDARD,
) -> Move | None:
    """The single-step :class:`Move` for this request, or ``None`` if illegal."""
    move, _ = resolve(board, origin, destination, mover, rules)
    return move


def diagnose(
    board: Board,
    origin: Square,
    destination: Square,
    mover: Side,
    rules: RuleSet = _STANDARD,
) -> Rejection | None:
    """Why the request is illegal, or ``None`` if it is fine."""
    _, reason = resolve(board, origin, destination, mover, rules)
    return reason


def validate(
    board: Board,
    origin: Square,
    destination: Square,
    mover: Side,
    rules: RuleSet = _STANDARD,
) -> bool:
    """Whether *mover* may play *origin* -> *destination* as a single step.

    Never raises; malformed input simply yields ``False``.
    """
    move, _ = resolve(board, origin, destination, mover, rules)
    return move is not None
