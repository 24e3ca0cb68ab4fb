"""Turn controller: the engine's functional interface.

Every mutating call validates completely before it writes to the board,
so a rejected request leaves the :class:`GameState` exactly as it was.
Rejections are reported as ``False`` (or an empty list), never raised.
"""

from __future__ import annotations

import logging

from checkie.core.capture_search import (
    can_capture,
    captures_from,
    has_capture,
    quiet_moves_from,
)
from checkie.core.enums import MoveKind, Rejection, Side
from checkie.core.move import Move
from checkie.core.rules import Rules
from checkie.core.ruleset import RuleSet
from checkie.core.types import Square, in_bounds, is_playable
from checkie.core.validator import is_capture_attempt, resolve
from checkie.game.state import CommittedMove, GameState

_LOGGER = logging.getLogger(__name__)


# ── Lifecycle ────────────────────────────────────────────────────────────────


def new_game(rules: RuleSet | None = None) -> GameState:
    """A fresh game in the standard starting position, white to move."""
    return GameState(rules=rules or RuleSet.standard())


def reset(state: GameState) -> None:
    """Reinitialise *state* in place to a fresh standard game."""
    state.setup(RuleSet.standard())


# ── Queries ──────────────────────────────────────────────────────────────────


def _capture_required(state: GameState) -> bool:
    if state.pending is not None:
        return True
    if not state.rules.forced_capture:
        return False
    return has_capture(state.board, state.side_to_move, state.rules)


def has_forced_capture(state: GameState) -> bool:
    """Whether the side to move is obliged to capture right now."""
    if state.is_over:
        return False
    return _capture_required(state)


def winner(state: GameState) -> Side | None:
    """The winning side once the game is over, otherwise ``None``."""
    if not state.is_over:
        return None
    return Rules.winner(state.board, state.side_to_move, state.rules)


def legal_moves(state: GameState, sq: Square) -> list[Move]:
    """Moves the piece on *sq* may make now.

    Only captures (single and chained) while the side is obliged to capture,
    which leaves nothing for a piece that cannot capture itself. Without
    that obligation, captures followed by quiet moves. Empty when the
    square does not hold a piece of the side to move, or while a different
    piece is finishing a capture chain.
    """
    square = _as_square(sq)
    if state.is_over or square is None:
        return []
    piece = state.board.occupant(square)
    if piece is None or piece.side != state.side_to_move:
        return []
    if state.pending is not None and square != state.pending:
        return []

    captures = captures_from(state.board, square, state.rules)
    if _capture_required(state):
        return captures
    return captures + quiet_moves_from(state.board, square)


def all_legal_moves(state: GameState) -> list[Move]:
    """Every legal move of the side to move, row-major by origin."""
    moves: list[Move] = []
    for sq in state.board.squares_of(state.side_to_move):
        moves.extend(legal_moves(state, sq))
    return moves


def check_move(state: GameState, origin: Square, destination: Square) -> Rejection | None:
    """Why ``apply_move(state, origin, destination)`` would fail, or ``None``."""
    _, reason = _check_step(state, origin, destination)
    return reason


# ── Mutation ─────────────────────────────────────────────────────────────────


def apply_move(state: GameState, origin: Square, destination: Square) -> bool:
    """Play a single step (quiet move or one capture). ``True`` if committed."""
    return commit_step(state, origin, destination) is not None


def play(state: GameState, move: Move) -> bool:
    """Play a whole move taken from :func:`legal_moves`, chains included."""
    return commit(state, move) is not None


def commit_step(state: GameState, origin: Square, destination: Square) -> CommittedMove | None:
    """Like :func:`apply_move` but returns the committed record."""
    move, reason = _check_step(state, origin, destination)
    if move is None:
        _LOGGER.debug("Rejected %s -> %s: %s", origin, destination, reason.name)
        return None
    return _commit(state, move)


def commit(state: GameState, move: Move) -> CommittedMove | None:
    """Like :func:`play` but returns the committed record."""
    if move not in legal_moves(state, move.origin):
        _LOGGER.debug("Rejected %s: not among the legal moves", move)
        return None
    return _commit(state, move)


def _as_square(value: object) -> Square | None:
    """*value* as a square if it is a pair of plain ints, else ``None``."""
    if not isinstance(value, tuple | list) or len(value) != 2:
        return None
    row, col = value
    if type(row) is not int or type(col) is not int:
        return None
    return (row, col)


def _check_step(
    state: GameState, origin: Square, destination: Square
) -> tuple[Move | None, Rejection | None]:
    if state.is_over:
        return None, Rejection.GAME_OVER

    src = _as_square(origin)
    dst = _as_square(destination)
    if src is None or dst is None or not in_bounds(src) or not in_bounds(dst):
        return None, Rejection.OUT_OF_BOUNDS

    board = state.board
    mover = state.side_to_move
    piece = board.occupant(src)
    if piece is None or piece.side != mover:
        return None, Rejection.NOT_YOUR_PIECE
    if not is_playable(dst) or not board.is_empty(dst):
        return None, Rejection.DESTINATION_BLOCKED
    if state.pending is not None and src != state.pending:
        return None, Rejection.MUST_CONTINUE_CAPTURE

    if _capture_required(state) and not is_capture_attempt(board, src, dst):
        return None, Rejection.CAPTURE_REQUIRED

    move, reason = resolve(board, src, dst, mover, state.rules)
    if move is None:
        return None, reason or Rejection.ILLEGAL_GEOMETRY
    return move, None


def _commit(state: GameState, move: Move) -> CommittedMove:
    """The single write path. *move* has already been validated."""
    board = state.board
    mover = state.side_to_move
    piece = board.occupant(move.origin)
    assert piece is not None

    board.place(move.origin, None)
    for victim in move.captures:
        board.place(victim, None)

    promoted = not piece.is_king and move.destination[0] == mover.promotion_row
    board.place(move.destination, piece.promoted() if promoted else piece)

    state.last_move = move
    state.pending = None
    kind = MoveKind.of(move.is_capture, promoted)

    if board.count(mover.opposite) == 0:
        state.is_over = True
        return CommittedMove(move, mover, kind, game_over=True)

    if move.is_capture and can_capture(board, move.destination, state.rules):
        state.pending = move.destination
        return CommittedMove(move, mover, kind, turn_retained=True)

    state.side_to_move = mover.opposite
    if Rules.is_blocked(board, state.side_to_move, state.rules):
        state.is_over = True
        return CommittedMove(move, mover, kind, game_over=True)
    return CommittedMove(move, mover, kind)
