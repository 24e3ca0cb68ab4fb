"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable, Mapping

import pytest

from checkie.core.board import Board
from checkie.core.enums import Side
from checkie.core.piece import Piece
from checkie.core.ruleset import RuleSet
from checkie.core.types import Square
from checkie.game.state import GameState


BoardFactory = Callable[[Mapping[Square, Piece]], Board]
StateFactory = Callable[..., GameState]


def build_board(pieces: Mapping[Square, Piece]) -> Board:
    board = Board()
    for sq, piece in pieces.items():
        board.place(sq, piece)
    return board


@pytest.fixture
def make_board() -> BoardFactory:
    """Board holding exactly the given pieces."""
    return build_board


@pytest.fixture
def make_state() -> StateFactory:
    """Game state on a custom position, white to move unless told otherwise."""

    def factory(
        pieces: Mapping[Square, Piece],
        side_to_move: Side = Side.WHITE,
        rules: RuleSet | None = None,
    ) -> GameState:
        return GameState.from_board(build_board(pieces), side_to_move, rules)

    return factory
