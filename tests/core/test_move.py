"""Tests for Move, the enums and the square helpers."""

import pytest

from checkie.core.enums import MoveKind, Side
from checkie.core.move import Move
from checkie.core.types import in_bounds, is_playable, offset


class TestMove:
    def test_quiet(self) -> None:
        m = Move((2, 1), (3, 2))
        assert not m.is_capture
        assert m.capture_count == 0
        assert str(m) == "2,1-3,2"

    def test_extend_builds_new_chain(self) -> None:
        start = Move((1, 0), (1, 0))
        first = start.extend((2, 1), (3, 2))
        second = first.extend((4, 3), (5, 4))
        assert start.captures == ()
        assert first == Move((1, 0), (3, 2), ((2, 1),))
        assert second == Move((1, 0), (5, 4), ((2, 1), (4, 3)))
        assert second.capture_count == 2
        assert str(second) == "1,0x5,4"

    def test_hashable(self) -> None:
        assert len({Move((2, 1), (3, 2)), Move((2, 1), (3, 2))}) == 1


class TestEnums:
    def test_side_directions(self) -> None:
        assert Side.WHITE.opposite == Side.BLACK
        assert Side.BLACK.opposite == Side.WHITE
        assert Side.WHITE.forward == 1
        assert Side.BLACK.forward == -1
        assert Side.WHITE.promotion_row == 7
        assert Side.BLACK.promotion_row == 0
        assert str(Side.BLACK) == "black"

    @pytest.mark.parametrize(
        ("captured", "promoted", "kind"),
        [
            (False, False, MoveKind.QUIET),
            (True, False, MoveKind.CAPTURE),
            (False, True, MoveKind.PROMOTION),
            (True, True, MoveKind.CAPTURE_WITH_PROMOTION),
        ],
    )
    def test_move_kind_of(self, captured: bool, promoted: bool, kind: MoveKind) -> None:
        assert MoveKind.of(captured, promoted) == kind


class TestSquares:
    def test_bounds(self) -> None:
        assert in_bounds((0, 0))
        assert in_bounds((7, 7))
        assert not in_bounds((8, 0))
        assert not in_bounds((0, -1))

    def test_playable(self) -> None:
        assert is_playable((0, 1))
        assert not is_playable((0, 0))

    def test_offset(self) -> None:
        assert offset((2, 1), 1, 1) == (3, 2)
        assert offset((2, 1), -1, 1, steps=2) == (0, 3)
