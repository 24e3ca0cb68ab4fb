"""Tests for Board."""

import pytest

from checkie.core.board import Board
from checkie.core.enums import Rank, Side
from checkie.core.piece import Piece


class TestBoardInitial:
    def test_piece_counts(self) -> None:
        board = Board.initial()
        assert board.count(Side.WHITE) == 12
        assert board.count(Side.BLACK) == 12

    def test_white_fills_rows_0_to_2(self) -> None:
        board = Board.initial()
        squares = board.squares_of(Side.WHITE)
        assert all(row < 3 for row, _ in squares)
        assert (0, 1) in squares and (2, 7) in squares

    def test_black_fills_rows_5_to_7(self) -> None:
        board = Board.initial()
        squares = board.squares_of(Side.BLACK)
        assert all(row >= 5 for row, _ in squares)
        assert (5, 0) in squares and (7, 6) in squares

    def test_only_playable_squares_occupied(self) -> None:
        board = Board.initial()
        for (row, col), _ in board.items():
            assert (row + col) % 2 == 1

    def test_all_regular(self) -> None:
        board = Board.initial()
        assert all(piece.rank == Rank.REGULAR for _, piece in board.items())

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for row in (3, 4):
            for col in range(8):
                assert board[(row, col)] is None


class TestBoardOperations:
    def test_place_and_occupant(self) -> None:
        board = Board()
        piece = Piece(Side.WHITE)
        board.place((3, 2), piece)
        assert board.occupant((3, 2)) == piece
        assert board.count(Side.WHITE) == 1

    def test_out_of_bounds_reads_as_empty(self) -> None:
        board = Board.initial()
        assert board.occupant((-1, 0)) is None
        assert board.occupant((8, 3)) is None
        assert board.occupant((2, 8)) is None

    def test_place_on_light_square_raises(self) -> None:
        board = Board()
        with pytest.raises(ValueError, match="not playable"):
            board.place((0, 0), Piece(Side.WHITE))

    def test_place_out_of_bounds_raises(self) -> None:
        board = Board()
        with pytest.raises(ValueError, match="out of bounds"):
            board.place((8, 1), None)

    def test_replacing_piece_keeps_counts(self) -> None:
        board = Board()
        board.place((3, 2), Piece(Side.WHITE))
        board.place((3, 2), Piece(Side.BLACK))
        assert board.count(Side.WHITE) == 0
        assert board.count(Side.BLACK) == 1
        board.place((3, 2), None)
        assert board.count(Side.BLACK) == 0

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy.place((0, 1), None)
        assert board != copy
        assert board[(0, 1)] == Piece(Side.WHITE)
        assert board.count(Side.WHITE) == 12

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert list(board.items()) == []
        assert board.count(Side.WHITE) == 0

    def test_geometry_helpers(self) -> None:
        assert Board.is_playable((0, 1))
        assert not Board.is_playable((0, 0))
        assert Board.in_bounds((7, 7))
        assert not Board.in_bounds((0, -1))

    def test_repr_not_empty(self) -> None:
        text = repr(Board.initial())
        assert "w" in text and "b" in text
        assert "0 1 2 3 4 5 6 7" in text
