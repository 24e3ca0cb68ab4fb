"""Tests for the plain-text board notation and square names."""

import pytest

from checkie.core.board import Board
from checkie.core.enums import Rank, Side
from checkie.core.notation import board_from_text, board_to_text
from checkie.core.piece import Piece
from checkie.core.types import parse_square, square_name

INITIAL_TEXT = """\
.w.w.w.w
w.w.w.w.
.w.w.w.w
........
........
b.b.b.b.
.b.b.b.b
b.b.b.b."""


class TestBoardText:
    def test_initial_board_to_text(self) -> None:
        assert board_to_text(Board.initial()) == INITIAL_TEXT

    def test_initial_board_from_text(self) -> None:
        assert board_from_text(INITIAL_TEXT) == Board.initial()

    def test_kings_use_uppercase(self) -> None:
        board = Board()
        board.place((2, 1), Piece(Side.WHITE, Rank.KING))
        board.place((5, 4), Piece(Side.BLACK, Rank.KING))
        text = board_to_text(board)
        assert text.splitlines()[2] == ".W......"
        assert text.splitlines()[5] == "....B..."

    def test_indentation_and_blank_lines_ignored(self) -> None:
        text = "\n" + "\n".join("    " + line for line in INITIAL_TEXT.splitlines()) + "\n\n"
        assert board_from_text(text) == Board.initial()

    def test_wrong_row_count(self) -> None:
        with pytest.raises(ValueError, match="8 rows"):
            board_from_text("\n".join(INITIAL_TEXT.splitlines()[:7]))

    def test_wrong_row_width(self) -> None:
        lines = INITIAL_TEXT.splitlines()
        lines[3] = "......."
        with pytest.raises(ValueError, match="row width"):
            board_from_text("\n".join(lines))

    def test_unknown_character(self) -> None:
        lines = INITIAL_TEXT.splitlines()
        lines[3] = "x......."
        with pytest.raises(ValueError, match="Invalid piece character"):
            board_from_text("\n".join(lines))

    def test_piece_on_light_square(self) -> None:
        lines = INITIAL_TEXT.splitlines()
        lines[3] = ".w......"
        with pytest.raises(ValueError, match="non-playable"):
            board_from_text("\n".join(lines))


class TestSquareNames:
    def test_square_name(self) -> None:
        assert square_name((2, 1)) == "2,1"

    def test_parse_square(self) -> None:
        assert parse_square("2,1") == (2, 1)
        assert parse_square(" 7, 0") == (7, 0)

    @pytest.mark.parametrize("name", ["", "21", "a,1", "8,1", "1,2,3"])
    def test_parse_square_invalid(self, name: str) -> None:
        with pytest.raises(ValueError):
            parse_square(name)


class TestPiece:
    def test_from_char(self) -> None:
        assert Piece.from_char("B") == Piece(Side.BLACK, Rank.KING)
        assert str(Piece(Side.WHITE)) == "w"

    def test_from_char_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("k")

    def test_promoted(self) -> None:
        man = Piece(Side.BLACK)
        king = man.promoted()
        assert king.is_king and king.side == Side.BLACK
        assert king.promoted() == king
        assert not man.is_king

    def test_symbols_distinct(self) -> None:
        symbols = {Piece(side, rank).symbol for side in Side for rank in Rank}
        assert len(symbols) == 4
