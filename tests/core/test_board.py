"""Tests for Board and Square."""

import pytest

from pawnrace.core.board import Board
from pawnrace.core.enums import Colour
from pawnrace.core.square import Square


class TestBoardInitial:
    def test_full_ranks(self) -> None:
        b = Board.initial()
        assert b.count(Colour.WHITE) == 8
        assert b.count(Colour.BLACK) == 8
        assert all(sq.y == 1 for sq in b.pawns(Colour.WHITE))
        assert all(sq.y == 6 for sq in b.pawns(Colour.BLACK))

    def test_gaps(self) -> None:
        b = Board.initial(white_gap=0, black_gap=7)
        assert b.occupant(0, 1) == Colour.NONE
        assert b.occupant(7, 6) == Colour.NONE
        assert b.count(Colour.WHITE) == 7
        assert b.count(Colour.BLACK) == 7

    def test_small_board(self) -> None:
        b = Board.initial(5)
        assert b.dim == 5
        assert all(sq.y == 1 for sq in b.pawns(Colour.WHITE))
        assert all(sq.y == 3 for sq in b.pawns(Colour.BLACK))

    def test_rejects_tiny_board(self) -> None:
        with pytest.raises(ValueError):
            Board(2)

    def test_rejects_board_wider_than_file_letters(self) -> None:
        with pytest.raises(ValueError):
            Board(27)

    def test_widest_board_renders(self) -> None:
        b = Board.initial(26)
        text = repr(b)
        assert text.splitlines()[-1].split() == list("abcdefghijklmnopqrstuvwxyz")
        assert b.get_square(25, 1).name == "z2"


class TestBoardAccess:
    def test_off_board_is_none(self) -> None:
        b = Board(4)
        assert b.get_square(-1, 0) is None
        assert b.get_square(0, -1) is None
        assert b.get_square(4, 0) is None
        assert b.get_square(0, 4) is None
        assert b.occupant(9, 9) is None

    def test_place_and_read(self) -> None:
        b = Board(4)
        b.place(2, 3, Colour.BLACK)
        sq = b.get_square(2, 3)
        assert sq is not None
        assert sq.occupied_by() == Colour.BLACK
        assert not sq.is_empty

    def test_place_off_board_raises(self) -> None:
        with pytest.raises(ValueError):
            Board(4).place(4, 0, Colour.WHITE)

    def test_pawns_are_listed_file_by_file(self) -> None:
        b = Board(4)
        b.place(2, 0, Colour.WHITE)
        b.place(0, 3, Colour.WHITE)
        b.place(0, 1, Colour.WHITE)
        assert [(sq.x, sq.y) for sq in b.pawns(Colour.WHITE)] == [(0, 1), (0, 3), (2, 0)]


class TestBoardCopy:
    def test_copy_is_equal_and_independent(self) -> None:
        b = Board.initial(6)
        c = b.copy()
        assert c == b
        c.place(0, 1, Colour.NONE)
        assert c != b
        assert b.occupant(0, 1) == Colour.WHITE

    def test_different_dims_differ(self) -> None:
        assert Board(4) != Board(5)


class TestSquare:
    def test_equality_uses_coordinates(self) -> None:
        assert Square(1, 2, Colour.WHITE) == Square(1, 2, Colour.BLACK)
        assert Square(1, 2) != Square(2, 1)
        assert hash(Square(1, 2)) == hash(Square(1, 2, Colour.WHITE))

    def test_name(self) -> None:
        assert Square(0, 0).name == "a1"
        assert Square(7, 7).name == "h8"

    def test_colour_opposite(self) -> None:
        assert Colour.WHITE.opposite == Colour.BLACK
        assert Colour.BLACK.opposite == Colour.WHITE
        assert Colour.NONE.opposite == Colour.NONE
