"""Tests for board diagrams, square names and move text."""

import pytest

from pawnrace.core.board import Board
from pawnrace.core.enums import Colour
from pawnrace.core.move import Move
from pawnrace.core.notation import board_from_diagram, board_to_diagram, move_from_text
from pawnrace.core.types import parse_square, square_name

DIAGRAM = """
. . . .
. B . .
W . . .
. . W .
"""


class TestDiagram:
    def test_parse(self) -> None:
        b = board_from_diagram(DIAGRAM)
        assert b.dim == 4
        assert b.occupant(1, 2) == Colour.BLACK
        assert b.occupant(0, 1) == Colour.WHITE
        assert b.occupant(2, 0) == Colour.WHITE
        assert b.count(Colour.WHITE) == 2

    def test_spaces_are_optional(self) -> None:
        assert board_from_diagram("....\n.B..\nW...\n..W.") == board_from_diagram(DIAGRAM)

    def test_round_trip(self) -> None:
        b = Board.initial(5, white_gap=2)
        assert board_from_diagram(board_to_diagram(b)) == b

    def test_coordinates(self) -> None:
        text = board_to_diagram(Board(3), coordinates=True)
        assert text.splitlines()[0].startswith(" 3")
        assert text.splitlines()[-1].split() == ["a", "b", "c"]

    def test_invalid_character(self) -> None:
        with pytest.raises(ValueError, match="character"):
            board_from_diagram("...\n.K.\n...")

    def test_ragged_rank(self) -> None:
        with pytest.raises(ValueError, match="width"):
            board_from_diagram("...\n..\n...")


class TestSquareNames:
    def test_square_name(self) -> None:
        assert square_name(4, 3) == "e4"

    def test_parse_square(self) -> None:
        assert parse_square("e4") == (4, 3)
        assert parse_square("c10", dim=10) == (2, 9)

    @pytest.mark.parametrize("name", ["", "e", "z1", "a0", "a9", "4e"])
    def test_invalid_square(self, name: str) -> None:
        with pytest.raises(ValueError):
            parse_square(name)


class TestMoveText:
    def test_advance(self) -> None:
        b = Board()
        move = move_from_text(b, "b2-b4")
        assert (move.from_sq.x, move.from_sq.y) == (1, 1)
        assert (move.to_sq.x, move.to_sq.y) == (1, 3)
        assert not move.is_capture
        assert str(move) == "b2-b4"

    def test_en_passant(self) -> None:
        b = Board()
        move = move_from_text(b, "b5xc6 e.p.")
        assert move.is_capture and move.is_en_passant
        assert str(move) == "b5xc6 e.p."

    def test_moves_compare_by_all_fields(self) -> None:
        b = Board()
        a, c = b.get_square(0, 1), b.get_square(0, 2)
        assert a is not None and c is not None
        assert Move(a, c) == move_from_text(b, "a2-a3")
        assert Move(a, c, is_capture=True) != Move(a, c)

    def test_invalid(self) -> None:
        with pytest.raises(ValueError):
            move_from_text(Board(), "b2b4")
