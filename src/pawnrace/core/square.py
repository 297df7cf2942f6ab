"""Square: a board coordinate with its current occupant."""

from __future__ import annotations

from pawnrace.core.enums import Colour
from pawnrace.core.types import square_name


class Square:
    """A single board cell.

    Squares are owned by their :class:`~pawnrace.core.board.Board`; only the
    board and the game mutate the occupant.  Equality and hashing use the
    coordinates alone, so a square from a copied board equals its original.
    """

    __slots__ = ("x", "y", "_occupant")

    def __init__(self, x: int, y: int, occupant: Colour = Colour.NONE) -> None:
        self.x = x
        self.y = y
        self._occupant = occupant

    def occupied_by(self) -> Colour:
        return self._occupant

    def set_occupier(self, colour: Colour) -> None:
        self._occupant = colour

    @property
    def is_empty(self) -> bool:
        return self._occupant == Colour.NONE

    @property
    def name(self) -> str:
        return square_name(self.x, self.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Square):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __repr__(self) -> str:
        return f"Square({self.name}, {self._occupant.name})"
