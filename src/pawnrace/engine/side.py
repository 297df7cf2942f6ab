"""Colour-scoped views over a shared game.

Each side reaches its opponent through the registry returned by
:func:`side_registry`, never through a stored back-reference.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pawnrace.core.enums import Colour
from pawnrace.engine.evaluation import Evaluator, is_passed_pawn

if TYPE_CHECKING:
    from pawnrace.core.move import Move
    from pawnrace.core.square import Square
    from pawnrace.game.state import Game


class Side:
    """One colour's view of the game: pawns, moves, passed pawns, score."""

    __slots__ = ("_game", "_colour", "_evaluator")

    def __init__(self, game: Game, colour: Colour, evaluator: Evaluator) -> None:
        if colour == Colour.NONE:
            raise ValueError("A side must be WHITE or BLACK")
        self._game = game
        self._colour = colour
        self._evaluator = evaluator

    @property
    def colour(self) -> Colour:
        return self._colour

    def pawns(self) -> list[Square]:
        return self._game.board.pawns(self._colour)

    def valid_moves(self) -> list[Move]:
        return self._game.valid_moves(self._colour)

    def is_passed_pawn(self, square: Square) -> bool:
        return is_passed_pawn(self._game.board, square, self._colour)

    def evaluate(self) -> int:
        return self._evaluator.evaluate(self._game, self._colour)


def side_registry(game: Game, evaluator: Evaluator) -> dict[Colour, Side]:
    """Both sides of *game*, indexed by colour."""
    return {
        colour: Side(game, colour, evaluator)
        for colour in (Colour.WHITE, Colour.BLACK)
    }
