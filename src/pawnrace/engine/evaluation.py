"""Static evaluation of pawn-race positions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from pawnrace.core.enums import Colour
from pawnrace.core.types import forward, promotion_rank

if TYPE_CHECKING:
    from pawnrace.core.board import Board
    from pawnrace.core.square import Square
    from pawnrace.game.state import Game

MAX_SCORE: Final = 2**31 - 1
WIN_SCORE: Final = MAX_SCORE // 2


@dataclass(slots=True, frozen=True)
class EvalWeights:
    """Heuristic weights, in centipawn-like units."""

    pawn_value: int = 100
    advancement_value: int = 10
    passed_pawn_bonus: int = 50
    promotion_bonus: int = 1000


def is_passed_pawn(board: Board, square: Square, colour: Colour) -> bool:
    """No opposing pawn ahead of *square* on its file or the adjacent files.

    Ranks are scanned from the one in front of the pawn up to and including
    *colour*'s promotion rank.
    """
    if square.occupied_by() != colour or colour == Colour.NONE:
        return False

    opponent = colour.opposite
    step = forward(colour)
    end = promotion_rank(colour, board.dim)
    for y in range(square.y + step, end + step, step):
        for x in (square.x - 1, square.x, square.x + 1):
            if board.occupant(x, y) == opponent:
                return False
    return True


class Evaluator:
    """Scores a position from one side's point of view (positive = good)."""

    __slots__ = ("weights",)

    def __init__(self, weights: EvalWeights | None = None) -> None:
        self.weights = weights or EvalWeights()

    def evaluate(
        self,
        game: Game,
        colour: Colour,
        winner: Colour | None = None,
    ) -> int:
        """Score *game* for *colour*.

        *winner* is ``game.game_result()`` when the caller already has it.
        """
        if winner is None:
            winner = game.game_result()
        if winner == colour:
            return WIN_SCORE
        if winner != Colour.NONE:
            return -WIN_SCORE

        board = game.board
        mine = board.pawns(colour)
        theirs = board.pawns(colour.opposite)
        score = (len(mine) - len(theirs)) * self.weights.pawn_value
        score += sum(self._pawn_terms(board, sq, colour) for sq in mine)
        score -= sum(self._pawn_terms(board, sq, colour.opposite) for sq in theirs)
        return score

    def _pawn_terms(self, board: Board, sq: Square, colour: Colour) -> int:
        w = self.weights
        end = promotion_rank(colour, board.dim)
        distance = abs(sq.y - end)
        value = (board.dim - distance) * w.advancement_value
        if sq.y == end:
            value += w.promotion_bonus
        if is_passed_pawn(board, sq, colour):
            value += w.passed_pawn_bonus
        return value
