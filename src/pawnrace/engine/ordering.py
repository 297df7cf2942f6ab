"""Move ordering for alpha-beta and quiescence search."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pawnrace.core.move_generator import MoveGenerator
from pawnrace.core.types import promotion_rank

if TYPE_CHECKING:
    from pawnrace.core.enums import Colour
    from pawnrace.core.move import Move
    from pawnrace.engine.evaluation import EvalWeights


def order_moves(moves: list[Move], colour: Colour, dim: int) -> list[Move]:
    """Captures first, then moves landing closer to the promotion rank.

    ``sorted`` is stable, so equal keys keep generation order.
    """
    end = promotion_rank(colour, dim)
    return sorted(
        moves,
        key=lambda move: (not move.is_capture, abs(move.to_sq.y - end)),
    )


def is_tactical(move: Move, colour: Colour, dim: int) -> bool:
    """Captures and promotions; everything else is quiet."""
    return move.is_capture or MoveGenerator.is_promotion(move, colour, dim)


def tactical_moves(
    moves: list[Move],
    colour: Colour,
    dim: int,
    weights: EvalWeights,
) -> list[Move]:
    """Tactical subset of *moves*, most valuable first."""

    def value(move: Move) -> int:
        if MoveGenerator.is_promotion(move, colour, dim):
            return weights.promotion_bonus
        return weights.pawn_value if move.is_capture else 0

    tactical = [m for m in moves if is_tactical(m, colour, dim)]
    return sorted(tactical, key=value, reverse=True)
