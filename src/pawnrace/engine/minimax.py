"""Pure-Python pawn-race search (minimax + alpha-beta + quiescence)."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Final

from pawnrace.core.enums import Colour
from pawnrace.core.move import Move
from pawnrace.engine.evaluation import MAX_SCORE, EvalWeights, Evaluator
from pawnrace.engine.ordering import order_moves, tactical_moves
from pawnrace.engine.search import IEngine, SearchLimits, SearchResult
from pawnrace.engine.side import Side, side_registry

if TYPE_CHECKING:
    from pawnrace.game.state import Game

_LOGGER = logging.getLogger(__name__)

_INF_SCORE: Final = MAX_SCORE + 1


def random_move(
    game: Game,
    colour: Colour,
    rng: random.Random | None = None,
) -> Move | None:
    """Uniformly random valid move for *colour*; not part of the search."""
    moves = game.valid_moves(colour)
    if not moves:
        return None
    return (rng or random.Random()).choice(moves)


class MinimaxEngine(IEngine):
    """Depth-limited minimax with alpha-beta pruning and quiescence.

    Scores are always from the searching colour's point of view.  A decided
    game scores ``MAX_SCORE - plies_from_root`` for a win and the mirror for a
    loss, so quicker wins and slower losses are preferred.

    The game's board is shared and mutated in place; every applied move is
    undone through :meth:`Game.applied` before the frame returns.  The engine
    keeps per-search state and is not re-entrant.
    """

    __slots__ = (
        "_limits",
        "_evaluator",
        "_game",
        "_colour",
        "_sides",
        "_nodes",
    )

    def __init__(
        self,
        limits: SearchLimits | None = None,
        weights: EvalWeights | None = None,
    ) -> None:
        self._limits = limits or SearchLimits()
        self._evaluator = Evaluator(weights)
        self._game: Game | None = None
        self._colour = Colour.WHITE
        self._sides: dict[Colour, Side] = {}
        self._nodes = 0

    @property
    def limits(self) -> SearchLimits:
        return self._limits

    @limits.setter
    def limits(self, limits: SearchLimits) -> None:
        self._limits = limits

    @property
    def evaluator(self) -> Evaluator:
        return self._evaluator

    # ── Decision facade ──────────────────────────────────────────────────

    def choose_move(self, game: Game, colour: Colour) -> Move | None:
        """Best move for *colour*, or ``None`` when it cannot move."""
        return self.search(game, colour).best_move

    def search(
        self,
        game: Game,
        colour: Colour,
        limits: SearchLimits | None = None,
    ) -> SearchResult:
        limits = limits or self._limits
        self._begin(game, colour)

        root_moves = self._sides[colour].valid_moves()
        if not root_moves:
            return SearchResult(None, -MAX_SCORE, 0, self._nodes)

        best_score = -_INF_SCORE
        best_move = root_moves[0]
        for move in order_moves(root_moves, colour, game.dim):
            with game.applied(move):
                score = self._minimax(
                    limits.max_depth - 1,
                    -_INF_SCORE,
                    _INF_SCORE,
                    maximizing=False,
                    limits=limits,
                )
            if score > best_score:
                best_score = score
                best_move = move

        _LOGGER.debug(
            "%s chooses %s (score %d, %d nodes)",
            colour,
            best_move,
            best_score,
            self._nodes,
        )
        return SearchResult(best_move, best_score, limits.max_depth, self._nodes)

    def random_move(
        self,
        game: Game,
        colour: Colour,
        rng: random.Random | None = None,
    ) -> Move | None:
        return random_move(game, colour, rng)

    # ── Search internals ─────────────────────────────────────────────────

    def _begin(self, game: Game, colour: Colour) -> None:
        if colour == Colour.NONE:
            raise ValueError("Cannot search for Colour.NONE")
        self._game = game
        self._colour = colour
        self._sides = side_registry(game, self._evaluator)
        self._nodes = 0

    def _mate_score(self, winner: Colour, depth: int, limits: SearchLimits) -> int:
        distance = limits.max_depth - depth
        if winner == self._colour:
            return MAX_SCORE - distance
        return -MAX_SCORE + distance

    def _side_to_move(self, maximizing: bool) -> Side:
        colour = self._colour if maximizing else self._colour.opposite
        return self._sides[colour]

    def _minimax(
        self,
        depth: int,
        alpha: int,
        beta: int,
        maximizing: bool,
        limits: SearchLimits,
    ) -> int:
        game = self._game
        assert game is not None
        self._nodes += 1

        winner = game.game_result()
        if winner != Colour.NONE:
            return self._mate_score(winner, depth, limits)

        if depth == 0:
            return self._quiescence(alpha, beta, limits.quiescence_depth, maximizing)

        side = self._side_to_move(maximizing)
        moves = side.valid_moves()
        if not moves:
            return self._mate_score(side.colour.opposite, depth, limits)

        if maximizing:
            best = -_INF_SCORE
            for move in order_moves(moves, side.colour, game.dim):
                with game.applied(move):
                    score = self._minimax(depth - 1, alpha, beta, False, limits)
                best = max(best, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break
            return best

        best = _INF_SCORE
        for move in order_moves(moves, side.colour, game.dim):
            with game.applied(move):
                score = self._minimax(depth - 1, alpha, beta, True, limits)
            best = min(best, score)
            beta = min(beta, score)
            if beta <= alpha:
                break
        return best

    def _quiescence(self, alpha: int, beta: int, depth: int, maximizing: bool) -> int:
        game = self._game
        assert game is not None
        self._nodes += 1

        # One terminal check per node, shared with the evaluator.
        winner = game.game_result()
        stand_pat = self._evaluator.evaluate(game, self._colour, winner)
        if maximizing:
            if stand_pat >= beta:
                return beta
            alpha = max(alpha, stand_pat)
        else:
            if stand_pat <= alpha:
                return alpha
            beta = min(beta, stand_pat)

        # Hard cap keeps long capture chains bounded.
        if depth <= 0 or winner != Colour.NONE:
            return stand_pat

        side = self._side_to_move(maximizing)
        candidates = tactical_moves(
            side.valid_moves(), side.colour, game.dim, self._evaluator.weights
        )
        if not candidates:
            return stand_pat

        best = stand_pat
        for move in candidates:
            with game.applied(move):
                score = self._quiescence(alpha, beta, depth - 1, not maximizing)
            if maximizing:
                best = max(best, score)
                alpha = max(alpha, score)
            else:
                best = min(best, score)
                beta = min(beta, score)
            if beta <= alpha:
                break
        return best
