"""Pawn-race engine package: evaluation, search and Qt worker bridge."""

from pawnrace.engine.evaluation import EvalWeights, Evaluator, is_passed_pawn
from pawnrace.engine.minimax import MinimaxEngine
from pawnrace.engine.qt_bridge import EngineRequester, EngineWorker
from pawnrace.engine.search import IEngine, SearchLimits, SearchResult
from pawnrace.engine.side import Side, side_registry

__all__ = [
    "EngineRequester",
    "EngineWorker",
    "EvalWeights",
    "Evaluator",
    "IEngine",
    "MinimaxEngine",
    "SearchLimits",
    "SearchResult",
    "Side",
    "is_passed_pawn",
    "side_registry",
]
