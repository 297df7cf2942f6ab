"""Shared engine search models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pawnrace.core.enums import Colour
    from pawnrace.core.move import Move
    from pawnrace.game.state import Game


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single move computation."""

    max_depth: int = 6
    quiescence_depth: int = 4

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError("Search depth must be >= 1")
        if self.quiescence_depth < 0:
            raise ValueError("Quiescence depth must be >= 0")


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search."""

    best_move: Move | None
    score: int
    depth: int
    nodes: int


class IEngine(Protocol):
    """Protocol for engines used by players and the Qt bridge."""

    def search(
        self,
        game: Game,
        colour: Colour,
        limits: SearchLimits | None = None,
    ) -> SearchResult: ...
