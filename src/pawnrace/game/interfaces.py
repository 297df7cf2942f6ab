"""Abstract interfaces for the game layer.

Follows Dependency Inversion: the GameController depends on these ABCs,
not on concrete player implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pawnrace.core.enums import Colour
    from pawnrace.core.move import Move
    from pawnrace.game.state import Game


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a pawn race."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    THINKING = auto()  # computer is searching
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a race participant (human or computer)."""

    @property
    @abstractmethod
    def colour(self) -> Colour: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_computer(self) -> bool: ...

    @abstractmethod
    def request_move(self, game: Game) -> Move | None:
        """Pick a move for the current position.

        Humans return ``None`` (their moves arrive through the controller).
        Computers return their choice, or ``None`` when they cannot move.
        """
