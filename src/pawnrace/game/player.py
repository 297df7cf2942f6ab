"""Concrete player implementations."""

from __future__ import annotations

import random
from enum import StrEnum
from typing import TYPE_CHECKING

from pawnrace.core.enums import Colour
from pawnrace.engine.minimax import MinimaxEngine, random_move
from pawnrace.game.interfaces import IPlayer

if TYPE_CHECKING:
    from pawnrace.core.move import Move
    from pawnrace.engine.search import IEngine
    from pawnrace.game.state import Game


class PlayMode(StrEnum):
    """How a computer player picks its moves."""

    SEARCH = "search"
    RANDOM = "random"


class HumanPlayer(IPlayer):
    """A human participant; moves come from ``controller.submit_move()``."""

    __slots__ = ("_colour", "_name")

    def __init__(self, colour: Colour, name: str = "") -> None:
        self._colour = colour
        self._name = name or f"Player ({colour})"

    @property
    def colour(self) -> Colour:
        return self._colour

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_computer(self) -> bool:
        return False

    def request_move(self, game: Game) -> Move | None:
        return None


class ComputerPlayer(IPlayer):
    """A computer participant backed by a search engine.

    Args:
        colour: Side the computer plays.
        name: Display name.
        engine: Engine used in ``SEARCH`` mode (a default
            :class:`MinimaxEngine` when omitted).
        mode: ``SEARCH`` runs the engine, ``RANDOM`` picks uniformly.
        rng: Random source for ``RANDOM`` mode.
    """

    __slots__ = ("_colour", "_name", "_engine", "_mode", "_rng")

    def __init__(
        self,
        colour: Colour,
        name: str = "Engine",
        engine: IEngine | None = None,
        mode: PlayMode = PlayMode.SEARCH,
        rng: random.Random | None = None,
    ) -> None:
        self._colour = colour
        self._name = name
        self._engine = engine if engine is not None else MinimaxEngine()
        self._mode = mode
        self._rng = rng or random.Random()

    @property
    def colour(self) -> Colour:
        return self._colour

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_computer(self) -> bool:
        return True

    @property
    def mode(self) -> PlayMode:
        return self._mode

    def request_move(self, game: Game) -> Move | None:
        if self._mode == PlayMode.RANDOM:
            return random_move(game, self._colour, self._rng)
        return self._engine.search(game, self._colour).best_move
