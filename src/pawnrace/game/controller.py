"""GameController - the turn loop of a pawn race.

Coordinates: Players, Game, MoveGenerator.
Emits events via simple callbacks so a UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from pawnrace.core.board import Board
from pawnrace.core.enums import Colour
from pawnrace.core.move import Move
from pawnrace.game.interfaces import GamePhase, IPlayer
from pawnrace.game.state import Game

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, Game], None]
GameOverCallback = Callable[[Colour], None]  # winner
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Runs a pawn race: validates moves, alternates turns, notifies listeners.

    Computer turns are played synchronously inside :meth:`new_game` and
    :meth:`submit_move` until a human is to move or the race is decided.
    """

    __slots__ = ("_game", "_players", "_phase", "_winner", "events")

    def __init__(self) -> None:
        self._game = Game()
        self._players: dict[Colour, IPlayer] = {}
        self._phase = GamePhase.NOT_STARTED
        self._winner = Colour.NONE
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def game(self) -> Game:
        return self._game

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def winner(self) -> Colour:
        return self._winner

    @property
    def is_game_over(self) -> bool:
        return self._phase == GamePhase.GAME_OVER

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._game.side_to_move)

    def player(self, colour: Colour) -> IPlayer | None:
        return self._players.get(colour)

    # ── Public API ───────────────────────────────────────────────────────

    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        board: Board | None = None,
        side_to_move: Colour = Colour.WHITE,
    ) -> None:
        """Set up a new race and play any leading computer turns."""
        self._players = {Colour.WHITE: white, Colour.BLACK: black}
        self._game = Game(board, side_to_move)
        self._winner = Colour.NONE
        self._set_phase(GamePhase.AWAITING_MOVE)
        if not self._check_game_over():
            self._play_computer_turns()

    def submit_move(self, move: Move) -> bool:
        """Play a human move. Returns True if it was valid and applied."""
        if self.is_game_over or self._phase == GamePhase.NOT_STARTED:
            return False
        if move not in self._game.valid_moves():
            return False

        self._apply(move)
        if not self.is_game_over:
            self._play_computer_turns()
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _play_computer_turns(self) -> None:
        while not self.is_game_over:
            cp = self.current_player
            if cp is None or not cp.is_computer:
                self._set_phase(GamePhase.AWAITING_MOVE)
                return

            self._set_phase(GamePhase.THINKING)
            move = cp.request_move(self._game)
            if move is None:
                _LOGGER.info("%s has no move and loses", cp.name)
                self._finish(cp.colour.opposite)
                return
            self._apply(move)

    def _apply(self, move: Move) -> None:
        self._game.apply_move(move, record_history=True)
        for cb in self.events.on_move:
            cb(move, self._game)
        self._check_game_over()

    def _check_game_over(self) -> bool:
        if not self._game.is_finished(verbose=True):
            return False
        self._finish(self._game.game_result())
        return True

    def _finish(self, winner: Colour) -> None:
        self._winner = winner
        self._set_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(winner)

    def _set_phase(self, phase: GamePhase) -> None:
        if phase == self._phase:
            return
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)
