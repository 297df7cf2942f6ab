"""Game management layer: game state, players and the turn loop.

Quick start::

    from pawnrace.core import Colour
    from pawnrace.game import ComputerPlayer, GameController, HumanPlayer

    ctrl = GameController()
    ctrl.new_game(
        white=HumanPlayer(Colour.WHITE, "Alice"),
        black=ComputerPlayer(Colour.BLACK),
    )
"""

from pawnrace.game.state import Game
from pawnrace.game.controller import GameController, GameEvents
from pawnrace.game.interfaces import GamePhase, IPlayer
from pawnrace.game.player import ComputerPlayer, HumanPlayer, PlayMode

__all__ = [
    # Interfaces
    "GamePhase",
    "IPlayer",
    # Concrete
    "ComputerPlayer",
    "Game",
    "GameController",
    "GameEvents",
    "HumanPlayer",
    "PlayMode",
]
