"""Core domain layer: pawn-race board, squares, moves and move generation.

Quick start::

    from pawnrace.core import Board, Colour, MoveGenerator

    board = Board.initial(8)
    for move in MoveGenerator(board).generate_moves(Colour.WHITE):
        print(move)
"""

from pawnrace.core.board import Board
from pawnrace.core.enums import Colour
from pawnrace.core.move import Move
from pawnrace.core.move_generator import MoveGenerator
from pawnrace.core.notation import board_from_diagram, board_to_diagram, move_from_text
from pawnrace.core.square import Square
from pawnrace.core.types import (
    DEFAULT_DIM,
    forward,
    parse_square,
    promotion_rank,
    square_name,
    start_rank,
)

__all__ = [
    # Enums / geometry
    "Colour",
    "DEFAULT_DIM",
    "forward",
    "parse_square",
    "promotion_rank",
    "square_name",
    "start_rank",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Square",
    # Notation
    "board_from_diagram",
    "board_to_diagram",
    "move_from_text",
]
