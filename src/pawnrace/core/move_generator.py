"""Pseudo-legal pawn move generation."""

from __future__ import annotations

from pawnrace.core.board import Board
from pawnrace.core.enums import Colour
from pawnrace.core.move import Move
from pawnrace.core.square import Square
from pawnrace.core.types import forward, promotion_rank, start_rank


class MoveGenerator:
    """Generates pawn moves for one side of a :class:`Board`.

    *last_move* is the most recently applied move (if any); it decides
    whether an en-passant capture is available.
    """

    __slots__ = ("_board", "_last_move")

    def __init__(self, board: Board, last_move: Move | None = None) -> None:
        self._board = board
        self._last_move = last_move

    def generate_moves(self, colour: Colour) -> list[Move]:
        """All pseudo-legal moves for *colour*, in stable board order."""
        moves: list[Move] = []
        for sq in self._board.pawns(colour):
            self._pawn_moves(sq, colour, moves)
        return moves

    def has_moves(self, colour: Colour) -> bool:
        # Stops at the first pawn that can move.
        for sq in self._board.pawns(colour):
            found: list[Move] = []
            self._pawn_moves(sq, colour, found)
            if found:
                return True
        return False

    @staticmethod
    def is_promotion(move: Move, colour: Colour, dim: int) -> bool:
        """Whether *move* lands on *colour*'s promotion rank."""
        return move.to_sq.y == promotion_rank(colour, dim)

    # -- Per-pawn generation --------------------------------------------------

    def _pawn_moves(self, sq: Square, colour: Colour, out: list[Move]) -> None:
        board = self._board
        opponent = colour.opposite
        step = forward(colour)

        ep = self._en_passant_target(sq, opponent)
        if ep is not None:
            out.append(Move(sq, ep, is_capture=True, is_en_passant=True))

        for dx in (-1, 1):
            target = board.get_square(sq.x + dx, sq.y + step)
            if target is not None and target.occupied_by() == opponent:
                out.append(Move(sq, target, is_capture=True))

        one = board.get_square(sq.x, sq.y + step)
        if one is None or not one.is_empty:
            return
        out.append(Move(sq, one))

        if sq.y == start_rank(colour, board.dim):
            two = board.get_square(sq.x, sq.y + 2 * step)
            if two is not None and two.is_empty:
                out.append(Move(sq, two))

    def _en_passant_target(self, sq: Square, opponent: Colour) -> Square | None:
        last = self._last_move
        if last is None or abs(last.rank_delta) != 2:
            return None
        to_x, to_y = last.to_sq.x, last.to_sq.y
        if abs(to_x - sq.x) != 1 or to_y != sq.y:
            return None
        if self._board.occupant(to_x, to_y) != opponent:
            return None
        target = self._board.get_square(to_x, (last.from_sq.y + to_y) // 2)
        if target is None or not target.is_empty:
            return None
        return target
