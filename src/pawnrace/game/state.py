"""Game state - shared board, side to move, apply/undo and terminal rules."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from pawnrace.core.board import Board
from pawnrace.core.enums import Colour
from pawnrace.core.move import Move
from pawnrace.core.move_generator import MoveGenerator
from pawnrace.core.types import promotion_rank

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class _AppliedMove:
    """Snapshot pushed by each :meth:`Game.apply_move` so it can be undone."""

    move: Move
    mover: Colour
    side_before: Colour
    ep_captured: tuple[int, int] | None
    recorded: bool


class Game:
    """A pawn race in progress.

    The board is mutated in place.  Every :meth:`apply_move` pushes an undo
    record (Command pattern); :meth:`unapply_move` pops exactly one.
    ``history`` only holds moves applied with ``record_history=True``, i.e.
    the moves actually played, while :attr:`last_move` sees search moves too.
    """

    __slots__ = ("board", "side_to_move", "history", "_applied")

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Colour = Colour.WHITE,
    ) -> None:
        if side_to_move == Colour.NONE:
            raise ValueError("side_to_move must be WHITE or BLACK")
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.history: list[Move] = []
        self._applied: list[_AppliedMove] = []

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def dim(self) -> int:
        return self.board.dim

    @property
    def last_move(self) -> Move | None:
        return self._applied[-1].move if self._applied else None

    @property
    def ply_count(self) -> int:
        """Number of applied moves (played and search-internal)."""
        return len(self._applied)

    def valid_moves(self, colour: Colour | None = None) -> list[Move]:
        """Pseudo-legal moves for *colour* (default: side to move)."""
        side = self.side_to_move if colour is None else colour
        return MoveGenerator(self.board, self.last_move).generate_moves(side)

    # ── Core move operations ─────────────────────────────────────────────

    def apply_move(self, move: Move, record_history: bool = True) -> None:
        """Apply *move* and hand the turn to the other side."""
        board = self.board
        origin = board.get_square(move.from_sq.x, move.from_sq.y)
        target = board.get_square(move.to_sq.x, move.to_sq.y)
        if origin is None or target is None:
            raise ValueError(f"Move {move} leaves the board")
        mover = origin.occupied_by()
        if mover == Colour.NONE:
            raise ValueError(f"No pawn on {origin.name}")

        ep_captured: tuple[int, int] | None = None
        if move.is_en_passant:
            # The captured pawn sits beside the origin, not on the target.
            ep_captured = (target.x, origin.y)
            board.place(*ep_captured, Colour.NONE)

        origin.set_occupier(Colour.NONE)
        target.set_occupier(mover)

        self._applied.append(
            _AppliedMove(
                move=move,
                mover=mover,
                side_before=self.side_to_move,
                ep_captured=ep_captured,
                recorded=record_history,
            )
        )
        self.side_to_move = mover.opposite

        if record_history:
            self.history.append(move)
            _LOGGER.debug("%s plays %s", mover, move)

    def unapply_move(self) -> Move:
        """Undo the most recent :meth:`apply_move` and return its move."""
        if not self._applied:
            raise RuntimeError("unapply_move() called with no applied move")
        state = self._applied.pop()
        move = state.move
        board = self.board

        board.place(move.from_sq.x, move.from_sq.y, state.mover)
        if move.is_capture and not move.is_en_passant:
            board.place(move.to_sq.x, move.to_sq.y, state.mover.opposite)
        else:
            board.place(move.to_sq.x, move.to_sq.y, Colour.NONE)
        if state.ep_captured is not None:
            board.place(*state.ep_captured, state.mover.opposite)

        self.side_to_move = state.side_before
        if state.recorded:
            self.history.pop()
        return move

    @contextmanager
    def applied(self, move: Move) -> Iterator[None]:
        """Apply *move* without recording it; undo on every exit path."""
        self.apply_move(move, record_history=False)
        try:
            yield
        finally:
            self.unapply_move()

    # ── Terminal state ───────────────────────────────────────────────────

    def game_result(self) -> Colour:
        """Winner, or ``Colour.NONE`` while the race is undecided."""
        board = self.board
        dim = board.dim
        white = board.pawns(Colour.WHITE)
        black = board.pawns(Colour.BLACK)

        if any(sq.y == promotion_rank(Colour.WHITE, dim) for sq in white):
            return Colour.WHITE
        if any(sq.y == promotion_rank(Colour.BLACK, dim) for sq in black):
            return Colour.BLACK
        if not white:
            return Colour.BLACK
        if not black:
            return Colour.WHITE

        gen = MoveGenerator(board, self.last_move)
        if not gen.has_moves(self.side_to_move):
            return self.side_to_move.opposite
        return Colour.NONE

    def is_finished(self, verbose: bool = True) -> bool:
        """Whether the race is decided; logs the outcome when *verbose*."""
        winner = self.game_result()
        if winner == Colour.NONE:
            return False
        if verbose:
            _LOGGER.info("Game over: %s wins after %d moves", winner, len(self.history))
        return True

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Game:
        """Independent copy with the same board, turn and undo stack."""
        game = Game(self.board.copy(), self.side_to_move)
        game.history = self.history.copy()
        game._applied = self._applied.copy()
        return game
