"""Qt bridge to run engine search in a worker thread."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from pawnrace.engine.minimax import MinimaxEngine
from pawnrace.engine.search import IEngine, SearchLimits
from pawnrace.game.state import Game

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that computes engine moves on demand.

    The worker searches the game object it receives and mutates it while
    searching; senders pass a private copy (see :class:`EngineRequester`).
    """

    best_move_ready = pyqtSignal(int, object, int, int)
    search_no_move = pyqtSignal(int, int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_engine", "_limits")

    def __init__(
        self,
        *,
        max_depth: int = 6,
        quiescence_depth: int = 4,
    ) -> None:
        super().__init__()
        self._limits = SearchLimits(
            max_depth=max_depth, quiescence_depth=quiescence_depth
        )
        self._engine: IEngine = MinimaxEngine(self._limits)

    @pyqtSlot(object, int)
    def request_move(self, game_obj: object, request_id: int) -> None:
        """Search for the side to move in *game_obj* and emit the result."""
        if not isinstance(game_obj, Game):
            self.search_error.emit(request_id, "Engine received invalid game")
            return

        try:
            result = self._engine.search(
                game_obj,
                game_obj.side_to_move,
                self._limits,
            )
        except Exception as exc:
            _LOGGER.exception("Engine search failed for request %d", request_id)
            self.search_error.emit(request_id, str(exc))
            return

        if result.best_move is None:
            self.search_no_move.emit(request_id, result.score)
            return

        self.best_move_ready.emit(
            request_id,
            result.best_move,
            result.score,
            result.nodes,
        )

    @pyqtSlot(int, int)
    def set_limits(self, max_depth: int, quiescence_depth: int) -> None:
        """Update search limits (takes effect on the next search)."""
        try:
            self._limits = SearchLimits(
                max_depth=max_depth, quiescence_depth=quiescence_depth
            )
        except ValueError as exc:
            self.search_error.emit(-1, str(exc))


class EngineRequester(QObject):
    """Sending side of the worker: snapshots the game before emitting.

    Connect :attr:`search_requested` to :meth:`EngineWorker.request_move`.
    The copy is taken on the caller's thread, so the worker never reads the
    live game.
    """

    search_requested = pyqtSignal(object, int)

    __slots__ = ("_request_id",)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._request_id = 0

    @property
    def last_request_id(self) -> int:
        return self._request_id

    def request(self, game: Game) -> int:
        """Queue a search on a copy of *game*; returns the request id."""
        self._request_id += 1
        self.search_requested.emit(game.copy(), self._request_id)
        return self._request_id
