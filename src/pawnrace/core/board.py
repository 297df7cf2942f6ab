"""Board - pawn placement on an N x N grid."""

from __future__ import annotations

from pawnrace.core.enums import Colour
from pawnrace.core.square import Square
from pawnrace.core.types import DEFAULT_DIM, MAX_DIM, MIN_DIM, start_rank


class Board:
    """Mutable N x N grid of :class:`Square` objects."""

    __slots__ = ("_dim", "_squares")

    def __init__(self, dim: int = DEFAULT_DIM) -> None:
        if not MIN_DIM <= dim <= MAX_DIM:
            raise ValueError(
                f"Board dimension must be in [{MIN_DIM}, {MAX_DIM}], got {dim}"
            )
        self._dim = dim
        # [x][y] -> square, so iteration runs file by file.
        self._squares: list[list[Square]] = [
            [Square(x, y) for y in range(dim)] for x in range(dim)
        ]

    @property
    def dim(self) -> int:
        return self._dim

    # -- Element access -----------------------------------------------------

    def get_square(self, x: int, y: int) -> Square | None:
        """Square at ``(x, y)``, or ``None`` when off the board."""
        if 0 <= x < self._dim and 0 <= y < self._dim:
            return self._squares[x][y]
        return None

    def occupant(self, x: int, y: int) -> Colour | None:
        """Occupant of ``(x, y)``, or ``None`` when off the board."""
        sq = self.get_square(x, y)
        return None if sq is None else sq.occupied_by()

    def place(self, x: int, y: int, colour: Colour) -> None:
        sq = self.get_square(x, y)
        if sq is None:
            raise ValueError(f"Square ({x}, {y}) is off a {self._dim}x{self._dim} board")
        sq.set_occupier(colour)

    # -- Query helpers ------------------------------------------------------

    def pawns(self, colour: Colour) -> list[Square]:
        """Squares occupied by *colour*, file by file then rank by rank."""
        return [
            sq for column in self._squares for sq in column if sq.occupied_by() == colour
        ]

    def count(self, colour: Colour) -> int:
        return len(self.pawns(colour))

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board(self._dim)
        for column, src_column in zip(b._squares, self._squares):
            for sq, src in zip(column, src_column):
                sq.set_occupier(src.occupied_by())
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(
        cls,
        dim: int = DEFAULT_DIM,
        white_gap: int | None = None,
        black_gap: int | None = None,
    ) -> Board:
        """Starting position: a full rank of pawns per side.

        *white_gap* / *black_gap* name a file left empty on that side's
        starting rank, as in the classic pawn race.
        """
        b = cls(dim)
        for x in range(dim):
            if x != white_gap:
                b.place(x, start_rank(Colour.WHITE, dim), Colour.WHITE)
            if x != black_gap:
                b.place(x, start_rank(Colour.BLACK, dim), Colour.BLACK)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        if self._dim != other._dim:
            return False
        return all(
            a.occupied_by() == b.occupied_by()
            for col_a, col_b in zip(self._squares, other._squares)
            for a, b in zip(col_a, col_b)
        )

    def __repr__(self) -> str:
        from pawnrace.core.notation import board_to_diagram

        return board_to_diagram(self, coordinates=True)
