"""Text diagrams for boards and long-algebraic text for moves.

A diagram lists ranks from the highest down to rank 1, one line per rank::

    . . . .
    . B . .
    W . . .
    . . . .

``W`` is a white pawn, ``B`` a black pawn and ``.`` an empty square.
Whitespace inside a line is ignored and blank lines are skipped.
"""

from __future__ import annotations

from pawnrace.core.board import Board
from pawnrace.core.enums import Colour
from pawnrace.core.move import Move
from pawnrace.core.types import parse_square, square_name

_CHAR_MAP: dict[str, Colour] = {
    "W": Colour.WHITE,
    "B": Colour.BLACK,
    ".": Colour.NONE,
}
_DIAGRAM_CHARS: dict[Colour, str] = {v: k for k, v in _CHAR_MAP.items()}


def board_from_diagram(diagram: str) -> Board:
    """Parse a text diagram into a :class:`Board`."""
    rows = ["".join(line.split()) for line in diagram.strip().splitlines()]
    rows = [row for row in rows if row]
    dim = len(rows)
    board = Board(dim)
    for rank_idx, row in enumerate(rows):
        if len(row) != dim:
            raise ValueError(
                f"Invalid diagram rank width {len(row)} (expected {dim}): {row!r}"
            )
        y = dim - 1 - rank_idx
        for x, ch in enumerate(row):
            try:
                colour = _CHAR_MAP[ch.upper()]
            except KeyError:
                raise ValueError(f"Invalid diagram character: {ch!r}") from None
            board.place(x, y, colour)
    return board


def board_to_diagram(board: Board, coordinates: bool = False) -> str:
    """Render *board* as a diagram accepted by :func:`board_from_diagram`."""
    dim = board.dim
    rows: list[str] = []
    for y in range(dim - 1, -1, -1):
        row = " ".join(_DIAGRAM_CHARS[board.occupant(x, y)] for x in range(dim))
        rows.append(f"{y + 1:>2} {row}" if coordinates else row)
    if coordinates:
        files = " ".join(square_name(x, 0)[0] for x in range(dim))
        rows.append(f"   {files}")
    return "\n".join(rows)


def move_from_text(board: Board, text: str) -> Move:
    """Build a move from text such as ``'b2-b4'``, ``'b4xc5'`` or ``'b5xc6 e.p.'``."""
    body = text.strip()
    en_passant = body.endswith("e.p.")
    if en_passant:
        body = body[: -len("e.p.")].strip()

    for sep in ("-", "x"):
        if sep in body:
            origin, target = body.split(sep, 1)
            break
    else:
        raise ValueError(f"Invalid move text: {text!r}")

    from_sq = board.get_square(*parse_square(origin, board.dim))
    to_sq = board.get_square(*parse_square(target, board.dim))
    assert from_sq is not None and to_sq is not None
    return Move(from_sq, to_sq, is_capture=sep == "x", is_en_passant=en_passant)
