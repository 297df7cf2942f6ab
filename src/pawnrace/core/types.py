"""Board geometry helpers.

Coordinates are ``(x, y)``: ``x`` is the file (0 = ``a``), ``y`` the rank
(0 = rank ``1``).  White advances towards higher ranks, black towards rank 0.
"""

from __future__ import annotations

from typing import Final

from pawnrace.core.enums import Colour

DEFAULT_DIM: Final = 8
MIN_DIM: Final = 3
_FILES: Final = "abcdefghijklmnopqrstuvwxyz"
# One letter per file.
MAX_DIM: Final = len(_FILES)


def forward(colour: Colour) -> int:
    """Rank step for *colour*'s pawns (+1 for white, -1 for black)."""
    return 1 if colour == Colour.WHITE else -1


def start_rank(colour: Colour, dim: int) -> int:
    """Rank from which *colour* may advance two squares."""
    return 1 if colour == Colour.WHITE else dim - 2


def promotion_rank(colour: Colour, dim: int) -> int:
    """Far rank *colour* is racing to."""
    return dim - 1 if colour == Colour.WHITE else 0


def square_name(x: int, y: int) -> str:
    """Human-readable name, e.g. ``(0, 0)`` -> ``'a1'``."""
    return f"{_FILES[x]}{y + 1}"


def parse_square(name: str, dim: int = DEFAULT_DIM) -> tuple[int, int]:
    """Parse a square name, e.g. ``'e4'`` -> ``(4, 3)``."""
    if len(name) < 2 or name[0] not in _FILES[:dim] or not name[1:].isdigit():
        raise ValueError(f"Invalid square name: {name!r}")
    x = _FILES.index(name[0])
    y = int(name[1:]) - 1
    if not 0 <= y < dim:
        raise ValueError(f"Invalid square name: {name!r}")
    return x, y
