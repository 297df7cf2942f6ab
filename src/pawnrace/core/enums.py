"""Core enumerations for the pawn-race domain."""

from __future__ import annotations

from enum import IntEnum


class Colour(IntEnum):
    """Side colour. ``NONE`` marks an empty square."""

    WHITE = 0
    BLACK = 1
    NONE = 2

    @property
    def opposite(self) -> Colour:
        if self is Colour.NONE:
            return Colour.NONE
        return Colour(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()
