"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from pawnrace.core.square import Square


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable pawn move.

    Holds the board's squares as they were at generation time; consumers
    resolve them by coordinates, so a move stays usable on a copied board.
    """

    from_sq: Square
    to_sq: Square
    is_capture: bool = False
    is_en_passant: bool = False

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        sep = "x" if self.is_capture else "-"
        text = f"{self.from_sq.name}{sep}{self.to_sq.name}"
        if self.is_en_passant:
            text += " e.p."
        return text

    @property
    def rank_delta(self) -> int:
        """Signed rank distance covered by the move."""
        return self.to_sq.y - self.from_sq.y
