"""pawnrace: move generation, evaluation and alpha-beta search for pawn races."""

__version__ = "0.1.0"
