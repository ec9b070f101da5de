"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row step of a pawn advance: White climbs, Black descends."""
        return 1 if self is Color.WHITE else -1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece kinds, in FEN letter order P, B, N, R, Q, K."""

    PAWN = 0
    BISHOP = 1
    KNIGHT = 2
    ROOK = 3
    QUEEN = 4
    KING = 5


class Validation(IntEnum):
    """Outcome of validating or applying a move.

    Outcomes are returned, never raised: every expected way a move attempt
    can fail during play is one of these values.
    """

    LEGAL_MOVE = auto()
    ILLEGAL_MOVE = auto()
    KING_ON_CHECK = auto()  # follows the pattern but leaves own king attacked
    BLANK_SQUARE = auto()
    OUT_OF_BOARD = auto()
    CHECKMATE = auto()
    MATCH_FINISHED = auto()


class MatchPhase(IntEnum):
    """Finite-state-machine states for a match."""

    IN_PROGRESS = auto()
    FINISHED = auto()
