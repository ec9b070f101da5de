"""Coordinate value object and board-geometry helpers.

Board layout (row-major, White at the bottom):
    row 0 = rank 1 (White's back rank), row 7 = rank 8
    column 0 = file A, column 7 = file H
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Immutable (row, column) pair; may point outside the board."""

    row: int
    column: int

    @property
    def on_board(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.column < BOARD_SIZE

    def shifted(self, d_row: int, d_column: int) -> Coordinate:
        """Coordinate displaced by (*d_row*, *d_column*)."""
        return Coordinate(self.row + d_row, self.column + d_column)


def square_name(coord: Coordinate) -> str:
    """Human-readable name of an on-board coordinate, e.g. (3, 6) → 'g4'."""
    return chr(ord("a") + coord.column) + str(coord.row + 1)


def all_coordinates() -> list[Coordinate]:
    """Every on-board coordinate, row-major then by column."""
    return [Coordinate(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)]


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Coordinate(0, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Coordinate(1, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Coordinate(2, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Coordinate(3, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Coordinate(4, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Coordinate(5, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Coordinate(6, c) for c in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (Coordinate(7, c) for c in range(8))
