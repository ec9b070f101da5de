"""Movement value object."""

from __future__ import annotations

from dataclasses import dataclass

from lightchess.core.types import Coordinate, square_name


@dataclass(frozen=True, slots=True)
class Movement:
    """A candidate move from *initial* to *final*, not yet validated."""

    initial: Coordinate
    final: Coordinate

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        if self.initial.on_board and self.final.on_board:
            return f"{square_name(self.initial)}{square_name(self.final)}"
        return f"{self.initial}->{self.final}"
