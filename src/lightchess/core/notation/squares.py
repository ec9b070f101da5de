"""Square-name codec: 'G4' ↔ Coordinate(row=3, column=6)."""

from __future__ import annotations

import re

from lightchess.core.errors import InvalidCoordinate, InvalidCoordinateFormat
from lightchess.core.move import Movement
from lightchess.core.types import Coordinate

_FILES = "ABCDEFGH"
_RANKS = "12345678"

_MOVEMENT_RE = re.compile(r"^\s*([a-hA-H][1-8])\s*[- ]?\s*([a-hA-H][1-8])\s*$")


def decode(text: str) -> Coordinate:
    """Parse a square name such as ``"e2"`` or ``"E2"``."""
    if not isinstance(text, str) or len(text) != 2:
        raise InvalidCoordinateFormat(f"Invalid square name: {text!r}")
    file_char, rank_char = text[0].upper(), text[1]
    if file_char not in _FILES or rank_char not in _RANKS:
        raise InvalidCoordinateFormat(f"Invalid square name: {text!r}")
    return Coordinate(_RANKS.index(rank_char), _FILES.index(file_char))


def encode(coord: Coordinate) -> str:
    """Uppercase square name of *coord*, e.g. ``"G4"``."""
    if not coord.on_board:
        raise InvalidCoordinate(
            f"Coordinate has no square name (row={coord.row}, column={coord.column})"
        )
    return _FILES[coord.column] + _RANKS[coord.row]


def parse_movement(text: str) -> Movement:
    """Parse ``"e2e4"``, ``"e2 e4"`` or ``"e2-e4"`` into a :class:`Movement`."""
    match = _MOVEMENT_RE.match(text)
    if match is None:
        raise InvalidCoordinateFormat(f"Invalid movement: {text!r}")
    return Movement(decode(match.group(1)), decode(match.group(2)))
