"""Errors raised at the engine boundary.

Move outcomes are never raised (see :class:`~lightchess.core.enums.Validation`).
These exceptions cover malformed external input and broken board invariants.
"""

from __future__ import annotations


class InvalidCoordinateFormat(ValueError):
    """Square name text could not be decoded."""


class InvalidCoordinate(ValueError):
    """Coordinate lies outside the board and has no square name."""


class InvalidFenFormat(ValueError):
    """FEN text does not match the FEN grammar."""


class MissingKingError(ValueError):
    """The board holds no king for a color whose king was required."""
