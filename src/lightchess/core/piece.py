"""Square variants: an occupied :class:`Piece` or the :class:`Empty` square."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, TypeAlias

from lightchess.core.enums import Color, PieceType

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "B": (Color.WHITE, PieceType.BISHOP),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "b": (Color.BLACK, PieceType.BISHOP),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}

PIECE_CHARS = frozenset(_CHAR_MAP)


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object for an occupied square."""

    occupied: ClassVar[bool] = True

    color: Color
    kind: PieceType

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.kind)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            color, kind = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, kind)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.kind)]


@dataclass(frozen=True, slots=True)
class Empty:
    """The unoccupied square. All instances compare equal."""

    occupied: ClassVar[bool] = False
    color: ClassVar[None] = None

    def __str__(self) -> str:
        return "."

    @property
    def symbol(self) -> str:
        return " "


EMPTY = Empty()

Square: TypeAlias = Piece | Empty
