"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from lightchess.core.enums import Color, PieceType
from lightchess.core.errors import MissingKingError
from lightchess.core.piece import EMPTY, Piece, Square
from lightchess.core.types import BOARD_SIZE, Coordinate

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid of squares indexed by :class:`Coordinate`.

    ``grid[row][column]`` with row 0 = rank 1. Squares are immutable values,
    so :meth:`copy` yields a board that shares no mutable state with this one.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Square]] = [
            [EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, coord: Coordinate) -> Square:
        if not coord.on_board:
            raise IndexError(f"Coordinate off board: {coord}")
        return self._grid[coord.row][coord.column]

    def __setitem__(self, coord: Coordinate, square: Square) -> None:
        if not coord.on_board:
            raise IndexError(f"Coordinate off board: {coord}")
        self._grid[coord.row][coord.column] = square

    def is_empty(self, coord: Coordinate) -> bool:
        return not self[coord].occupied

    def color_at(self, coord: Coordinate) -> Color | None:
        """Color of the piece on *coord*, ``None`` if empty."""
        return self[coord].color

    # -- Query helpers ------------------------------------------------------

    def occupied(self, color: Color | None = None) -> Iterator[tuple[Coordinate, Piece]]:
        """Occupied squares (optionally of *color*), row-major then by column."""
        for row_idx, row in enumerate(self._grid):
            for col_idx, square in enumerate(row):
                if not isinstance(square, Piece):
                    continue
                if color is not None and square.color != color:
                    continue
                yield Coordinate(row_idx, col_idx), square

    def pieces(self, color: Color, kind: PieceType) -> list[Coordinate]:
        """Coordinates occupied by *color*'s *kind*."""
        target = Piece(color, kind)
        return [coord for coord, piece in self.occupied(color) if piece == target]

    def king_coordinate(self, color: Color) -> Coordinate:
        """Return the single king coordinate for *color*."""
        kings = self.pieces(color, PieceType.KING)
        if not kings:
            raise MissingKingError(f"No {color.name} king on board")
        return kings[0]

    # -- Mutation / copying -------------------------------------------------

    def move_piece(self, origin: Coordinate, target: Coordinate) -> None:
        """Move whatever stands on *origin* to *target*, clearing *origin*."""
        self[target] = self[origin]
        self[origin] = EMPTY

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for column in range(BOARD_SIZE):
            b[Coordinate(1, column)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Coordinate(6, column)] = Piece(Color.BLACK, PieceType.PAWN)

        for column, kind in enumerate(_BACK_RANK):
            b[Coordinate(0, column)] = Piece(Color.WHITE, kind)
            b[Coordinate(7, column)] = Piece(Color.BLACK, kind)
        return b

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Square]]) -> Board:
        """Build a board from eight rows of eight squares, row 0 first."""
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise ValueError("Board layout must be 8 rows of 8 squares")
        b = cls()
        b._grid = [list(row) for row in rows]
        return b

    def rows(self) -> list[tuple[Square, ...]]:
        """Snapshot of the grid, row 0 (rank 1) first."""
        return [tuple(row) for row in self._grid]

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        lines: list[str] = []
        for row in range(BOARD_SIZE - 1, -1, -1):
            cells = " ".join(str(square) for square in self._grid[row])
            lines.append(f"{row + 1} {cells}")
        lines.append("  a b c d e f g h")
        return "\n".join(lines)
