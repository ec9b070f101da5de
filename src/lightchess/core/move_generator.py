"""Legal and pseudo-legal move generation + check detection."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from lightchess.core.board import Board
from lightchess.core.enums import Color, PieceType
from lightchess.core.move import Movement
from lightchess.core.piece import Piece
from lightchess.core.types import Coordinate

Direction = tuple[int, int]

KNIGHT_OFFSETS: tuple[Direction, ...] = (
    (2, -1),
    (2, 1),
    (-2, 1),
    (-2, -1),
    (1, -2),
    (1, 2),
    (-1, 2),
    (-1, -2),
)

KING_OFFSETS: tuple[Direction, ...] = (
    (1, 0),
    (-1, 0),
    (0, 1),
    (0, -1),
    (1, -1),
    (1, 1),
    (-1, 1),
    (-1, -1),
)

BISHOP_DIRS: tuple[Direction, ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
ROOK_DIRS: tuple[Direction, ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))
QUEEN_DIRS: tuple[Direction, ...] = BISHOP_DIRS + ROOK_DIRS

_PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}


# -- Ray casting -----------------------------------------------------------


def cast_ray(board: Board, origin: Coordinate, direction: Direction) -> Iterator[Coordinate]:
    """Walk from *origin* along *direction* until blocked.

    Yields empty squares, then the first enemy-occupied square if any. Stops
    before a friendly piece or the board edge.
    """
    mover = board.color_at(origin)
    d_row, d_column = direction
    target = origin.shifted(d_row, d_column)
    while target.on_board:
        occupant = board.color_at(target)
        if occupant is None:
            yield target
        else:
            if occupant != mover:
                yield target
            return
        target = target.shifted(d_row, d_column)


# -- Piece-specific generators (pseudo-legal) ------------------------------


def _gen_pawn(board: Board, origin: Coordinate, color: Color) -> list[Coordinate]:
    moves: list[Coordinate] = []
    step = color.forward
    enemy = color.opposite

    one_step = origin.shifted(step, 0)
    if one_step.on_board and board.is_empty(one_step):
        moves.append(one_step)

    for d_column in (1, -1):
        cap = origin.shifted(step, d_column)
        if cap.on_board and board.color_at(cap) == enemy:
            moves.append(cap)

    if origin.row == _PAWN_START_ROW[color]:
        two_step = origin.shifted(2 * step, 0)
        if board.is_empty(one_step) and board.is_empty(two_step):
            moves.append(two_step)
    return moves


def _gen_leaper(
    board: Board,
    origin: Coordinate,
    color: Color,
    offsets: tuple[Direction, ...],
) -> list[Coordinate]:
    moves: list[Coordinate] = []
    for d_row, d_column in offsets:
        target = origin.shifted(d_row, d_column)
        if target.on_board and board.color_at(target) != color:
            moves.append(target)
    return moves


def _gen_sliding(
    board: Board,
    origin: Coordinate,
    directions: tuple[Direction, ...],
) -> list[Coordinate]:
    moves: list[Coordinate] = []
    for direction in directions:
        moves.extend(cast_ray(board, origin, direction))
    return moves


Generator = Callable[[Board, Coordinate, Color], list[Coordinate]]

# One generator per piece kind.
_GENERATORS: dict[PieceType, Generator] = {
    PieceType.PAWN: _gen_pawn,
    PieceType.BISHOP: lambda b, sq, _c: _gen_sliding(b, sq, BISHOP_DIRS),
    PieceType.KNIGHT: lambda b, sq, c: _gen_leaper(b, sq, c, KNIGHT_OFFSETS),
    PieceType.ROOK: lambda b, sq, _c: _gen_sliding(b, sq, ROOK_DIRS),
    PieceType.QUEEN: lambda b, sq, _c: _gen_sliding(b, sq, QUEEN_DIRS),
    PieceType.KING: lambda b, sq, c: _gen_leaper(b, sq, c, KING_OFFSETS),
}


class MoveGenerator:
    """Generates pseudo-legal and legal moves on a :class:`Board`.

    The board is only read. Legality is tested on private scratch copies,
    one per candidate, which are discarded right after the check test.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Per-square generation ---------------------------------------------

    def pseudo_legal_destinations(self, origin: Coordinate) -> list[Coordinate]:
        """Destinations following the piece's movement pattern only."""
        square = self._board[origin]
        if not isinstance(square, Piece):
            return []
        return _GENERATORS[square.kind](self._board, origin, square.color)

    def destinations(self, origin: Coordinate, filter_checks: bool = True) -> list[Coordinate]:
        """Destinations for the piece on *origin*; empty list for an empty square."""
        candidates = self.pseudo_legal_destinations(origin)
        if not filter_checks:
            return candidates
        return self.filter_legal(origin, candidates)

    def filter_legal(
        self, origin: Coordinate, candidates: Iterable[Coordinate]
    ) -> list[Coordinate]:
        """Keep the candidates that do not leave the mover's own king in check."""
        color = self._board.color_at(origin)
        if color is None:
            return []
        legal: list[Coordinate] = []
        for target in candidates:
            scratch = self._board.copy()
            scratch.move_piece(origin, target)
            if not MoveGenerator(scratch).is_in_check(color):
                legal.append(target)
        return legal

    # -- Per-side generation -----------------------------------------------

    def iter_moves(self, color: Color, filter_checks: bool = True) -> Iterator[Movement]:
        """Lazily yield *color*'s moves, row-major then by column."""
        for origin, _piece in self._board.occupied(color):
            for target in self.destinations(origin, filter_checks):
                yield Movement(origin, target)

    def generate_moves(self, color: Color, filter_checks: bool = True) -> list[Movement]:
        """All moves for *color*; pseudo-legal only when *filter_checks* is false."""
        return list(self.iter_moves(color, filter_checks))

    def has_legal_moves(self, color: Color) -> bool:
        return next(self.iter_moves(color), None) is not None

    # -- Check detection ---------------------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king a pseudo-legal destination of the opponent?"""
        king = self._board.king_coordinate(color)
        return any(
            move.final == king
            for move in self.iter_moves(color.opposite, filter_checks=False)
        )
