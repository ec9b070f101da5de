"""Match state machine — owns the live board, the turn and the winner."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from lightchess.core.board import Board
from lightchess.core.enums import Color, MatchPhase, Validation
from lightchess.core.move import Movement
from lightchess.core.notation.fen import board_from_fen, board_to_fen
from lightchess.core.render import render_unicode
from lightchess.core.rules import Rules
from lightchess.core.types import Coordinate

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Movement, Validation, "Match"], None]
GameOverCallback = Callable[[Color], None]  # winner


@dataclass
class MatchEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Match ────────────────────────────────────────────────────────────────────


class Match:
    """A single game session.

    Created in progress with White to move. The board changes only through
    :meth:`apply_move`; once a winner is set every further move attempt is
    answered with :attr:`Validation.MATCH_FINISHED`.

    The given *board* is copied, so the caller's board is never mutated.
    """

    __slots__ = ("_board", "_turn", "_winner", "events")

    def __init__(self, board: Board | None = None, turn: Color = Color.WHITE) -> None:
        self._board = board.copy() if board is not None else Board.initial()
        self._turn = turn
        self._winner: Color | None = None
        self.events = MatchEvents()

    @classmethod
    def from_fen(cls, fen: str) -> Match:
        board, turn = board_from_fen(fen)
        return cls(board, turn)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def turn(self) -> Color:
        return self._turn

    @property
    def winner(self) -> Color | None:
        return self._winner

    @property
    def phase(self) -> MatchPhase:
        return MatchPhase.IN_PROGRESS if self._winner is None else MatchPhase.FINISHED

    @property
    def is_finished(self) -> bool:
        return self._winner is not None

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, movement: Movement) -> Validation:
        """Validate and play *movement* for the side to move.

        Returns the outcome; the board and turn are left untouched unless
        the outcome is ``LEGAL_MOVE`` or ``CHECKMATE``. A position where the
        next side has no legal reply is reported as ``CHECKMATE`` whether or
        not that side is in check.
        """
        if self._winner is not None:
            return Validation.MATCH_FINISHED

        initial = movement.initial
        # An off-board square holds no piece of the side to move.
        if not initial.on_board or self._board.color_at(initial) != self._turn:
            return self._reject(movement, Validation.ILLEGAL_MOVE)

        result = Rules.validate(self._board, movement)
        if result != Validation.LEGAL_MOVE:
            return self._reject(movement, result)

        self._board.move_piece(initial, movement.final)
        mover = self._turn
        _LOGGER.debug("%s played %s", mover, movement)

        if not Rules.has_legal_moves(self._board, mover.opposite):
            self._winner = mover
            _LOGGER.info("Checkmate: %s wins after %s", mover, movement)
            self._emit_move(movement, Validation.CHECKMATE)
            self._emit_game_over(mover)
            return Validation.CHECKMATE

        self._turn = mover.opposite
        self._emit_move(movement, Validation.LEGAL_MOVE)
        return Validation.LEGAL_MOVE

    # ── Query helpers ────────────────────────────────────────────────────

    def validate(self, movement: Movement) -> Validation:
        return Rules.validate(self._board, movement)

    def legal_destinations(self, coordinate: Coordinate) -> list[Coordinate]:
        return Rules.legal_destinations(self._board, coordinate)

    def all_legal_moves(
        self, color: Color | None = None, filter_checks: bool = True
    ) -> list[Movement]:
        """Moves for *color* (side to move by default)."""
        side = self._turn if color is None else color
        return Rules.all_legal_moves(self._board, side, filter_checks)

    def is_in_check(self, color: Color | None = None) -> bool:
        return Rules.is_in_check(self._board, self._turn if color is None else color)

    # ── Import / export ──────────────────────────────────────────────────

    def load_fen(self, fen: str) -> None:
        """Replace the position with *fen* and restart the match.

        Raises :class:`~lightchess.core.errors.InvalidFenFormat` and leaves
        the match untouched if *fen* is malformed.
        """
        board, turn = board_from_fen(fen)
        self._board = board
        self._turn = turn
        self._winner = None

    def to_fen(self) -> str:
        return board_to_fen(self._board, self._turn)

    def render(self) -> str:
        return render_unicode(self._board)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _reject(self, movement: Movement, result: Validation) -> Validation:
        _LOGGER.debug("Rejected %s for %s: %s", movement, self._turn, result.name)
        return result

    def _emit_move(self, movement: Movement, result: Validation) -> None:
        for cb in self.events.on_move:
            cb(movement, result, self)

    def _emit_game_over(self, winner: Color) -> None:
        for cb in self.events.on_game_over:
            cb(winner)
