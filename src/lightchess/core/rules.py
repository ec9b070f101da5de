"""High-level chess rules: move validation, enumeration, check."""

from __future__ import annotations

from lightchess.core.board import Board
from lightchess.core.enums import Color, Validation
from lightchess.core.move import Movement
from lightchess.core.move_generator import MoveGenerator
from lightchess.core.types import Coordinate


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def validate(board: Board, movement: Movement) -> Validation:
        """Classify *movement* on *board*; never raises for a bad move.

        Order matters: off-board origin, then empty origin, then legal,
        then "pattern fits but the own king would be attacked", else illegal.
        """
        initial = movement.initial
        if not initial.on_board:
            return Validation.OUT_OF_BOARD
        if board.is_empty(initial):
            return Validation.BLANK_SQUARE

        gen = MoveGenerator(board)
        candidates = gen.pseudo_legal_destinations(initial)
        if movement.final in gen.filter_legal(initial, candidates):
            return Validation.LEGAL_MOVE
        if movement.final in candidates:
            return Validation.KING_ON_CHECK
        return Validation.ILLEGAL_MOVE

    @staticmethod
    def legal_destinations(board: Board, coordinate: Coordinate) -> list[Coordinate]:
        if not coordinate.on_board:
            return []
        return MoveGenerator(board).destinations(coordinate)

    @staticmethod
    def all_legal_moves(
        board: Board, color: Color, filter_checks: bool = True
    ) -> list[Movement]:
        return MoveGenerator(board).generate_moves(color, filter_checks)

    @staticmethod
    def has_legal_moves(board: Board, color: Color) -> bool:
        return MoveGenerator(board).has_legal_moves(color)

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)
