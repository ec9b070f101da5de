"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from lightchess.core.board import Board
from lightchess.core.notation import board_from_fen

# After 1.f3 e5 2.g4 Qh4#, white is mated.
FOOLS_MATE_FEN = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"

# White knight e2 shields its king e1 from the rook on e8.
PINNED_KNIGHT_FEN = "k3r3/8/8/8/8/8/4N3/4K3 w - - 0 1"


def board_at(fen: str) -> Board:
    """Board part of *fen*."""
    board, _turn = board_from_fen(fen)
    return board


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()


@pytest.fixture
def fools_mate_board() -> Board:
    return board_at(FOOLS_MATE_FEN)


@pytest.fixture
def pinned_knight_board() -> Board:
    return board_at(PINNED_KNIGHT_FEN)
