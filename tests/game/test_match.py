"""Tests for the Match state machine."""

import pytest

from lightchess.core.board import Board
from lightchess.core.enums import Color, MatchPhase, PieceType, Validation
from lightchess.core.errors import InvalidFenFormat
from lightchess.core.move import Movement
from lightchess.core.notation import STARTING_FEN, parse_movement
from lightchess.core.piece import EMPTY, Piece
from lightchess.core.types import D8, E2, E4, E5, E7, H4, Coordinate
from lightchess.game.match import Match

FOOLS_MATE = ("f2f3", "e7e5", "g2g4", "d8h4")


def _play(match: Match, *moves: str) -> list[Validation]:
    return [match.apply_move(parse_movement(text)) for text in moves]


def _snapshot(match: Match) -> tuple[Board, Color, Color | None]:
    return match.board.copy(), match.turn, match.winner


class TestMatchSetup:
    def test_defaults(self) -> None:
        match = Match()
        assert match.turn == Color.WHITE
        assert match.winner is None
        assert match.phase == MatchPhase.IN_PROGRESS
        assert not match.is_finished
        assert match.board == Board.initial()

    def test_board_is_copied(self) -> None:
        board = Board.initial()
        match = Match(board)
        match.apply_move(Movement(E2, E4))
        assert board == Board.initial()

    def test_from_fen(self) -> None:
        match = Match.from_fen("rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1")
        assert match.turn == Color.BLACK
        assert match.board[E4] == Piece(Color.WHITE, PieceType.PAWN)

    def test_from_bad_fen(self) -> None:
        with pytest.raises(InvalidFenFormat):
            Match.from_fen("This is an invalid FEN")

    def test_from_fen_without_king(self) -> None:
        with pytest.raises(InvalidFenFormat):
            Match.from_fen("8/8/8/8/8/8/4P3/8 w - - 0 1")


class TestApplyMove:
    def test_legal_move(self) -> None:
        match = Match()
        assert match.apply_move(Movement(E2, E4)) == Validation.LEGAL_MOVE
        assert match.turn == Color.BLACK
        assert match.board[E4] == Piece(Color.WHITE, PieceType.PAWN)
        assert match.board[E2] == EMPTY

    def test_turns_alternate(self) -> None:
        match = Match()
        assert _play(match, "e2e4", "e7e5", "g1f3") == [Validation.LEGAL_MOVE] * 3
        assert match.turn == Color.BLACK

    @pytest.mark.parametrize(
        ("movement", "expected"),
        [
            (Movement(E7, E5), Validation.ILLEGAL_MOVE),  # black piece on white's turn
            (Movement(E4, E5), Validation.ILLEGAL_MOVE),  # empty square
            (Movement(E2, E5), Validation.ILLEGAL_MOVE),  # not a pawn move
            (Movement(Coordinate(8, 0), E4), Validation.ILLEGAL_MOVE),  # off the board
            (Movement(Coordinate(-1, 4), E4), Validation.ILLEGAL_MOVE),
        ],
    )
    def test_rejected_moves_leave_state(
        self, movement: Movement, expected: Validation
    ) -> None:
        match = Match()
        before = _snapshot(match)
        assert match.apply_move(movement) == expected
        assert _snapshot(match) == before

    def test_king_on_check_is_rejected(self) -> None:
        match = Match.from_fen("k3r3/8/8/8/8/8/4N3/4K3 w - - 0 1")
        before = _snapshot(match)
        assert match.apply_move(parse_movement("e2c3")) == Validation.KING_ON_CHECK
        assert _snapshot(match) == before

    def test_capture_replaces_piece(self) -> None:
        match = Match()
        _play(match, "e2e4", "d7d5")
        assert match.apply_move(parse_movement("e4d5")) == Validation.LEGAL_MOVE
        assert match.board[Coordinate(4, 3)] == Piece(Color.WHITE, PieceType.PAWN)


class TestCheckmate:
    def test_fools_mate(self) -> None:
        match = Match()
        results = _play(match, *FOOLS_MATE)
        assert results == [Validation.LEGAL_MOVE] * 3 + [Validation.CHECKMATE]
        assert match.winner == Color.BLACK
        assert match.phase == MatchPhase.FINISHED
        assert match.is_in_check(Color.WHITE)
        assert match.all_legal_moves(Color.WHITE) == []
        assert match.board[H4] == Piece(Color.BLACK, PieceType.QUEEN)
        assert match.board[D8] == EMPTY

    def test_finished_match_rejects_everything(self) -> None:
        match = Match()
        _play(match, *FOOLS_MATE)
        before = _snapshot(match)
        for text in ("e2e4", "e8e7", "a1a1", "h2h3"):
            assert match.apply_move(parse_movement(text)) == Validation.MATCH_FINISHED
        assert match.apply_move(Movement(Coordinate(9, 9), E4)) == (
            Validation.MATCH_FINISHED
        )
        assert _snapshot(match) == before

    def test_no_legal_reply_without_check_counts_as_checkmate(self) -> None:
        match = Match.from_fen("7k/8/5K2/6Q1/8/8/8/8 w - - 0 1")
        assert match.apply_move(parse_movement("g5g6")) == Validation.CHECKMATE
        assert match.winner == Color.WHITE
        assert not match.is_in_check(Color.BLACK)


class TestQueries:
    def test_defaults_follow_turn(self) -> None:
        match = Match()
        assert len(match.all_legal_moves()) == 20
        assert not match.is_in_check()
        match.apply_move(Movement(E2, E4))
        assert all(m.initial.row >= 6 for m in match.all_legal_moves())

    def test_unfiltered_moves(self) -> None:
        match = Match.from_fen("k3r3/8/8/8/8/8/4N3/4K3 w - - 0 1")
        assert len(match.all_legal_moves()) == 4
        assert len(match.all_legal_moves(filter_checks=False)) == 10

    def test_validate_and_destinations(self) -> None:
        match = Match()
        assert match.validate(Movement(E2, E4)) == Validation.LEGAL_MOVE
        assert match.legal_destinations(E2) == [Coordinate(2, 4), E4]
        assert match.legal_destinations(E4) == []

    def test_render(self) -> None:
        lines = Match().render().split("\n")
        assert lines[0].startswith("8 |♜")


class TestFen:
    def test_export_start(self) -> None:
        assert Match().to_fen() == STARTING_FEN

    def test_round_trip_after_moves(self) -> None:
        match = Match()
        _play(match, "e2e4", "e7e5", "g1f3", "b8c6", "f1b5")
        copy = Match.from_fen(match.to_fen())
        assert copy.board == match.board
        assert copy.turn == match.turn == Color.BLACK

    def test_load_fen_replaces_position(self) -> None:
        match = Match()
        _play(match, *FOOLS_MATE)
        match.load_fen(STARTING_FEN)
        assert match.board == Board.initial()
        assert match.winner is None
        assert match.apply_move(Movement(E2, E4)) == Validation.LEGAL_MOVE

    def test_bad_fen_leaves_match_untouched(self) -> None:
        match = Match()
        match.apply_move(Movement(E2, E4))
        fen = match.to_fen()
        with pytest.raises(InvalidFenFormat):
            match.load_fen("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0")
        assert match.to_fen() == fen


class TestEvents:
    def test_move_event_fires(self) -> None:
        match = Match()
        seen: list[tuple[str, Validation]] = []
        match.events.on_move.append(lambda m, result, _match: seen.append((str(m), result)))
        match.apply_move(Movement(E2, E4))
        match.apply_move(Movement(E2, E4))  # black to move: rejected, no event
        assert seen == [("e2e4", Validation.LEGAL_MOVE)]

    def test_game_over_event(self) -> None:
        match = Match()
        winners: list[Color] = []
        match.events.on_game_over.append(winners.append)
        _play(match, *FOOLS_MATE)
        assert winners == [Color.BLACK]
