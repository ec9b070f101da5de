"""Game management layer — the match state machine.

Quick start::

    from lightchess.core import parse_movement
    from lightchess.game import Match

    match = Match()
    match.apply_move(parse_movement("e2e4"))
"""

from lightchess.game.match import Match, MatchEvents

__all__ = [
    "Match",
    "MatchEvents",
]
