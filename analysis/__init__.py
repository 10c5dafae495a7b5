"""Pure statistics package for boardGameStats.

This package contains deterministic, testable computations that operate on
in-memory game records and return DTOs. It must not import Django or perform
any I/O.
"""

from .achievements import get_special_card_holders
from .engine import StatsEngine
from .facts import get_general_facts
from .histogram import get_games_by_month
from .leaderboard import get_leaderboard
from .records import MalformedRecordError, parse_game_record, parse_game_records
from .roster import get_previous_players

__all__ = [
    "MalformedRecordError",
    "StatsEngine",
    "get_games_by_month",
    "get_general_facts",
    "get_leaderboard",
    "get_previous_players",
    "get_special_card_holders",
    "parse_game_record",
    "parse_game_records",
]
