"""Leaderboard construction and ranking.

Ranking rules, evaluated top-down for each compared pair:

1. Same average and the first player has at least one win: more games played
   ranks higher.
2. Neither player has a win: fewer games played ranks higher.
3. Otherwise: higher average ranks higher.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import cmp_to_key

from .dto import GameRecord, LeaderboardEntry
from .roster import get_previous_players

logger = logging.getLogger(__name__)


def get_leaderboard_entry(results: Sequence[GameRecord], player: str) -> LeaderboardEntry:
    """Compute wins, losses and the rendered average for one player.

    Args:
        results: Finished game records.
        player: Player identifier.

    Returns:
        LeaderboardEntry with `average` rendered to three decimals (`0.000`
        when the player has no games).
    """

    total_games = sum(1 for result in results if player in result.players)
    wins = sum(1 for result in results if result.winner == player)
    average = wins / total_games if total_games > 0 else 0
    return LeaderboardEntry(
        player=player,
        wins=wins,
        losses=total_games - wins,
        average=f"{average:.3f}",
    )


def compare_leaderboard_entries(a: LeaderboardEntry, b: LeaderboardEntry) -> int:
    """Order two entries; a negative result places `a` above `b`."""

    if a.win_ratio == b.win_ratio and a.wins > 0:
        return b.total_games - a.total_games

    if a.wins == 0 and b.wins == 0:
        return a.total_games - b.total_games

    if b.win_ratio > a.win_ratio:
        return 1
    if b.win_ratio < a.win_ratio:
        return -1
    return 0


def get_leaderboard(results: Sequence[GameRecord]) -> tuple[LeaderboardEntry, ...]:
    """Build the ranked leaderboard, one entry per distinct player.

    Args:
        results: Finished game records.

    Returns:
        Entries in leaderboard order (best first). The sort is stable, so
        players the rules consider equal keep their roster order.
    """

    entries = [get_leaderboard_entry(results, player) for player in get_previous_players(results)]
    ranked = sorted(entries, key=cmp_to_key(compare_leaderboard_entries))
    logger.debug("Ranked %d leaderboard entries from %d games", len(ranked), len(results))
    return tuple(ranked)
