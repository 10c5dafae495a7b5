"""Service layer wiring Django settings and localization into the stats engine."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any, Callable

from django.conf import settings
from django.utils import timezone

from analysis.dto import GameStatsSnapshot, LeaderboardEntry
from analysis.durations import DurationFormatter
from analysis.engine import StatsEngine
from analysis.records import parse_game_records

from .formatting import localized_month_label, localized_timestamp

logger = logging.getLogger(__name__)


def build_stats_engine(*, clock: Callable[[], datetime] | None = None) -> StatsEngine:
    """Return a StatsEngine configured from Django settings.

    Args:
        clock: Optional clock override; defaults to `django.utils.timezone.now`.

    Returns:
        StatsEngine using localized month labels and timestamps.

    Raises:
        ValueError: When a configured duration unit is unknown.
    """

    return StatsEngine(
        game_duration_formatter=DurationFormatter(units=tuple(settings.STATS_GAME_DURATION_UNITS)),
        last_played_formatter=DurationFormatter(units=tuple(settings.STATS_LAST_PLAYED_UNITS)),
        timestamp_formatter=localized_timestamp,
        month_label=localized_month_label,
        clock=clock or timezone.now,
    )


def summarize_raw_records(
    payloads: Iterable[Mapping[str, object]],
    *,
    engine: StatsEngine | None = None,
) -> GameStatsSnapshot:
    """Parse raw record payloads and compute every statistic.

    Raises:
        MalformedRecordError: When a payload violates the record contract.
    """

    records = parse_game_records(payloads)
    logger.info("Summarizing %d game records", len(records))
    return (engine or build_stats_engine()).summarize(records)


def _leaderboard_entry_payload(entry: LeaderboardEntry) -> dict[str, Any]:
    return {
        "player": entry.player,
        "wins": entry.wins,
        "losses": entry.losses,
        "average": entry.average,
    }


def snapshot_payload(snapshot: GameStatsSnapshot) -> dict[str, Any]:
    """Serialize a snapshot into a JSON-ready dict using camelCase keys."""

    facts = snapshot.general_facts
    holders = snapshot.special_card_holders
    return {
        "previousPlayers": list(snapshot.previous_players),
        "leaderboard": [_leaderboard_entry_payload(entry) for entry in snapshot.leaderboard],
        "generalFacts": {
            "lastPlayed": facts.last_played,
            "totalGames": facts.total_games,
            "shortestGame": facts.shortest_game,
            "longestGame": facts.longest_game,
        },
        "specialCardHolders": {
            "longestRoad": holders.longest_road,
            "largestArmy": holders.largest_army,
        },
        "gamesByMonth": [[label, count] for label, count in snapshot.games_by_month],
    }
