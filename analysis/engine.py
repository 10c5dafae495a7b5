"""Orchestration entry point for game statistics.

The stats engine is a pure, non-Django module that accepts in-memory game
records and returns DTOs. Formatting capabilities and the clock are injected so
the same engine can be wired to Django's localization or used standalone.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable

from .achievements import TimestampFormat, get_special_card_holders
from .dto import AchievementHolders, GameRecord, GameStatsSnapshot, GeneralFacts, LeaderboardEntry, MonthlyHistogram
from .durations import LAST_PLAYED_UNITS, DurationFormatter
from .facts import DurationFormat, get_general_facts
from .histogram import MonthLabel, english_month_label, get_games_by_month
from .leaderboard import get_leaderboard
from .roster import get_previous_players


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _iso_timestamp(value: datetime) -> str:
    return value.isoformat()


@dataclass(frozen=True)
class StatsEngine:
    """Stateless query surface over a collection of game records.

    Every method copies its input into a tuple before computing, so callers may
    pass any iterable (including generators) and later changes to a caller's
    list never affect a result.

    Args:
        game_duration_formatter: Renders game durations in milliseconds.
        last_played_formatter: Renders elapsed time since the last game.
        timestamp_formatter: Renders the timestamp in special card holder text.
        month_label: Maps a date to its short month label.
        clock: Returns the current aware datetime.
    """

    game_duration_formatter: DurationFormat = field(default_factory=DurationFormatter)
    last_played_formatter: DurationFormat = field(default_factory=lambda: DurationFormatter(units=LAST_PLAYED_UNITS))
    timestamp_formatter: TimestampFormat = _iso_timestamp
    month_label: MonthLabel = english_month_label
    clock: Callable[[], datetime] = _utc_now

    def previous_players(self, results: Iterable[GameRecord]) -> tuple[str, ...]:
        """Return the sorted, distinct roster."""

        return get_previous_players(tuple(results))

    def leaderboard(self, results: Iterable[GameRecord]) -> tuple[LeaderboardEntry, ...]:
        """Return the ranked leaderboard."""

        return get_leaderboard(tuple(results))

    def general_facts(self, results: Iterable[GameRecord]) -> GeneralFacts:
        """Return counts, recency and duration extremes."""

        return get_general_facts(
            tuple(results),
            game_duration_formatter=self.game_duration_formatter,
            last_played_formatter=self.last_played_formatter,
            now=self.clock(),
        )

    def special_card_holders(self, results: Iterable[GameRecord]) -> AchievementHolders:
        """Return the most recent Longest Road / Largest Army holders."""

        return get_special_card_holders(tuple(results), timestamp_formatter=self.timestamp_formatter)

    def games_by_month(self, results: Iterable[GameRecord]) -> MonthlyHistogram:
        """Return the twelve-month games histogram."""

        return get_games_by_month(tuple(results), month_label=self.month_label)

    def summarize(self, results: Iterable[GameRecord]) -> GameStatsSnapshot:
        """Compute every statistic over a single snapshot of `results`."""

        snapshot = tuple(results)
        return GameStatsSnapshot(
            previous_players=self.previous_players(snapshot),
            leaderboard=self.leaderboard(snapshot),
            general_facts=self.general_facts(snapshot),
            special_card_holders=self.special_card_holders(snapshot),
            games_by_month=self.games_by_month(snapshot),
        )
