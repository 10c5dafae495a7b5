"""General facts: game count, recency and duration extremes."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Callable

from .dto import NO_DATA, GameRecord, GeneralFacts

logger = logging.getLogger(__name__)

DurationFormat = Callable[[float], str]


def get_general_facts(
    results: Sequence[GameRecord],
    *,
    game_duration_formatter: DurationFormat,
    last_played_formatter: DurationFormat,
    now: datetime | None = None,
) -> GeneralFacts:
    """Summarize the game collection.

    Args:
        results: Finished game records.
        game_duration_formatter: Renders game durations (milliseconds).
        last_played_formatter: Renders the elapsed time since the last game
            (milliseconds), typically at day granularity.
        now: Reference time for recency; defaults to the current UTC time.

    Returns:
        GeneralFacts. Empty input yields `n/a` strings and a zero count.
    """

    if not results:
        return GeneralFacts(
            last_played=NO_DATA,
            total_games=0,
            shortest_game=NO_DATA,
            longest_game=NO_DATA,
        )

    if now is None:
        now = datetime.now(timezone.utc)

    last_played_ms = min((now - result.end).total_seconds() * 1000 for result in results)
    if last_played_ms < 0:
        logger.warning("Most recent game ends %.0fms in the future; treating it as just played", -last_played_ms)
        last_played_ms = 0

    durations = [result.duration_ms for result in results]

    return GeneralFacts(
        last_played=f"{last_played_formatter(last_played_ms)} ago",
        total_games=len(results),
        shortest_game=game_duration_formatter(min(durations)),
        longest_game=game_duration_formatter(max(durations)),
    )
