"""Special card holders (Longest Road, Largest Army).

The "most recent" holder is the last qualifying record in input order. Callers
are expected to supply records oldest first; timestamps are not compared.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Callable

from .dto import ABSENT_HOLDER, AchievementHolders, GameRecord

TimestampFormat = Callable[[datetime], str]


def has_holder(value: str | None) -> bool:
    """Return True when a holder field names an actual player."""

    return bool(value) and value != ABSENT_HOLDER


def _latest_holder(
    results: Sequence[GameRecord],
    holder_getter: Callable[[GameRecord], str | None],
    timestamp_formatter: TimestampFormat,
) -> str | None:
    qualifying = [result for result in results if has_holder(holder_getter(result))]
    if not qualifying:
        return None
    latest = qualifying[-1]
    return f"{holder_getter(latest)} since {timestamp_formatter(latest.end)}"


def get_special_card_holders(
    results: Sequence[GameRecord],
    *,
    timestamp_formatter: TimestampFormat,
) -> AchievementHolders:
    """Resolve the most recent holder of each special card.

    Args:
        results: Finished game records, oldest first.
        timestamp_formatter: Renders the end timestamp of the holder's game.

    Returns:
        AchievementHolders with `<holder> since <timestamp>` strings, or None
        for a card nobody has held.
    """

    return AchievementHolders(
        longest_road=_latest_holder(results, lambda r: r.longest_road_holder, timestamp_formatter),
        largest_army=_latest_holder(results, lambda r: r.largest_army_holder, timestamp_formatter),
    )
