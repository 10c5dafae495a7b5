"""Games-per-month histogram."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence
from datetime import date, datetime
from typing import Callable

from .dto import GameRecord, MonthlyHistogram

logger = logging.getLogger(__name__)

MonthLabel = Callable[[date], str]

MONTH_ABBREVIATIONS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# Any year works; only the month of these dates is read.
_CALENDAR_MONTHS = tuple(date(2000, month, 1) for month in range(1, 13))


def english_month_label(value: date | datetime) -> str:
    """Return the English three-letter month abbreviation for a date."""

    return MONTH_ABBREVIATIONS[value.month - 1]


def get_games_by_month(
    results: Sequence[GameRecord],
    *,
    month_label: MonthLabel = english_month_label,
) -> MonthlyHistogram:
    """Count games by the month they started in.

    Args:
        results: Finished game records.
        month_label: Maps a date to its short month label.

    Returns:
        Twelve `(label, count)` pairs in calendar order, January first. Months
        without games have a count of zero.
    """

    start_months = Counter(month_label(result.start) for result in results)
    logger.debug("Game start months: %s", dict(start_months))
    return tuple((label, start_months.get(label, 0)) for label in map(month_label, _CALENDAR_MONTHS))
