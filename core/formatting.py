"""Locale-aware formatting capabilities injected into the stats engine.

These helpers depend on Django's translation catalogs and time zone settings,
which is why they live here rather than in the pure `analysis` package.
"""

from __future__ import annotations

from datetime import date, datetime

from django.utils import dateformat, formats, timezone


def localized_month_label(value: date | datetime) -> str:
    """Return the short month label for a date in the active language.

    Aware datetimes are converted to the current time zone first, so a game
    started late on Jan 31 UTC may count towards February locally.
    """

    if isinstance(value, datetime) and timezone.is_aware(value):
        value = timezone.localtime(value)
    return dateformat.format(value, "M")


def localized_timestamp(value: datetime) -> str:
    """Render a timestamp in the current time zone using the locale's format.

    Args:
        value: Timestamp to render. Naive values are assumed to be in the
            default time zone.

    Returns:
        A localized date-time string, e.g. `Jan. 1, 2024, 1 a.m.` for `en-us`.
    """

    if timezone.is_naive(value):
        value = timezone.make_aware(value)
    return formats.date_format(timezone.localtime(value), "DATETIME_FORMAT")
