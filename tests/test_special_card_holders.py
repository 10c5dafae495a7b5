"""Regression tests for Longest Road / Largest Army holder resolution."""

from __future__ import annotations

from datetime import datetime

import pytest

from analysis.achievements import get_special_card_holders, has_holder
from analysis.dto import AchievementHolders

pytestmark = [pytest.mark.unit, pytest.mark.golden]


def _iso(value: datetime) -> str:
    return value.isoformat()


def test_special_card_holders_single_game(make_record) -> None:
    """A holder is reported with the end time of the game; a missing holder is None."""

    results = [
        make_record(
            "A",
            ["A", "B"],
            start="2024-01-01T00:00:00Z",
            end="2024-01-01T01:00:00Z",
            longest_road_holder="A",
            largest_army_holder=None,
        )
    ]

    assert get_special_card_holders(results, timestamp_formatter=_iso) == AchievementHolders(
        longest_road="A since 2024-01-01T01:00:00+00:00",
        largest_army=None,
    )


def test_special_card_holders_empty_input() -> None:
    """Nobody holds anything before the first game."""

    assert get_special_card_holders([], timestamp_formatter=_iso) == AchievementHolders(None, None)


def test_special_card_holders_skip_absent_sentinels(make_record) -> None:
    """The literal "None" and empty strings mean nobody held the card."""

    results = [
        make_record("A", ["A", "B"], end="2024-01-01T01:00:00Z", largest_army_holder="B"),
        make_record("A", ["A", "B"], end="2024-01-02T01:00:00Z", largest_army_holder="None"),
        make_record("B", ["A", "B"], end="2024-01-03T01:00:00Z", largest_army_holder=""),
    ]

    holders = get_special_card_holders(results, timestamp_formatter=_iso)

    assert holders.largest_army == "B since 2024-01-01T01:00:00+00:00"
    assert holders.longest_road is None


def test_special_card_holders_use_last_record_not_latest_timestamp(make_record) -> None:
    """The last qualifying record in input order wins even when an earlier one ended later."""

    results = [
        make_record("A", ["A", "B"], start="2024-03-01T00:00:00Z", end="2024-03-01T01:00:00Z", longest_road_holder="Late"),
        make_record("B", ["A", "B"], start="2024-01-01T00:00:00Z", end="2024-01-01T01:00:00Z", longest_road_holder="Early"),
    ]

    holders = get_special_card_holders(results, timestamp_formatter=_iso)

    assert holders.longest_road == "Early since 2024-01-01T01:00:00+00:00"


def test_has_holder_treats_none_values_as_absent() -> None:
    """Null, empty and the "None" literal are all absent."""

    assert not has_holder(None)
    assert not has_holder("")
    assert not has_holder("None")
    assert has_holder("Alice")
