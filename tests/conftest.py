"""Pytest fixtures shared across stats engine tests."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime

import pytest

from analysis.dto import GameRecord
from analysis.records import parse_timestamp


@pytest.fixture
def make_record() -> Callable[..., GameRecord]:
    """Return a factory for GameRecord objects built from ISO timestamp strings."""

    def _make(
        winner: str,
        players: Sequence[str],
        *,
        start: str = "2024-01-01T00:00:00Z",
        end: str = "2024-01-01T01:00:00Z",
        longest_road_holder: str | None = None,
        largest_army_holder: str | None = None,
    ) -> GameRecord:
        return GameRecord(
            winner=winner,
            players=tuple(players),
            start=parse_timestamp(start, field="start"),
            end=parse_timestamp(end, field="end"),
            longest_road_holder=longest_road_holder,
            largest_army_holder=largest_army_holder,
        )

    return _make


@pytest.fixture
def fixed_now() -> datetime:
    """Return a fixed reference time for recency calculations."""

    return parse_timestamp("2024-01-11T01:00:00Z", field="now")


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    The suite must be runnable by intent:
    - `unit`: pure, fast tests with no Django I/O.
    - `integration`: tests touching Django settings, localization or commands.

    Each test must have exactly one of these markers. `golden` is an optional
    tag on top of the speed marker for literal input/output fixtures (ranking
    rules, facts, holders) and is not checked here.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
