"""Integration tests for the game_stats management command."""

from __future__ import annotations

import json
from io import StringIO

import pytest
from django.core.management import CommandError, call_command

pytestmark = pytest.mark.integration

RECORDS = [
    {
        "winner": "Ann",
        "players": ["Ann", "Ben"],
        "start": "2024-01-01T00:00:00Z",
        "end": "2024-01-01T01:00:00Z",
        "longestRoadHolder": "Ann",
        "largestArmyHolder": "None",
    },
    {
        "winner": "Ann",
        "players": ["Ann", "Ben", "Cy"],
        "start": "2024-03-10T18:00:00Z",
        "end": "2024-03-10T20:15:00Z",
        "longestRoadHolder": None,
        "largestArmyHolder": "Cy",
    },
]


def _run(tmp_path, records, *args: str) -> str:
    path = tmp_path / "games.json"
    path.write_text(json.dumps(records), encoding="utf-8")
    out = StringIO()
    call_command("game_stats", str(path), *args, stdout=out)
    return out.getvalue()


def test_game_stats_prints_all_sections(tmp_path) -> None:
    """The full report includes every statistic with camelCase keys."""

    report = json.loads(_run(tmp_path, RECORDS))

    assert report["previousPlayers"] == ["Ann", "Ben", "Cy"]
    assert report["leaderboard"][0] == {"player": "Ann", "wins": 2, "losses": 0, "average": "1.000"}
    assert [entry["player"] for entry in report["leaderboard"]] == ["Ann", "Cy", "Ben"]
    assert report["generalFacts"]["totalGames"] == 2
    assert report["generalFacts"]["shortestGame"] == "1h"
    assert report["generalFacts"]["longestGame"] == "2h 15m"
    assert report["generalFacts"]["lastPlayed"].endswith(" ago")
    assert report["specialCardHolders"]["longestRoad"].startswith("Ann since ")
    assert report["specialCardHolders"]["largestArmy"].startswith("Cy since ")
    assert len(report["gamesByMonth"]) == 12
    assert sum(count for _, count in report["gamesByMonth"]) == 2


def test_game_stats_prints_single_section(tmp_path) -> None:
    """`--section` limits the output to one statistic."""

    months = json.loads(_run(tmp_path, RECORDS, "--section", "months"))

    assert months[0] == ["Jan", 1]
    assert months[2] == ["Mar", 1]


def test_game_stats_empty_file_reports_no_data(tmp_path) -> None:
    """An empty record list produces no-data facts instead of failing."""

    facts = json.loads(_run(tmp_path, [], "--section", "facts"))

    assert facts == {"lastPlayed": "n/a", "totalGames": 0, "shortestGame": "n/a", "longestGame": "n/a"}


def test_game_stats_rejects_malformed_records(tmp_path) -> None:
    """Malformed records surface as a CommandError naming the field."""

    bad = [dict(RECORDS[0], winner="Zed")]

    with pytest.raises(CommandError, match="winner"):
        _run(tmp_path, bad)


def test_game_stats_rejects_invalid_json(tmp_path) -> None:
    """Invalid JSON is reported as a CommandError."""

    path = tmp_path / "games.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(CommandError, match="Invalid JSON"):
        call_command("game_stats", str(path), stdout=StringIO())


def test_game_stats_rejects_missing_file(tmp_path) -> None:
    """Unreadable paths are reported as a CommandError."""

    with pytest.raises(CommandError, match="Unable to read"):
        call_command("game_stats", str(tmp_path / "missing.json"), stdout=StringIO())
