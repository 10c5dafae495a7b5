"""Boundary parsing for raw game-record payloads.

Raw records arrive as JSON-like mappings using the camelCase keys of the
stored game log (`winner`, `players`, `start`, `end`, `longestRoadHolder`,
`largestArmyHolder`). Parsing fails fast with `MalformedRecordError` instead of
letting unparseable values leak into the aggregations.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime, timezone

from .dto import GameRecord

_HOLDER_FIELDS = {
    "longestRoadHolder": "longest_road_holder",
    "largestArmyHolder": "largest_army_holder",
}


class MalformedRecordError(ValueError):
    """Raised when a raw game record violates the record contract."""

    def __init__(self, *, field: str, value: object, reason: str, index: int | None = None) -> None:
        """Initialize the error.

        Args:
            field: Name of the offending field (wire name).
            value: The offending raw value.
            reason: Human-readable reason.
            index: Optional position of the record within its collection.
        """

        location = f"record {index}: " if index is not None else ""
        super().__init__(f"{location}invalid {field!r} ({value!r}): {reason}.")
        self.field = field
        self.value = value
        self.reason = reason
        self.index = index


def parse_timestamp(raw: object, *, field: str) -> datetime:
    """Parse an ISO 8601 timestamp into an aware datetime.

    Args:
        raw: Raw value (a string such as `2024-01-01T01:00:00Z`).
        field: Wire field name used in error messages.

    Returns:
        A timezone-aware datetime. Naive timestamps are interpreted as UTC.

    Raises:
        MalformedRecordError: When the value is not a parseable timestamp.
    """

    if not isinstance(raw, str) or not raw.strip():
        raise MalformedRecordError(field=field, value=raw, reason="expected an ISO 8601 timestamp string")
    text = raw.strip()
    if text.endswith(("Z", "z")):
        text = f"{text[:-1]}+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        raise MalformedRecordError(field=field, value=raw, reason="unparseable timestamp") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_game_record(payload: Mapping[str, object], *, index: int | None = None) -> GameRecord:
    """Validate a raw record mapping and return a GameRecord.

    Args:
        payload: Mapping with the wire keys of a finished game.
        index: Optional position of the record, included in error messages.

    Returns:
        An immutable GameRecord.

    Raises:
        MalformedRecordError: When any field violates the record contract.
    """

    try:
        return _parse_game_record(payload)
    except MalformedRecordError as exc:
        if index is None:
            raise
        raise MalformedRecordError(field=exc.field, value=exc.value, reason=exc.reason, index=index) from exc


def parse_game_records(payloads: Iterable[Mapping[str, object]]) -> tuple[GameRecord, ...]:
    """Parse a collection of raw records, preserving input order."""

    return tuple(parse_game_record(payload, index=idx) for idx, payload in enumerate(payloads))


def _parse_game_record(payload: Mapping[str, object]) -> GameRecord:
    if not isinstance(payload, Mapping):
        raise MalformedRecordError(field="record", value=payload, reason="expected an object")

    for key in ("winner", "players", "start", "end"):
        if key not in payload:
            raise MalformedRecordError(field=key, value=None, reason="missing required field")

    players_raw = payload["players"]
    if not isinstance(players_raw, (list, tuple)) or not players_raw:
        raise MalformedRecordError(field="players", value=players_raw, reason="expected a non-empty list")
    if not all(isinstance(p, str) and p for p in players_raw):
        raise MalformedRecordError(field="players", value=players_raw, reason="player names must be non-empty strings")
    players = tuple(players_raw)

    winner = payload["winner"]
    if not isinstance(winner, str) or not winner:
        raise MalformedRecordError(field="winner", value=winner, reason="expected a non-empty string")
    if winner not in players:
        raise MalformedRecordError(field="winner", value=winner, reason="winner is not one of the players")

    start = parse_timestamp(payload["start"], field="start")
    end = parse_timestamp(payload["end"], field="end")
    if end < start:
        raise MalformedRecordError(field="end", value=payload["end"], reason="game ends before it starts")

    holders: dict[str, str | None] = {}
    for wire_key, attr in _HOLDER_FIELDS.items():
        value = payload.get(wire_key)
        if value is not None and not isinstance(value, str):
            raise MalformedRecordError(field=wire_key, value=value, reason="expected a player name or null")
        holders[attr] = value

    return GameRecord(winner=winner, players=players, start=start, end=end, **holders)
