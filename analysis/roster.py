"""Distinct player roster across all recorded games."""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable

from .dto import GameRecord


def player_sort_key(name: str) -> tuple[str, str, str, str]:
    """Collation key approximating locale-aware (ICU root) string comparison.

    Levels, most significant first: base letters ignoring accents and case,
    then accents, then case with lowercase first, then the raw string.
    """

    decomposed = unicodedata.normalize("NFKD", name).casefold()
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base, decomposed, name.swapcase(), name)


def get_previous_players(results: Iterable[GameRecord]) -> tuple[str, ...]:
    """Return every player who has ever played, sorted and without duplicates.

    Args:
        results: Finished game records.

    Returns:
        A tuple of distinct player identifiers in collation order. Empty input
        yields an empty tuple.
    """

    players = {player for result in results for player in result.players}
    return tuple(sorted(players, key=player_sort_key))
