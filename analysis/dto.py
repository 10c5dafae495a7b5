"""DTO types consumed and returned by the stats engine.

DTOs are plain data containers used to transport game records in and derived
statistics out to the display layer. They intentionally avoid any Django/ORM
dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

NO_DATA = "n/a"
ABSENT_HOLDER = "None"

MonthlyHistogram = tuple[tuple[str, int], ...]


@dataclass(frozen=True, slots=True)
class GameRecord:
    """A single finished game.

    Attributes:
        winner: Identifier of the winning player; one of `players`.
        players: Participant identifiers in seating order.
        start: Timezone-aware start timestamp.
        end: Timezone-aware end timestamp (never before `start`).
        longest_road_holder: Longest Road holder at game end, if any.
        largest_army_holder: Largest Army holder at game end, if any.
    """

    winner: str
    players: tuple[str, ...]
    start: datetime
    end: datetime
    longest_road_holder: str | None = None
    largest_army_holder: str | None = None

    @property
    def duration_ms(self) -> float:
        """Return the game duration in milliseconds."""

        return (self.end - self.start).total_seconds() * 1000


@dataclass(frozen=True, slots=True)
class LeaderboardEntry:
    """Win/loss summary for one player.

    Attributes:
        player: Player identifier.
        wins: Number of games won.
        losses: Number of games played but not won.
        average: Win ratio rendered with exactly three decimals (e.g. `0.667`).
    """

    player: str
    wins: int
    losses: int
    average: str

    @property
    def total_games(self) -> int:
        """Return the number of games the player took part in."""

        return self.wins + self.losses

    @property
    def win_ratio(self) -> float:
        """Return `average` as a number (rounded to three decimals)."""

        return float(self.average)


@dataclass(frozen=True, slots=True)
class GeneralFacts:
    """Aggregate facts across all games.

    Attributes:
        last_played: Elapsed time since the most recent game, e.g. `3d ago`.
        total_games: Number of games.
        shortest_game: Duration of the shortest game.
        longest_game: Duration of the longest game.
    """

    last_played: str
    total_games: int
    shortest_game: str
    longest_game: str


@dataclass(frozen=True, slots=True)
class AchievementHolders:
    """Most recent Longest Road / Largest Army holders.

    Each value is either None or a string like `Alice since <timestamp>`.
    """

    longest_road: str | None
    largest_army: str | None


@dataclass(frozen=True)
class GameStatsSnapshot:
    """All derived statistics computed over one input collection."""

    previous_players: tuple[str, ...]
    leaderboard: tuple[LeaderboardEntry, ...]
    general_facts: GeneralFacts
    special_card_holders: AchievementHolders
    games_by_month: MonthlyHistogram
