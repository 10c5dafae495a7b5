"""Compact human-readable duration formatting.

Durations render as space-separated unit tokens (`1h 2m 3s`). Each formatter
is restricted to a set of allowed units; anything smaller than the smallest
allowed unit is dropped.
"""

from __future__ import annotations

from dataclasses import dataclass

_MS_PER_SECOND = 1000
_MS_PER_DAY = 24 * 60 * 60 * _MS_PER_SECOND

UNIT_MILLISECONDS: dict[str, int] = {
    "y": 365 * _MS_PER_DAY,
    "mo": 30 * _MS_PER_DAY,
    "w": 7 * _MS_PER_DAY,
    "d": _MS_PER_DAY,
    "h": 60 * 60 * _MS_PER_SECOND,
    "m": 60 * _MS_PER_SECOND,
    "s": _MS_PER_SECOND,
    "ms": 1,
}

GAME_DURATION_UNITS = ("y", "mo", "d", "h", "m", "s")
LAST_PLAYED_UNITS = ("y", "mo", "d")


@dataclass(frozen=True, slots=True)
class DurationFormatter:
    """Render millisecond durations using a fixed set of allowed units.

    Args:
        units: Allowed unit keys (any order; see `UNIT_MILLISECONDS`).
    """

    units: tuple[str, ...] = GAME_DURATION_UNITS

    def __post_init__(self) -> None:
        unknown = [unit for unit in self.units if unit not in UNIT_MILLISECONDS]
        if unknown:
            raise ValueError(f"Unknown duration units: {unknown!r}")
        if not self.units:
            raise ValueError("At least one duration unit is required")
        ordered = tuple(sorted(set(self.units), key=lambda unit: -UNIT_MILLISECONDS[unit]))
        object.__setattr__(self, "units", ordered)

    def __call__(self, milliseconds: float) -> str:
        """Format a duration.

        Args:
            milliseconds: Non-negative duration; negative values clamp to zero.

        Returns:
            A string such as `1h 30m`, or `0<smallest unit>` when the duration is
            shorter than the smallest allowed unit.
        """

        remaining = max(int(milliseconds), 0)
        parts: list[str] = []
        for unit in self.units:
            size = UNIT_MILLISECONDS[unit]
            amount, remaining = divmod(remaining, size)
            if amount:
                parts.append(f"{amount}{unit}")
        if not parts:
            return f"0{self.units[-1]}"
        return " ".join(parts)
