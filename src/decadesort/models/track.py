"""Data structures representing library tracks."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Track:
    """Represents one song from the library export."""

    title: str
    artist: str
    year: int = 0

    def has_year(self) -> bool:
        """Return True when a usable release year is known."""
        return self.year > 0
