"""Decade grouping and CSV rendering."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from decadesort.models import Track

CSV_HEADER = "Title,Artist,Year,Decade"


def decade_label(year: int) -> str:
    """Return the decade a year belongs to, e.g. ``1994 -> "1990s"``."""
    return f"{(year // 10) * 10}s"


def group_by_decade(tracks: Iterable[Track]) -> dict[str, list[Track]]:
    """Bucket dated tracks by decade, keeping encounter order inside each bucket."""
    groups: dict[str, list[Track]] = {}
    for track in tracks:
        if not track.has_year():
            continue
        groups.setdefault(decade_label(track.year), []).append(track)
    return groups


def sorted_decades(groups: Mapping[str, Sequence[Track]]) -> list[str]:
    """Return decade labels in output order.

    Labels are compared as text, which matches numeric order for any four-digit
    decade but would put ``"10s"`` before ``"9s"``.
    """
    return sorted(groups)


def decade_summary(groups: Mapping[str, Sequence[Track]]) -> list[tuple[str, int]]:
    """Return ``(label, track count)`` pairs in output order."""
    return [(label, len(groups[label])) for label in sorted_decades(groups)]


def _quote(text: str) -> str:
    return '"' + text.replace('"', '""') + '"'


def render_rows(groups: Mapping[str, Sequence[Track]]) -> list[str]:
    rows: list[str] = []
    for label in sorted_decades(groups):
        for track in groups[label]:
            rows.append(f"{_quote(track.title)},{_quote(track.artist)},{track.year},{label}")
    return rows


def render_csv(tracks: Iterable[Track]) -> str:
    """Render the decade report for ``tracks`` as CSV text."""
    lines = [CSV_HEADER, *render_rows(group_by_decade(tracks))]
    return "\n".join(lines) + "\n"


__all__ = [
    "CSV_HEADER",
    "decade_label",
    "decade_summary",
    "group_by_decade",
    "render_csv",
    "render_rows",
    "sorted_decades",
]
