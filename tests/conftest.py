"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from xml.sax.saxutils import escape

import pytest

from decadesort.models import Track

PLIST_PROLOGUE = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" '
    '"http://www.apple.com/DTDs/PropertyList-1.0.dtd">\n'
)

Entry = Mapping[str, str | int]


def _value(value: str | int) -> str:
    if isinstance(value, int):
        return f"<integer>{value}</integer>"
    return f"<string>{escape(value)}</string>"


def build_library_xml(
    entries: Sequence[Entry],
    *,
    playlists: Sequence[tuple[str, Sequence[int]]] = (),
) -> str:
    """Render a minimal Library.xml export holding ``entries`` and ``playlists``."""
    lines = [
        PLIST_PROLOGUE,
        '<plist version="1.0">',
        "<dict>",
        "\t<key>Major Version</key><integer>1</integer>",
        "\t<key>Application Version</key><string>1.5.0.73</string>",
        "\t<key>Show Content Ratings</key><true/>",
        "\t<key>Tracks</key>",
        "\t<dict>",
    ]
    for track_id, entry in enumerate(entries, start=1000):
        lines.append(f"\t\t<key>{track_id}</key>")
        lines.append("\t\t<dict>")
        lines.append(f"\t\t\t<key>Track ID</key><integer>{track_id}</integer>")
        for key, value in entry.items():
            lines.append(f"\t\t\t<key>{escape(key)}</key>{_value(value)}")
        lines.append("\t\t\t<key>Date Added</key><date>2021-03-04T05:06:07Z</date>")
        lines.append("\t\t</dict>")
    lines.append("\t</dict>")

    lines.append("\t<key>Playlists</key>")
    lines.append("\t<array>")
    for name, track_ids in playlists:
        lines.append("\t\t<dict>")
        lines.append(f"\t\t\t<key>Name</key><string>{escape(name)}</string>")
        lines.append("\t\t\t<key>Playlist Items</key>")
        lines.append("\t\t\t<array>")
        for track_id in track_ids:
            lines.append(f"\t\t\t\t<dict><key>Track ID</key><integer>{track_id}</integer></dict>")
        lines.append("\t\t\t</array>")
        lines.append("\t\t</dict>")
    lines.append("\t</array>")
    lines.append("</dict>")
    lines.append("</plist>")
    return "\n".join(lines) + "\n"


@pytest.fixture
def write_library(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory that writes a Library.xml export and returns its path."""

    def _write(entries: Sequence[Entry], *, name: str = "Library.xml", **kwargs) -> Path:
        path = tmp_path / name
        path.write_text(build_library_xml(entries, **kwargs), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_tracks() -> list[Track]:
    return [
        Track(title="Heroes", artist="David Bowie", year=1977),
        Track(title="Song A", artist="Artist X", year=1994),
        Track(title="Comfortably Numb", artist="Pink Floyd", year=1979),
        Track(title="Demo", artist="Unknown Band", year=0),
        Track(title="Yesterday", artist="The Beatles", year=1965),
    ]
