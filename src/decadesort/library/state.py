"""Track extraction state machine.

The machine walks the plist layout used by iTunes / Apple Music exports::

    <plist><dict>
      <key>Tracks</key>
      <dict>
        <key>1234</key>
        <dict>
          <key>Name</key><string>Song A</string>
          <key>Artist</key><string>Artist X</string>
          <key>Year</key><integer>1994</integer>
        </dict>
        ...
      </dict>
      ...
    </dict></plist>

``advance`` is a pure step function: it takes the current state and one
event and returns the next state together with whatever the event completed
(a ``Track``, a ``DroppedEntry`` or ``None``).

Phases only move forward. Once ``<key>Tracks</key>`` has been seen the
machine never returns to ``ROOT``, so dictionaries after the tracks section
(playlists, for instance) also open entries. Those lack an ``Artist`` and are
dropped. An entry also closes at the first ``</dict>`` after it opened: the
tracks container dict opens the first entry, which the first track dict then
continues, and a dict nested inside a track would close it early.

Character data is buffered as it arrives and trimmed once when its element
closes. Trimming each chunk separately would make the result depend on where
the parser splits text, turning ``Rock &amp; Roll`` into ``Rock&Roll``.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType

from decadesort.models import Track

from .events import Characters, EndElement, ParseEvent, StartElement

TRACKS_KEY = "Tracks"
TITLE_FIELD = "Name"
ARTIST_FIELD = "Artist"
YEAR_FIELD = "Year"

SCALAR_ELEMENTS = frozenset({"string", "integer"})

_YEAR_PATTERN = re.compile(r"[+-]?[0-9]+")

_EMPTY_FIELDS: Mapping[str, str] = MappingProxyType({})


class Phase(Enum):
    ROOT = "root"
    IN_TRACKS_SECTION = "in_tracks_section"
    IN_TRACK_ENTRY = "in_track_entry"


@dataclass(slots=True, frozen=True)
class DroppedEntry:
    """A track entry that closed without both a name and an artist."""

    fields: Mapping[str, str]


@dataclass(slots=True, frozen=True)
class ExtractorState:
    """Working state for a single parse run."""

    phase: Phase = Phase.ROOT
    current_key: str = ""
    value: str = ""
    fields: Mapping[str, str] = field(default_factory=lambda: _EMPTY_FIELDS)
    emitted: int = 0
    dropped: int = 0


Outcome = Track | DroppedEntry | None


def parse_year(raw: str | None) -> int:
    """Return the integer year in ``raw`` or 0 when it is missing or not a number."""
    if raw is None or not _YEAR_PATTERN.fullmatch(raw):
        return 0
    return int(raw)


def build_track(fields: Mapping[str, str]) -> Track | None:
    """Create a track from raw entry fields, or None when name or artist is missing."""
    title = fields.get(TITLE_FIELD)
    artist = fields.get(ARTIST_FIELD)
    if title is None or artist is None:
        return None
    return Track(title=title, artist=artist, year=parse_year(fields.get(YEAR_FIELD)))


def advance(state: ExtractorState, event: ParseEvent) -> tuple[ExtractorState, Outcome]:
    """Apply one parse event and return the next state plus any completed record."""
    if isinstance(event, Characters):
        return replace(state, value=state.value + event.text), None

    if isinstance(event, StartElement):
        if event.name == "dict" and state.phase is Phase.IN_TRACKS_SECTION:
            return replace(state, phase=Phase.IN_TRACK_ENTRY, value="", fields=_EMPTY_FIELDS), None
        return replace(state, value=""), None

    if isinstance(event, EndElement):
        return _close_element(state, event.name, state.value.strip())

    raise TypeError(f"Unsupported parse event: {event!r}")


def _close_element(state: ExtractorState, name: str, text: str) -> tuple[ExtractorState, Outcome]:
    if name == "key":
        phase = state.phase
        if text == TRACKS_KEY and phase is Phase.ROOT:
            phase = Phase.IN_TRACKS_SECTION
        return replace(state, phase=phase, current_key=text), None

    if state.phase is not Phase.IN_TRACK_ENTRY:
        return state, None

    if name in SCALAR_ELEMENTS:
        fields = {**state.fields, state.current_key: text}
        return replace(state, fields=MappingProxyType(fields)), None

    if name == "dict":
        closed = replace(state, phase=Phase.IN_TRACKS_SECTION, fields=_EMPTY_FIELDS)
        track = build_track(state.fields)
        if track is None:
            return replace(closed, dropped=state.dropped + 1), DroppedEntry(state.fields)
        return replace(closed, emitted=state.emitted + 1), track

    return state, None


__all__ = [
    "DroppedEntry",
    "ExtractorState",
    "Outcome",
    "Phase",
    "advance",
    "build_track",
    "parse_year",
]
