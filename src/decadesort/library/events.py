"""Parse events emitted while streaming a library export."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class StartElement:
    """An opening tag, e.g. ``<dict>``."""

    name: str


@dataclass(slots=True, frozen=True)
class Characters:
    """A run of character data; one element's text may arrive in several runs."""

    text: str


@dataclass(slots=True, frozen=True)
class EndElement:
    """A closing tag, e.g. ``</key>``."""

    name: str


ParseEvent = StartElement | Characters | EndElement

__all__ = ["Characters", "EndElement", "ParseEvent", "StartElement"]
