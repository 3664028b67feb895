"""Exceptions raised by decadesort."""

from __future__ import annotations

from pathlib import Path


class DecadeSortError(Exception):
    """Base class for all decadesort errors."""


class SourceUnavailableError(DecadeSortError):
    """The library export could not be opened or read."""

    def __init__(self, source: Path, reason: str) -> None:
        super().__init__(f"Cannot read library export {source}: {reason}")
        self.source = source
        self.reason = reason


class MalformedDocumentError(DecadeSortError):
    """The library export is not well-formed XML."""

    def __init__(self, source: Path, reason: str) -> None:
        super().__init__(f"Library export {source} is not well-formed: {reason}")
        self.source = source
        self.reason = reason


class ReportWriteError(DecadeSortError):
    """The CSV report could not be persisted."""

    def __init__(self, destination: Path, reason: str) -> None:
        super().__init__(f"Cannot write report to {destination}: {reason}")
        self.destination = destination
        self.reason = reason


class ConfigError(DecadeSortError):
    """A settings file is unreadable or holds a value of the wrong type."""
