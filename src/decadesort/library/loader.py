"""Streaming extraction of tracks from a plist library export."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from lxml import etree

from decadesort.errors import MalformedDocumentError, SourceUnavailableError
from decadesort.models import Track

from .events import Characters, EndElement, ParseEvent, StartElement
from .state import DroppedEntry, ExtractorState, advance

logger = logging.getLogger(__name__)

DroppedCallback = Callable[[DroppedEntry], None]


class _TrackCollector:
    """lxml parser target that folds callbacks through the extractor state machine."""

    def __init__(self, on_dropped: DroppedCallback | None) -> None:
        self.state = ExtractorState()
        self.tracks: list[Track] = []
        self._on_dropped = on_dropped

    def _dispatch(self, event: ParseEvent) -> None:
        self.state, outcome = advance(self.state, event)
        if isinstance(outcome, Track):
            self.tracks.append(outcome)
        elif isinstance(outcome, DroppedEntry):
            logger.debug("Dropped incomplete track entry: %s", dict(outcome.fields))
            if self._on_dropped is not None:
                self._on_dropped(outcome)

    def start(self, tag: str, attrib: dict[str, str]) -> None:
        self._dispatch(StartElement(tag))

    def data(self, text: str) -> None:
        self._dispatch(Characters(text))

    def end(self, tag: str) -> None:
        self._dispatch(EndElement(tag))

    def close(self) -> list[Track]:
        return self.tracks


class LibraryXmlLoader:
    """Extract tracks from an iTunes / Apple Music ``Library.xml`` export."""

    DEFAULT_CHUNK_SIZE = 64 * 1024

    def __init__(
        self,
        source: Path | str,
        *,
        on_dropped: DroppedCallback | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        self.source = Path(source)
        self.on_dropped = on_dropped
        self.chunk_size = max(1, chunk_size)
        self.track_count = 0
        self.dropped_count = 0

    def parse(self) -> list[Track]:
        """Return tracks in document order, raising when the export cannot be parsed."""
        self.track_count = 0
        self.dropped_count = 0
        collector = _TrackCollector(self.on_dropped)
        parser = etree.XMLParser(target=collector, no_network=True)

        try:
            with self.source.open("rb") as stream:
                while chunk := stream.read(self.chunk_size):
                    parser.feed(chunk)
        except OSError as exc:
            raise SourceUnavailableError(self.source, exc.strerror or str(exc)) from exc
        except etree.XMLSyntaxError as exc:
            raise MalformedDocumentError(self.source, str(exc)) from exc

        try:
            tracks = parser.close()
        except etree.XMLSyntaxError as exc:
            raise MalformedDocumentError(self.source, str(exc)) from exc

        self.track_count = collector.state.emitted
        self.dropped_count = collector.state.dropped
        if self.dropped_count:
            logger.debug(
                "Dropped %d incomplete track entries from %s", self.dropped_count, self.source
            )
        return tracks

    def load_tracks(self) -> list[Track]:
        """Return tracks in document order, or an empty list if the export is unusable."""
        try:
            return self.parse()
        except (SourceUnavailableError, MalformedDocumentError) as exc:
            logger.warning("%s", exc)
            return []


def load_tracks(source: Path | str, **kwargs) -> list[Track]:
    """Shortcut for ``LibraryXmlLoader(source, **kwargs).load_tracks()``."""
    return LibraryXmlLoader(source, **kwargs).load_tracks()


__all__ = ["DroppedCallback", "LibraryXmlLoader", "load_tracks"]
