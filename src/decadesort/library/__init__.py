"""Library export parsing for decadesort."""

from .loader import LibraryXmlLoader, load_tracks
from .state import DroppedEntry, ExtractorState, Phase, advance

__all__ = [
    "DroppedEntry",
    "ExtractorState",
    "LibraryXmlLoader",
    "Phase",
    "advance",
    "load_tracks",
]
