"""Domain models for decadesort."""

from .track import Track

__all__ = ["Track"]
