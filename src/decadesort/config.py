"""Runtime settings for decadesort."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from decadesort.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_LIBRARY_FILENAME = "Library.xml"
DEFAULT_REPORT_FILENAME = "SortedMusicByDecade.csv"


def default_documents_dir() -> Path:
    return Path.home() / "Documents"


def _as_path(key: str, value: Any) -> Path:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key} must be a non-empty string, got {value!r}")
    return Path(value.strip()).expanduser()


@dataclass(slots=True, frozen=True)
class Settings:
    """Input and output locations for one run."""

    library_path: Path
    output_path: Path
    log_file: Path | None = None

    @classmethod
    def defaults(cls) -> Settings:
        documents = default_documents_dir()
        return cls(
            library_path=documents / DEFAULT_LIBRARY_FILENAME,
            output_path=documents / DEFAULT_REPORT_FILENAME,
        )

    @classmethod
    def from_toml(cls, path: Path | str, *, base: Settings | None = None) -> Settings:
        """Load settings from a TOML file, falling back to ``base`` for absent keys.

        Recognised keys are ``library_path``, ``output_path`` and ``log_file``.
        """
        config_file = Path(path).expanduser()
        try:
            with config_file.open("rb") as handle:
                data = tomllib.load(handle)
        except OSError as exc:
            raise ConfigError(f"Cannot read settings file {config_file}: {exc}") from exc
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {config_file}: {exc}") from exc

        settings = base or cls.defaults()
        updates: dict[str, Path] = {}
        for key, value in data.items():
            if key in ("library_path", "output_path", "log_file"):
                updates[key] = _as_path(key, value)
            else:
                logger.warning("Ignoring unknown setting %r in %s", key, config_file)

        logger.debug("Settings loaded from %s", config_file)
        return replace(settings, **updates)

    def override(
        self,
        *,
        library_path: Path | None = None,
        output_path: Path | None = None,
        log_file: Path | None = None,
    ) -> Settings:
        """Return a copy with every non-None argument applied."""
        updates = {
            key: value
            for key, value in (
                ("library_path", library_path),
                ("output_path", output_path),
                ("log_file", log_file),
            )
            if value is not None
        }
        return replace(self, **updates)


__all__ = ["DEFAULT_LIBRARY_FILENAME", "DEFAULT_REPORT_FILENAME", "Settings", "default_documents_dir"]
