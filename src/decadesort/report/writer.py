"""Persist rendered reports to disk."""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path

from decadesort.errors import ReportWriteError

logger = logging.getLogger(__name__)


def _report_mode(target: Path) -> int:
    """Return the permission bits the finished report should carry.

    An existing report keeps its mode; a new one gets ``0o666`` minus the umask,
    as a plain ``open()`` would.
    """
    try:
        return stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_report(text: str, destination: Path | str) -> Path:
    """Write ``text`` to ``destination`` as UTF-8, replacing any existing file atomically.

    The report is written to a temporary sibling first and moved into place
    with ``os.replace``, so a failed write never leaves a truncated report.
    """
    target = Path(destination).expanduser()
    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="",
            dir=target.parent,
            prefix=f".{target.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            temp_path = Path(handle.name)
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(temp_path, _report_mode(target))
        os.replace(temp_path, target)
    except OSError as exc:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        logger.error("Failed to write report to %s: %s", target, exc)
        raise ReportWriteError(target, exc.strerror or str(exc)) from exc

    logger.debug("Wrote %d characters to %s", len(text), target)
    return target


__all__ = ["write_report"]
