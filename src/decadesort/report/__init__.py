"""Decade report rendering and output."""

from .decades import (
    CSV_HEADER,
    decade_label,
    decade_summary,
    group_by_decade,
    render_csv,
    sorted_decades,
)
from .writer import write_report

__all__ = [
    "CSV_HEADER",
    "decade_label",
    "decade_summary",
    "group_by_decade",
    "render_csv",
    "sorted_decades",
    "write_report",
]
