"""Diff report engine for tslog.

Sorts records chronologically and lays them out as a column-aligned text
table with optional since-previous, since-first and since-now columns.

Submodules:
    durations    -- Unit-labelled duration text (``1h2m3s``).
    diff_report  -- Sorting, column sizing and table rendering.
"""

from tslog.report.diff_report import (
    MIN_NAME_COLUMN_WIDTH,
    NO_RECORDS_MESSAGE,
    name_column_width,
    render_report,
    sort_records,
)
from tslog.report.durations import format_duration

__all__ = [
    "MIN_NAME_COLUMN_WIDTH",
    "NO_RECORDS_MESSAGE",
    "format_duration",
    "name_column_width",
    "render_report",
    "sort_records",
]
