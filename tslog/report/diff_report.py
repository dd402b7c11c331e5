"""Chronological diff table rendering.

Column layout (widths in characters):

    Name        max(longest name + 2, 6), left-aligned, optional
    Timestamp   19, the display-zone timestamp
    Since prev  12, right-aligned
    Since first 13, right-aligned
    Since now   11, right-aligned

The first row has blank prev/first cells.  When prev or first is enabled a
trailing "Now" row measures from the last and first rows to *now*.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from tslog.models.records import DisplayConfig, Record
from tslog.report.durations import format_duration
from tslog.temporal.codec import format_timestamp, to_display_zone

NO_RECORDS_MESSAGE = "No records found"
NOW_LABEL = "Now"

MIN_NAME_COLUMN_WIDTH = 6
TIMESTAMP_COLUMN_WIDTH = 19
PREV_COLUMN_WIDTH = 12
FIRST_COLUMN_WIDTH = 13
NOW_COLUMN_WIDTH = 11


def sort_records(records: Iterable[Record]) -> list[Record]:
    """Ascending by timestamp; equal timestamps keep their input order."""
    return sorted(records, key=lambda r: r.timestamp)


def name_column_width(records: Iterable[Record]) -> int:
    longest = max((len(r.name) for r in records), default=0)
    return max(longest + 2, MIN_NAME_COLUMN_WIDTH)


def _header(display: DisplayConfig, name_width: int | None) -> str:
    parts: list[str] = []
    if name_width is not None:
        parts.append(f"{'Name':<{name_width}}")
    parts.append(f"{'Timestamp':<{TIMESTAMP_COLUMN_WIDTH}}")
    if display.show_prev_diff:
        parts.append(f"{'Since prev':>{PREV_COLUMN_WIDTH}}")
    if display.show_first_diff:
        parts.append(f"{'Since first':>{FIRST_COLUMN_WIDTH}}")
    if display.show_now_diff:
        parts.append(f"{'Since now':>{NOW_COLUMN_WIDTH}}")
    return "".join(parts)


def render_report(
    records: Iterable[Record],
    display: DisplayConfig,
    now: datetime,
    zone: str | None = None,
    show_names: bool = True,
) -> list[str]:
    """Render *records* as table lines, header first.

    *now* is sampled once by the caller and reused for every row so the
    since-now column is consistent across the whole table.  Returns an empty
    list for no records; the caller prints NO_RECORDS_MESSAGE instead.
    """
    rows = sort_records(records)
    if not rows:
        return []

    name_width = name_column_width(rows) if show_names else None
    now = to_display_zone(now, zone)
    lines = [_header(display, name_width)]

    first: Record | None = None
    prev: Record | None = None
    for record in rows:
        ts = to_display_zone(record.timestamp, zone)
        parts: list[str] = []
        if name_width is not None:
            parts.append(f"{record.name:<{name_width}}")
        parts.append(f"{format_timestamp(ts):>{TIMESTAMP_COLUMN_WIDTH}}")

        if first is None or prev is None:
            first = record
            prev_cell = first_cell = ""
        else:
            prev_cell = format_duration(record.timestamp - prev.timestamp)
            first_cell = format_duration(record.timestamp - first.timestamp)
        if display.show_prev_diff:
            parts.append(f"{prev_cell:>{PREV_COLUMN_WIDTH}}")
        if display.show_first_diff:
            parts.append(f"{first_cell:>{FIRST_COLUMN_WIDTH}}")
        if display.show_now_diff:
            parts.append(f"{format_duration(now - record.timestamp):>{NOW_COLUMN_WIDTH}}")

        lines.append("".join(parts).rstrip())
        prev = record

    if first is not None and prev is not None and (display.show_prev_diff or display.show_first_diff):
        parts = []
        if name_width is not None:
            parts.append(" " * name_width)
        parts.append(f"{NOW_LABEL:<{TIMESTAMP_COLUMN_WIDTH}}")
        if display.show_prev_diff:
            parts.append(f"{format_duration(now - prev.timestamp):>{PREV_COLUMN_WIDTH}}")
        if display.show_first_diff:
            parts.append(f"{format_duration(now - first.timestamp):>{FIRST_COLUMN_WIDTH}}")
        lines.append("".join(parts).rstrip())

    lines[0] = lines[0].rstrip()
    return lines
