"""Temporal codec for tslog.

Timestamps are persisted as ``YYYY-MM-DD HH:MM:SS`` in UTC and compared as
aware datetimes.  Rendering re-projects them into the display zone: the zone
named in the override file, or the process's local zone when there is none.

Submodules:
    codec     -- Layout parse/format, UTC "now", display-zone projection.
    settings  -- Timezone override file (read / write / clear).
"""

from tslog.temporal.codec import (
    LAYOUT,
    format_timestamp,
    load_zone,
    now_utc,
    parse_timestamp,
    to_display_zone,
)
from tslog.temporal.settings import TimezoneSettings

__all__ = [
    "LAYOUT",
    "TimezoneSettings",
    "format_timestamp",
    "load_zone",
    "now_utc",
    "parse_timestamp",
    "to_display_zone",
]
