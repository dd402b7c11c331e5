"""Fixed-layout timestamp parsing, formatting and zone projection."""

from __future__ import annotations

import re
from datetime import UTC, datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from tslog.errors import FormatError, ValidationError

LAYOUT = "%Y-%m-%d %H:%M:%S"
_LAYOUT_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", re.ASCII)


def parse_timestamp(text: str) -> datetime:
    """Parse a stored ``YYYY-MM-DD HH:MM:SS`` string as a UTC instant.

    Raises FormatError if *text* does not match the layout exactly.
    """
    # strptime accepts unpadded fields and runs of whitespace; the stored layout does not.
    if not _LAYOUT_PATTERN.fullmatch(text):
        raise FormatError(f"timestamp {text!r} does not match layout {LAYOUT!r}")
    try:
        parsed = datetime.strptime(text, LAYOUT)
    except ValueError as exc:
        raise FormatError(f"timestamp {text!r} does not match layout {LAYOUT!r}") from exc
    return parsed.replace(tzinfo=UTC)


def format_timestamp(ts: datetime) -> str:
    """Render *ts* in the fixed layout, in whatever offset it carries."""
    return ts.strftime(LAYOUT)


def now_utc() -> datetime:
    """Return the current UTC instant truncated to one second."""
    return datetime.now(tz=UTC).replace(microsecond=0)


def load_zone(name: str) -> tzinfo:
    """Resolve an IANA zone name, raising ValidationError when unknown."""
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise ValidationError(f"Unknown timezone: {name}") from exc


def to_display_zone(ts: datetime, zone: str | None) -> datetime:
    """Re-project *ts* into *zone*, or the local zone when *zone* is None.

    The absolute instant is unchanged; only the rendered offset moves.
    """
    if zone:
        return ts.astimezone(load_zone(zone))
    return ts.astimezone()
