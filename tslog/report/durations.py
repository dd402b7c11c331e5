"""Duration rendering."""

from __future__ import annotations

from datetime import timedelta


def format_duration(delta: timedelta) -> str:
    """Render *delta* as hours, minutes and seconds, e.g. ``1h2m3s``.

    Leading zero units are dropped (``5s``, ``1m0s``) and there is no day
    unit, so the text grows monotonically with the magnitude.  Sub-second
    precision is truncated.
    """
    total = int(delta.total_seconds())
    sign = "-" if total < 0 else ""
    total = abs(total)
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    if hours:
        return f"{sign}{hours}h{minutes}m{seconds}s"
    if minutes:
        return f"{sign}{minutes}m{seconds}s"
    return f"{sign}{seconds}s"
