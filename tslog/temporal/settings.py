"""Timezone override file."""

from __future__ import annotations

from pathlib import Path

import structlog

from tslog.errors import StoreIOError
from tslog.temporal.codec import load_zone

_log = structlog.get_logger(component="temporal.settings")


class TimezoneSettings:
    """Single-line file holding the display zone name.

    An absent file means "render in the local zone".
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> str | None:
        """Return the configured zone name, or None when no override exists."""
        try:
            content = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise StoreIOError(str(self._path), exc) from exc
        zone = content.strip()
        return zone or None

    def write(self, zone: str) -> None:
        """Replace the override with *zone* after checking that it resolves."""
        zone = zone.strip()
        load_zone(zone)
        self.clear()
        try:
            self._path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
            self._path.write_text(zone, encoding="utf-8")
        except OSError as exc:
            raise StoreIOError(str(self._path), exc) from exc
        _log.debug("timezone override written", zone=zone)

    def clear(self) -> None:
        """Delete the override file if present."""
        try:
            self._path.unlink(missing_ok=True)
        except OSError as exc:
            raise StoreIOError(str(self._path), exc) from exc
        _log.debug("timezone override cleared")
