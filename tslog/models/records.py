"""Record and display option data structures."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

DEFAULT_NAME = "default"


@dataclass(frozen=True)
class Record:
    """One named timestamp.

    ``timestamp`` is a timezone-aware UTC instant with one-second resolution.
    Records are never mutated; rename builds new ones and rewrites the store.
    """

    name: str
    timestamp: datetime


@dataclass(frozen=True)
class DisplayConfig:
    """Which diff columns the report engine renders."""

    show_prev_diff: bool = False
    show_first_diff: bool = False
    show_now_diff: bool = False
