"""Shared fixtures for tslog CLI integration tests.

Every test gets its own storage home under tmp_path and a CliRunner whose
environment points TSLOG_HOME there, so no test touches ~/.config/ts.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
from click.testing import CliRunner, Result

from tslog.cli import cli
from tslog.models.records import Record
from tslog.store import RecordStore

# ---------------------------------------------------------------------------
# Timestamp helpers
# ---------------------------------------------------------------------------

_T0 = datetime(2026, 2, 18, 12, 0, 0, tzinfo=UTC)


def make_record(name: str = "default", offset_s: int = 0) -> Record:
    """Create a Record *offset_s* seconds after a fixed UTC instant."""
    return Record(name=name, timestamp=_T0 + timedelta(seconds=offset_s))


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def home(tmp_path: Path) -> Path:
    path = tmp_path / "ts-home"
    path.mkdir()
    # Pin rendering to UTC so timestamps in output are deterministic.
    (path / "tz").write_text("UTC")
    return path


@pytest.fixture
def store(home: Path) -> RecordStore:
    return RecordStore(home / "timestamps.csv")


@pytest.fixture
def invoke(home: Path) -> Callable[..., Result]:
    """Run the CLI against the test home: ``invoke("show", "-diff-prev")``."""
    runner = CliRunner()

    def _invoke(*args: str, input: str | None = None) -> Result:
        return runner.invoke(
            cli,
            list(args),
            input=input,
            env={"TSLOG_HOME": str(home), "TSLOG_LOG_LEVEL": "warning"},
        )

    return _invoke
