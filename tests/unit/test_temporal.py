"""Tests for the temporal codec and the timezone override file."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from tslog.errors import FormatError, ValidationError
from tslog.temporal import (
    TimezoneSettings,
    format_timestamp,
    load_zone,
    now_utc,
    parse_timestamp,
    to_display_zone,
)

_TS = datetime(2026, 2, 18, 12, 0, 5, tzinfo=UTC)


class TestParseTimestamp:
    def test_parses_layout_as_utc(self) -> None:
        assert parse_timestamp("2026-02-18 12:00:05") == _TS

    def test_result_is_aware(self) -> None:
        assert parse_timestamp("2026-02-18 12:00:05").tzinfo is UTC

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "2026-02-18",
            "2026-02-18T12:00:05",
            "2026-2-18 12:00:05",
            "2026-02-18 12:00:05Z",
            "2026-02-18  1:00:05",
            "2026-02-18 1:00:05 ",
            "\uff12026-02-18 12:00:05",
            "2026-13-01 00:00:00",
            "not a timestamp",
        ],
    )
    def test_rejects_malformed_text(self, text: str) -> None:
        with pytest.raises(FormatError):
            parse_timestamp(text)


class TestFormatTimestamp:
    def test_formats_fixed_layout(self) -> None:
        assert format_timestamp(_TS) == "2026-02-18 12:00:05"

    def test_drops_sub_second_precision(self) -> None:
        assert format_timestamp(_TS.replace(microsecond=999_999)) == "2026-02-18 12:00:05"

    def test_formats_in_own_offset(self) -> None:
        plus_two = _TS.astimezone(timezone(timedelta(hours=2)))
        assert format_timestamp(plus_two) == "2026-02-18 14:00:05"


class TestNowUtc:
    def test_truncated_to_second(self) -> None:
        now = now_utc()
        assert now.microsecond == 0
        assert now.tzinfo is UTC


class TestDisplayZone:
    def test_named_zone_keeps_instant(self) -> None:
        shown = to_display_zone(_TS, "America/New_York")
        assert shown == _TS
        assert format_timestamp(shown) == "2026-02-18 07:00:05"

    def test_no_zone_uses_local(self) -> None:
        shown = to_display_zone(_TS, None)
        assert shown == _TS
        assert shown.utcoffset() == _TS.astimezone().utcoffset()

    def test_unknown_zone_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            to_display_zone(_TS, "Mars/Olympus_Mons")

    def test_load_zone_rejects_empty_name(self) -> None:
        with pytest.raises(ValidationError):
            load_zone("")


class TestTimezoneSettings:
    def test_read_without_file_returns_none(self, tmp_path) -> None:
        assert TimezoneSettings(tmp_path / "tz").read() is None

    def test_write_then_read(self, tmp_path) -> None:
        settings = TimezoneSettings(tmp_path / "tz")
        settings.write("Europe/Stockholm")
        assert settings.read() == "Europe/Stockholm"

    def test_write_replaces_previous_zone(self, tmp_path) -> None:
        settings = TimezoneSettings(tmp_path / "tz")
        settings.write("Europe/Stockholm")
        settings.write("Asia/Tokyo")
        assert (tmp_path / "tz").read_text() == "Asia/Tokyo"

    def test_read_strips_trailing_newline(self, tmp_path) -> None:
        (tmp_path / "tz").write_text("Asia/Tokyo\n")
        assert TimezoneSettings(tmp_path / "tz").read() == "Asia/Tokyo"

    def test_write_rejects_unknown_zone_and_keeps_old(self, tmp_path) -> None:
        settings = TimezoneSettings(tmp_path / "tz")
        settings.write("Asia/Tokyo")
        with pytest.raises(ValidationError):
            settings.write("Nowhere/Special")
        assert settings.read() == "Asia/Tokyo"

    def test_clear_removes_file(self, tmp_path) -> None:
        settings = TimezoneSettings(tmp_path / "tz")
        settings.write("Asia/Tokyo")
        settings.clear()
        assert settings.read() is None

    def test_clear_without_file_is_noop(self, tmp_path) -> None:
        TimezoneSettings(tmp_path / "tz").clear()
