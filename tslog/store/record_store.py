"""Flat-file persistence of named timestamp records."""

from __future__ import annotations

import csv
import os
from collections.abc import Iterable
from datetime import UTC
from pathlib import Path

import structlog

from tslog.errors import FormatError, StoreIOError
from tslog.models.records import Record
from tslog.temporal.codec import format_timestamp, parse_timestamp

_log = structlog.get_logger(component="store.record_store")

_FIELD_COUNT = 2


def _encode(record: Record) -> list[str]:
    return [format_timestamp(record.timestamp), record.name]


def _decode(row: list[str], line_number: int) -> Record:
    if len(row) != _FIELD_COUNT:
        raise FormatError(f"expected {_FIELD_COUNT} fields, got {len(row)}", line_number)
    try:
        timestamp = parse_timestamp(row[0])
    except FormatError as exc:
        raise FormatError(str(exc), line_number) from exc
    return Record(name=row[1], timestamp=timestamp)


class RecordStore:
    """Durable, append-ordered collection of Records.

    Timestamps are converted to UTC on write, so callers may pass any aware
    datetime.  Every OSError surfaces as StoreIOError; handles are closed on
    every exit path.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    # ---- reads ---------------------------------------------------------

    def load_all(self) -> list[Record]:
        """Return every record in file order; empty when no store exists yet.

        Raises FormatError on the first malformed line.
        """
        records: list[Record] = []
        try:
            with self._path.open(newline="", encoding="utf-8") as fh:
                reader = csv.reader(fh, strict=True)
                try:
                    for row in reader:
                        if not row:
                            continue
                        records.append(_decode(row, reader.line_num))
                except csv.Error as exc:
                    raise FormatError(str(exc), reader.line_num) from exc
                except UnicodeDecodeError as exc:
                    raise FormatError(f"not valid UTF-8: {exc}", reader.line_num + 1) from exc
        except FileNotFoundError:
            return []
        except OSError as exc:
            raise StoreIOError(str(self._path), exc) from exc
        _log.debug("records loaded", path=str(self._path), count=len(records))
        return records

    # ---- writes --------------------------------------------------------

    def append(self, record: Record) -> None:
        """Append one record as a single flushed write."""
        self._write([record], mode="a")
        _log.debug("record appended", path=str(self._path), name=record.name)

    def rewrite_all(self, records: Iterable[Record]) -> None:
        """Replace the store with *records*, in iteration order.

        Not atomic: the old file is removed before the new one is written,
        so a crash in between leaves an empty store.
        """
        records = list(records)
        self.delete()
        self._write(records, mode="w")
        _log.debug("store rewritten", path=str(self._path), count=len(records))

    def delete(self) -> None:
        """Remove the backing file; a missing file is not an error."""
        try:
            self._path.unlink(missing_ok=True)
        except OSError as exc:
            raise StoreIOError(str(self._path), exc) from exc

    def _write(self, records: list[Record], mode: str) -> None:
        # Rows are encoded up front so a bad record never leaves a partial line.
        rows = [_encode(_as_utc(r)) for r in records]
        try:
            self._path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
            with self._path.open(mode, newline="", encoding="utf-8") as fh:
                # The default "\r\n" terminator makes the writer quote names holding \r or \n.
                writer = csv.writer(fh)
                writer.writerows(rows)
                fh.flush()
                os.fsync(fh.fileno())
        except OSError as exc:
            raise StoreIOError(str(self._path), exc) from exc


def _as_utc(record: Record) -> Record:
    if record.timestamp.utcoffset() is None:
        return Record(name=record.name, timestamp=record.timestamp.replace(tzinfo=UTC))
    return Record(name=record.name, timestamp=record.timestamp.astimezone(UTC))
