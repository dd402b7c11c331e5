"""Record store for tslog.

The backing store is a flat CSV file, one ``timestamp,name`` row per record,
no header, timestamps in UTC.  The whole file is read at the start of every
command; rename and reset rewrite it from scratch.

Submodules:
    record_store  -- Load / append / rewrite / delete against the CSV file.
"""

from tslog.store.record_store import RecordStore

__all__ = ["RecordStore"]
