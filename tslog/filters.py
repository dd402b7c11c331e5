"""Name-based selection over a list of records.

Exact mode keeps a record whose name equals one of the candidates.  Substring
mode keeps a record whose name *contains* one of the candidates, so
``["stop"]`` selects ``"mystopwatch"`` but ``["mystopwatch"]`` does not
select ``"stop"``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from tslog.models.records import Record


def _matches(name: str, names: Sequence[str], exact: bool) -> bool:
    if exact:
        return name in names
    return any(candidate in name for candidate in names)


def keep_matching(records: Iterable[Record], names: Sequence[str], exact: bool) -> list[Record]:
    """Return the records selected by *names*; all of them when *names* is empty."""
    if not names:
        return list(records)
    return [r for r in records if _matches(r.name, names, exact)]


def remove_matching(records: Iterable[Record], names: Sequence[str], exact: bool) -> list[Record]:
    """Complement of keep_matching: an empty *names* removes everything."""
    if not names:
        return []
    return [r for r in records if not _matches(r.name, names, exact)]


def unique_names(records: Iterable[Record]) -> list[str]:
    """Series names in first-seen order."""
    return list(dict.fromkeys(r.name for r in records))


def name_exists(records: Iterable[Record], name: str) -> bool:
    return any(r.name == name for r in records)
