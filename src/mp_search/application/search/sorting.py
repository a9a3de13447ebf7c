"""Application search – stable single-column sort."""
from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, time, timezone
from operator import itemgetter
from typing import Any, TypeVar

from mp_search.application.search.matcher import FieldKind, kind_of
from mp_search.application.search.query import SortDirection
from mp_search.application.search.records import field_value

T = TypeVar("T")

__all__ = ["sort_key", "sort_records"]

# Columns holding several kinds order kind by kind; unclassified values last.
_KIND_RANK: dict[FieldKind | None, int] = {
    FieldKind.BOOLEAN: 0,
    FieldKind.NUMBER: 1,
    FieldKind.DATE: 2,
    FieldKind.STRING: 3,
    None: 4,
}


def sort_key(value: Any) -> tuple[int, Any]:
    """Comparable key for a non-``None`` field value.

    Plain dates count as midnight; naive datetimes are read as UTC so that
    they order against timezone-aware ones.
    """
    kind = kind_of(value)
    if kind is FieldKind.DATE:
        if not isinstance(value, datetime):
            value = datetime.combine(value, time.min)
        if value.utcoffset() is None:
            value = value.replace(tzinfo=timezone.utc)
    elif kind is None:
        value = str(value)
    return _KIND_RANK[kind], value


def sort_records(
    records: Iterable[T],
    column: str,
    direction: SortDirection | str = SortDirection.ASC,
) -> list[T]:
    """Return *records* ordered by *column* as a new list.

    Strings compare ordinally, numbers numerically and dates chronologically.
    Ties keep their input order in both directions.  Records without a value
    for *column* go last, in input order, whatever the direction.  An empty
    *column* returns the records in input order.
    """
    if not column:
        return list(records)

    descending = SortDirection.parse(direction) is SortDirection.DESC
    keyed: list[tuple[tuple[int, Any], T]] = []
    missing: list[T] = []
    for record in records:
        value = field_value(record, column)
        if value is None:
            missing.append(record)
        else:
            keyed.append((sort_key(value), record))

    keyed.sort(key=itemgetter(0), reverse=descending)
    return [record for _, record in keyed] + missing
