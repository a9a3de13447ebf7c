"""Application search – type-aware multi-column matcher.

Values are classified into a small closed set of kinds and a field/term
pair is only compared when both sides share the same kind:

* ``STRING``  – exact equality or case-insensitive containment
* ``NUMBER``  – equality (``int``, ``float``, ``Decimal``; never ``bool``)
* ``BOOLEAN`` – equality
* ``DATE``    – equality (``date`` and ``datetime``)

Anything else, ``None`` included, never matches.
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date
from decimal import Decimal
from enum import Enum
from numbers import Real
from typing import Any, TypeVar

from mp_search.application.search.records import field_value

T = TypeVar("T")

__all__ = ["FieldKind", "FieldMatcher", "kind_of", "matches_term", "normalize_terms"]


class FieldKind(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"


def kind_of(value: Any) -> FieldKind | None:
    """Classify *value*; ``None`` for values the matcher does not compare."""
    match value:
        case bool():
            return FieldKind.BOOLEAN
        case str():
            return FieldKind.STRING
        case Real() | Decimal():
            return FieldKind.NUMBER
        case date():
            return FieldKind.DATE
        case _:
            return None


def matches_term(value: Any, term: Any, exact_match: bool = False) -> bool:
    """Return ``True`` when field *value* matches a single search *term*."""
    kind = kind_of(value)
    if kind is None or kind is not kind_of(term):
        return False
    match kind:
        case FieldKind.STRING:
            if exact_match:
                return value == term
            return term.lower() in value.lower()
        case _:
            return value == term


def normalize_terms(term: Any) -> tuple[Any, ...]:
    """Flatten a term or term sequence, dropping empty strings and ``None``.

    ``bytes`` stay a single term (of no matchable kind) rather than being
    read as a sequence of ints.
    """
    if term is None:
        return ()
    if isinstance(term, str):
        return (term,) if term else ()
    if isinstance(term, (bytes, bytearray)):
        return (term,)
    if isinstance(term, Sequence):
        return tuple(t for t in term if t is not None and t != "")
    return (term,)


class FieldMatcher:
    """Keep/drop decision for records against ``columns`` × ``terms``.

    A record is kept when any column matches any term.  With no columns or
    no terms the matcher is inactive and keeps every record.
    """

    def __init__(
        self,
        columns: Iterable[str] | None,
        term: Any,
        exact_match: bool = False,
    ) -> None:
        self.columns: tuple[str, ...] = tuple(c for c in columns or () if c)
        self.terms: tuple[Any, ...] = normalize_terms(term)
        self.exact_match = exact_match

    @property
    def is_active(self) -> bool:
        return bool(self.columns) and bool(self.terms)

    def __call__(self, record: Any) -> bool:
        if not self.is_active:
            return True
        for column in self.columns:
            value = field_value(record, column)
            if any(matches_term(value, term, self.exact_match) for term in self.terms):
                return True
        return False

    def filter(self, records: Iterable[T]) -> list[T]:
        """Return the kept records as a new list, input order preserved."""
        if not self.is_active:
            return list(records)
        return [record for record in records if self(record)]

    def __repr__(self) -> str:
        return (
            f"FieldMatcher(columns={self.columns!r}, terms={self.terms!r}, "
            f"exact_match={self.exact_match!r})"
        )
