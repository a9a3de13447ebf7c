"""Application search – QueryState, SortDirection, SortDefault."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import TYPE_CHECKING, Any, TypeVar

from mp_search.application.pagination.window import cap_limit, resolve_window
from mp_search.application.search.matcher import normalize_terms

if TYPE_CHECKING:
    from mp_search.application.pagination.page import Page
    from mp_search.application.search.result import SearchResult

T = TypeVar("T")

__all__ = ["QueryState", "SortDefault", "SortDirection"]


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: "SortDirection | str | None") -> "SortDirection":
        """'desc' in any case is descending; anything else, ``None`` included, is ascending."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.strip().lower() == cls.DESC.value:
            return cls.DESC
        return cls.ASC


@dataclasses.dataclass(frozen=True, slots=True)
class SortDefault:
    """Sort column and direction to apply when a query names none."""

    column: str
    ascending: bool = True

    @property
    def direction(self) -> SortDirection:
        return SortDirection.ASC if self.ascending else SortDirection.DESC

    @classmethod
    def from_args(cls, column: str | None, ascending: bool = True) -> "SortDefault | None":
        """Return ``None`` ("not set") when *column* is ``None`` or empty."""
        if column is None or column == "":
            return None
        return cls(column=column, ascending=ascending)


# camelCase keys accepted by ``QueryState.from_dict``
_FIELD_ALIASES: dict[str, str] = {
    "sortColumn": "sort_column",
    "sortDirection": "sort_direction",
    "exactMatch": "exact_match",
    "pageIndex": "page_index",
    "pageSize": "page_size",
    "searchColumns": "search_columns",
}


@dataclasses.dataclass
class QueryState:
    """Mutable description of one search/filter/sort/paginate request.

    Running :meth:`get_items` writes the effective sort and limit back onto
    the instance, so after the call it describes exactly the query that was
    executed and can be echoed to the caller (e.g. for a "next page" link).
    One instance must not be shared by concurrent calls.
    """

    term: Any = ""
    sort_column: str = ""
    sort_direction: SortDirection | str = SortDirection.ASC
    limit: int = 0
    offset: int = 0
    exact_match: bool = False
    page_index: int = 0
    page_size: int = 0
    search_columns: list[str] | None = None

    def __post_init__(self) -> None:
        self.sort_direction = SortDirection.parse(self.sort_direction)

    # ------------------------------------------------------------------
    # Construction / serialisation
    # ------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "QueryState":
        """Build from a plain mapping with snake_case or camelCase keys.

        Unknown keys are ignored.
        """
        names = {f.name for f in dataclasses.fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _FIELD_ALIASES.get(key, key)
            if name in names:
                kwargs[name] = value
        if kwargs.get("search_columns") is not None:
            kwargs["search_columns"] = list(kwargs["search_columns"])
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        term = self.term
        if isinstance(term, Sequence) and not isinstance(term, (str, bytes, bytearray)):
            term = list(term)
        return {
            "term": term,
            "sort_column": self.sort_column,
            "sort_direction": SortDirection.parse(self.sort_direction).value,
            "limit": self.limit,
            "offset": self.offset,
            "exact_match": self.exact_match,
            "page_index": self.page_index,
            "page_size": self.page_size,
            "search_columns": list(self.search_columns) if self.search_columns is not None else None,
        }

    def clear(self) -> None:
        """Reset every field to its zero value."""
        self.term = ""
        self.sort_column = ""
        self.sort_direction = SortDirection.ASC
        self.limit = 0
        self.offset = 0
        self.exact_match = False
        self.page_index = 0
        self.page_size = 0
        self.search_columns = None

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def is_ascending(self) -> bool:
        return SortDirection.parse(self.sort_direction) is SortDirection.ASC

    @property
    def is_descending(self) -> bool:
        return SortDirection.parse(self.sort_direction) is SortDirection.DESC

    @property
    def calculated_offset(self) -> int:
        return resolve_window(self).offset

    @property
    def calculated_page_size(self) -> int:
        """Resolved page size; ``0`` means unbounded."""
        return resolve_window(self).size

    @property
    def has_search_term(self) -> bool:
        return bool(normalize_terms(self.term))

    @property
    def is_filtering(self) -> bool:
        return bool(self.search_columns) and self.has_search_term

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def cap_limit(self, max_allowed: int) -> int:
        """Bound ``limit``/``page_size`` by *max_allowed*; returns ``limit``."""
        return cap_limit(self, max_allowed)

    def get_items(
        self,
        items: Sequence[T],
        fallback_limit: int = 0,
        default_sort_column: str | None = None,
        default_ascending: bool = True,
    ) -> "SearchResult[T]":
        """Filter, sort and paginate *items*; returns ``(page, total)``.

        See :func:`mp_search.application.search.service.get_items`.
        """
        from mp_search.application.search.service import get_items

        return get_items(self, items, fallback_limit, default_sort_column, default_ascending)

    def get_page(
        self,
        items: Sequence[T],
        fallback_limit: int = 0,
        default_sort_column: str | None = None,
        default_ascending: bool = True,
    ) -> "Page[T]":
        """Like :meth:`get_items` but wrapped into a :class:`Page`."""
        from mp_search.application.pagination.page import Page

        result = self.get_items(items, fallback_limit, default_sort_column, default_ascending)
        return Page.of(result, resolve_window(self))
