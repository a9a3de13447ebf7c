"""Unit tests for pagination window resolution and the Page envelope."""

from __future__ import annotations

import pytest

from mp_search.application.pagination import Page, PaginationWindow, cap_limit, resolve_window
from mp_search.application.search import QueryState, SearchResult


# ---------------------------------------------------------------------------
# resolve_window
# ---------------------------------------------------------------------------


class TestResolveWindow:
    def test_page_based_is_authoritative(self) -> None:
        q = QueryState(limit=5, offset=3, page_index=1, page_size=10)
        window = resolve_window(q)
        assert window.offset == 10
        assert window.size == 10
        assert window.page_based is True

    def test_page_based_ignores_fallback(self) -> None:
        q = QueryState(page_index=2, page_size=4)
        window = resolve_window(q, fallback_limit=50)
        assert (window.offset, window.size) == (8, 4)

    def test_offset_limit_mode(self) -> None:
        q = QueryState(limit=25, offset=7)
        window = resolve_window(q, fallback_limit=50)
        assert (window.offset, window.size) == (7, 25)
        assert window.page_based is False

    def test_fallback_used_when_limit_unset(self) -> None:
        q = QueryState(offset=2)
        assert resolve_window(q, fallback_limit=30).size == 30

    def test_unbounded_when_nothing_set(self) -> None:
        window = resolve_window(QueryState(offset=4))
        assert window.size == 0
        assert window.is_unbounded
        assert window.end is None

    def test_negative_inputs_degrade_to_zero(self) -> None:
        q = QueryState(limit=-3, offset=-1, page_index=-2, page_size=-5)
        window = resolve_window(q, fallback_limit=-10)
        assert (window.offset, window.size) == (0, 0)

    def test_does_not_modify_state(self) -> None:
        q = QueryState(offset=1)
        resolve_window(q, fallback_limit=30)
        assert q.limit == 0


class TestPaginationWindowSlice:
    def test_bounded_slice(self) -> None:
        assert PaginationWindow(offset=2, size=3).slice(list(range(10))) == [2, 3, 4]

    def test_unbounded_slice_returns_remainder(self) -> None:
        assert PaginationWindow(offset=7).slice(list(range(10))) == [7, 8, 9]

    def test_offset_past_end(self) -> None:
        assert PaginationWindow(offset=20, size=5).slice(list(range(10))) == []

    def test_partial_last_window(self) -> None:
        assert PaginationWindow(offset=8, size=5).slice(list(range(10))) == [8, 9]

    def test_slice_is_new_list(self) -> None:
        items = [1, 2, 3]
        out = PaginationWindow().slice(items)
        assert out == items
        assert out is not items


# ---------------------------------------------------------------------------
# cap_limit
# ---------------------------------------------------------------------------


class TestCapLimit:
    def test_limit_above_ceiling_is_reduced(self) -> None:
        q = QueryState(limit=5000)
        assert cap_limit(q, 1000) == 1000
        assert q.limit == 1000

    def test_limit_below_ceiling_is_kept(self) -> None:
        q = QueryState(limit=50)
        assert cap_limit(q, 1000) == 50

    def test_unset_limit_becomes_ceiling(self) -> None:
        q = QueryState()
        assert cap_limit(q, 100) == 100
        assert q.limit == 100

    def test_zero_ceiling_disables_capping(self) -> None:
        q = QueryState(limit=5000)
        assert cap_limit(q, 0) == 5000
        assert QueryState().cap_limit(0) == 0

    def test_page_size_above_ceiling_is_reduced(self) -> None:
        q = QueryState(page_size=500)
        q.cap_limit(100)
        assert q.page_size == 100
        assert q.calculated_page_size == 100

    def test_unset_page_size_stays_unset(self) -> None:
        q = QueryState(limit=10)
        q.cap_limit(100)
        assert q.page_size == 0
        assert q.calculated_page_size == 10


# ---------------------------------------------------------------------------
# Page
# ---------------------------------------------------------------------------


class TestPage:
    def test_of_copies_result_and_window(self) -> None:
        result = SearchResult(items=[10, 11, 12], total=25)
        page = Page.of(result, PaginationWindow(offset=10, size=10))
        assert page.items == [10, 11, 12]
        assert page.total == 25
        assert page.offset == 10
        assert page.size == 10

    def test_page_number(self) -> None:
        assert Page(items=[], total=25, offset=0, size=10).page_number == 1
        assert Page(items=[], total=25, offset=20, size=10).page_number == 3

    def test_total_pages(self) -> None:
        assert Page(items=[], total=25, size=10).total_pages == 3
        assert Page(items=[], total=20, size=10).total_pages == 2

    def test_unbounded_page_counts_as_single_page(self) -> None:
        page = Page(items=list(range(5)), total=5)
        assert page.total_pages == 1
        assert page.page_number == 1
        assert not page.has_next

    def test_unbounded_page_with_offset_has_no_previous(self) -> None:
        page = QueryState(offset=5).get_page(list(range(10)))
        assert page.items == [5, 6, 7, 8, 9]
        assert page.page_number == 1
        assert not page.has_previous
        assert not page.has_next

    def test_empty_has_no_pages(self) -> None:
        assert Page(items=[], total=0, size=10).total_pages == 0

    def test_has_next_and_previous(self) -> None:
        first = Page(items=[], total=25, offset=0, size=10)
        last = Page(items=[], total=25, offset=20, size=10)
        assert first.has_next and not first.has_previous
        assert last.has_previous and not last.has_next

    def test_map_preserves_pagination(self) -> None:
        page = Page(items=[1, 2], total=12, offset=10, size=10)
        mapped = page.map(str)
        assert mapped.items == ["1", "2"]
        assert (mapped.total, mapped.offset, mapped.size) == (12, 10, 10)


@pytest.mark.parametrize(
    ("page_index", "page_size", "expected_offset"),
    [(0, 10, 0), (1, 10, 10), (3, 7, 21)],
)
def test_page_index_times_page_size(page_index: int, page_size: int, expected_offset: int) -> None:
    q = QueryState(page_index=page_index, page_size=page_size)
    assert q.calculated_offset == expected_offset
    assert q.calculated_page_size == page_size
