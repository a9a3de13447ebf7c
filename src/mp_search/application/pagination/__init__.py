"""Application pagination – window resolution and page envelope."""
from mp_search.application.pagination.window import PaginationFields, PaginationWindow, cap_limit, resolve_window
from mp_search.application.pagination.page import Page

__all__ = ["Page", "PaginationFields", "PaginationWindow", "cap_limit", "resolve_window"]
