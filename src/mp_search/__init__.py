"""
mp_search – in-memory search/filter/sort/paginate query engine.

Import path convention::

    from mp_search.application.search import QueryState
    from mp_search.application.pagination import Page, PaginationWindow
    from mp_search.kernel.errors import ValidationError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
