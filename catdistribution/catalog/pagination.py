"""
Page slicing for the catalog list.

``paginate()`` is the pure stage: it computes the page count, clamps
the requested page into range and slices the items. ``Paginator``
holds the page size and current page between requests and applies the
reset rules of the list screen: changing the page size or the search
term sends the user back to the first page.
"""

from __future__ import annotations

from typing import Optional, Sequence

from .. import config
from .schemas import Cat, CatPage


def total_pages_for(total: int, page_size: int) -> int:
    if page_size <= 0:
        raise ValueError(f"Page size must be positive, got {page_size}")
    return max(1, (total + page_size - 1) // page_size)


def paginate(cats: Sequence[Cat], page_size: int, current_page: int) -> CatPage:
    """Slice ``cats`` into the page ``current_page`` of size ``page_size``.

    The returned ``page`` is always within ``[1, total_pages]``: pages
    past the end are clamped to the last page (which happens when a
    filter shrinks the result set) and pages below 1 to the first.
    """
    total = len(cats)
    total_pages = total_pages_for(total, page_size)
    page = min(max(1, current_page), total_pages)
    start = (page - 1) * page_size
    return CatPage(
        page=page,
        page_size=page_size,
        total=total,
        total_pages=total_pages,
        items=list(cats[start:start + page_size]),
    )


class Paginator:
    """Pagination state kept across renders of the list."""

    def __init__(self, page_size: Optional[int] = None) -> None:
        if page_size is None:
            page_size = config.get_settings().page_size
        total_pages_for(0, page_size)
        self.page_size = page_size
        self.current_page = 1
        self._search_term = ""

    def change_page(self, page: int) -> None:
        self.current_page = max(1, page)

    def change_page_size(self, page_size: int) -> None:
        total_pages_for(0, page_size)
        self.page_size = page_size
        self.current_page = 1

    def track_search_term(self, search_term: Optional[str]) -> None:
        """Reset to the first page when the active search term changes."""
        term = search_term or ""
        if term != self._search_term:
            self._search_term = term
            self.current_page = 1

    def apply(self, cats: Sequence[Cat]) -> CatPage:
        result = paginate(cats, self.page_size, self.current_page)
        self.current_page = result.page
        return result
