"""PagedList - one page of results plus page metadata.

Returned by list query handlers; the presentation layer renders `items` as
the body and the metadata as the X-Pagination header.

Page metadata is derived from the counts, never from `items`, so `items`
can be a lazy iterable that is consumed once, when the response body is
rendered.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from math import ceil
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, kw_only=True)
class PagedList(Generic[T]):
    """One page of items.

    Attributes:
        items: Items on this page (possibly a one-shot iterator).
        total_count: Items across all pages.
        page_number: 1-based page number that was requested.
        page_size: Requested page size.

    Example:
        >>> page = PagedList(items=iter("cd"), total_count=5, page_number=2, page_size=2)
        >>> page.total_pages, page.has_previous, page.has_next
        (3, True, True)
        >>> page.current_start_index, page.current_end_index
        (3, 4)
    """

    items: Iterable[T] = field(default_factory=list)
    total_count: int
    page_number: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return ceil(self.total_count / self.page_size) if self.page_size > 0 else 0

    @property
    def has_previous(self) -> bool:
        return self.page_number > 1

    @property
    def has_next(self) -> bool:
        return self.page_number < self.total_pages

    @property
    def current_page_size(self) -> int:
        """Items on this page: a full page, the remainder, or 0 past the end."""
        if self.page_size <= 0:
            return 0
        remaining = self.total_count - (self.page_number - 1) * self.page_size
        return max(0, min(self.page_size, remaining))

    @property
    def current_start_index(self) -> int:
        """1-based index of the first item on this page (0 for an empty page)."""
        if self.current_page_size == 0:
            return 0
        return (self.page_number - 1) * self.page_size + 1

    @property
    def current_end_index(self) -> int:
        """1-based index of the last item on this page (0 for an empty page)."""
        if self.current_page_size == 0:
            return 0
        return self.current_start_index + self.current_page_size - 1
