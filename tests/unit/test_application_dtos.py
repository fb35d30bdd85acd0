"""Unit tests for PagedList and the X-Pagination header schema."""

import json

import pytest

from src.application.dtos import PagedList
from src.schemas.common_schemas import PaginationMeta


@pytest.mark.unit
class TestPagedList:
    """Test page metadata."""

    def test_middle_page(self):
        page = PagedList(items=["c", "d"], total_count=5, page_number=2, page_size=2)

        assert page.total_pages == 3
        assert page.has_previous is True
        assert page.has_next is True
        assert page.current_page_size == 2
        assert page.current_start_index == 3
        assert page.current_end_index == 4

    def test_last_partial_page(self):
        page = PagedList(items=["e"], total_count=5, page_number=3, page_size=2)

        assert page.has_next is False
        assert page.current_start_index == 5
        assert page.current_end_index == 5

    def test_first_page(self):
        page = PagedList(items=["a"], total_count=1, page_number=1, page_size=10)

        assert page.total_pages == 1
        assert page.has_previous is False
        assert page.has_next is False

    def test_empty_page(self):
        page = PagedList(items=[], total_count=0, page_number=1, page_size=10)

        assert page.total_pages == 0
        assert page.current_page_size == 0
        assert page.current_start_index == 0
        assert page.current_end_index == 0

    def test_page_past_the_end(self):
        page = PagedList(items=[], total_count=3, page_number=5, page_size=2)

        assert page.total_pages == 2
        assert page.has_previous is True
        assert page.has_next is False
        assert page.current_start_index == 0

    def test_metadata_does_not_consume_items(self):
        consumed = []

        def items():
            for item in ["a", "b"]:
                consumed.append(item)
                yield item

        page = PagedList(items=items(), total_count=4, page_number=1, page_size=2)

        assert page.current_end_index == 2
        assert page.has_next is True
        assert consumed == []
        assert list(page.items) == ["a", "b"]


@pytest.mark.unit
class TestPaginationMeta:
    """Test the header rendering."""

    def test_header_uses_camel_case_keys(self):
        page = PagedList(items=[1, 2], total_count=3, page_number=1, page_size=2)

        header = json.loads(PaginationMeta.from_paged_list(page).to_header())

        assert header == {
            "totalCount": 3,
            "pageSize": 2,
            "currentPageSize": 2,
            "currentStartIndex": 1,
            "currentEndIndex": 2,
            "pageNumber": 1,
            "totalPages": 2,
            "hasPrevious": False,
            "hasNext": True,
        }
