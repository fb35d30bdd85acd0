"""Common schemas used across multiple API endpoints.

Provides reusable schema components for pagination.

Reference:
    - src/application/dtos/paged_list.py
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.application.dtos.paged_list import PagedList


class PaginationParams(BaseModel):
    """Pagination query parameters.

    Attributes:
        page_number: Page number (1-indexed).
        page_size: Number of items per page.
    """

    page_number: int = Field(1, ge=1, description="Page number (1-indexed)")
    page_size: int = Field(10, ge=1, description="Items per page")


class PaginationMeta(BaseModel):
    """Pagination metadata sent in the X-Pagination response header.

    Serialised with camelCase keys (totalCount, pageSize, ...).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_count: int
    page_size: int
    current_page_size: int
    current_start_index: int
    current_end_index: int
    page_number: int
    total_pages: int
    has_previous: bool
    has_next: bool

    @classmethod
    def from_paged_list(cls, paged: PagedList) -> "PaginationMeta":
        return cls(
            total_count=paged.total_count,
            page_size=paged.page_size,
            current_page_size=paged.current_page_size,
            current_start_index=paged.current_start_index,
            current_end_index=paged.current_end_index,
            page_number=paged.page_number,
            total_pages=paged.total_pages,
            has_previous=paged.has_previous,
            has_next=paged.has_next,
        )

    def to_header(self) -> str:
        """JSON for the X-Pagination header."""
        return self.model_dump_json(by_alias=True)
