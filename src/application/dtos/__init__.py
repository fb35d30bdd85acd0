"""Application DTOs shared by query handlers."""

from src.application.dtos.paged_list import PagedList

__all__ = ["PagedList"]
