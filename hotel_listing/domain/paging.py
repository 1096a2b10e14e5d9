"""
Paging Models
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

R = TypeVar("R")

DEFAULT_PAGE_SIZE = 15


class QueryParameters(BaseModel):
    """
    Paging Query Parameters

    Rows are skipped by ``start_index``; ``page_number`` is only echoed back in the result.
    """

    start_index: int = Field(0, ge=0, description="Number of rows to skip")
    page_number: int = Field(0, ge=0, description="Page number (echoed back)")
    page_size: int = Field(DEFAULT_PAGE_SIZE, ge=0, description="Rows per page")


class PagedResult(BaseModel, Generic[R]):
    """A page of projected items plus the unpaged row count"""

    items: list[R] = Field(default_factory=list)
    total_count: int = 0
    page_number: int = 0
    # Requested page size
    record_number: int = 0
