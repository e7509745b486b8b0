"""
Core pagination utilities for API endpoints.
"""
from typing import TypeVar, Generic, List
from pydantic import BaseModel, Field
from fastapi import Query
import math

T = TypeVar("T")

MAX_PAGE_SIZE = 100
# Keeps (page - 1) * limit inside a signed 64-bit OFFSET
MAX_PAGE = (2 ** 63 - 1) // MAX_PAGE_SIZE

class PageParams:
    """
    Page parameters for pagination.

    Out-of-range values are rejected by FastAPI before the handler runs.

    Attributes:
        page: Page number (1-indexed)
        limit: Number of items per page
    """
    def __init__(
        self,
        page: int = Query(1, ge=1, le=MAX_PAGE, description="Page number"),
        limit: int = Query(10, ge=1, le=MAX_PAGE_SIZE, description="Items per page")
    ):
        self.page = page
        self.limit = limit
        self.offset = (page - 1) * limit


class PaginationMeta(BaseModel):
    """
    Pagination metadata.

    Attributes:
        current_page: Current page number
        items_per_page: Number of items per page
        total_items: Total number of items
        total_pages: Total number of pages
        has_next_page: Whether there is a next page
        has_previous_page: Whether there is a previous page
    """
    current_page: int = Field(alias="currentPage")
    items_per_page: int = Field(alias="itemsPerPage")
    total_items: int = Field(alias="totalItems")
    total_pages: int = Field(alias="totalPages")
    has_next_page: bool = Field(alias="hasNextPage")
    has_previous_page: bool = Field(alias="hasPreviousPage")

    class Config:
        populate_by_name = True


class PageResponse(BaseModel, Generic[T]):
    """
    Paginated response model.

    Attributes:
        data: List of items for the current page
        meta: Pagination metadata
    """
    data: List[T]
    meta: PaginationMeta


def create_pagination_meta(page: int, limit: int, total: int) -> PaginationMeta:
    """
    Compute pagination metadata from the page request and total item count.

    Args:
        page: Current page number
        limit: Number of items per page
        total: Total number of items

    Returns:
        PaginationMeta: Derived page count and navigation flags
    """
    total_pages = math.ceil(total / limit)

    return PaginationMeta(
        current_page=page,
        items_per_page=limit,
        total_items=total,
        total_pages=total_pages,
        has_next_page=page < total_pages,
        has_previous_page=page > 1
    )


def paginate(items: list, page_params: PageParams, total: int, schema_class) -> PageResponse:
    """
    Wrap one page of ORM rows with its metadata.

    Args:
        items: Rows of the current page
        page_params: Pagination parameters
        total: Total number of rows across all pages
        schema_class: Pydantic model the rows are converted to

    Returns:
        PageResponse: Paginated response
    """
    return PageResponse[schema_class](
        data=[schema_class.model_validate(item) for item in items],
        meta=create_pagination_meta(page_params.page, page_params.limit, total)
    )
