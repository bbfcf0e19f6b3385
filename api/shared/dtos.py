"""Shared DTOs for the Currency Converter API."""
from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")

MAX_PAGE = 2**31 - 1
MAX_PAGE_SIZE = 100


class BaseDTO(BaseModel):
    """Base DTO with common configuration."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class PaginationRequest(BaseDTO):
    """Request DTO for page-based pagination."""
    page: int = Field(default=1, ge=1, le=MAX_PAGE, description="1-based page number")
    page_size: int = Field(
        default=10, ge=1, le=MAX_PAGE_SIZE, alias="pageSize", description="Items per page"
    )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


class PaginationResponse(BaseDTO, Generic[T]):
    """Response DTO for paginated results."""
    items: List[T] = Field(description="List of items")
    total: int = Field(description="Total number of items")
    page: int = Field(description="Current page number")
    page_size: int = Field(alias="pageSize", description="Items per page")
    total_pages: int = Field(alias="totalPages", description="Number of pages available")


class HealthCheckResponse(BaseDTO):
    """Health check response DTO."""
    status: str = Field(description="Service status")


class ErrorResponse(BaseDTO):
    """Error body returned for every non-2xx response."""
    error: str = Field(description="Error message")
    status_code: int = Field(description="HTTP status code")
