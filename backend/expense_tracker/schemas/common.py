from datetime import datetime
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class OperationResult(CamelModel):
    """Outcome of a create/update/delete request"""
    success: bool
    message: str


class PaginatedResponse(CamelModel, Generic[T]):
    """Pagination envelope shared by every search endpoint"""
    limit: int
    offset: int
    total_count: int = Field(ge=0, description="Number of matches ignoring pagination")
    items: List[T]


class SearchRequest(CamelModel):
    """Offset/limit pagination shared by every search request"""
    offset: int = Field(0, ge=0, description="Number of matching records to skip")
    limit: int = Field(10, ge=1, le=100, description="Maximum number of records to return")


class DateRangeFilter(SearchRequest):
    """Inclusive range on the record's creation time"""
    id: Optional[int] = None
    start_date: Optional[datetime] = Field(None, description="Created on or after")
    end_date: Optional[datetime] = Field(None, description="Created on or before")
