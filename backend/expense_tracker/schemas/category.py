from pydantic import Field
from typing import Optional
from datetime import datetime

from .common import CamelModel, DateRangeFilter


class CategoryBase(CamelModel):
    title: str = Field(min_length=1, max_length=50)
    description: Optional[str] = Field(None, max_length=200)


class CategoryRequest(CategoryBase):
    pass


class CategoryResponse(CategoryBase):
    id: int
    created_by_id: int
    created_date: datetime
    last_updated_date: datetime


class CategorySearchRequest(DateRangeFilter):
    """Filters for category search. Text filters are case-insensitive substrings."""
    title: Optional[str] = None
    description: Optional[str] = None
    overview_text: Optional[str] = Field(None, description="Matches title or description")
