from pydantic import Field
from typing import List, Optional
from datetime import datetime
from decimal import Decimal

from ..enums import DistributionStatus
from .common import CamelModel, DateRangeFilter


class ExpenseBase(CamelModel):
    category_id: int
    title: str = Field(min_length=1, max_length=50)
    description: Optional[str] = Field(None, max_length=200)
    amount: Decimal = Field(gt=0, max_digits=12, decimal_places=2)


class ExpenseRequest(ExpenseBase):
    pass


class ExpenseResponse(ExpenseBase):
    id: int
    category_title: Optional[str] = None
    created_by_id: int
    created_date: datetime
    last_updated_date: datetime


class ExpenseSearchRequest(DateRangeFilter):
    """Filters for expense search. Text filters are case-insensitive substrings."""
    title: Optional[str] = None
    description: Optional[str] = None
    overview_text: Optional[str] = Field(None, description="Matches title or description")
    category_id: Optional[int] = None
    min_amount: Optional[Decimal] = Field(None, ge=0)
    max_amount: Optional[Decimal] = Field(None, ge=0)


class MonthlyExpenseMetric(CamelModel):
    """Aggregates over the requester's expenses for the current month"""
    month: str = Field(description="Calendar month as YYYY-MM")
    total_amount: Decimal
    expense_count: int
    average_amount: Decimal
    largest_amount: Decimal
    previous_month_total: Decimal
    change_percentage: Decimal = Field(description="Change against previous month; 0 when previous month is empty")


class CurrentDistributionRequest(CamelModel):
    start_date: datetime
    end_date: Optional[datetime] = Field(None, description="Defaults to now")


class CategoryDistribution(CamelModel):
    category_id: int
    category_title: str
    amount: Decimal
    percentage: Decimal
    minimum_distribution: Optional[int] = None
    maximum_distribution: Optional[int] = None
    status: DistributionStatus


class CurrentDistributionResponse(CamelModel):
    start_date: datetime
    end_date: datetime
    total_amount: Decimal
    distributions: List[CategoryDistribution]
