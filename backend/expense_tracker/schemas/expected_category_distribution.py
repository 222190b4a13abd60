from pydantic import Field, model_validator
from typing import Optional
from datetime import datetime

from .common import CamelModel, DateRangeFilter


class DistributionRange(CamelModel):
    """Inclusive target percentage range"""
    minimum_distribution: int = Field(ge=0, le=100)
    maximum_distribution: int = Field(ge=0, le=100)

    @model_validator(mode="after")
    def check_bounds(self):
        if self.minimum_distribution > self.maximum_distribution:
            raise ValueError("minimumDistribution must not exceed maximumDistribution")
        return self


class ExpectedCategoryDistributionRequest(DistributionRange):
    category_id: int


class ExpectedCategoryDistributionUpdateRequest(DistributionRange):
    pass


class ExpectedCategoryDistributionResponse(CamelModel):
    id: int
    category_id: int
    category_title: Optional[str] = None
    minimum_distribution: int
    maximum_distribution: int
    created_by_id: int
    created_date: datetime
    last_updated_date: datetime


class ExpectedCategoryDistributionSearchRequest(DateRangeFilter):
    category_id: Optional[int] = None
