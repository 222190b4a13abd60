from typing import Optional

from ..models import ExpectedCategoryDistribution
from .base import SQLAlchemyRepository


class ExpectedCategoryDistributionRepository(SQLAlchemyRepository[ExpectedCategoryDistribution]):
    model = ExpectedCategoryDistribution

    def get_by_category(self, category_id: int) -> Optional[ExpectedCategoryDistribution]:
        return self.query(ExpectedCategoryDistribution.category_id == category_id).first()

    def list_owned_by(self, user_id: int):
        return self.list(ExpectedCategoryDistribution.created_by_id == user_id)
