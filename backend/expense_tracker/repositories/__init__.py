from .base import SQLAlchemyRepository
from .category import CategoryRepository
from .expense import ExpenseRepository
from .expected_category_distribution import ExpectedCategoryDistributionRepository

__all__ = [
    "SQLAlchemyRepository",
    "CategoryRepository",
    "ExpenseRepository",
    "ExpectedCategoryDistributionRepository",
]
