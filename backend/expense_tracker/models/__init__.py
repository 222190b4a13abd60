# Import and re-export all models so callers can use `from expense_tracker import models`

# Import Base from db module
from ..db import Base

# Import all models from their individual files
from .user import User
from .category import Category
from .expense import Expense
from .expected_category_distribution import ExpectedCategoryDistribution

# Ensure all models are available at package level
__all__ = [
    "Base",
    "User",
    "Category",
    "Expense",
    "ExpectedCategoryDistribution",
]
