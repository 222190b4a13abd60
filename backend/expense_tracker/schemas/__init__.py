# Shared schemas
from .common import (
    CamelModel,
    OperationResult,
    PaginatedResponse,
    SearchRequest,
    DateRangeFilter
)

# Auth schemas
from .auth import (
    RegisterRequest,
    LoginRequest,
    UserResponse,
    AuthResponse
)

# Category schemas
from .category import (
    CategoryRequest,
    CategoryResponse,
    CategorySearchRequest
)

# Expense schemas
from .expense import (
    ExpenseRequest,
    ExpenseResponse,
    ExpenseSearchRequest,
    MonthlyExpenseMetric,
    CurrentDistributionRequest,
    CategoryDistribution,
    CurrentDistributionResponse
)

# Expected category distribution schemas
from .expected_category_distribution import (
    ExpectedCategoryDistributionRequest,
    ExpectedCategoryDistributionUpdateRequest,
    ExpectedCategoryDistributionResponse,
    ExpectedCategoryDistributionSearchRequest
)

# Make all schemas available at package level
__all__ = [
    # Shared
    "CamelModel",
    "OperationResult",
    "PaginatedResponse",
    "SearchRequest",
    "DateRangeFilter",
    # Auth
    "RegisterRequest",
    "LoginRequest",
    "UserResponse",
    "AuthResponse",
    # Category
    "CategoryRequest",
    "CategoryResponse",
    "CategorySearchRequest",
    # Expense
    "ExpenseRequest",
    "ExpenseResponse",
    "ExpenseSearchRequest",
    "MonthlyExpenseMetric",
    "CurrentDistributionRequest",
    "CategoryDistribution",
    "CurrentDistributionResponse",
    # Expected category distribution
    "ExpectedCategoryDistributionRequest",
    "ExpectedCategoryDistributionUpdateRequest",
    "ExpectedCategoryDistributionResponse",
    "ExpectedCategoryDistributionSearchRequest"
]
