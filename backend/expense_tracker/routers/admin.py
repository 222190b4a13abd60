from fastapi import APIRouter, Depends
from .. import schemas
from ..dependencies import (
    require_admin,
    get_category_service,
    get_expense_service,
    get_expected_category_distribution_service
)
from ..services.category_service import CategoryService
from ..services.expense_service import ExpenseService
from ..services.expected_category_distribution_service import ExpectedCategoryDistributionService

# Searches here are not restricted to the requester's own records
router = APIRouter(
    prefix="/admin",
    tags=["Admin"],
    dependencies=[Depends(require_admin)],
)


@router.post("/category/search", response_model=schemas.PaginatedResponse[schemas.CategoryResponse])
def search_all_categories(
    request: schemas.CategorySearchRequest,
    service: CategoryService = Depends(get_category_service)
):
    """Search categories of every user"""
    return service.search_categories(request, all_users=True)


@router.post("/expense/search", response_model=schemas.PaginatedResponse[schemas.ExpenseResponse])
def search_all_expenses(
    request: schemas.ExpenseSearchRequest,
    service: ExpenseService = Depends(get_expense_service)
):
    """Search expenses of every user"""
    return service.search_expenses(request, all_users=True)


@router.post(
    "/expected-category-distribution/search",
    response_model=schemas.PaginatedResponse[schemas.ExpectedCategoryDistributionResponse]
)
def search_all_distributions(
    request: schemas.ExpectedCategoryDistributionSearchRequest,
    service: ExpectedCategoryDistributionService = Depends(get_expected_category_distribution_service)
):
    """Search target distributions of every user"""
    return service.search_expected_category_distributions(request, all_users=True)
