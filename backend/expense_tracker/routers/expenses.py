from decimal import Decimal
from fastapi import APIRouter, Depends
from .. import schemas
from ..dependencies import get_expense_service
from ..services.expense_service import ExpenseService

router = APIRouter(
    prefix="/expense",
    tags=["Expenses"],
    responses={404: {"description": "Not found"}},
)


@router.get("/monthly-metric", response_model=schemas.MonthlyExpenseMetric)
def get_monthly_expense_metric(service: ExpenseService = Depends(get_expense_service)):
    """Aggregate metrics over the current month's expenses"""
    return service.get_monthly_expense_metric()


@router.get("/total-amount", response_model=Decimal)
def get_total_amount(service: ExpenseService = Depends(get_expense_service)):
    """Total amount of expenses in the current month"""
    return service.get_total_expense_amount()


@router.post("/current-distribution", response_model=schemas.CurrentDistributionResponse)
def get_current_distribution(
    request: schemas.CurrentDistributionRequest,
    service: ExpenseService = Depends(get_expense_service)
):
    """Actual spending share per category in a date range, next to each target range"""
    return service.get_current_distribution(request)


@router.post("/search", response_model=schemas.PaginatedResponse[schemas.ExpenseResponse])
def search_expenses(
    request: schemas.ExpenseSearchRequest,
    service: ExpenseService = Depends(get_expense_service)
):
    """Search the current user's expenses with pagination"""
    return service.search_expenses(request)


@router.get("/{expense_id}", response_model=schemas.ExpenseResponse)
def get_expense(expense_id: int, service: ExpenseService = Depends(get_expense_service)):
    """Get an expense by id"""
    return service.get_expense_by_id(expense_id)


@router.post("", response_model=schemas.OperationResult)
def create_expense(
    request: schemas.ExpenseRequest,
    service: ExpenseService = Depends(get_expense_service)
):
    """Create an expense in one of the current user's categories"""
    return service.create_expense(request)


@router.put("/{expense_id}", response_model=schemas.OperationResult)
def update_expense(
    expense_id: int,
    request: schemas.ExpenseRequest,
    service: ExpenseService = Depends(get_expense_service)
):
    """Update an expense by id"""
    return service.update_expense(expense_id, request)


@router.delete("/{expense_id}", response_model=schemas.OperationResult)
def delete_expense(expense_id: int, service: ExpenseService = Depends(get_expense_service)):
    """Delete an expense by id"""
    return service.delete_expense(expense_id)
