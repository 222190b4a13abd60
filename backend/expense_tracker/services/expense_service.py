from datetime import datetime
from decimal import Decimal
from typing import Optional, Tuple
import logging

from fastapi import HTTPException

from .. import models
from ..enums import DistributionStatus
from ..exceptions import NotFoundError, ValidationFailure
from ..filters import build_expense_filters
from ..models.mixins import as_utc, utcnow
from ..policies import authorize_owner, forbidden_message, is_owner_or_admin
from ..repositories import ExpenseRepository, ExpectedCategoryDistributionRepository
from ..schemas import (
    ExpenseRequest,
    ExpenseResponse,
    ExpenseSearchRequest,
    MonthlyExpenseMetric,
    CurrentDistributionRequest,
    CategoryDistribution,
    CurrentDistributionResponse,
    OperationResult,
    PaginatedResponse
)
from .category_service import CategoryService

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
ZERO = Decimal("0")


def month_bounds(moment: datetime) -> Tuple[datetime, datetime]:
    """Start of the month containing `moment` and start of the following month."""
    start = moment.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    if start.month == 12:
        end = start.replace(year=start.year + 1, month=1)
    else:
        end = start.replace(month=start.month + 1)
    return start, end


def previous_month_start(month_start: datetime) -> datetime:
    if month_start.month == 1:
        return month_start.replace(year=month_start.year - 1, month=12)
    return month_start.replace(month=month_start.month - 1)


def percentage_of(part: Decimal, whole: Decimal) -> Decimal:
    """Share of `whole` as a percentage rounded to cents; 0 when whole is 0."""
    if whole == 0:
        return ZERO.quantize(CENT)
    return (part / whole * 100).quantize(CENT)


def distribution_status(percentage: Decimal, target: Optional[models.ExpectedCategoryDistribution]) -> DistributionStatus:
    if target is None:
        return DistributionStatus.UNSET
    if percentage < target.minimum_distribution:
        return DistributionStatus.UNDER
    if percentage > target.maximum_distribution:
        return DistributionStatus.OVER
    return DistributionStatus.WITHIN


class ExpenseService:
    """Expense CRUD, search and spending metrics for the current user."""

    def __init__(
        self,
        repository: ExpenseRepository,
        category_service: CategoryService,
        distribution_repository: ExpectedCategoryDistributionRepository,
        current_user: models.User
    ):
        self.repository = repository
        self.category_service = category_service
        self.distribution_repository = distribution_repository
        self.current_user = current_user

    def get_expense_by_id(self, expense_id: int) -> models.Expense:
        """
        Retrieve an expense after checking ownership.

        Raises:
            NotFoundError: If no expense has this id
            ForbiddenError: If the current user neither owns it nor is an admin
        """
        expense = self.repository.get(expense_id)
        if expense is None:
            raise NotFoundError(f"Expense not found with ID: {expense_id}")

        authorize_owner(expense.created_by_id, self.current_user, "get", "an expense")
        return expense

    def _resolve_category(self, category_id: int) -> Tuple[Optional[models.Category], Optional[str]]:
        try:
            return self.category_service.get_category_by_id(category_id, action="use"), None
        except HTTPException as e:
            return None, e.detail

    def create_expense(self, request: ExpenseRequest) -> OperationResult:
        """Create an expense in an existing category. The expense belongs to the category owner."""
        category, error = self._resolve_category(request.category_id)
        if category is None:
            logger.warning(f"User {self.current_user.id} could not create expense: {error}")
            return OperationResult(success=False, message=error)

        now = utcnow()
        expense = models.Expense(
            category_id=category.id,
            title=request.title,
            description=request.description,
            amount=request.amount,
            created_date=now,
            last_updated_date=now,
            created_by_id=category.created_by_id
        )

        try:
            self.repository.save(expense)
        except Exception as e:
            self.repository.rollback()
            logger.error(f"Failed to create expense for user {self.current_user.id}: {str(e)}")
            raise

        logger.info(f"Expense {expense.id} created by user {self.current_user.id}")
        return OperationResult(success=True, message="Expense created successfully")

    def update_expense(self, expense_id: int, request: ExpenseRequest) -> OperationResult:
        expense = self.repository.get(expense_id)

        if expense is None:
            return OperationResult(success=False, message=f"Expense not found with ID: {expense_id}")
        if not is_owner_or_admin(expense.created_by_id, self.current_user):
            logger.warning(f"User {self.current_user.id} denied update on expense {expense_id}")
            return OperationResult(success=False, message=forbidden_message("update", "an expense"))

        category, error = self._resolve_category(request.category_id)
        if category is None:
            return OperationResult(success=False, message=error)
        if category.created_by_id != expense.created_by_id:
            return OperationResult(
                success=False,
                message="An expense can only be moved to a category of the same owner."
            )

        expense.category_id = category.id
        expense.title = request.title
        expense.description = request.description
        expense.amount = request.amount
        expense.last_updated_date = utcnow()

        try:
            self.repository.save(expense)
        except Exception as e:
            self.repository.rollback()
            logger.error(f"Failed to update expense {expense_id}: {str(e)}")
            raise

        logger.info(f"Expense {expense_id} updated by user {self.current_user.id}")
        return OperationResult(success=True, message="Expense updated successfully")

    def delete_expense(self, expense_id: int) -> OperationResult:
        expense = self.repository.get(expense_id)

        if expense is None:
            return OperationResult(success=False, message=f"Expense not found with ID: {expense_id}")
        if not is_owner_or_admin(expense.created_by_id, self.current_user):
            logger.warning(f"User {self.current_user.id} denied delete on expense {expense_id}")
            return OperationResult(success=False, message=forbidden_message("delete", "an expense"))

        try:
            self.repository.delete(expense)
        except Exception as e:
            self.repository.rollback()
            logger.error(f"Failed to delete expense {expense_id}: {str(e)}")
            raise

        logger.info(f"Expense {expense_id} deleted by user {self.current_user.id}")
        return OperationResult(success=True, message="Expense deleted successfully")

    def search_expenses(
        self,
        request: ExpenseSearchRequest,
        all_users: bool = False
    ) -> PaginatedResponse[ExpenseResponse]:
        """
        Search expenses with optional filters and offset/limit pagination.

        Args:
            request: Search filters and pagination
            all_users: Search every user's expenses (admin endpoints only)
        """
        owner_id = None if all_users else self.current_user.id
        clauses = build_expense_filters(request, owner_id)

        total_count, expenses = self.repository.search(clauses, request.offset, request.limit)

        logger.info(
            f"Expense search by user {self.current_user.id} matched {total_count} "
            f"(offset {request.offset}, limit {request.limit})"
        )

        return PaginatedResponse[ExpenseResponse](
            limit=request.limit,
            offset=request.offset,
            total_count=total_count,
            items=[ExpenseResponse.model_validate(e) for e in expenses]
        )

    def _month_clauses(self, start: datetime, end: datetime):
        return (
            models.Expense.created_by_id == self.current_user.id,
            models.Expense.created_date >= start,
            models.Expense.created_date < end,
        )

    def get_total_expense_amount(self) -> Decimal:
        """Sum of the current user's expenses created this calendar month (UTC)."""
        start, end = month_bounds(utcnow())
        return self.repository.sum_amount(*self._month_clauses(start, end))

    def get_monthly_expense_metric(self) -> MonthlyExpenseMetric:
        """Aggregate the current month's expenses and compare them with last month."""
        start, end = month_bounds(utcnow())
        clauses = self._month_clauses(start, end)

        total = self.repository.sum_amount(*clauses)
        count = self.repository.count(*clauses)
        largest = self.repository.max_amount(*clauses)
        average = (total / count).quantize(CENT) if count else ZERO.quantize(CENT)

        previous_total = self.repository.sum_amount(
            *self._month_clauses(previous_month_start(start), start)
        )
        if previous_total == 0:
            change = ZERO.quantize(CENT)
        else:
            change = ((total - previous_total) / previous_total * 100).quantize(CENT)

        return MonthlyExpenseMetric(
            month=start.strftime("%Y-%m"),
            total_amount=total,
            expense_count=count,
            average_amount=average,
            largest_amount=largest,
            previous_month_total=previous_total,
            change_percentage=change
        )

    def get_current_distribution(self, request: CurrentDistributionRequest) -> CurrentDistributionResponse:
        """
        Compare each category's share of spending in a date range with its target.

        Every category owned by the current user is reported, including ones
        with no spending. When nothing was spent every percentage is 0.

        Raises:
            ValidationFailure: If startDate is after endDate
        """
        start = as_utc(request.start_date)
        end = as_utc(request.end_date) if request.end_date is not None else utcnow()
        if start > end:
            raise ValidationFailure("startDate must not be after endDate")

        categories = self.category_service.get_all_categories()
        targets = {
            d.category_id: d
            for d in self.distribution_repository.list_owned_by(self.current_user.id)
        }
        spent = self.repository.sum_by_category(
            models.Expense.created_by_id == self.current_user.id,
            models.Expense.created_date >= start,
            models.Expense.created_date <= end,
        )
        total = sum(spent.values(), ZERO)

        distributions = []
        for category in categories:
            amount = spent.get(category.id, ZERO)
            percentage = percentage_of(amount, total)
            target = targets.get(category.id)
            distributions.append(CategoryDistribution(
                category_id=category.id,
                category_title=category.title,
                amount=amount,
                percentage=percentage,
                minimum_distribution=target.minimum_distribution if target else None,
                maximum_distribution=target.maximum_distribution if target else None,
                status=distribution_status(percentage, target)
            ))

        return CurrentDistributionResponse(
            start_date=start,
            end_date=end,
            total_amount=total,
            distributions=distributions
        )
