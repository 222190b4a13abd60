"""
Query builders for the search endpoints.

Each builder folds the optional fields of a search request into a list of
SQLAlchemy clauses that repositories AND together. A field left as None adds
no clause. `owner_id` restricts results to one user; None means all users and
is only passed by the admin search endpoints.
"""
from typing import List, Optional

from sqlalchemy import or_

from .models import Category, Expense, ExpectedCategoryDistribution
from .models.mixins import as_utc
from .schemas import (
    CategorySearchRequest,
    ExpenseSearchRequest,
    ExpectedCategoryDistributionSearchRequest,
)


def _contains(column, fragment: str):
    """Case-insensitive substring match; `%` and `_` in the fragment are literal."""
    return column.icontains(fragment, autoescape=True)


def _overview(model, fragment: str):
    return or_(_contains(model.title, fragment), _contains(model.description, fragment))


def _common_clauses(model, request, owner_id: Optional[int]) -> List:
    clauses = []
    if owner_id is not None:
        clauses.append(model.created_by_id == owner_id)
    if request.id is not None:
        clauses.append(model.id == request.id)
    if request.start_date is not None:
        clauses.append(model.created_date >= as_utc(request.start_date))
    if request.end_date is not None:
        clauses.append(model.created_date <= as_utc(request.end_date))
    return clauses


def _text_clauses(model, request) -> List:
    clauses = []
    if request.title is not None:
        clauses.append(_contains(model.title, request.title))
    if request.description is not None:
        clauses.append(_contains(model.description, request.description))
    if request.overview_text is not None:
        clauses.append(_overview(model, request.overview_text))
    return clauses


def build_category_filters(request: CategorySearchRequest, owner_id: Optional[int]) -> List:
    return _common_clauses(Category, request, owner_id) + _text_clauses(Category, request)


def build_expense_filters(request: ExpenseSearchRequest, owner_id: Optional[int]) -> List:
    clauses = _common_clauses(Expense, request, owner_id) + _text_clauses(Expense, request)
    if request.category_id is not None:
        clauses.append(Expense.category_id == request.category_id)
    if request.min_amount is not None:
        clauses.append(Expense.amount >= request.min_amount)
    if request.max_amount is not None:
        clauses.append(Expense.amount <= request.max_amount)
    return clauses


def build_distribution_filters(
    request: ExpectedCategoryDistributionSearchRequest, owner_id: Optional[int]
) -> List:
    clauses = _common_clauses(ExpectedCategoryDistribution, request, owner_id)
    if request.category_id is not None:
        clauses.append(ExpectedCategoryDistribution.category_id == request.category_id)
    return clauses
