from fastapi import Depends
from sqlalchemy.orm import Session

# Re-export database dependency
from .db import get_db

# Re-export authentication dependencies
from .auth import get_current_user, require_admin

from . import models
from .core.settings import Settings, get_settings
from .notifications import CategoryEventPublisher, DefaultDistributionSeeder
from .repositories import (
    CategoryRepository,
    ExpenseRepository,
    ExpectedCategoryDistributionRepository
)
from .services.category_service import CategoryService
from .services.expense_service import ExpenseService
from .services.expected_category_distribution_service import ExpectedCategoryDistributionService


def get_category_event_publisher(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
) -> CategoryEventPublisher:
    return CategoryEventPublisher([
        DefaultDistributionSeeder(ExpectedCategoryDistributionRepository(db), settings)
    ])


def get_category_service(
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
    publisher: CategoryEventPublisher = Depends(get_category_event_publisher),
    settings: Settings = Depends(get_settings)
) -> CategoryService:
    return CategoryService(CategoryRepository(db), current_user, publisher, settings)


def get_expense_service(
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
    category_service: CategoryService = Depends(get_category_service)
) -> ExpenseService:
    return ExpenseService(
        ExpenseRepository(db),
        category_service,
        ExpectedCategoryDistributionRepository(db),
        current_user
    )


def get_expected_category_distribution_service(
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
    category_service: CategoryService = Depends(get_category_service)
) -> ExpectedCategoryDistributionService:
    return ExpectedCategoryDistributionService(
        ExpectedCategoryDistributionRepository(db),
        category_service,
        current_user
    )
