# backend/tests/unit/conftest.py
import os

# Keep the application engine off PostgreSQL; every request uses the session below
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

from datetime import datetime, timezone
from decimal import Decimal
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from expense_tracker.main import app
from expense_tracker.db import Base, get_db
from expense_tracker import models
from expense_tracker.auth import create_access_token
from expense_tracker.core.settings import Settings
from expense_tracker.enums import UserRole
from expense_tracker.notifications import CategoryEventPublisher, DefaultDistributionSeeder
from expense_tracker.repositories import (
    CategoryRepository,
    ExpenseRepository,
    ExpectedCategoryDistributionRepository
)
from expense_tracker.services.category_service import CategoryService
from expense_tracker.services.expense_service import ExpenseService
from expense_tracker.services.expected_category_distribution_service import ExpectedCategoryDistributionService

# One in-memory DB shared across threads (TestClient) via StaticPool
engine = create_engine(
    "sqlite+pysqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


# Enforce FKs in SQLite (off by default otherwise)
@event.listens_for(engine, "connect")
def _set_sqlite_pragma(dbapi_connection, _):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()

TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)

@pytest.fixture
def db_session():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)

@pytest.fixture(autouse=True)
def _override_get_db(db_session):
    def _get_db():
        yield db_session
    app.dependency_overrides[get_db] = _get_db
    yield
    app.dependency_overrides.clear()

@pytest.fixture
def client():
    return TestClient(app)


# ----------------------------
# Data factories
# ----------------------------

@pytest.fixture
def make_user(db_session):
    def _make(username: str, role: UserRole = UserRole.STANDARD) -> models.User:
        user = models.User(
            username=username,
            email=f"{username}@example.com",
            password_hash="not-a-real-hash",
            role=role
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user
    return _make

@pytest.fixture
def user(make_user):
    return make_user("alice")

@pytest.fixture
def other_user(make_user):
    return make_user("bob")

@pytest.fixture
def admin_user(make_user):
    return make_user("root", UserRole.ADMIN)

@pytest.fixture
def make_category(db_session):
    def _make(owner, title="Food", description=None, created_date=None, last_updated_date=None):
        created_date = created_date or datetime.now(timezone.utc)
        category = models.Category(
            title=title,
            description=description,
            created_date=created_date,
            last_updated_date=last_updated_date or created_date,
            created_by_id=owner.id
        )
        db_session.add(category)
        db_session.commit()
        db_session.refresh(category)
        return category
    return _make

@pytest.fixture
def make_expense(db_session):
    def _make(category, title="Groceries", amount="10.00", description=None, created_date=None):
        created_date = created_date or datetime.now(timezone.utc)
        expense = models.Expense(
            category_id=category.id,
            title=title,
            description=description,
            amount=Decimal(amount),
            created_date=created_date,
            last_updated_date=created_date,
            created_by_id=category.created_by_id
        )
        db_session.add(expense)
        db_session.commit()
        db_session.refresh(expense)
        return expense
    return _make

@pytest.fixture
def make_distribution(db_session):
    def _make(category, minimum=10, maximum=20, created_date=None):
        created_date = created_date or datetime.now(timezone.utc)
        distribution = models.ExpectedCategoryDistribution(
            category_id=category.id,
            minimum_distribution=minimum,
            maximum_distribution=maximum,
            created_date=created_date,
            last_updated_date=created_date,
            created_by_id=category.created_by_id
        )
        db_session.add(distribution)
        db_session.commit()
        db_session.refresh(distribution)
        return distribution
    return _make


# ----------------------------
# Services and auth
# ----------------------------

@pytest.fixture
def services_for(db_session):
    """Build the service graph for a given requester, as the dependencies module does."""
    def _build(current_user):
        settings = Settings()
        publisher = CategoryEventPublisher([
            DefaultDistributionSeeder(ExpectedCategoryDistributionRepository(db_session), settings)
        ])
        category_service = CategoryService(CategoryRepository(db_session), current_user, publisher, settings)
        return SimpleNamespace(
            category=category_service,
            expense=ExpenseService(
                ExpenseRepository(db_session),
                category_service,
                ExpectedCategoryDistributionRepository(db_session),
                current_user
            ),
            distribution=ExpectedCategoryDistributionService(
                ExpectedCategoryDistributionRepository(db_session),
                category_service,
                current_user
            )
        )
    return _build

@pytest.fixture
def headers_for():
    def _headers(user):
        token = create_access_token(data={"sub": user.username})
        return {"Authorization": f"Bearer {token}"}
    return _headers

@pytest.fixture
def auth_headers(user, headers_for):
    return headers_for(user)
