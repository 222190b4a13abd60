from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError

from expense_tracker import models
from expense_tracker.enums import UserRole


class TestUser:
    def test_defaults(self, db_session):
        user = models.User(username="carol", email="carol@example.com", password_hash="hashed_password")
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)

        assert user.id is not None
        assert user.role == UserRole.STANDARD
        assert user.is_admin is False
        assert user.created_at is not None

    def test_username_unique(self, db_session, make_user):
        make_user("carol")

        db_session.add(models.User(username="carol", email="other@example.com", password_hash="x"))
        with pytest.raises(IntegrityError):
            db_session.commit()
        db_session.rollback()


class TestCategoryAndExpense:
    def test_timestamps_assigned_on_insert(self, db_session, user):
        category = models.Category(title="Food", created_by_id=user.id)
        db_session.add(category)
        db_session.commit()
        db_session.refresh(category)

        assert category.created_date is not None
        assert category.last_updated_date is not None

    def test_expense_requires_existing_category(self, db_session, user):
        db_session.add(models.Expense(
            category_id=999,
            title="Orphan",
            amount=Decimal("1.00"),
            created_by_id=user.id
        ))
        with pytest.raises(IntegrityError):
            db_session.commit()
        db_session.rollback()

    def test_expense_category_title(self, user, make_category, make_expense):
        expense = make_expense(make_category(user, title="Transport"), amount="2.40")

        assert expense.category_title == "Transport"
        assert expense.amount == Decimal("2.40")


class TestExpectedCategoryDistribution:
    def test_one_distribution_per_category(self, db_session, user, make_category, make_distribution):
        category = make_category(user)
        make_distribution(category)

        db_session.add(models.ExpectedCategoryDistribution(
            category_id=category.id,
            minimum_distribution=1,
            maximum_distribution=2,
            created_by_id=user.id
        ))
        with pytest.raises(IntegrityError):
            db_session.commit()
        db_session.rollback()

    def test_range_check_constraint(self, db_session, user, make_category):
        category = make_category(user)

        db_session.add(models.ExpectedCategoryDistribution(
            category_id=category.id,
            minimum_distribution=50,
            maximum_distribution=10,
            created_by_id=user.id
        ))
        with pytest.raises(IntegrityError):
            db_session.commit()
        db_session.rollback()
