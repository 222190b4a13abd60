"""Unit tests for the ownership gate."""
import pytest
from unittest.mock import Mock

from expense_tracker.enums import UserRole
from expense_tracker.exceptions import ForbiddenError
from expense_tracker.policies import authorize_owner, forbidden_message, is_owner_or_admin


def _user(user_id, role=UserRole.STANDARD):
    user = Mock()
    user.id = user_id
    user.role = role
    return user


class TestOwnershipGate:
    def test_owner_is_allowed(self):
        assert is_owner_or_admin(1, _user(1)) is True

    def test_other_standard_user_is_denied(self):
        assert is_owner_or_admin(1, _user(2)) is False

    def test_admin_bypasses_ownership(self):
        assert is_owner_or_admin(1, _user(2, UserRole.ADMIN)) is True

    def test_authorize_owner_returns_silently_for_owner(self):
        authorize_owner(7, _user(7), "update", "a category")

    def test_authorize_owner_raises_forbidden_with_message(self):
        with pytest.raises(ForbiddenError) as exc_info:
            authorize_owner(7, _user(8), "delete", "an expense")

        assert exc_info.value.status_code == 403
        assert exc_info.value.detail == "You are not authorized to delete an expense that is not yours."

    def test_forbidden_message(self):
        assert forbidden_message("get", "a category") == (
            "You are not authorized to get a category that is not yours."
        )
