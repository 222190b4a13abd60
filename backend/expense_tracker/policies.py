"""Ownership gate shared by every owned entity."""
import logging

from .enums import UserRole
from .exceptions import ForbiddenError

logger = logging.getLogger(__name__)


def is_owner_or_admin(resource_owner_id: int, requester) -> bool:
    """True when the requester created the resource or holds the admin role."""
    return resource_owner_id == requester.id or requester.role == UserRole.ADMIN


def forbidden_message(action: str, resource: str) -> str:
    return f"You are not authorized to {action} {resource} that is not yours."


def authorize_owner(resource_owner_id: int, requester, action: str, resource: str) -> None:
    """
    Raise ForbiddenError unless the requester may act on the resource.

    Args:
        resource_owner_id: id of the user that owns the resource
        requester: the authenticated user
        action: verb used in the error message ("get", "update", "delete", ...)
        resource: noun phrase used in the error message ("a category", ...)
    """
    if not is_owner_or_admin(resource_owner_id, requester):
        logger.warning(f"User {requester.id} denied {action} on {resource} owned by user {resource_owner_id}")
        raise ForbiddenError(forbidden_message(action, resource))
