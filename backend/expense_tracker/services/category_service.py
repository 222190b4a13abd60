from typing import List, Optional
import logging

from .. import models
from ..core.settings import Settings
from ..exceptions import NotFoundError
from ..filters import build_category_filters
from ..models.mixins import utcnow
from ..notifications import CategoryEventPublisher
from ..policies import authorize_owner, forbidden_message, is_owner_or_admin
from ..repositories import CategoryRepository
from ..schemas import (
    CategoryRequest,
    CategoryResponse,
    CategorySearchRequest,
    OperationResult,
    PaginatedResponse
)

logger = logging.getLogger(__name__)


class CategoryService:
    """Category CRUD and search scoped to the current user."""

    def __init__(
        self,
        repository: CategoryRepository,
        current_user: models.User,
        publisher: CategoryEventPublisher,
        settings: Settings
    ):
        self.repository = repository
        self.current_user = current_user
        self.publisher = publisher
        self.max_categories = settings.max_categories_per_user

    def get_all_categories(self) -> List[models.Category]:
        """Return every category owned by the current user, ordered by id."""
        return self.repository.list_owned_by(self.current_user.id)

    def get_category_by_id(self, category_id: int, action: str = "get") -> models.Category:
        """
        Retrieve a category after checking ownership.

        Raises:
            NotFoundError: If no category has this id
            ForbiddenError: If the current user neither owns it nor is an admin
        """
        category = self.repository.get(category_id)
        if category is None:
            raise NotFoundError(f"Category not found with ID: {category_id}")

        authorize_owner(category.created_by_id, self.current_user, action, "a category")
        return category

    def create_category(self, request: CategoryRequest) -> OperationResult:
        """
        Create a category for the current user.

        Fails without persisting when the user already owns the maximum number
        of categories. On success the created category is published to the
        category-created subscribers.
        """
        owned = self.repository.count_owned_by(self.current_user.id)
        if owned >= self.max_categories:
            logger.warning(f"User {self.current_user.id} hit the category limit ({owned}/{self.max_categories})")
            return OperationResult(
                success=False,
                message=f"You have reached the maximum of {self.max_categories} categories."
            )

        now = utcnow()
        category = models.Category(
            title=request.title,
            description=request.description,
            created_date=now,
            last_updated_date=now,
            created_by_id=self.current_user.id
        )

        try:
            self.repository.save(category)
        except Exception as e:
            self.repository.rollback()
            logger.error(f"Failed to create category for user {self.current_user.id}: {str(e)}")
            raise

        logger.info(f"Category {category.id} created by user {self.current_user.id}")
        self.publisher.publish_created(category)

        return OperationResult(success=True, message="Category created successfully")

    def update_category(self, category_id: int, request: CategoryRequest) -> OperationResult:
        category = self.repository.get(category_id)

        if category is None:
            return OperationResult(success=False, message=f"Category not found with ID: {category_id}")
        if not is_owner_or_admin(category.created_by_id, self.current_user):
            logger.warning(f"User {self.current_user.id} denied update on category {category_id}")
            return OperationResult(success=False, message=forbidden_message("update", "a category"))

        category.title = request.title
        category.description = request.description
        category.last_updated_date = utcnow()

        try:
            self.repository.save(category)
        except Exception as e:
            self.repository.rollback()
            logger.error(f"Failed to update category {category_id}: {str(e)}")
            raise

        logger.info(f"Category {category_id} updated by user {self.current_user.id}")
        return OperationResult(success=True, message="Category updated successfully")

    def delete_category(self, category_id: int) -> OperationResult:
        """Hard delete a category together with its expenses and expected distribution."""
        category = self.repository.get(category_id)

        if category is None:
            return OperationResult(success=False, message=f"Category not found with ID: {category_id}")
        if not is_owner_or_admin(category.created_by_id, self.current_user):
            logger.warning(f"User {self.current_user.id} denied delete on category {category_id}")
            return OperationResult(success=False, message=forbidden_message("delete", "a category"))

        try:
            self.repository.delete(category)
        except Exception as e:
            self.repository.rollback()
            logger.error(f"Failed to delete category {category_id}: {str(e)}")
            raise

        logger.info(f"Category {category_id} deleted by user {self.current_user.id}")
        return OperationResult(success=True, message="Category deleted successfully")

    def search_categories(
        self,
        request: CategorySearchRequest,
        all_users: bool = False
    ) -> PaginatedResponse[CategoryResponse]:
        """
        Search categories with optional filters and offset/limit pagination.

        Args:
            request: Search filters and pagination
            all_users: Search every user's categories (admin endpoints only)
        """
        owner_id: Optional[int] = None if all_users else self.current_user.id
        clauses = build_category_filters(request, owner_id)

        total_count, categories = self.repository.search(clauses, request.offset, request.limit)

        logger.info(
            f"Category search by user {self.current_user.id} matched {total_count} "
            f"(offset {request.offset}, limit {request.limit})"
        )

        return PaginatedResponse[CategoryResponse](
            limit=request.limit,
            offset=request.offset,
            total_count=total_count,
            items=[CategoryResponse.model_validate(c) for c in categories]
        )
