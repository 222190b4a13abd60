from typing import List, Sequence
import logging

from fastapi import HTTPException

from .. import models
from ..exceptions import NotFoundError
from ..filters import build_distribution_filters
from ..models.mixins import utcnow
from ..policies import authorize_owner, forbidden_message, is_owner_or_admin
from ..repositories import ExpectedCategoryDistributionRepository
from ..schemas import (
    ExpectedCategoryDistributionRequest,
    ExpectedCategoryDistributionUpdateRequest,
    ExpectedCategoryDistributionResponse,
    ExpectedCategoryDistributionSearchRequest,
    OperationResult,
    PaginatedResponse
)
from .category_service import CategoryService

logger = logging.getLogger(__name__)

# (title, description, minimum %, maximum %) seeded for every new user
DEFAULT_CATEGORIES = [
    ("Housing", "Expenses related to housing.", 25, 35),
    ("Transportation", "Costs associated with transportation.", 10, 15),
    ("Food", "Expenditures on food.", 10, 15),
    ("Utilities", "Costs for utilities.", 5, 10),
    ("Insurance", "Expenditures for various types of insurance coverage.", 10, 25),
    ("Medical & Healthcare", "Expenses related to medical and healthcare services.", 5, 10),
    ("Saving, Investing, & Debt Payments", "Allocations for saving, investing, and debt payments.", 10, 20),
    ("Personal Spending", "Personal discretionary spending.", 5, 10),
    ("Recreation & Entertainment", "Costs associated with recreation and entertainment.", 5, 10),
    ("Miscellaneous", "Miscellaneous expenses.", 5, 10),
]


class ExpectedCategoryDistributionService:
    """Target distribution ranges per category for the current user."""

    def __init__(
        self,
        repository: ExpectedCategoryDistributionRepository,
        category_service: CategoryService,
        current_user: models.User
    ):
        self.repository = repository
        self.category_service = category_service
        self.current_user = current_user

    def get_all_distributions(self) -> List[models.ExpectedCategoryDistribution]:
        """Return every distribution owned by the current user, ordered by id."""
        return self.repository.list_owned_by(self.current_user.id)

    def get_expected_category_distribution_by_id(self, distribution_id: int) -> models.ExpectedCategoryDistribution:
        """
        Retrieve a distribution after checking ownership.

        Raises:
            NotFoundError: If no distribution has this id
            ForbiddenError: If the current user neither owns it nor is an admin
        """
        distribution = self.repository.get(distribution_id)
        if distribution is None:
            raise NotFoundError(f"Expected category distribution not found with ID: {distribution_id}")

        authorize_owner(distribution.created_by_id, self.current_user, "get", "an expected category distribution")
        return distribution

    def create_expected_category_distribution(self, request: ExpectedCategoryDistributionRequest) -> OperationResult:
        """Create the target range for a category that does not have one yet."""
        try:
            category = self.category_service.get_category_by_id(request.category_id, action="use")
        except HTTPException as e:
            logger.warning(f"User {self.current_user.id} could not create distribution: {e.detail}")
            return OperationResult(success=False, message=e.detail)

        if self.repository.get_by_category(category.id) is not None:
            return OperationResult(
                success=False,
                message=f"Category {category.id} already has an expected distribution"
            )

        now = utcnow()
        distribution = models.ExpectedCategoryDistribution(
            category_id=category.id,
            minimum_distribution=request.minimum_distribution,
            maximum_distribution=request.maximum_distribution,
            created_date=now,
            last_updated_date=now,
            created_by_id=category.created_by_id
        )

        try:
            self.repository.save(distribution)
        except Exception as e:
            self.repository.rollback()
            logger.error(f"Failed to create distribution for category {category.id}: {str(e)}")
            raise

        logger.info(f"Distribution {distribution.id} created by user {self.current_user.id}")
        return OperationResult(success=True, message="Expected category distribution created successfully")

    def update_expected_category_distribution(
        self,
        distribution_id: int,
        request: ExpectedCategoryDistributionUpdateRequest
    ) -> OperationResult:
        distribution = self.repository.get(distribution_id)

        if distribution is None:
            return OperationResult(
                success=False,
                message=f"Expected category distribution not found with ID: {distribution_id}"
            )
        if not is_owner_or_admin(distribution.created_by_id, self.current_user):
            logger.warning(f"User {self.current_user.id} denied update on distribution {distribution_id}")
            return OperationResult(
                success=False,
                message=forbidden_message("update", "an expected category distribution")
            )

        distribution.minimum_distribution = request.minimum_distribution
        distribution.maximum_distribution = request.maximum_distribution
        distribution.last_updated_date = utcnow()

        try:
            self.repository.save(distribution)
        except Exception as e:
            self.repository.rollback()
            logger.error(f"Failed to update distribution {distribution_id}: {str(e)}")
            raise

        logger.info(f"Distribution {distribution_id} updated by user {self.current_user.id}")
        return OperationResult(success=True, message="Expected category distribution updated successfully")

    def delete_expected_category_distribution(self, distribution_id: int) -> OperationResult:
        distribution = self.repository.get(distribution_id)

        if distribution is None:
            return OperationResult(
                success=False,
                message=f"Expected category distribution not found with ID: {distribution_id}"
            )
        if not is_owner_or_admin(distribution.created_by_id, self.current_user):
            logger.warning(f"User {self.current_user.id} denied delete on distribution {distribution_id}")
            return OperationResult(
                success=False,
                message=forbidden_message("delete", "an expected category distribution")
            )

        try:
            self.repository.delete(distribution)
        except Exception as e:
            self.repository.rollback()
            logger.error(f"Failed to delete distribution {distribution_id}: {str(e)}")
            raise

        logger.info(f"Distribution {distribution_id} deleted by user {self.current_user.id}")
        return OperationResult(success=True, message="Expected category distribution deleted successfully")

    def search_expected_category_distributions(
        self,
        request: ExpectedCategoryDistributionSearchRequest,
        all_users: bool = False
    ) -> PaginatedResponse[ExpectedCategoryDistributionResponse]:
        owner_id = None if all_users else self.current_user.id
        clauses = build_distribution_filters(request, owner_id)

        total_count, distributions = self.repository.search(clauses, request.offset, request.limit)

        return PaginatedResponse[ExpectedCategoryDistributionResponse](
            limit=request.limit,
            offset=request.offset,
            total_count=total_count,
            items=[ExpectedCategoryDistributionResponse.model_validate(d) for d in distributions]
        )

    @staticmethod
    def seed_defaults(
        repository: ExpectedCategoryDistributionRepository,
        user: models.User
    ) -> Sequence[models.ExpectedCategoryDistribution]:
        """
        Create the default categories and their target ranges for a new user.

        Categories are added directly rather than through CategoryService so
        the category-created subscribers do not seed a second range.
        """
        now = utcnow()
        db = repository.db

        categories = [
            models.Category(
                title=title,
                description=description,
                created_date=now,
                last_updated_date=now,
                created_by_id=user.id
            )
            for title, description, _, _ in DEFAULT_CATEGORIES
        ]
        db.add_all(categories)
        db.flush()

        distributions = [
            models.ExpectedCategoryDistribution(
                category_id=category.id,
                minimum_distribution=minimum,
                maximum_distribution=maximum,
                created_date=now,
                last_updated_date=now,
                created_by_id=user.id
            )
            for category, (_, _, minimum, maximum) in zip(categories, DEFAULT_CATEGORIES)
        ]
        repository.save_all(distributions)

        logger.info(f"Seeded {len(categories)} default categories for user {user.id}")
        return distributions
