"""Notifications raised by the category creation flow."""
import logging
from typing import Callable, Iterable, List

from .core.settings import Settings
from .models import Category, ExpectedCategoryDistribution
from .repositories import ExpectedCategoryDistributionRepository

logger = logging.getLogger(__name__)

CategoryCreatedSubscriber = Callable[[Category], None]


class CategoryEventPublisher:
    """Invokes every subscriber after a category has been committed."""

    def __init__(self, subscribers: Iterable[CategoryCreatedSubscriber] = ()):
        self.subscribers: List[CategoryCreatedSubscriber] = list(subscribers)

    def subscribe(self, subscriber: CategoryCreatedSubscriber) -> None:
        self.subscribers.append(subscriber)

    def publish_created(self, category: Category) -> None:
        for subscriber in self.subscribers:
            subscriber(category)


class DefaultDistributionSeeder:
    """Gives a newly created category the default expected distribution range."""

    def __init__(self, repository: ExpectedCategoryDistributionRepository, settings: Settings):
        self.repository = repository
        self.minimum = settings.default_distribution_minimum
        self.maximum = settings.default_distribution_maximum

    def __call__(self, category: Category) -> None:
        if self.repository.get_by_category(category.id) is not None:
            return

        distribution = ExpectedCategoryDistribution(
            category_id=category.id,
            minimum_distribution=self.minimum,
            maximum_distribution=self.maximum,
            created_by_id=category.created_by_id,
        )
        self.repository.save(distribution)
        logger.info(
            f"Seeded distribution {self.minimum}-{self.maximum}% for category {category.id}"
        )
