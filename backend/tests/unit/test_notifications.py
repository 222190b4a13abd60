from unittest.mock import Mock

from expense_tracker import models
from expense_tracker.core.settings import Settings
from expense_tracker.notifications import CategoryEventPublisher, DefaultDistributionSeeder
from expense_tracker.repositories import ExpectedCategoryDistributionRepository


class TestCategoryEventPublisher:
    def test_publishes_to_every_subscriber_in_order(self):
        calls = []
        publisher = CategoryEventPublisher([lambda c: calls.append(("first", c))])
        publisher.subscribe(lambda c: calls.append(("second", c)))
        category = Mock()

        publisher.publish_created(category)

        assert calls == [("first", category), ("second", category)]

    def test_no_subscribers_is_a_no_op(self):
        CategoryEventPublisher().publish_created(Mock())


class TestDefaultDistributionSeeder:
    def test_uses_configured_range(self, db_session, user, make_category):
        category = make_category(user)
        seeder = DefaultDistributionSeeder(
            ExpectedCategoryDistributionRepository(db_session),
            Settings(_env_file=None, default_distribution_minimum=3, default_distribution_maximum=7)
        )

        seeder(category)

        distribution = db_session.query(models.ExpectedCategoryDistribution).one()
        assert (distribution.minimum_distribution, distribution.maximum_distribution) == (3, 7)
        assert distribution.created_by_id == user.id

    def test_keeps_existing_distribution(self, db_session, user, make_category, make_distribution):
        category = make_category(user)
        make_distribution(category, 20, 30)
        seeder = DefaultDistributionSeeder(ExpectedCategoryDistributionRepository(db_session), Settings(_env_file=None))

        seeder(category)

        distribution = db_session.query(models.ExpectedCategoryDistribution).one()
        assert distribution.minimum_distribution == 20
