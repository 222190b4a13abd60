from sqlalchemy import Column, Integer, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from ..db import Base
from .mixins import utcnow


class ExpectedCategoryDistribution(Base):
    """
    Target share of total spending for one category, stored as an inclusive
    percentage range. Each category has at most one target.
    """
    __tablename__ = "expected_category_distributions"
    __table_args__ = (
        CheckConstraint(
            "minimum_distribution >= 0 AND maximum_distribution <= 100 "
            "AND minimum_distribution <= maximum_distribution",
            name="ck_distribution_range",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, unique=True, index=True)
    minimum_distribution = Column(Integer, nullable=False)
    maximum_distribution = Column(Integer, nullable=False)
    created_date = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    last_updated_date = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    created_by_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    category = relationship("Category", back_populates="expected_distribution")
    created_by = relationship("User")

    @property
    def category_title(self):
        return self.category.title if self.category else None
