from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from ..db import Base
from .mixins import utcnow


class Category(Base):
    """
    Represents a spending category owned by a single user.
    A user may own a limited number of categories (see Settings.max_categories_per_user).
    """
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(50), nullable=False)
    description = Column(String(200), nullable=True)
    created_date = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    last_updated_date = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    created_by_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    created_by = relationship("User", back_populates="categories")
    expenses = relationship(
        "Expense",
        back_populates="category",
        cascade="all, delete-orphan",
    )
    expected_distribution = relationship(
        "ExpectedCategoryDistribution",
        back_populates="category",
        cascade="all, delete-orphan",
        uselist=False,
    )
