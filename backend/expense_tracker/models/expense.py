from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Numeric
from sqlalchemy.orm import relationship
from ..db import Base
from .mixins import utcnow


class Expense(Base):
    """
    A single recorded expense.
    The owner of an expense is always the owner of its category.
    """
    __tablename__ = "expenses"

    id = Column(Integer, primary_key=True, index=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)
    title = Column(String(50), nullable=False)
    description = Column(String(200), nullable=True)
    amount = Column(Numeric(12, 2), nullable=False)
    created_date = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    last_updated_date = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    created_by_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    category = relationship("Category", back_populates="expenses")
    created_by = relationship("User")

    @property
    def category_title(self):
        return self.category.title if self.category else None
