from decimal import Decimal
from typing import Dict

from sqlalchemy import and_, func

from ..models import Expense
from .base import SQLAlchemyRepository


def _to_decimal(value) -> Decimal:
    if value is None:
        return Decimal("0")
    return Decimal(str(value))


class ExpenseRepository(SQLAlchemyRepository[Expense]):
    model = Expense

    def sum_amount(self, *clauses) -> Decimal:
        query = self.db.query(func.sum(Expense.amount))
        if clauses:
            query = query.filter(and_(*clauses))
        return _to_decimal(query.scalar())

    def max_amount(self, *clauses) -> Decimal:
        query = self.db.query(func.max(Expense.amount))
        if clauses:
            query = query.filter(and_(*clauses))
        return _to_decimal(query.scalar())

    def sum_by_category(self, *clauses) -> Dict[int, Decimal]:
        """Total amount per category id for expenses matching the clauses."""
        query = self.db.query(Expense.category_id, func.sum(Expense.amount))
        if clauses:
            query = query.filter(and_(*clauses))
        rows = query.group_by(Expense.category_id).all()
        return {category_id: _to_decimal(total) for category_id, total in rows}
