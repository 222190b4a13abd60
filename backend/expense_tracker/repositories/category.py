from ..models import Category
from .base import SQLAlchemyRepository


class CategoryRepository(SQLAlchemyRepository[Category]):
    model = Category

    def count_owned_by(self, user_id: int) -> int:
        return self.count(Category.created_by_id == user_id)

    def list_owned_by(self, user_id: int):
        return self.list(Category.created_by_id == user_id)
