from typing import Generic, List, Optional, Sequence, Tuple, Type, TypeVar

from sqlalchemy import and_
from sqlalchemy.orm import Session

ModelType = TypeVar("ModelType")


class SQLAlchemyRepository(Generic[ModelType]):
    """
    Thin persistence gateway over a SQLAlchemy session for one model.

    Models are expected to expose `id`, `created_date` and `last_updated_date`
    columns; `search` orders by those for a deterministic page order.
    """
    model: Type[ModelType]

    def __init__(self, db: Session):
        self.db = db

    def query(self, *clauses):
        query = self.db.query(self.model)
        if clauses:
            query = query.filter(and_(*clauses))
        return query

    def get(self, entity_id: int) -> Optional[ModelType]:
        return self.db.get(self.model, entity_id)

    def save(self, entity: ModelType) -> ModelType:
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def save_all(self, entities: Sequence[ModelType]) -> List[ModelType]:
        self.db.add_all(entities)
        self.db.commit()
        return list(entities)

    def delete(self, entity: ModelType) -> None:
        self.db.delete(entity)
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()

    def count(self, *clauses) -> int:
        return self.query(*clauses).count()

    def list(self, *clauses, order_by=None) -> List[ModelType]:
        query = self.query(*clauses)
        if order_by is None:
            order_by = (self.model.id.asc(),)
        return query.order_by(*order_by).all()

    def search(self, clauses, offset: int, limit: int) -> Tuple[int, List[ModelType]]:
        """Return the total match count and one ordered page of matches."""
        query = self.query(*clauses)
        total_count = query.count()
        items = (
            query.order_by(
                self.model.created_date.desc(),
                self.model.last_updated_date.desc(),
                self.model.id.asc(),
            )
            .offset(offset)
            .limit(limit)
            .all()
        )
        return total_count, items
