"""Base repository: generic CRUD and predicate-driven reads."""

from collections.abc import Sequence
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.value_objects.ordering import SortKey
from app.domain.value_objects.predicates import Condition
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.query_compiler import (
    compile_condition,
    compile_order,
)


class BaseRepository[ModelType: Base]:
    """Base repository with get_entity, find_entities, count, create, update, delete.

    Reads take backend-neutral predicates and compound orders (no offsets).
    Subclasses map ORM rows to application DTOs.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_entity(self, entity_id: int) -> ModelType | None:
        """Return a single ORM row by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def find_entities(
        self,
        where: Condition | None,
        order: Sequence[SortKey],
        limit: int,
    ) -> list[ModelType]:
        """Return at most limit ORM rows matching where, sorted by order."""
        stmt = select(self.model)
        clause = compile_condition(self.model, where)
        if clause is not None:
            stmt = stmt.where(clause)
        stmt = stmt.order_by(*compile_order(self.model, order)).limit(limit)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def count(self, where: Condition | None) -> int:
        """Return the number of rows matching where."""
        model: Any = self.model
        stmt = select(func.count(model.id))
        clause = compile_condition(self.model, where)
        if clause is not None:
            stmt = stmt.where(clause)
        result = await self.db.execute(stmt)
        return result.scalar() or 0

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record and return it refreshed."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def update(self, obj: ModelType, changes: dict[str, Any]) -> ModelType:
        """Apply changes to an attached row and return it refreshed."""
        for key, value in changes.items():
            setattr(obj, key, value)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def delete(self, obj: ModelType) -> None:
        """Delete the record and flush."""
        await self.db.delete(obj)
        await self.db.flush()
