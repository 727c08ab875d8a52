"""Generic domain-scoped catalog repository (record source + CRUD). Returns DTOs."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.value_objects.ordering import SortKey
from app.domain.value_objects.predicates import Condition
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.repositories.base import BaseRepository


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


class CatalogRepository[ModelType: Base, ResultType](BaseRepository[ModelType]):
    """Catalog table repository. Subclasses define the ORM/DTO mapping.

    Implements ICatalogRepository[ResultType]: the page engine reads it
    through find_many/count, services mutate it through create_record,
    update_record and delete_record.
    """

    # Columns a caller may change through update_record
    updatable_fields: frozenset[str] = frozenset()

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        super().__init__(db, model)

    def _to_result(self, row: ModelType) -> ResultType:
        raise NotImplementedError

    def _new_row(self, data: Any) -> ModelType:
        raise NotImplementedError

    async def get_by_id(self, record_id: int) -> ResultType | None:
        row = await self.get_entity(record_id)
        return self._to_result(row) if row else None

    async def find_many(
        self,
        where: Condition | None,
        order: Sequence[SortKey],
        limit: int,
    ) -> list[ResultType]:
        rows = await self.find_entities(where, order, limit)
        return [self._to_result(r) for r in rows]

    async def create_record(self, data: Any, domain_id: int, actor_id: int) -> ResultType:
        """Insert data into domain_id; actor_id is recorded as creator and updater."""
        row = self._new_row(data)
        row.domain_id = domain_id
        row.created_by = actor_id
        row.updated_by = actor_id
        return self._to_result(await self.create(row))

    async def update_record(
        self, record_id: int, changes: dict[str, Any], actor_id: int
    ) -> ResultType | None:
        """Apply allowed changes; unknown keys are ignored. None if the row is gone."""
        row = await self.get_entity(record_id)
        if row is None:
            return None
        values = {
            k: _plain(v) for k, v in changes.items() if k in self.updatable_fields
        }
        values["updated_by"] = actor_id
        return self._to_result(await self.update(row, values))

    async def delete_record(self, record_id: int) -> ResultType | None:
        row = await self.get_entity(record_id)
        if row is None:
            return None
        result = self._to_result(row)
        await self.delete(row)
        return result
