"""Domain tree repositories: graph reads for access resolution, and domain CRUD."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.domain import DomainResult
from app.domain.value_objects.ordering import SortKey
from app.domain.value_objects.predicates import Condition
from app.infrastructure.persistence.models.domain import Domain
from app.infrastructure.persistence.models.grant import UserDomainAccess
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils.datetime import ensure_utc


def _domain_to_result(d: Domain) -> DomainResult:
    """Map ORM Domain to application DomainResult."""
    return DomainResult(
        id=d.id,
        name=d.name,
        parent_id=d.parent_id,
        created_at=ensure_utc(d.created_at),
        updated_at=ensure_utc(d.updated_at),
        created_by=d.created_by,
        updated_by=d.updated_by,
    )


class DomainGraphRepository:
    """IDomainGraphSource over the domain and user_domain_access tables."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def children_of(self, domain_id: int) -> set[int]:
        result = await self.db.execute(
            select(Domain.id).where(Domain.parent_id == domain_id)
        )
        return set(result.scalars().all())

    async def parent_of(self, domain_id: int) -> int | None:
        result = await self.db.execute(
            select(Domain.parent_id).where(Domain.id == domain_id)
        )
        return result.scalar_one_or_none()

    async def grants_of(self, user_id: int) -> set[int]:
        result = await self.db.execute(
            select(UserDomainAccess.domain_id).where(UserDomainAccess.user_id == user_id)
        )
        return set(result.scalars().all())


class DomainRepository(BaseRepository[Domain]):
    """Domain CRUD and record source (for listing accessible domains)."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Domain)

    async def get_by_id(self, domain_id: int) -> DomainResult | None:
        row = await self.get_entity(domain_id)
        return _domain_to_result(row) if row else None

    async def find_many(
        self,
        where: Condition | None,
        order: Sequence[SortKey],
        limit: int,
    ) -> list[DomainResult]:
        rows = await self.find_entities(where, order, limit)
        return [_domain_to_result(r) for r in rows]

    async def create_domain(
        self, name: str, parent_id: int | None, actor_id: int
    ) -> DomainResult:
        row = Domain(
            name=name,
            parent_id=parent_id,
            created_by=actor_id,
            updated_by=actor_id,
        )
        return _domain_to_result(await self.create(row))

    async def update_domain(
        self, domain_id: int, changes: dict[str, Any], actor_id: int
    ) -> DomainResult | None:
        row = await self.get_entity(domain_id)
        if row is None:
            return None
        values = {k: v for k, v in changes.items() if k in ("name", "parent_id")}
        values["updated_by"] = actor_id
        return _domain_to_result(await self.update(row, values))

    async def delete_domain(self, domain_id: int) -> DomainResult | None:
        row = await self.get_entity(domain_id)
        if row is None:
            return None
        result = _domain_to_result(row)
        await self.delete(row)
        return result
