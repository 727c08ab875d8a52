"""Grant repository (user_domain_access). Returns GrantResult DTOs."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.domain import GrantResult
from app.domain.value_objects.ordering import SortKey
from app.domain.value_objects.predicates import Condition
from app.infrastructure.persistence.models.grant import UserDomainAccess
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils.datetime import ensure_utc


def _grant_to_result(g: UserDomainAccess) -> GrantResult:
    """Map ORM UserDomainAccess to application GrantResult."""
    return GrantResult(
        id=g.id,
        user_id=g.user_id,
        domain_id=g.domain_id,
        created_at=ensure_utc(g.created_at),
        created_by=g.created_by,
    )


class GrantRepository(BaseRepository[UserDomainAccess]):
    """Direct grants: lookup by (user, domain), create, delete, and list."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, UserDomainAccess)

    async def _get_row(self, user_id: int, domain_id: int) -> UserDomainAccess | None:
        result = await self.db.execute(
            select(UserDomainAccess).where(
                UserDomainAccess.user_id == user_id,
                UserDomainAccess.domain_id == domain_id,
            )
        )
        return result.scalar_one_or_none()

    async def get(self, user_id: int, domain_id: int) -> GrantResult | None:
        row = await self._get_row(user_id, domain_id)
        return _grant_to_result(row) if row else None

    async def find_many(
        self,
        where: Condition | None,
        order: Sequence[SortKey],
        limit: int,
    ) -> list[GrantResult]:
        rows = await self.find_entities(where, order, limit)
        return [_grant_to_result(r) for r in rows]

    async def create_grant(
        self, user_id: int, domain_id: int, granted_by: int
    ) -> GrantResult:
        row = UserDomainAccess(
            user_id=user_id,
            domain_id=domain_id,
            created_by=granted_by,
            updated_by=granted_by,
        )
        return _grant_to_result(await self.create(row))

    async def delete_grant(self, user_id: int, domain_id: int) -> GrantResult | None:
        row = await self._get_row(user_id, domain_id)
        if row is None:
            return None
        result = _grant_to_result(row)
        await self.delete(row)
        return result
