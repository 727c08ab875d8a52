"""User repository. Interface methods return application DTOs."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.user import UserCreate, UserResult
from app.domain.exceptions import UserAlreadyExistsException
from app.domain.value_objects.ordering import SortKey
from app.domain.value_objects.predicates import Condition
from app.infrastructure.persistence.models.user import User
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils.datetime import ensure_utc

_UPDATABLE = ("username", "email", "first_name", "last_name")


def _user_to_result(u: User) -> UserResult:
    """Map ORM User to application UserResult."""
    return UserResult(
        id=u.id,
        username=u.username,
        email=u.email,
        first_name=u.first_name,
        last_name=u.last_name,
        created_at=ensure_utc(u.created_at),
        updated_at=ensure_utc(u.updated_at),
        created_by=u.created_by,
        updated_by=u.updated_by,
    )


class UserRepository(BaseRepository[User]):
    """User CRUD and record source (for listing users)."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def get_by_id(self, user_id: int) -> UserResult | None:
        row = await self.get_entity(user_id)
        return _user_to_result(row) if row else None

    async def get_by_username(self, username: str) -> UserResult | None:
        result = await self.db.execute(select(User).where(User.username == username))
        row = result.scalar_one_or_none()
        return _user_to_result(row) if row else None

    async def get_by_email(self, email: str) -> UserResult | None:
        result = await self.db.execute(
            select(User).where(func.lower(User.email) == email.lower()).limit(1)
        )
        row = result.scalar_one_or_none()
        return _user_to_result(row) if row else None

    async def find_many(
        self,
        where: Condition | None,
        order: Sequence[SortKey],
        limit: int,
    ) -> list[UserResult]:
        rows = await self.find_entities(where, order, limit)
        return [_user_to_result(r) for r in rows]

    async def create_user(self, data: UserCreate, actor_id: int | None) -> UserResult:
        """Create user; raise UserAlreadyExistsException on unique constraint violation."""
        row = User(
            username=data.username,
            email=data.email,
            first_name=data.first_name,
            last_name=data.last_name,
            created_by=actor_id,
            updated_by=actor_id,
        )
        try:
            return _user_to_result(await self.create(row))
        except IntegrityError:
            raise UserAlreadyExistsException("username_or_email")

    async def update_user(
        self, user_id: int, changes: dict[str, Any], actor_id: int
    ) -> UserResult | None:
        """Update user; raise UserAlreadyExistsException on unique constraint violation."""
        row = await self.get_entity(user_id)
        if row is None:
            return None
        values = {k: v for k, v in changes.items() if k in _UPDATABLE}
        values["updated_by"] = actor_id
        try:
            return _user_to_result(await self.update(row, values))
        except IntegrityError:
            raise UserAlreadyExistsException("username_or_email")

    async def delete_user(self, user_id: int) -> UserResult | None:
        row = await self.get_entity(user_id)
        if row is None:
            return None
        result = _user_to_result(row)
        await self.delete(row)
        return result
