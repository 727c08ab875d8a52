"""User service dependency (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.services import DomainAccessResolver, PageEngine
from app.application.use_cases.users import UserService
from app.infrastructure.persistence.database import get_db_transactional
from app.infrastructure.persistence.repositories import UserRepository

from .access import get_domain_access_resolver, get_page_engine


async def get_user_service(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    resolver: Annotated[DomainAccessResolver, Depends(get_domain_access_resolver)],
    engine: Annotated[PageEngine, Depends(get_page_engine)],
) -> UserService:
    """User service (transactional)."""
    return UserService(UserRepository(db), resolver, engine)
