"""Domain and grant service dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.services import AccessGate, DomainAccessResolver, PageEngine
from app.application.use_cases.domains import DomainService, GrantService
from app.infrastructure.persistence.database import get_db_transactional
from app.infrastructure.persistence.repositories import (
    DomainRepository,
    GrantRepository,
    UserRepository,
)

from .access import get_access_gate, get_domain_access_resolver, get_page_engine


async def get_domain_service(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    resolver: Annotated[DomainAccessResolver, Depends(get_domain_access_resolver)],
    gate: Annotated[AccessGate, Depends(get_access_gate)],
    engine: Annotated[PageEngine, Depends(get_page_engine)],
) -> DomainService:
    """Domain tree service (transactional)."""
    return DomainService(
        DomainRepository(db), GrantRepository(db), resolver, gate, engine
    )


async def get_grant_service(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    resolver: Annotated[DomainAccessResolver, Depends(get_domain_access_resolver)],
    gate: Annotated[AccessGate, Depends(get_access_gate)],
    engine: Annotated[PageEngine, Depends(get_page_engine)],
) -> GrantService:
    """Grant service (transactional)."""
    return GrantService(
        GrantRepository(db),
        UserRepository(db),
        DomainRepository(db),
        resolver,
        gate,
        engine,
    )
