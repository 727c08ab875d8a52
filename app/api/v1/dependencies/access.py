"""Domain access and pagination dependencies (composition root).

One resolver per request: FastAPI caches dependencies within a request,
so the gate and every service share its request-scoped memo.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.services import (
    AccessGate,
    AccessResolutionCache,
    CursorCodec,
    DomainAccessResolver,
    PageEngine,
)
from app.core.config import get_settings
from app.infrastructure.persistence.database import after_commit, get_db_transactional
from app.infrastructure.persistence.repositories import DomainGraphRepository


async def get_domain_access_resolver(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> DomainAccessResolver:
    """Resolver over the SQL domain graph; uses app.state.cache when connected.

    Shared-cache invalidations wait for the request transaction to commit.
    """
    settings = get_settings()
    resolver = DomainAccessResolver(
        DomainGraphRepository(db),
        cache=AccessResolutionCache(),
        shared_cache=getattr(request.app.state, "cache", None),
        shared_cache_ttl=settings.cache_ttl_domain_access,
        defer_shared_invalidation=True,
    )
    after_commit(db, resolver.flush_invalidations)
    return resolver


async def get_access_gate(
    resolver: Annotated[DomainAccessResolver, Depends(get_domain_access_resolver)],
) -> AccessGate:
    return AccessGate(resolver)


def get_page_engine() -> PageEngine:
    """Page engine configured from pagination settings."""
    settings = get_settings()
    return PageEngine(
        codec=CursorCodec(),
        default_page_size=settings.pagination_default_page_size,
        max_page_size=settings.pagination_max_page_size,
        strict_cursors=settings.pagination_strict_cursors,
    )
