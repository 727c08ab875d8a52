"""Country and animal service dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.catalog import AnimalResult, CountryResult
from app.application.services import AccessGate, PageEngine
from app.application.use_cases.catalog import CatalogService
from app.infrastructure.persistence.database import get_db_transactional
from app.infrastructure.persistence.repositories import (
    AnimalRepository,
    CountryRepository,
)

from .access import get_access_gate, get_page_engine


async def get_country_service(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    gate: Annotated[AccessGate, Depends(get_access_gate)],
    engine: Annotated[PageEngine, Depends(get_page_engine)],
) -> CatalogService[CountryResult]:
    """Country service (transactional; shares the request session with the resolver)."""
    return CatalogService(CountryRepository(db), gate, engine)


async def get_animal_service(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    gate: Annotated[AccessGate, Depends(get_access_gate)],
    engine: Annotated[PageEngine, Depends(get_page_engine)],
) -> CatalogService[AnimalResult]:
    """Animal service (transactional)."""
    return CatalogService(AnimalRepository(db), gate, engine)
