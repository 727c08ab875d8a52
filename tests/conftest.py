"""Pytest configuration and fixtures for the catalog service.

Uses app.main:app for HTTP tests with the SQL-backed services swapped for
in-memory fakes (tests.fakes) through dependency_overrides, and
app.infrastructure.persistence.database for DB-dependent fixtures.
"""

from collections.abc import AsyncIterator, Iterator
from typing import Annotated

import pytest
from fastapi import Depends
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.dependencies import (
    get_access_gate,
    get_animal_service,
    get_country_service,
    get_domain_access_resolver,
    get_domain_service,
    get_grant_service,
    get_page_engine,
    get_user_service,
)
from app.application.services import (
    AccessGate,
    AccessResolutionCache,
    DomainAccessResolver,
    PageEngine,
)
from app.application.use_cases.catalog import CatalogService
from app.application.use_cases.domains import DomainService, GrantService
from app.application.use_cases.users import UserService
from app.core.limiter import limiter
from app.infrastructure.persistence import database
from app.main import app
from tests.fakes import (
    DomainStore,
    InMemoryCatalogRepository,
    InMemoryDomainGraph,
    InMemoryDomainRepository,
    InMemoryGrantRepository,
    InMemoryUserRepository,
    animal_repo,
    country_repo,
    make_animal,
    make_country,
    sample_tree,
)


@pytest.fixture
def domain_store() -> DomainStore:
    """Root(1) -> Child(2) -> Grandchild(3) and Other(4); user 1 granted Root, user 2 Child."""
    return sample_tree()


@pytest.fixture
def countries(domain_store: DomainStore) -> InMemoryCatalogRepository:
    """Countries spread over the sample tree (one orphaned)."""
    return country_repo(
        [
            make_country(1, "Austria", domain_id=1, population=9_000_000, area=83879.0),
            make_country(2, "Belgium", domain_id=2, population=11_600_000, area=30528.0),
            make_country(3, "Chile", domain_id=3, continent="southamerica", population=19_500_000),
            make_country(4, "Denmark", domain_id=4, population=5_900_000, area=42933.0),
            make_country(5, "Egypt", domain_id=1, continent="africa", population=104_000_000),
            make_country(6, "Fiji", domain_id=None, continent="oceania"),
        ]
    )


@pytest.fixture
def animals(domain_store: DomainStore) -> InMemoryCatalogRepository:
    return animal_repo(
        [
            make_animal(1, "Lion", domain_id=1, species="Panthera leo", habitat="savanna"),
            make_animal(2, "Eagle", domain_id=2, category="birds", species="Aquila"),
            make_animal(3, "Cobra", domain_id=4, category="reptiles"),
        ]
    )


@pytest.fixture
def fake_services(
    domain_store: DomainStore,
    countries: InMemoryCatalogRepository,
    animals: InMemoryCatalogRepository,
) -> Iterator[DomainStore]:
    """Point every SQL-backed dependency at the in-memory fakes."""

    def resolver() -> DomainAccessResolver:
        return DomainAccessResolver(
            InMemoryDomainGraph(domain_store), cache=AccessResolutionCache()
        )

    def country_service(
        gate: Annotated[AccessGate, Depends(get_access_gate)],
        engine: Annotated[PageEngine, Depends(get_page_engine)],
    ) -> CatalogService:
        return CatalogService(countries, gate, engine)

    def animal_service(
        gate: Annotated[AccessGate, Depends(get_access_gate)],
        engine: Annotated[PageEngine, Depends(get_page_engine)],
    ) -> CatalogService:
        return CatalogService(animals, gate, engine)

    def domain_service(
        res: Annotated[DomainAccessResolver, Depends(get_domain_access_resolver)],
        gate: Annotated[AccessGate, Depends(get_access_gate)],
        engine: Annotated[PageEngine, Depends(get_page_engine)],
    ) -> DomainService:
        return DomainService(
            InMemoryDomainRepository(domain_store),
            InMemoryGrantRepository(domain_store),
            res,
            gate,
            engine,
        )

    def grant_service(
        res: Annotated[DomainAccessResolver, Depends(get_domain_access_resolver)],
        gate: Annotated[AccessGate, Depends(get_access_gate)],
        engine: Annotated[PageEngine, Depends(get_page_engine)],
    ) -> GrantService:
        return GrantService(
            InMemoryGrantRepository(domain_store),
            InMemoryUserRepository(domain_store),
            InMemoryDomainRepository(domain_store),
            res,
            gate,
            engine,
        )

    def user_service(
        res: Annotated[DomainAccessResolver, Depends(get_domain_access_resolver)],
        engine: Annotated[PageEngine, Depends(get_page_engine)],
    ) -> UserService:
        return UserService(InMemoryUserRepository(domain_store), res, engine)

    app.dependency_overrides[get_domain_access_resolver] = resolver
    app.dependency_overrides[get_country_service] = country_service
    app.dependency_overrides[get_animal_service] = animal_service
    app.dependency_overrides[get_domain_service] = domain_service
    app.dependency_overrides[get_grant_service] = grant_service
    app.dependency_overrides[get_user_service] = user_service
    yield domain_store
    app.dependency_overrides.clear()


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI)."""
    limiter.reset()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def api(fake_services: DomainStore, client: AsyncClient) -> AsyncClient:
    """HTTP client whose services run on the in-memory fakes."""
    return client


@pytest.fixture
async def db_session() -> AsyncIterator[AsyncSession]:
    """Database session for repository/integration tests. Rolls back after test.

    Requires DATABASE_URL and a migrated schema (alembic upgrade head).
    Skips (pytest.skip) when Postgres is not configured. Use
    @pytest.mark.requires_db to mark tests that need this fixture; run
    without DB via: pytest -m 'not requires_db'.
    """
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        pytest.skip(
            "Postgres not configured: set DATABASE_URL, then run: alembic upgrade head"
        )
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()
