"""Country repository. Returns CountryResult DTOs."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.catalog import CountryCreate, CountryResult
from app.infrastructure.persistence.models.country import Country
from app.infrastructure.persistence.repositories.catalog_repo import CatalogRepository
from app.shared.utils.datetime import ensure_utc


def _country_to_result(c: Country) -> CountryResult:
    """Map ORM Country to application CountryResult."""
    return CountryResult(
        id=c.id,
        name=c.name,
        capital=c.capital,
        population=c.population,
        area=c.area,
        currency=c.currency,
        continent=c.continent,
        domain_id=c.domain_id,
        created_at=ensure_utc(c.created_at),
        updated_at=ensure_utc(c.updated_at),
        created_by=c.created_by,
        updated_by=c.updated_by,
    )


class CountryRepository(CatalogRepository[Country, CountryResult]):
    """Country table as a record source and CRUD target."""

    updatable_fields = frozenset(
        {"name", "capital", "population", "area", "currency", "continent", "domain_id"}
    )

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Country)

    def _to_result(self, row: Country) -> CountryResult:
        return _country_to_result(row)

    def _new_row(self, data: CountryCreate) -> Country:
        return Country(
            name=data.name,
            capital=data.capital,
            population=data.population,
            area=data.area,
            currency=data.currency,
            continent=data.continent.value,
        )
