"""Animal repository. Returns AnimalResult DTOs."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.catalog import AnimalCreate, AnimalResult
from app.infrastructure.persistence.models.animal import Animal
from app.infrastructure.persistence.repositories.catalog_repo import CatalogRepository
from app.shared.utils.datetime import ensure_utc


def _animal_to_result(a: Animal) -> AnimalResult:
    """Map ORM Animal to application AnimalResult."""
    return AnimalResult(
        id=a.id,
        name=a.name,
        species=a.species,
        habitat=a.habitat,
        diet=a.diet,
        conservation_status=a.conservation_status,
        category=a.category,
        domain_id=a.domain_id,
        created_at=ensure_utc(a.created_at),
        updated_at=ensure_utc(a.updated_at),
        created_by=a.created_by,
        updated_by=a.updated_by,
    )


class AnimalRepository(CatalogRepository[Animal, AnimalResult]):
    """Animal table as a record source and CRUD target."""

    updatable_fields = frozenset(
        {
            "name",
            "species",
            "habitat",
            "diet",
            "conservation_status",
            "category",
            "domain_id",
        }
    )

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Animal)

    def _to_result(self, row: Animal) -> AnimalResult:
        return _animal_to_result(row)

    def _new_row(self, data: AnimalCreate) -> Animal:
        return Animal(
            name=data.name,
            species=data.species,
            habitat=data.habitat,
            diet=data.diet,
            conservation_status=data.conservation_status,
            category=data.category.value,
        )
