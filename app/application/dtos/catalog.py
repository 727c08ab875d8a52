"""DTOs for catalog use cases: countries and animals (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime

from app.domain.enums import AnimalCategory, Continent


@dataclass(frozen=True)
class CountryResult:
    """Country read-model. Field names are the sortable/filterable record fields."""

    id: int
    name: str
    capital: str | None
    population: int | None
    area: float | None
    currency: str | None
    continent: str
    domain_id: int | None
    created_at: datetime
    updated_at: datetime
    created_by: int | None = None
    updated_by: int | None = None


@dataclass(frozen=True)
class CountryCreate:
    """Country write-model (domain and actor are supplied separately)."""

    name: str
    continent: Continent
    capital: str | None = None
    population: int | None = None
    area: float | None = None
    currency: str | None = None


@dataclass(frozen=True)
class CountryFilter:
    """Optional country filters; every supplied field is AND-ed."""

    continent: Continent | None = None
    population_min: int | None = None
    population_max: int | None = None
    area_min: float | None = None
    area_max: float | None = None
    name: str | None = None
    capital: str | None = None
    currency: str | None = None


@dataclass(frozen=True)
class AnimalResult:
    """Animal read-model."""

    id: int
    name: str
    species: str | None
    habitat: str | None
    diet: str | None
    conservation_status: str | None
    category: str
    domain_id: int | None
    created_at: datetime
    updated_at: datetime
    created_by: int | None = None
    updated_by: int | None = None


@dataclass(frozen=True)
class AnimalCreate:
    """Animal write-model (domain and actor are supplied separately)."""

    name: str
    category: AnimalCategory
    species: str | None = None
    habitat: str | None = None
    diet: str | None = None
    conservation_status: str | None = None


@dataclass(frozen=True)
class AnimalFilter:
    """Optional animal filters; every supplied field is AND-ed."""

    category: AnimalCategory | None = None
    species: str | None = None
    habitat: str | None = None
    diet: str | None = None
    conservation_status: str | None = None
    name: str | None = None
