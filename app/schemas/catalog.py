"""Country and animal API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.domain.enums import AnimalCategory, Continent


class CountryCreateRequest(BaseModel):
    """Request body for creating a country.

    domain_id falls back to the X-Create-Domain header when omitted.
    """

    name: str = Field(..., min_length=1, max_length=200)
    continent: Continent
    capital: str | None = Field(default=None, max_length=200)
    population: int | None = Field(default=None, ge=0)
    area: float | None = Field(default=None, ge=0)
    currency: str | None = Field(default=None, max_length=100)
    domain_id: int | None = Field(default=None, gt=0)


class CountryUpdateRequest(BaseModel):
    """Request body for updating a country (partial; only sent fields change)."""

    name: str | None = Field(default=None, min_length=1, max_length=200)
    continent: Continent | None = None
    capital: str | None = Field(default=None, max_length=200)
    population: int | None = Field(default=None, ge=0)
    area: float | None = Field(default=None, ge=0)
    currency: str | None = Field(default=None, max_length=100)
    domain_id: int | None = Field(default=None, gt=0)


class CountryResponse(BaseModel):
    """Country response."""

    model_config = ConfigDict(from_attributes=True)

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


class AnimalCreateRequest(BaseModel):
    """Request body for creating an animal.

    domain_id falls back to the X-Create-Domain header when omitted.
    """

    name: str = Field(..., min_length=1, max_length=200)
    category: AnimalCategory
    species: str | None = Field(default=None, max_length=200)
    habitat: str | None = Field(default=None, max_length=200)
    diet: str | None = Field(default=None, max_length=200)
    conservation_status: str | None = Field(default=None, max_length=100)
    domain_id: int | None = Field(default=None, gt=0)


class AnimalUpdateRequest(BaseModel):
    """Request body for updating an animal (partial; only sent fields change)."""

    name: str | None = Field(default=None, min_length=1, max_length=200)
    category: AnimalCategory | None = None
    species: str | None = Field(default=None, max_length=200)
    habitat: str | None = Field(default=None, max_length=200)
    diet: str | None = Field(default=None, max_length=200)
    conservation_status: str | None = Field(default=None, max_length=100)
    domain_id: int | None = Field(default=None, gt=0)


class AnimalResponse(BaseModel):
    """Animal response."""

    model_config = ConfigDict(from_attributes=True)

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
