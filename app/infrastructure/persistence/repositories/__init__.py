"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.animal_repo import AnimalRepository
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.catalog_repo import CatalogRepository
from app.infrastructure.persistence.repositories.country_repo import CountryRepository
from app.infrastructure.persistence.repositories.domain_repo import (
    DomainGraphRepository,
    DomainRepository,
)
from app.infrastructure.persistence.repositories.grant_repo import GrantRepository
from app.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = [
    "AnimalRepository",
    "BaseRepository",
    "CatalogRepository",
    "CountryRepository",
    "DomainGraphRepository",
    "DomainRepository",
    "GrantRepository",
    "UserRepository",
]
