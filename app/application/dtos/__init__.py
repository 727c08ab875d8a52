"""Application DTOs (no ORM dependency)."""

from app.application.dtos.catalog import (
    AnimalCreate,
    AnimalFilter,
    AnimalResult,
    CountryCreate,
    CountryFilter,
    CountryResult,
)
from app.application.dtos.domain import DomainResult, GrantResult
from app.application.dtos.pagination import CursorPayload, PageResult, WindowSpec
from app.application.dtos.user import UserCreate, UserFilter, UserResult

__all__ = [
    "AnimalCreate",
    "AnimalFilter",
    "AnimalResult",
    "CountryCreate",
    "CountryFilter",
    "CountryResult",
    "CursorPayload",
    "DomainResult",
    "GrantResult",
    "PageResult",
    "UserCreate",
    "UserFilter",
    "UserResult",
    "WindowSpec",
]
