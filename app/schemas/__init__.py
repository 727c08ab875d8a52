"""Pydantic request/response schemas for the API."""

from app.schemas.catalog import (
    AnimalCreateRequest,
    AnimalResponse,
    AnimalUpdateRequest,
    CountryCreateRequest,
    CountryResponse,
    CountryUpdateRequest,
)
from app.schemas.domain import (
    AccessibleDomainsResponse,
    DomainCreateRequest,
    DomainResponse,
    DomainUpdateRequest,
    GrantCreateRequest,
    GrantResponse,
)
from app.schemas.health import HealthResponse, ReadinessErrorResponse, ReadinessResponse
from app.schemas.pagination import Page, PageInfo
from app.schemas.user import UserCreateRequest, UserResponse, UserUpdateRequest

__all__ = [
    "AccessibleDomainsResponse",
    "AnimalCreateRequest",
    "AnimalResponse",
    "AnimalUpdateRequest",
    "CountryCreateRequest",
    "CountryResponse",
    "CountryUpdateRequest",
    "DomainCreateRequest",
    "DomainResponse",
    "DomainUpdateRequest",
    "GrantCreateRequest",
    "GrantResponse",
    "HealthResponse",
    "Page",
    "PageInfo",
    "ReadinessErrorResponse",
    "ReadinessResponse",
    "UserCreateRequest",
    "UserResponse",
    "UserUpdateRequest",
]
