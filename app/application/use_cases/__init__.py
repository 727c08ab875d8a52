"""Application use cases: one entry point per workflow."""

from app.application.use_cases.catalog import CatalogService
from app.application.use_cases.domains import DomainService, GrantService
from app.application.use_cases.users import UserService

__all__ = [
    "CatalogService",
    "DomainService",
    "GrantService",
    "UserService",
]
