"""Domain layer: value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import (
    AnimalCategory,
    AnimalOrderField,
    Continent,
    CountryOrderField,
    DomainOrderField,
    GrantOrderField,
    SortDirection,
    UserOrderField,
)
from app.domain.exceptions import (
    AuthenticationException,
    CatalogException,
    DatabaseNotConfiguredException,
    DomainAccessDeniedException,
    InvalidCursorException,
    ResourceNotFoundException,
    UserAlreadyExistsException,
    ValidationException,
)

__all__ = [
    # Enums
    "AnimalCategory",
    "AnimalOrderField",
    "Continent",
    "CountryOrderField",
    "DomainOrderField",
    "GrantOrderField",
    "SortDirection",
    "UserOrderField",
    # Exceptions
    "AuthenticationException",
    "CatalogException",
    "DatabaseNotConfiguredException",
    "DomainAccessDeniedException",
    "InvalidCursorException",
    "ResourceNotFoundException",
    "UserAlreadyExistsException",
    "ValidationException",
]
