"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.animal import Animal
from app.infrastructure.persistence.models.country import Country
from app.infrastructure.persistence.models.domain import Domain
from app.infrastructure.persistence.models.grant import UserDomainAccess
from app.infrastructure.persistence.models.mixins import (
    AuditedDomainScopedModel,
    AuditedModel,
    DomainScopedMixin,
    IntIdMixin,
    TimestampMixin,
    UserAuditMixin,
)
from app.infrastructure.persistence.models.user import User

__all__ = [
    "Animal",
    "AuditedDomainScopedModel",
    "AuditedModel",
    "Country",
    "Domain",
    "DomainScopedMixin",
    "IntIdMixin",
    "TimestampMixin",
    "User",
    "UserAuditMixin",
    "UserDomainAccess",
]
