"""Domain tree and grant use cases."""

from app.application.use_cases.domains.domain_operations import DomainService
from app.application.use_cases.domains.grant_operations import GrantService

__all__ = ["DomainService", "GrantService"]
