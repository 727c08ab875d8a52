"""DTOs for domain (organizational node) and grant use cases."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class DomainResult:
    """Domain read-model. parent_id None means the domain is a root."""

    id: int
    name: str
    parent_id: int | None
    created_at: datetime
    updated_at: datetime
    created_by: int | None = None
    updated_by: int | None = None


@dataclass(frozen=True)
class GrantResult:
    """User-to-domain access grant. created_by is the granting user."""

    id: int
    user_id: int
    domain_id: int
    created_at: datetime
    created_by: int | None = None
