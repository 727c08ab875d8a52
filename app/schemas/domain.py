"""Domain and grant API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class DomainCreateRequest(BaseModel):
    """Request body for creating a domain (no parent_id: a new root)."""

    name: str = Field(..., min_length=1, max_length=200)
    parent_id: int | None = Field(default=None, gt=0)


class DomainUpdateRequest(BaseModel):
    """Request body for renaming and/or moving a domain.

    Send parent_id: null to make the domain a root; omit it to keep the parent.
    """

    name: str | None = Field(default=None, min_length=1, max_length=200)
    parent_id: int | None = Field(default=None, gt=0)


class DomainResponse(BaseModel):
    """Domain response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    parent_id: int | None
    created_at: datetime
    updated_at: datetime
    created_by: int | None = None
    updated_by: int | None = None


class AccessibleDomainsResponse(BaseModel):
    """Resolved accessible domain ids of the caller."""

    user_id: int
    domain_ids: list[int]


class GrantCreateRequest(BaseModel):
    """Request body for granting a user access to a domain."""

    user_id: int = Field(..., gt=0)
    domain_id: int = Field(..., gt=0)


class GrantResponse(BaseModel):
    """Grant response. created_by is the granting user."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    domain_id: int
    created_at: datetime
    created_by: int | None = None
