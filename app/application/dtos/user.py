"""DTOs for user use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserResult:
    """User read-model. first_name and last_name are optional."""

    id: int
    username: str
    email: str
    first_name: str | None = None
    last_name: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    created_by: int | None = None
    updated_by: int | None = None


@dataclass(frozen=True)
class UserCreate:
    """User write-model (the acting user is supplied separately)."""

    username: str
    email: str
    first_name: str | None = None
    last_name: str | None = None


@dataclass(frozen=True)
class UserFilter:
    """Optional user filters; case-insensitive substring matches, AND-ed."""

    username: str | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
