"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs or domain value objects only; no
infrastructure imports.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.application.dtos.domain import DomainResult, GrantResult
    from app.application.dtos.user import UserCreate, UserResult
    from app.domain.value_objects.ordering import SortKey
    from app.domain.value_objects.predicates import Condition


# Record source: the only read path used by the page engine
class IRecordSource[T](Protocol):
    """Protocol for an ordered, filterable collection of records (no offsets)."""

    async def find_many(
        self,
        where: Condition | None,
        order: Sequence[SortKey],
        limit: int,
    ) -> list[T]:
        """Return at most limit records matching where, sorted by order."""

    async def count(self, where: Condition | None) -> int:
        """Return the number of records matching where."""


# Catalog repository (countries, animals)
class ICatalogRepository[T](IRecordSource[T], Protocol):
    """Protocol for a domain-scoped catalog table."""

    async def get_by_id(self, record_id: int) -> T | None:
        """Return record by id or None."""

    async def create_record(
        self, data: Any, domain_id: int, actor_id: int
    ) -> T:
        """Insert a record into domain_id on behalf of actor_id."""

    async def update_record(
        self, record_id: int, changes: dict[str, Any], actor_id: int
    ) -> T | None:
        """Apply changes (field -> value); return None if the record is gone."""

    async def delete_record(self, record_id: int) -> T | None:
        """Delete and return the record; None if it did not exist."""


# Domain graph (organizational tree + grants)
class IDomainGraphSource(Protocol):
    """Read-only view of the domain forest and of direct grants."""

    async def children_of(self, domain_id: int) -> set[int]:
        """Return ids of the direct children of domain_id."""

    async def parent_of(self, domain_id: int) -> int | None:
        """Return the parent id of domain_id (None for roots and unknown ids)."""

    async def grants_of(self, user_id: int) -> set[int]:
        """Return ids of the domains granted directly to user_id."""


class IDomainRepository(IRecordSource["DomainResult"], Protocol):
    """Protocol for domain CRUD."""

    async def get_by_id(self, domain_id: int) -> DomainResult | None:
        """Return domain by id or None."""

    async def create_domain(
        self, name: str, parent_id: int | None, actor_id: int
    ) -> DomainResult:
        """Create a domain under parent_id (None for a root)."""

    async def update_domain(
        self, domain_id: int, changes: dict[str, Any], actor_id: int
    ) -> DomainResult | None:
        """Apply name/parent_id changes; None if the domain is gone."""

    async def delete_domain(self, domain_id: int) -> DomainResult | None:
        """Delete and return the domain; None if it did not exist."""


class IGrantRepository(IRecordSource["GrantResult"], Protocol):
    """Protocol for user-to-domain grants."""

    async def get(self, user_id: int, domain_id: int) -> GrantResult | None:
        """Return the grant for (user_id, domain_id) or None."""

    async def create_grant(
        self, user_id: int, domain_id: int, granted_by: int
    ) -> GrantResult:
        """Insert a grant (caller ensures it does not exist yet)."""

    async def delete_grant(self, user_id: int, domain_id: int) -> GrantResult | None:
        """Delete and return the grant; None if it did not exist."""


class IUserRepository(IRecordSource["UserResult"], Protocol):
    """Protocol for user CRUD (username and email are unique)."""

    async def get_by_id(self, user_id: int) -> UserResult | None:
        """Return user by id or None."""

    async def get_by_username(self, username: str) -> UserResult | None:
        """Return the user with exactly this username or None."""

    async def get_by_email(self, email: str) -> UserResult | None:
        """Return the user with this email (case-insensitive) or None."""

    async def create_user(self, data: UserCreate, actor_id: int | None) -> UserResult:
        """Insert a user; actor_id None for self-registration.

        Raises UserAlreadyExistsException on a unique constraint violation.
        """

    async def update_user(
        self, user_id: int, changes: dict[str, Any], actor_id: int
    ) -> UserResult | None:
        """Apply changes; None if the user is gone.

        Raises UserAlreadyExistsException on a unique constraint violation.
        """

    async def delete_user(self, user_id: int) -> UserResult | None:
        """Delete and return the user; None if it did not exist."""
