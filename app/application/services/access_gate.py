"""Access gate: turns a user's accessible domains into read scopes and write checks."""

from __future__ import annotations

from collections.abc import Iterable

from app.application.services.domain_access_resolver import DomainAccessResolver
from app.domain.exceptions import DomainAccessDeniedException
from app.domain.value_objects.predicates import FieldCondition, in_

DOMAIN_FIELD = "domain_id"


class AccessGate:
    """Restricts reads to and validates writes against accessible domains."""

    def __init__(self, resolver: DomainAccessResolver) -> None:
        self.resolver = resolver

    async def effective_view_domains(
        self, user_id: int, requested: Iterable[int] | None = None
    ) -> frozenset[int]:
        """Return the domains to read from.

        With no request this is the full accessible set; otherwise the
        requested ids that are accessible. An empty result is not an error.
        """
        accessible = await self.resolver.accessible_domains(user_id)
        if requested is None:
            return accessible
        return accessible & frozenset(requested)

    async def validate_write_domain(
        self, user_id: int, requested_domain_id: int | None
    ) -> int:
        """Return requested_domain_id if the user may write to it.

        Raises:
            DomainAccessDeniedException: If the id is None or not accessible.
        """
        if requested_domain_id is None:
            raise DomainAccessDeniedException(None)
        if not await self.resolver.is_accessible(user_id, requested_domain_id):
            raise DomainAccessDeniedException(requested_domain_id)
        return requested_domain_id

    async def view_predicate(
        self,
        user_id: int,
        requested: Iterable[int] | None = None,
        field: str = DOMAIN_FIELD,
    ) -> FieldCondition:
        """Return a `field IN (...)` condition over the effective view domains.

        Records whose domain is null never match.
        """
        domains = await self.effective_view_domains(user_id, requested)
        return in_(field, domains)
