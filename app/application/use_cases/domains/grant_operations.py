"""Grant operations: give and take away direct access to a domain."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from app.application.dtos.domain import GrantResult
from app.application.dtos.pagination import PageResult, WindowSpec
from app.application.interfaces.repositories import (
    IDomainRepository,
    IGrantRepository,
    IUserRepository,
)
from app.application.services.access_gate import AccessGate
from app.application.services.domain_access_resolver import DomainAccessResolver
from app.application.services.page_engine import PageEngine
from app.domain.exceptions import ResourceNotFoundException
from app.domain.value_objects.ordering import SortKey
from app.domain.value_objects.predicates import all_of, eq, in_

logger = logging.getLogger(__name__)


class GrantService:
    """Grant, revoke and list user-to-domain access.

    The acting user must have access to the domain being granted or
    revoked. Each change invalidates the target user's cached access set.
    """

    def __init__(
        self,
        grant_repo: IGrantRepository,
        user_repo: IUserRepository,
        domain_repo: IDomainRepository,
        resolver: DomainAccessResolver,
        access_gate: AccessGate,
        page_engine: PageEngine,
    ) -> None:
        self.grant_repo = grant_repo
        self.user_repo = user_repo
        self.domain_repo = domain_repo
        self.resolver = resolver
        self.access_gate = access_gate
        self.page_engine = page_engine

    async def grant(self, actor_id: int, user_id: int, domain_id: int) -> GrantResult:
        """Grant user_id access to domain_id; return the existing grant if present.

        Raises:
            DomainAccessDeniedException: If actor_id cannot access domain_id.
            ResourceNotFoundException: If the user or the domain does not exist.
        """
        await self.access_gate.validate_write_domain(actor_id, domain_id)
        if await self.user_repo.get_by_id(user_id) is None:
            raise ResourceNotFoundException("user", user_id)
        if await self.domain_repo.get_by_id(domain_id) is None:
            raise ResourceNotFoundException("domain", domain_id)

        existing = await self.grant_repo.get(user_id, domain_id)
        if existing is not None:
            return existing
        grant = await self.grant_repo.create_grant(user_id, domain_id, actor_id)
        await self.resolver.invalidate_user(user_id)
        logger.info("User %s granted domain %s to user %s", actor_id, domain_id, user_id)
        return grant

    async def revoke(
        self, actor_id: int, user_id: int, domain_id: int
    ) -> GrantResult | None:
        """Remove the direct grant; None if there was none.

        Raises:
            DomainAccessDeniedException: If actor_id cannot access domain_id.
        """
        await self.access_gate.validate_write_domain(actor_id, domain_id)
        removed = await self.grant_repo.delete_grant(user_id, domain_id)
        if removed is not None:
            await self.resolver.invalidate_user(user_id)
            logger.info(
                "User %s revoked domain %s from user %s", actor_id, domain_id, user_id
            )
        return removed

    async def get(
        self, actor_id: int, user_id: int, domain_id: int
    ) -> GrantResult | None:
        """Return the grant if it exists and actor_id can access its domain."""
        if not await self.resolver.is_accessible(actor_id, domain_id):
            return None
        return await self.grant_repo.get(user_id, domain_id)

    async def list_page(
        self,
        actor_id: int,
        order: Sequence[SortKey],
        window: WindowSpec,
        user_id: int | None = None,
        domain_id: int | None = None,
    ) -> PageResult[GrantResult]:
        """Return one page of grants on domains actor_id can access."""
        self.page_engine.window_size(window)
        accessible = await self.resolver.accessible_domains(actor_id)
        if not accessible:
            return PageResult.empty()
        filter = all_of(
            eq("user_id", user_id) if user_id is not None else None,
            eq("domain_id", domain_id) if domain_id is not None else None,
        )
        return await self.page_engine.resolve_page(
            self.grant_repo,
            filter,
            order,
            window,
            access_predicate=in_("domain_id", accessible),
        )
