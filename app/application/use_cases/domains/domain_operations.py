"""Domain tree operations: list, get, create, update (rename/re-parent), delete."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from app.application.dtos.domain import DomainResult
from app.application.dtos.pagination import PageResult, WindowSpec
from app.application.interfaces.repositories import IDomainRepository, IGrantRepository
from app.application.services.access_gate import AccessGate
from app.application.services.domain_access_resolver import DomainAccessResolver
from app.application.services.page_engine import PageEngine
from app.domain.exceptions import ResourceNotFoundException, ValidationException
from app.domain.value_objects.ordering import SortKey
from app.domain.value_objects.predicates import contains, in_

logger = logging.getLogger(__name__)


class DomainService:
    """Manage domains the caller can access.

    Any change to the tree shape (create, re-parent, delete) invalidates
    every cached access set, since descendants of existing grants change.
    A new root domain is granted to its creator; otherwise nobody could
    reach it.
    """

    def __init__(
        self,
        domain_repo: IDomainRepository,
        grant_repo: IGrantRepository,
        resolver: DomainAccessResolver,
        access_gate: AccessGate,
        page_engine: PageEngine,
    ) -> None:
        self.domain_repo = domain_repo
        self.grant_repo = grant_repo
        self.resolver = resolver
        self.access_gate = access_gate
        self.page_engine = page_engine

    async def accessible_ids(self, user_id: int) -> list[int]:
        """Return the caller's accessible domain ids, ascending."""
        return sorted(await self.resolver.accessible_domains(user_id))

    async def list_page(
        self,
        user_id: int,
        order: Sequence[SortKey],
        window: WindowSpec,
        name: str | None = None,
    ) -> PageResult[DomainResult]:
        """Return one page of accessible domains, optionally filtered by name."""
        self.page_engine.window_size(window)
        accessible = await self.resolver.accessible_domains(user_id)
        if not accessible:
            return PageResult.empty()
        return await self.page_engine.resolve_page(
            self.domain_repo,
            contains("name", name) if name else None,
            order,
            window,
            access_predicate=in_("id", accessible),
        )

    async def get(self, user_id: int, domain_id: int) -> DomainResult | None:
        """Return the domain, or None when missing or not accessible."""
        if not await self.resolver.is_accessible(user_id, domain_id):
            return None
        return await self.domain_repo.get_by_id(domain_id)

    async def create(
        self, user_id: int, name: str, parent_id: int | None = None
    ) -> DomainResult:
        """Create a domain under parent_id, or a root domain when parent_id is None.

        Raises:
            DomainAccessDeniedException: If the parent is not accessible.
            ResourceNotFoundException: If the parent does not exist.
        """
        if parent_id is not None:
            await self.access_gate.validate_write_domain(user_id, parent_id)
            if await self.domain_repo.get_by_id(parent_id) is None:
                raise ResourceNotFoundException("domain", parent_id)

        domain = await self.domain_repo.create_domain(name, parent_id, user_id)
        if parent_id is None:
            await self.grant_repo.create_grant(user_id, domain.id, user_id)
        await self.resolver.invalidate_all()
        logger.info("User %s created domain %s (parent %s)", user_id, domain.id, parent_id)
        return domain

    async def update(
        self, user_id: int, domain_id: int, changes: dict[str, Any]
    ) -> DomainResult | None:
        """Rename and/or re-parent a domain; None if it is missing or not accessible.

        changes may hold "name" and "parent_id" (None makes the domain a root).

        Raises:
            DomainAccessDeniedException: If the new parent is not accessible.
            ValidationException: If the new parent is the domain itself or
                one of its descendants.
        """
        current = await self.get(user_id, domain_id)
        if current is None:
            return None

        reparent = "parent_id" in changes and changes["parent_id"] != current.parent_id
        if reparent and changes["parent_id"] is not None:
            new_parent = changes["parent_id"]
            if new_parent == domain_id or new_parent in await self.resolver.descendants_of(
                domain_id
            ):
                raise ValidationException(
                    "A domain cannot be moved under itself or one of its descendants",
                    field="parent_id",
                )
            await self.access_gate.validate_write_domain(user_id, new_parent)

        if not changes:
            return current
        updated = await self.domain_repo.update_domain(domain_id, changes, user_id)
        if reparent:
            await self.resolver.invalidate_all()
        return updated

    async def delete(self, user_id: int, domain_id: int) -> DomainResult | None:
        """Delete a leaf domain; None if it is missing or not accessible.

        Records in the domain are kept with no domain (visible to nobody).

        Raises:
            ValidationException: If the domain still has children.
        """
        if await self.get(user_id, domain_id) is None:
            return None
        if await self.resolver.graph.children_of(domain_id):
            raise ValidationException(
                "Domain has child domains; move or delete them first",
                field="domain_id",
            )
        deleted = await self.domain_repo.delete_domain(domain_id)
        await self.resolver.invalidate_all()
        if deleted is not None:
            logger.info("User %s deleted domain %s", user_id, domain_id)
        return deleted
