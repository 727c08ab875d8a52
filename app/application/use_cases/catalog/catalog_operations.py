"""Catalog operations: domain-scoped list, get, create, update, delete.

One service class serves every catalog resource (countries, animals);
the repository decides the record type.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from app.application.dtos.pagination import PageResult, WindowSpec
from app.application.interfaces.repositories import ICatalogRepository
from app.application.services.access_gate import DOMAIN_FIELD, AccessGate
from app.application.services.page_engine import PageEngine
from app.domain.value_objects.ordering import SortKey
from app.domain.value_objects.predicates import Condition

logger = logging.getLogger(__name__)


class CatalogService[T]:
    """List and mutate catalog records within the caller's accessible domains.

    Reads are restricted to the effective view domains (the caller's
    accessible set, optionally narrowed by a requested subset). Writes
    must target an accessible domain and may only touch records whose
    current domain is accessible. Records outside the accessible set are
    reported as missing so their existence is not disclosed.
    """

    def __init__(
        self,
        repo: ICatalogRepository[T],
        access_gate: AccessGate,
        page_engine: PageEngine,
    ) -> None:
        self.repo = repo
        self.access_gate = access_gate
        self.page_engine = page_engine

    async def list_page(
        self,
        user_id: int,
        filter: Condition | None,
        order: Sequence[SortKey],
        window: WindowSpec,
        view_domains: Iterable[int] | None = None,
    ) -> PageResult[T]:
        """Return one page of records visible to user_id.

        An empty effective view set yields an empty page (not an error).
        """
        # Validate the window even when nothing is visible
        self.page_engine.window_size(window)
        scope = await self.access_gate.view_predicate(user_id, view_domains)
        if not scope.value:
            return PageResult.empty()
        return await self.page_engine.resolve_page(
            self.repo, filter, order, window, access_predicate=scope
        )

    async def get(
        self,
        user_id: int,
        record_id: int,
        view_domains: Iterable[int] | None = None,
    ) -> T | None:
        """Return the record, or None when missing or outside the view domains."""
        record = await self.repo.get_by_id(record_id)
        if record is None:
            return None
        domains = await self.access_gate.effective_view_domains(user_id, view_domains)
        if getattr(record, DOMAIN_FIELD) not in domains:
            return None
        return record

    async def create(self, user_id: int, data: Any, domain_id: int | None) -> T:
        """Create a record in domain_id on behalf of user_id.

        Raises:
            DomainAccessDeniedException: If domain_id is None or not accessible.
        """
        target = await self.access_gate.validate_write_domain(user_id, domain_id)
        record = await self.repo.create_record(data, target, user_id)
        logger.info(
            "User %s created record %s in domain %s",
            user_id,
            getattr(record, "id", None),
            target,
        )
        return record

    async def update(
        self, user_id: int, record_id: int, changes: dict[str, Any]
    ) -> T | None:
        """Apply changes to a record; None if it is missing or not visible.

        A domain_id in changes moves the record and must itself be accessible.

        Raises:
            DomainAccessDeniedException: If the new domain is not accessible.
        """
        record = await self.get(user_id, record_id)
        if record is None:
            return None
        if DOMAIN_FIELD in changes:
            await self.access_gate.validate_write_domain(user_id, changes[DOMAIN_FIELD])
        if not changes:
            return record
        return await self.repo.update_record(record_id, changes, user_id)

    async def delete(self, user_id: int, record_id: int) -> T | None:
        """Delete a record; None if it is missing or not visible."""
        if await self.get(user_id, record_id) is None:
            return None
        deleted = await self.repo.delete_record(record_id)
        if deleted is not None:
            logger.info("User %s deleted record %s", user_id, record_id)
        return deleted
