"""Domain access resolution: expand direct grants over the domain tree.

A user granted a domain can see that domain and every domain below it.
Resolution walks the tree iteratively (explicit stack plus visited set)
so malformed parent links that form a cycle terminate instead of
recursing forever.

Two memo layers, both optional:
- AccessResolutionCache: request-scoped, created per request and
  discarded with it.
- ICacheService (redis): shared between workers, short TTL, invalidated
  by grant and tree changes.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Hashable
from typing import Any

from app.application.interfaces.repositories import IDomainGraphSource
from app.application.interfaces.services import ICacheService
from app.core.constants import CACHE_KEY_SEP, CACHE_PREFIX_DOMAIN_ACCESS
from app.shared.telemetry.tracing import add_span_attributes, traced

logger = logging.getLogger(__name__)


class AccessResolutionCache:
    """Request-scoped memo for resolved access sets.

    Entries never outlive the object; pass ttl_seconds to also expire them
    within a long-lived scope (e.g. a background job).
    """

    def __init__(
        self,
        ttl_seconds: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[Hashable, tuple[float, Any]] = {}

    def get(self, key: Hashable) -> Any | None:
        """Return the stored value or None when missing or expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        stored_at, value = entry
        if self.ttl_seconds is not None and self._clock() - stored_at >= self.ttl_seconds:
            del self._entries[key]
            return None
        return value

    def set(self, key: Hashable, value: Any) -> None:
        self._entries[key] = (self._clock(), value)

    def discard(self, key: Hashable) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


def domain_access_key(user_id: int) -> str:
    """Shared cache key for a user's accessible domain ids."""
    return f"{CACHE_PREFIX_DOMAIN_ACCESS}{CACHE_KEY_SEP}{user_id}"


class DomainAccessResolver:
    """Resolves which domains a user may see and write.

    With defer_shared_invalidation, shared-cache deletions are queued and
    applied by flush_invalidations() once the writing transaction has
    committed; until then the shared cache is bypassed for this resolver.
    """

    def __init__(
        self,
        graph: IDomainGraphSource,
        cache: AccessResolutionCache | None = None,
        shared_cache: ICacheService | None = None,
        shared_cache_ttl: int = 60,
        defer_shared_invalidation: bool = False,
    ) -> None:
        self.graph = graph
        self.cache = cache if cache is not None else AccessResolutionCache()
        self.shared_cache = shared_cache
        self.shared_cache_ttl = shared_cache_ttl
        self.defer_shared_invalidation = defer_shared_invalidation
        self._pending_invalidations: set[str] = set()

    def _shared_cache_usable(self) -> bool:
        if self._pending_invalidations:
            return False
        return self.shared_cache is not None and self.shared_cache.is_available()

    async def descendants_of(self, domain_id: int) -> set[int]:
        """Return every domain strictly below domain_id (never domain_id itself).

        A child link back to an already visited domain is a cycle: it is
        logged and not expanded again.
        """
        memo = self.cache.get(("descendants", domain_id))
        if memo is not None:
            return set(memo)

        visited: set[int] = {domain_id}
        result: set[int] = set()
        stack = [domain_id]
        while stack:
            current = stack.pop()
            for child in await self.graph.children_of(current):
                if child in visited:
                    logger.warning(
                        "Cycle in domain tree: %s is reachable again from %s",
                        child,
                        current,
                    )
                    continue
                visited.add(child)
                result.add(child)
                stack.append(child)

        self.cache.set(("descendants", domain_id), frozenset(result))
        return result

    @traced("domain_access.accessible_domains")
    async def accessible_domains(self, user_id: int) -> frozenset[int]:
        """Return the user's direct grants plus all their descendants.

        A user with no grants gets an empty set.
        """
        memo = self.cache.get(("access", user_id))
        if memo is not None:
            return memo

        key = domain_access_key(user_id)
        if self._shared_cache_usable():
            cached = await self.shared_cache.get(key)
            if cached is not None:
                accessible = frozenset(int(d) for d in cached)
                self.cache.set(("access", user_id), accessible)
                return accessible

        grants = await self.graph.grants_of(user_id)
        result: set[int] = set(grants)
        for domain_id in grants:
            result |= await self.descendants_of(domain_id)
        accessible = frozenset(result)
        logger.debug(
            "Resolved access for user %s: %d grants, %d domains",
            user_id,
            len(grants),
            len(accessible),
        )
        add_span_attributes(grants=len(grants), accessible=len(accessible))

        self.cache.set(("access", user_id), accessible)
        if self._shared_cache_usable():
            await self.shared_cache.set(key, sorted(accessible), ttl=self.shared_cache_ttl)
        return accessible

    async def is_accessible(self, user_id: int, domain_id: int) -> bool:
        """Return True if domain_id is in the user's accessible set."""
        return domain_id in await self.accessible_domains(user_id)

    async def invalidate_user(self, user_id: int) -> None:
        """Forget the user's resolved set (call after a grant or revoke)."""
        self.cache.discard(("access", user_id))
        await self._invalidate_shared(domain_access_key(user_id))

    async def invalidate_all(self) -> None:
        """Forget every resolved set (call after the tree itself changes)."""
        self.cache.clear()
        await self._invalidate_shared(f"{CACHE_PREFIX_DOMAIN_ACCESS}{CACHE_KEY_SEP}*")

    async def _invalidate_shared(self, key: str) -> None:
        if self.defer_shared_invalidation:
            self._pending_invalidations.add(key)
            return
        await self._delete_shared(key)

    async def _delete_shared(self, key: str) -> None:
        if self.shared_cache is None or not self.shared_cache.is_available():
            return
        if key.endswith("*"):
            await self.shared_cache.delete_pattern(key)
        else:
            await self.shared_cache.delete(key)

    async def flush_invalidations(self) -> None:
        """Apply queued shared-cache deletions. Run after the transaction commits."""
        pending = sorted(self._pending_invalidations)
        self._pending_invalidations.clear()
        for key in pending:
            await self._delete_shared(key)
