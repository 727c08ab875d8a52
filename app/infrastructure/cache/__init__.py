"""Cache: shared Redis service for resolved domain access sets."""

from app.infrastructure.cache.redis_cache import CacheService

__all__ = [
    "CacheService",
]
