"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (record sources, domain graph, cache).
"""

from app.application.interfaces import (
    ICacheService,
    ICatalogRepository,
    IDomainGraphSource,
    IDomainRepository,
    IGrantRepository,
    IRecordSource,
    IUserRepository,
)
from app.application.services import (
    AccessGate,
    CursorCodec,
    DomainAccessResolver,
    PageEngine,
)
from app.application.use_cases import CatalogService, DomainService, GrantService

__all__ = [
    "AccessGate",
    "CatalogService",
    "CursorCodec",
    "DomainAccessResolver",
    "DomainService",
    "GrantService",
    "ICacheService",
    "ICatalogRepository",
    "IDomainGraphSource",
    "IDomainRepository",
    "IGrantRepository",
    "IRecordSource",
    "IUserRepository",
    "PageEngine",
]
