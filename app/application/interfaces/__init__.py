"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.repositories import (
    ICatalogRepository,
    IDomainGraphSource,
    IDomainRepository,
    IGrantRepository,
    IRecordSource,
    IUserRepository,
)
from app.application.interfaces.services import ICacheService

__all__ = [
    "ICacheService",
    "ICatalogRepository",
    "IDomainGraphSource",
    "IDomainRepository",
    "IGrantRepository",
    "IRecordSource",
    "IUserRepository",
]
