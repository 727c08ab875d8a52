"""Application services: access resolution, access gate, cursor pagination."""

from app.application.services.access_gate import AccessGate
from app.application.services.cursor_codec import CursorCodec
from app.application.services.domain_access_resolver import (
    AccessResolutionCache,
    DomainAccessResolver,
)
from app.application.services.page_engine import PageEngine, resume_predicate

__all__ = [
    "AccessGate",
    "AccessResolutionCache",
    "CursorCodec",
    "DomainAccessResolver",
    "PageEngine",
    "resume_predicate",
]
