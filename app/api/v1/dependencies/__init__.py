"""Presentation-layer dependency injection (composition root).

Routes depend only on these providers; repositories and services are
built here from the request's database session.
"""

from .access import get_access_gate, get_domain_access_resolver, get_page_engine
from .caller import (
    get_create_domain,
    get_optional_user_id,
    get_user_id,
    get_view_domains,
)
from .catalog import get_animal_service, get_country_service
from .domain import get_domain_service, get_grant_service
from .user import get_user_service

__all__ = [
    "get_access_gate",
    "get_animal_service",
    "get_country_service",
    "get_create_domain",
    "get_domain_access_resolver",
    "get_domain_service",
    "get_grant_service",
    "get_optional_user_id",
    "get_page_engine",
    "get_user_id",
    "get_user_service",
    "get_view_domains",
]
