"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from app.api.v1.dependencies (no manual repo/service construction).
"""

from fastapi import APIRouter

from app.api.v1.endpoints import animals, countries, domains, grants, health, users

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(countries.router, prefix="/countries", tags=["countries"])
api_router.include_router(animals.router, prefix="/animals", tags=["animals"])
api_router.include_router(domains.router, prefix="/domains", tags=["domains"])
api_router.include_router(grants.router, prefix="/grants", tags=["grants"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
