"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports. Limits are keyed by caller (X-User-ID)
when present, else by client address.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from app.core.config import get_settings


def caller_key(request: Request) -> str:
    """Rate-limit key: the calling user id header, or the remote address."""
    user_id = request.headers.get(get_settings().user_id_header)
    if user_id and user_id.strip().isdigit():
        return f"user:{user_id.strip()}"
    return get_remote_address(request)


limiter = Limiter(key_func=caller_key)

# Single source of truth for rate limit strings and decorators.
WRITE_ENDPOINT_LIMIT = "120/minute"

limit_writes = limiter.limit(WRITE_ENDPOINT_LIMIT)
