"""Caller identity and domain selection dependencies (request headers)."""

from __future__ import annotations

from fastapi import Request

from app.core.config import get_settings
from app.domain.exceptions import AuthenticationException, ValidationException


def _parse_id(raw: str) -> int | None:
    try:
        value = int(raw.strip())
    except ValueError:
        return None
    return value if value > 0 else None


async def get_user_id(request: Request) -> int:
    """Return the caller's user id from the user header.

    Raises:
        AuthenticationException: If the header is missing or empty (401).
        ValidationException: If it is not a positive integer (400).
    """
    name = get_settings().user_id_header
    raw = request.headers.get(name)
    if raw is None or not raw.strip():
        raise AuthenticationException(f"Missing required header: {name}")
    user_id = _parse_id(raw)
    if user_id is None:
        raise ValidationException(f"{name} must be a positive integer", field=name)
    return user_id


async def get_optional_user_id(request: Request) -> int | None:
    """Return the caller's user id, or None when the user header is absent.

    Raises:
        ValidationException: If the header is present but not a positive integer.
    """
    raw = request.headers.get(get_settings().user_id_header)
    if raw is None or not raw.strip():
        return None
    return await get_user_id(request)


async def get_view_domains(request: Request) -> list[int] | None:
    """Return the requested view domains, or None to view every accessible domain.

    Malformed entries are skipped; a header with no valid entry counts as absent.
    """
    raw = request.headers.get(get_settings().view_domains_header)
    if not raw:
        return None
    ids = [d for d in (_parse_id(part) for part in raw.split(",")) if d is not None]
    return ids or None


async def get_create_domain(request: Request) -> int | None:
    """Return the default domain for new records from the create-domain header.

    Raises:
        ValidationException: If the header is present but not a positive integer.
    """
    name = get_settings().create_domain_header
    raw = request.headers.get(name)
    if raw is None or not raw.strip():
        return None
    domain_id = _parse_id(raw)
    if domain_id is None:
        raise ValidationException(f"{name} must be a positive integer", field=name)
    return domain_id
