"""Shared utilities: datetime helpers."""

from app.shared.utils.datetime import ensure_utc

__all__ = [
    "ensure_utc",
]
