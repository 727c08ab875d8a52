"""Encode/decode pagination cursors to/from opaque URL-safe tokens.

A token is compact JSON, base64url-encoded without padding:

    {"v": 1, "id": <tiebreaker>, "f": [fields...], "x": [values...], "d": "ASC"}

JSON has no datetime/date/Decimal types, so those values are tagged
({"$dt": iso}, {"$d": iso}, {"$dec": str}) and restored on decode. Enum
values are stored as their plain value.
"""

from __future__ import annotations

import base64
import binascii
import json
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from app.application.dtos.pagination import CursorPayload
from app.core.constants import MAX_CURSOR_LENGTH
from app.domain.enums import SortDirection
from app.domain.exceptions import InvalidCursorException

CURSOR_VERSION = 1

_TAG_DATETIME = "$dt"
_TAG_DATE = "$d"
_TAG_DECIMAL = "$dec"


def _encode_value(v: Any) -> Any:
    if isinstance(v, Enum):
        return _encode_value(v.value)
    if v is None or isinstance(v, (bool, int, float, str)):
        return v
    # datetime is a date subclass: check it first
    if isinstance(v, datetime):
        return {_TAG_DATETIME: v.isoformat()}
    if isinstance(v, date):
        return {_TAG_DATE: v.isoformat()}
    if isinstance(v, Decimal):
        return {_TAG_DECIMAL: str(v)}
    raise TypeError(f"Unsupported cursor value type: {type(v)}")


def _decode_value(obj: Any) -> Any:
    if isinstance(obj, dict):
        if len(obj) != 1:
            raise InvalidCursorException("malformed value")
        tag, raw = next(iter(obj.items()))
        if not isinstance(raw, str):
            raise InvalidCursorException("malformed value")
        try:
            if tag == _TAG_DATETIME:
                return datetime.fromisoformat(raw)
            if tag == _TAG_DATE:
                return date.fromisoformat(raw)
            if tag == _TAG_DECIMAL:
                return Decimal(raw)
        except (ValueError, InvalidOperation) as e:
            raise InvalidCursorException(f"bad {tag} value") from e
        raise InvalidCursorException(f"unknown value tag {tag!r}")
    if isinstance(obj, list):
        raise InvalidCursorException("nested lists are not supported")
    return obj


class CursorCodec:
    """Stateless codec between CursorPayload and opaque string tokens."""

    def encode(self, payload: CursorPayload) -> str:
        """Serialize payload to a URL-safe token.

        Raises:
            TypeError: If an order value has a type that cannot be carried.
        """
        doc = {
            "v": CURSOR_VERSION,
            "id": _encode_value(payload.id),
            "f": list(payload.order_fields),
            "x": [_encode_value(v) for v in payload.order_values],
            "d": payload.direction.value,
        }
        raw = json.dumps(doc, separators=(",", ":"), ensure_ascii=False)
        return base64.urlsafe_b64encode(raw.encode("utf-8")).decode("ascii").rstrip("=")

    def decode(self, token: str) -> CursorPayload:
        """Parse a token produced by encode.

        Raises:
            InvalidCursorException: On any syntactic or structural failure.
        """
        if not isinstance(token, str) or not token:
            raise InvalidCursorException("empty cursor")
        if len(token) > MAX_CURSOR_LENGTH:
            raise InvalidCursorException("cursor too long")
        try:
            padded = token + "=" * (-len(token) % 4)
            raw = base64.urlsafe_b64decode(padded.encode("ascii"))
            doc = json.loads(raw.decode("utf-8"))
        except (binascii.Error, UnicodeError, ValueError) as e:
            raise InvalidCursorException("not a valid cursor token") from e

        if not isinstance(doc, dict):
            raise InvalidCursorException("cursor body is not an object")
        if doc.get("v") != CURSOR_VERSION:
            raise InvalidCursorException("unsupported cursor version")

        fields = doc.get("f")
        values = doc.get("x")
        if not isinstance(fields, list) or not fields:
            raise InvalidCursorException("missing order fields")
        if not all(isinstance(f, str) and f for f in fields):
            raise InvalidCursorException("order fields must be names")
        if not isinstance(values, list) or len(values) != len(fields):
            raise InvalidCursorException("order values do not match order fields")
        if "id" not in doc:
            raise InvalidCursorException("missing id")

        try:
            direction = SortDirection(doc.get("d", SortDirection.ASC.value))
        except ValueError as e:
            raise InvalidCursorException("unknown direction") from e

        return CursorPayload(
            id=_decode_value(doc["id"]),
            order_fields=tuple(fields),
            order_values=tuple(_decode_value(v) for v in values),
            direction=direction,
        )

    def try_decode(self, token: str | None) -> CursorPayload | None:
        """Return the decoded payload, or None when token is absent or invalid."""
        if token is None:
            return None
        try:
            return self.decode(token)
        except InvalidCursorException:
            return None
