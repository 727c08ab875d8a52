"""CursorCodec: opaque token encode/decode and rejection of malformed input."""

import base64
import json
from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from app.application.dtos.pagination import CursorPayload
from app.application.services.cursor_codec import CursorCodec
from app.core.constants import MAX_CURSOR_LENGTH
from app.domain.enums import Continent, SortDirection
from app.domain.exceptions import InvalidCursorException


def _token(doc: object) -> str:
    raw = json.dumps(doc).encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


@pytest.fixture
def codec() -> CursorCodec:
    return CursorCodec()


def test_token_is_url_safe_without_padding(codec: CursorCodec) -> None:
    """Tokens use only the base64url alphabet and carry no '=' padding."""
    token = codec.encode(CursorPayload(id=7, order_fields=("name", "id"), order_values=("Åland ?&/", 7)))
    assert "=" not in token
    assert set(token) <= set("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_")


def test_decode_restores_typed_values(codec: CursorCodec) -> None:
    """datetime, date and Decimal order values survive the JSON encoding."""
    created = datetime(2025, 3, 1, 12, 30, tzinfo=timezone.utc)
    payload = CursorPayload(
        id=42,
        order_fields=("created_at", "birthday", "price", "id"),
        order_values=(created, date(2020, 2, 29), Decimal("10.50"), 42),
        direction=SortDirection.DESC,
    )
    decoded = codec.decode(codec.encode(payload))
    assert decoded == payload
    assert decoded.value_of("created_at").tzinfo is not None


def test_enum_values_are_stored_as_plain_values(codec: CursorCodec) -> None:
    """An enum order value decodes to its underlying string."""
    payload = CursorPayload(id=1, order_fields=("continent", "id"), order_values=(Continent.EUROPE, 1))
    assert codec.decode(codec.encode(payload)).order_values == ("europe", 1)


def test_null_order_value_is_carried(codec: CursorCodec) -> None:
    payload = CursorPayload(id=3, order_fields=("population", "id"), order_values=(None, 3))
    assert codec.decode(codec.encode(payload)).order_values == (None, 3)


def test_encode_rejects_unsupported_value_type(codec: CursorCodec) -> None:
    with pytest.raises(TypeError):
        codec.encode(CursorPayload(id=1, order_fields=("tags", "id"), order_values=({"a"}, 1)))


@pytest.mark.parametrize(
    "token",
    [
        "",
        "not a cursor!",
        "%%%%",
        _token([1, 2, 3]),
        _token({"v": 2, "id": 1, "f": ["id"], "x": [1]}),
        _token({"v": 1, "id": 1, "f": [], "x": []}),
        _token({"v": 1, "id": 1, "f": ["name", "id"], "x": [1]}),
        _token({"v": 1, "id": 1, "f": ["name", 5], "x": ["a", 1]}),
        _token({"v": 1, "f": ["id"], "x": [1]}),
        _token({"v": 1, "id": 1, "f": ["id"], "x": [1], "d": "SIDEWAYS"}),
        _token({"v": 1, "id": 1, "f": ["at", "id"], "x": [{"$dt": "yesterday"}, 1]}),
        _token({"v": 1, "id": 1, "f": ["at", "id"], "x": [{"$unknown": "x"}, 1]}),
        _token({"v": 1, "id": 1, "f": ["at", "id"], "x": [[1, 2], 1]}),
    ],
)
def test_decode_rejects_malformed_tokens(codec: CursorCodec, token: str) -> None:
    """Every structural or syntactic failure raises InvalidCursorException."""
    with pytest.raises(InvalidCursorException):
        codec.decode(token)


def test_decode_rejects_oversized_token(codec: CursorCodec) -> None:
    with pytest.raises(InvalidCursorException) as exc_info:
        codec.decode("A" * (MAX_CURSOR_LENGTH + 1))
    assert exc_info.value.reason == "cursor too long"


def test_direction_defaults_to_ascending(codec: CursorCodec) -> None:
    decoded = codec.decode(_token({"v": 1, "id": 5, "f": ["id"], "x": [5]}))
    assert decoded.direction is SortDirection.ASC


def test_try_decode_returns_none_for_invalid_or_missing(codec: CursorCodec) -> None:
    assert codec.try_decode(None) is None
    assert codec.try_decode("garbage") is None
    token = codec.encode(CursorPayload(id=1, order_fields=("id",), order_values=(1,)))
    assert codec.try_decode(token) == CursorPayload(id=1, order_fields=("id",), order_values=(1,))
