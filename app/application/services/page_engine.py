"""Cursor-based pagination over compound sort keys (no offsets).

Given a base filter, a sort order and a window request, PageEngine builds
a "strictly after the anchor" predicate over the full compound key, reads
one record more than the window to detect overflow, and reports cursors
for the first and last returned records.

For a compound order (k1, ..., kn) with anchor values (a1, ..., an) the
resume predicate is the lexicographic comparison

    k1 > a1 OR (k1 = a1 AND (k2 > a2 OR (k2 = a2 AND ... kn > an)))

with > replaced by < for descending keys, and both flipped when reading
backwards. NULL sorts as the largest value (last ascending, first
descending), matching the compiled ORDER BY:

    non-null anchor, moving towards nulls:  k > a OR k IS NULL OR (k = a AND ...)
    null anchor, moving towards nulls:      k IS NULL AND ...
    null anchor, moving away from nulls:    k IS NOT NULL OR (k IS NULL AND ...)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from app.application.dtos.pagination import CursorPayload, PageResult, WindowSpec
from app.application.interfaces.repositories import IRecordSource
from app.application.services.cursor_codec import CursorCodec
from app.core.constants import DEFAULT_PAGE_SIZE, TIEBREAKER_FIELD
from app.domain.exceptions import InvalidCursorException, ValidationException
from app.domain.value_objects.ordering import SortKey, compound_order, reverse_order
from app.domain.value_objects.predicates import (
    Condition,
    FieldCondition,
    Operator,
    all_of,
    any_of,
    eq,
)
from app.shared.telemetry.tracing import add_span_attributes, traced

logger = logging.getLogger(__name__)


def record_value(record: Any, field: str) -> Any:
    """Read field from a DTO/ORM object or a mapping."""
    if isinstance(record, Mapping):
        return record[field]
    return getattr(record, field)


def _strict_op(key: SortKey, backward: bool) -> Operator:
    return Operator.GT if key.descending == backward else Operator.LT


def _is_null(field: str, null: bool = True) -> FieldCondition:
    return FieldCondition(field, Operator.IS_NULL, null)


def _key_bounds(
    key: SortKey, value: Any, backward: bool
) -> tuple[Condition | None, Condition]:
    """Return (strictly past value, level with value) for one key."""
    op = _strict_op(key, backward)
    towards_nulls = op is Operator.GT
    if value is None:
        past = None if towards_nulls else _is_null(key.field, False)
        return past, _is_null(key.field)
    strict = FieldCondition(key.field, op, value)
    past = any_of(strict, _is_null(key.field)) if towards_nulls else strict
    return past, eq(key.field, value)


def resume_predicate(
    keys: Sequence[SortKey],
    anchor: CursorPayload,
    backward: bool = False,
) -> Condition:
    """Build the predicate selecting records strictly past anchor.

    keys must be a compound order ending with the (non-null) tiebreaker
    and match anchor.order_fields.

    Args:
        keys: Compound order the anchor was produced for.
        anchor: Decoded cursor.
        backward: True to select records strictly before the anchor.

    Returns:
        Condition over the key fields.
    """
    values = anchor.order_values
    last = len(keys) - 1

    def after(i: int) -> Condition | None:
        key = keys[i]
        if i == last:
            return FieldCondition(key.field, _strict_op(key, backward), values[i])
        past, level = _key_bounds(key, values[i], backward)
        return any_of(past, all_of(level, after(i + 1)))

    predicate = after(0)
    assert predicate is not None
    return predicate


class PageEngine:
    """Resolves one window of a filtered, ordered record source.

    Stateless: every call is a pure function of the filter, order and
    window plus the current contents of the source.
    """

    def __init__(
        self,
        codec: CursorCodec | None = None,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = 100,
        strict_cursors: bool = False,
        tiebreaker: str = TIEBREAKER_FIELD,
    ) -> None:
        """Initialize the engine.

        Args:
            codec: Cursor codec (default CursorCodec()).
            default_page_size: Window size when neither first nor last is given.
            max_page_size: Larger requests are clamped to this size.
            strict_cursors: Raise InvalidCursorException for a bad anchor
                instead of ignoring it.
            tiebreaker: Unique field appended to every order.
        """
        self.codec = codec or CursorCodec()
        self.default_page_size = default_page_size
        self.max_page_size = max_page_size
        self.strict_cursors = strict_cursors
        self.tiebreaker = tiebreaker

    def window_size(self, window: WindowSpec) -> int:
        """Return the effective window size (default, validated, clamped).

        Raises:
            ValidationException: If the requested size is below 1.
        """
        requested = window.requested_size
        if requested is None:
            return self.default_page_size
        if requested < 1:
            field = "last" if window.is_backward else "first"
            raise ValidationException(f"{field} must be at least 1", field=field)
        if requested > self.max_page_size:
            logger.debug(
                "Clamping page size %s to %s", requested, self.max_page_size
            )
            return self.max_page_size
        return requested

    def cursor_for(self, record: Any, keys: Sequence[SortKey]) -> str:
        """Encode the resume position of record under the compound order keys."""
        fields = tuple(k.field for k in keys)
        payload = CursorPayload(
            id=record_value(record, self.tiebreaker),
            order_fields=fields,
            order_values=tuple(record_value(record, f) for f in fields),
            direction=keys[0].direction,
        )
        return self.codec.encode(payload)

    def _resolve_anchor(
        self, token: str | None, keys: Sequence[SortKey]
    ) -> tuple[CursorPayload | None, bool]:
        """Decode and check the anchor. Returns (payload, rejected)."""
        if token is None:
            return None, False
        try:
            payload = self.codec.decode(token)
            if payload.order_fields != tuple(k.field for k in keys):
                raise InvalidCursorException("cursor was issued for a different order")
            if payload.direction is not keys[0].direction:
                raise InvalidCursorException("cursor was issued for a different direction")
            if payload.order_values[-1] != payload.id:
                raise InvalidCursorException("tiebreaker value does not match id")
        except InvalidCursorException as e:
            if self.strict_cursors:
                raise
            logger.warning("Ignoring pagination cursor: %s", e.reason)
            return None, True
        return payload, False

    @traced("page_engine.resolve_page")
    async def resolve_page[T](
        self,
        source: IRecordSource[T],
        filter: Condition | None,
        order: Sequence[SortKey],
        window: WindowSpec,
        access_predicate: Condition | None = None,
    ) -> PageResult[T]:
        """Return one window of source.

        Args:
            source: Record source to read from.
            filter: Caller's filter (None for all records).
            order: Requested sort keys; the tiebreaker is appended if missing.
            window: first/after (forward) or last/before (backward).
            access_predicate: Domain restriction AND-ed with filter.

        Returns:
            PageResult with items in presentation order.

        Raises:
            ValidationException: If the window size is below 1.
            InvalidCursorException: If the anchor is bad and strict cursors are on.
        """
        keys = compound_order(order, self.tiebreaker)
        size = self.window_size(window)
        base = all_of(filter, access_predicate)
        backward = window.is_backward
        anchor, rejected = self._resolve_anchor(window.anchor, keys)

        resume = resume_predicate(keys, anchor, backward) if anchor else None
        fetch_order = reverse_order(keys) if backward else keys
        rows = await source.find_many(all_of(base, resume), fetch_order, size + 1)
        overflow = len(rows) > size
        items = list(rows[:size])

        if backward:
            items.reverse()
            has_previous, has_next = overflow, anchor is not None
        else:
            has_next, has_previous = overflow, anchor is not None

        # Sequential: one session cannot run two statements at once
        total = await source.count(base)
        add_span_attributes(page_size=size, returned=len(items), total_count=total)

        return PageResult(
            items=items,
            has_next=has_next,
            has_previous=has_previous,
            start_cursor=self.cursor_for(items[0], keys) if items else None,
            end_cursor=self.cursor_for(items[-1], keys) if items else None,
            total_count=total,
            cursor_rejected=rejected,
        )
