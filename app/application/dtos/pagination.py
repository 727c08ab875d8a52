"""DTOs for cursor pagination: cursor payload, window request, page result."""

from dataclasses import dataclass, field
from typing import Any

from app.domain.enums import SortDirection


@dataclass(frozen=True)
class CursorPayload:
    """Resume position carried inside an opaque cursor token.

    order_fields and order_values are parallel and in sort precedence; the
    last field is the tiebreaker, whose value equals id.
    """

    id: Any
    order_fields: tuple[str, ...]
    order_values: tuple[Any, ...]
    direction: SortDirection = SortDirection.ASC

    def value_of(self, field_name: str) -> Any:
        """Return the anchor value for field_name (KeyError if not carried)."""
        return self.order_values[self.order_fields.index(field_name)]


@dataclass(frozen=True)
class WindowSpec:
    """Requested window: forward (first/after) or backward (last/before).

    When both first and last are set, first wins and the request is forward.
    """

    first: int | None = None
    after: str | None = None
    last: int | None = None
    before: str | None = None

    @property
    def is_backward(self) -> bool:
        return self.first is None and self.last is not None

    @property
    def anchor(self) -> str | None:
        """Cursor that applies to the chosen direction (the other one is ignored)."""
        return self.before if self.is_backward else self.after

    @property
    def requested_size(self) -> int | None:
        return self.last if self.is_backward else self.first


@dataclass(frozen=True)
class PageResult[T]:
    """One window of an ordered result set plus navigation metadata.

    has_next / has_previous report records beyond the window in each
    direction; cursors point at the first and last returned item.
    cursor_rejected is True when a supplied anchor was ignored because it
    could not be decoded or was built for a different order.
    """

    items: list[T] = field(default_factory=list)
    has_next: bool = False
    has_previous: bool = False
    start_cursor: str | None = None
    end_cursor: str | None = None
    total_count: int = 0
    cursor_rejected: bool = False

    @classmethod
    def empty(cls) -> "PageResult[T]":
        """Page with no items (e.g. the caller can see no domains)."""
        return cls()
