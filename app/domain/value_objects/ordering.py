"""Compound sort orders.

A compound order is a sequence of SortKey in precedence order that always
ends with the unique tiebreaker field, so every two records compare
unequal and paging is deterministic.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from app.core.constants import TIEBREAKER_FIELD
from app.domain.enums import SortDirection


@dataclass(frozen=True)
class SortKey:
    """One field of a compound order."""

    field: str
    direction: SortDirection = SortDirection.ASC

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC

    def reversed(self) -> "SortKey":
        return SortKey(self.field, self.direction.reversed())


def compound_order(
    keys: Sequence[SortKey], tiebreaker: str = TIEBREAKER_FIELD
) -> tuple[SortKey, ...]:
    """Return keys with the tiebreaker moved (or appended) to the end.

    Duplicate fields keep their first occurrence. An appended tiebreaker
    takes the direction of the primary key; with no keys at all the order
    is the tiebreaker ascending.
    """
    seen: set[str] = set()
    ordered: list[SortKey] = []
    tie_key: SortKey | None = None
    for key in keys:
        if key.field in seen:
            continue
        seen.add(key.field)
        if key.field == tiebreaker:
            tie_key = key
            continue
        ordered.append(key)
    if tie_key is None:
        direction = ordered[0].direction if ordered else SortDirection.ASC
        tie_key = SortKey(tiebreaker, direction)
    ordered.append(tie_key)
    return tuple(ordered)


def reverse_order(keys: Sequence[SortKey]) -> tuple[SortKey, ...]:
    """Flip every key's direction (used to read a window backwards)."""
    return tuple(k.reversed() for k in keys)
