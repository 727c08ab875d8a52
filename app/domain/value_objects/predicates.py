"""Backend-neutral filter predicates.

A small expression tree (field conditions combined with AND/OR) that the
application layer builds and record sources translate for their store.
The SQL translation lives in app.infrastructure.persistence.query_compiler.

None is used throughout to mean "no constraint": all_of/any_of drop None
operands and return None when nothing is left.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any


class Operator(str, Enum):
    """Comparison applied by a FieldCondition."""

    EQ = "eq"
    NE = "ne"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    CONTAINS = "contains"  # case-insensitive substring
    IN = "in"
    IS_NULL = "is_null"  # value: True for IS NULL, False for IS NOT NULL


@dataclass(frozen=True)
class FieldCondition:
    """Compare one record field against a value."""

    field: str
    op: Operator
    value: Any = None


@dataclass(frozen=True)
class AllOf:
    """Conjunction of conditions."""

    conditions: tuple[Condition, ...]


@dataclass(frozen=True)
class AnyOf:
    """Disjunction of conditions."""

    conditions: tuple[Condition, ...]


Condition = FieldCondition | AllOf | AnyOf


def _collect(
    conditions: Iterable[Condition | None], kind: type[AllOf] | type[AnyOf]
) -> list[Condition]:
    out: list[Condition] = []
    for c in conditions:
        if c is None:
            continue
        if isinstance(c, kind):
            out.extend(c.conditions)
        else:
            out.append(c)
    return out


def all_of(*conditions: Condition | None) -> Condition | None:
    """AND the given conditions, flattening nested conjunctions."""
    parts = _collect(conditions, AllOf)
    if not parts:
        return None
    if len(parts) == 1:
        return parts[0]
    return AllOf(tuple(parts))


def any_of(*conditions: Condition | None) -> Condition | None:
    """OR the given conditions, flattening nested disjunctions."""
    parts = _collect(conditions, AnyOf)
    if not parts:
        return None
    if len(parts) == 1:
        return parts[0]
    return AnyOf(tuple(parts))


def eq(field: str, value: Any) -> FieldCondition:
    return FieldCondition(field, Operator.EQ, value)


def gte(field: str, value: Any) -> FieldCondition:
    return FieldCondition(field, Operator.GTE, value)


def lte(field: str, value: Any) -> FieldCondition:
    return FieldCondition(field, Operator.LTE, value)


def contains(field: str, value: str) -> FieldCondition:
    return FieldCondition(field, Operator.CONTAINS, value)


def in_(field: str, values: Iterable[Any]) -> FieldCondition:
    """Membership test; an empty collection matches nothing."""
    return FieldCondition(field, Operator.IN, frozenset(values))


def referenced_fields(condition: Condition | None) -> set[str]:
    """Return every field name used anywhere in the condition tree."""
    if condition is None:
        return set()
    if isinstance(condition, FieldCondition):
        return {condition.field}
    fields: set[str] = set()
    for c in condition.conditions:
        fields |= referenced_fields(c)
    return fields
