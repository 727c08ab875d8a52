"""Translate filter predicates and compound orders into SQLAlchemy expressions.

Field names are resolved against the mapped columns of the model; a name
that is not a column raises ValidationException so callers cannot reach
arbitrary attributes. NULLs sort last ascending and first descending, so
reversing every key reverses the whole order.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy import and_, false, inspect as sa_inspect, or_
from sqlalchemy.sql.elements import ColumnElement

from app.domain.exceptions import ValidationException
from app.domain.value_objects.ordering import SortKey
from app.domain.value_objects.predicates import (
    AllOf,
    AnyOf,
    Condition,
    FieldCondition,
    Operator,
)


def _column(model: type, field: str) -> Any:
    columns = sa_inspect(model).columns
    if field not in columns:
        raise ValidationException(f"Unknown field: {field}", field=field)
    return getattr(model, field)


def _compile_field(model: type, cond: FieldCondition) -> ColumnElement[bool]:
    col = _column(model, cond.field)
    value = cond.value
    match cond.op:
        case Operator.EQ:
            return col.is_(None) if value is None else col == value
        case Operator.NE:
            return col.is_not(None) if value is None else col != value
        case Operator.GT:
            return col > value
        case Operator.GTE:
            return col >= value
        case Operator.LT:
            return col < value
        case Operator.LTE:
            return col <= value
        case Operator.CONTAINS:
            return col.icontains(value, autoescape=True)
        case Operator.IN:
            values = sorted(value)
            return col.in_(values) if values else false()
        case Operator.IS_NULL:
            return col.is_(None) if value else col.is_not(None)
    raise ValidationException(f"Unsupported operator: {cond.op}", field=cond.field)


def compile_condition(model: type, condition: Condition | None) -> ColumnElement[bool] | None:
    """Return a SQL boolean expression for condition (None when unconstrained)."""
    if condition is None:
        return None
    if isinstance(condition, FieldCondition):
        return _compile_field(model, condition)
    parts = [compile_condition(model, c) for c in condition.conditions]
    if isinstance(condition, AllOf):
        return and_(*parts)
    if isinstance(condition, AnyOf):
        return or_(*parts)
    raise TypeError(f"Unsupported condition: {type(condition)}")


def compile_order(model: type, keys: Sequence[SortKey]) -> list[Any]:
    """Return ORDER BY clauses for a compound order."""
    clauses = []
    for key in keys:
        col = _column(model, key.field)
        clauses.append(col.desc().nulls_first() if key.descending else col.asc().nulls_last())
    return clauses
