"""Domain value objects: filter predicates and compound orders."""

from app.domain.value_objects.ordering import SortKey, compound_order, reverse_order
from app.domain.value_objects.predicates import (
    AllOf,
    AnyOf,
    Condition,
    FieldCondition,
    Operator,
    all_of,
    any_of,
)

__all__ = [
    "AllOf",
    "AnyOf",
    "Condition",
    "FieldCondition",
    "Operator",
    "SortKey",
    "all_of",
    "any_of",
    "compound_order",
    "reverse_order",
]
