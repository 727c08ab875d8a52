"""Predicate and order compilation to SQLAlchemy (rendered for PostgreSQL)."""

import pytest
from sqlalchemy.dialects import postgresql

from app.domain.enums import SortDirection
from app.domain.exceptions import ValidationException
from app.domain.value_objects.ordering import SortKey
from app.domain.value_objects.predicates import (
    FieldCondition,
    Operator,
    all_of,
    any_of,
    contains,
    eq,
    gte,
    in_,
)
from app.infrastructure.persistence.models import Country
from app.infrastructure.persistence.query_compiler import (
    compile_condition,
    compile_order,
)


def _sql(clause) -> str:
    return str(
        clause.compile(dialect=postgresql.dialect(), compile_kwargs={"literal_binds": True})
    )


def test_no_condition_compiles_to_none() -> None:
    assert compile_condition(Country, None) is None


def test_comparisons_and_null_checks() -> None:
    assert _sql(compile_condition(Country, gte("population", 5))) == "country.population >= 5"
    assert _sql(compile_condition(Country, eq("capital", None))) == "country.capital IS NULL"
    assert (
        _sql(compile_condition(Country, FieldCondition("capital", Operator.IS_NULL, False)))
        == "country.capital IS NOT NULL"
    )


def test_membership_and_empty_membership() -> None:
    assert _sql(compile_condition(Country, in_("domain_id", [3, 1, 2]))) == (
        "country.domain_id IN (1, 2, 3)"
    )
    assert _sql(compile_condition(Country, in_("domain_id", []))) == "false"


def test_boolean_combinations() -> None:
    clause = compile_condition(
        Country,
        any_of(
            gte("population", 1),
            all_of(eq("name", "b"), FieldCondition("id", Operator.GT, 3)),
        ),
    )
    sql = _sql(clause)
    assert "country.population >= 1 OR" in sql
    assert "country.name = 'b' AND country.id > 3" in sql


def test_contains_is_case_insensitive_and_escaped() -> None:
    sql = str(compile_condition(Country, contains("name", "50%_off")).compile(
        dialect=postgresql.dialect()
    ))
    assert "country.name" in sql
    assert "ESCAPE" in sql


def test_unknown_field_is_rejected() -> None:
    with pytest.raises(ValidationException) as exc_info:
        compile_condition(Country, eq("password", "x"))
    assert exc_info.value.details == {"field": "password"}


def test_order_puts_nulls_last_ascending_and_first_descending() -> None:
    clauses = compile_order(
        Country, [SortKey("population"), SortKey("id", SortDirection.DESC)]
    )
    assert [_sql(c) for c in clauses] == [
        "country.population ASC NULLS LAST",
        "country.id DESC NULLS FIRST",
    ]


def test_order_rejects_unknown_field() -> None:
    with pytest.raises(ValidationException):
        compile_order(Country, [SortKey("nope")])
