"""AccessGate: read scopes and write validation on top of the resolver."""

import pytest

from app.application.services import AccessGate, DomainAccessResolver
from app.domain.exceptions import DomainAccessDeniedException
from app.domain.value_objects.predicates import FieldCondition, Operator
from tests.fakes import InMemoryDomainGraph, sample_tree


@pytest.fixture
def gate() -> AccessGate:
    return AccessGate(DomainAccessResolver(InMemoryDomainGraph(sample_tree())))


async def test_effective_view_defaults_to_accessible_set(gate) -> None:
    assert await gate.effective_view_domains(1) == frozenset({1, 2, 3})


async def test_effective_view_intersects_requested_subset(gate) -> None:
    assert await gate.effective_view_domains(1, [3, 4, 42]) == frozenset({3})


async def test_effective_view_may_be_empty(gate) -> None:
    assert await gate.effective_view_domains(2, [1, 4]) == frozenset()
    assert await gate.effective_view_domains(3) == frozenset()


async def test_validate_write_domain_returns_accessible_id(gate) -> None:
    assert await gate.validate_write_domain(1, 3) == 3


async def test_validate_write_domain_denies_outside_domain(gate) -> None:
    with pytest.raises(DomainAccessDeniedException) as exc_info:
        await gate.validate_write_domain(2, 1)
    assert exc_info.value.domain_id == 1
    assert exc_info.value.details == {"domain_id": 1}


async def test_validate_write_domain_denies_missing_domain(gate) -> None:
    with pytest.raises(DomainAccessDeniedException) as exc_info:
        await gate.validate_write_domain(1, None)
    assert exc_info.value.domain_id is None


async def test_view_predicate_is_membership_over_effective_domains(gate) -> None:
    assert await gate.view_predicate(2) == FieldCondition(
        "domain_id", Operator.IN, frozenset({2, 3})
    )
    assert await gate.view_predicate(3, field="id") == FieldCondition(
        "id", Operator.IN, frozenset()
    )
