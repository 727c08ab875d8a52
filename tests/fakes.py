"""In-memory fakes of the record sources and domain graph.

Predicates are evaluated in Python with SQL semantics: a null field fails
every comparison, ascending keys sort nulls last and descending keys sort
them first.
"""

from __future__ import annotations

import dataclasses
import functools
from collections.abc import Callable, Iterable, Sequence
from datetime import datetime, timedelta, timezone
from typing import Any

from app.application.dtos.catalog import (
    AnimalCreate,
    AnimalResult,
    CountryCreate,
    CountryResult,
)
from app.application.dtos.domain import DomainResult, GrantResult
from app.application.dtos.user import UserCreate, UserResult
from app.application.services.page_engine import record_value
from app.domain.value_objects.ordering import SortKey
from app.domain.value_objects.predicates import (
    AllOf,
    AnyOf,
    Condition,
    FieldCondition,
    Operator,
)

BASE_TIME = datetime(2025, 1, 1, tzinfo=timezone.utc)


def matches(record: Any, condition: Condition | None) -> bool:
    """Evaluate condition against one record."""
    if condition is None:
        return True
    if isinstance(condition, AllOf):
        return all(matches(record, c) for c in condition.conditions)
    if isinstance(condition, AnyOf):
        return any(matches(record, c) for c in condition.conditions)
    assert isinstance(condition, FieldCondition)
    value = record_value(record, condition.field)
    target = condition.value
    match condition.op:
        case Operator.EQ:
            return value is None if target is None else value is not None and value == target
        case Operator.NE:
            return value is not None if target is None else value is not None and value != target
        case Operator.IS_NULL:
            return (value is None) == bool(target)
        case Operator.IN:
            return value is not None and value in target
        case Operator.CONTAINS:
            return value is not None and str(target).lower() in str(value).lower()
    if value is None or target is None:
        return False
    match condition.op:
        case Operator.GT:
            return value > target
        case Operator.GTE:
            return value >= target
        case Operator.LT:
            return value < target
        case Operator.LTE:
            return value <= target
    raise AssertionError(f"unhandled operator {condition.op}")


def _compare(a: Any, b: Any, keys: Sequence[SortKey]) -> int:
    for key in keys:
        va, vb = record_value(a, key.field), record_value(b, key.field)
        if va == vb:
            continue
        # NULL is the largest value: last ascending, first descending
        if va is None:
            c = 1
        elif vb is None:
            c = -1
        else:
            c = -1 if va < vb else 1
        return -c if key.descending else c
    return 0


def sort_records(records: Iterable[Any], keys: Sequence[SortKey]) -> list[Any]:
    return sorted(records, key=functools.cmp_to_key(lambda a, b: _compare(a, b, keys)))


class InMemoryRecordSource:
    """IRecordSource over a list. Counts calls so tests can assert on reads."""

    def __init__(self, records: Iterable[Any] = ()) -> None:
        self.records: list[Any] = list(records)
        self.find_calls: list[tuple[Condition | None, tuple[SortKey, ...], int]] = []
        self.count_calls = 0

    async def find_many(
        self, where: Condition | None, order: Sequence[SortKey], limit: int
    ) -> list[Any]:
        self.find_calls.append((where, tuple(order), limit))
        selected = [r for r in self.records if matches(r, where)]
        return sort_records(selected, order)[:limit]

    async def count(self, where: Condition | None) -> int:
        self.count_calls += 1
        return sum(1 for r in self.records if matches(r, where))


class InMemoryCatalogRepository(InMemoryRecordSource):
    """ICatalogRepository over frozen result dataclasses."""

    def __init__(
        self,
        build: Callable[[int, Any, int, int, datetime], Any],
        records: Iterable[Any] = (),
    ) -> None:
        super().__init__(records)
        self._build = build
        self._next_id = max((r.id for r in self.records), default=0) + 1

    def _index(self, record_id: int) -> int | None:
        for i, r in enumerate(self.records):
            if r.id == record_id:
                return i
        return None

    async def get_by_id(self, record_id: int) -> Any | None:
        i = self._index(record_id)
        return None if i is None else self.records[i]

    async def create_record(self, data: Any, domain_id: int, actor_id: int) -> Any:
        record = self._build(self._next_id, data, domain_id, actor_id, BASE_TIME)
        self._next_id += 1
        self.records.append(record)
        return record

    async def update_record(
        self, record_id: int, changes: dict[str, Any], actor_id: int
    ) -> Any | None:
        i = self._index(record_id)
        if i is None:
            return None
        values = {
            k: getattr(v, "value", v)
            for k, v in changes.items()
            if k in {f.name for f in dataclasses.fields(self.records[i])}
            and k not in ("id", "created_at", "created_by")
        }
        updated = dataclasses.replace(self.records[i], **values, updated_by=actor_id)
        self.records[i] = updated
        return updated

    async def delete_record(self, record_id: int) -> Any | None:
        i = self._index(record_id)
        if i is None:
            return None
        return self.records.pop(i)


def make_country(
    id: int,
    name: str,
    domain_id: int | None = 1,
    continent: str = "europe",
    population: int | None = None,
    area: float | None = None,
    capital: str | None = None,
    currency: str | None = None,
) -> CountryResult:
    return CountryResult(
        id=id,
        name=name,
        capital=capital,
        population=population,
        area=area,
        currency=currency,
        continent=continent,
        domain_id=domain_id,
        created_at=BASE_TIME + timedelta(minutes=id),
        updated_at=BASE_TIME + timedelta(minutes=id),
    )


def make_animal(
    id: int,
    name: str,
    domain_id: int | None = 1,
    category: str = "mammals",
    species: str | None = None,
    habitat: str | None = None,
) -> AnimalResult:
    return AnimalResult(
        id=id,
        name=name,
        species=species,
        habitat=habitat,
        diet=None,
        conservation_status=None,
        category=category,
        domain_id=domain_id,
        created_at=BASE_TIME + timedelta(minutes=id),
        updated_at=BASE_TIME + timedelta(minutes=id),
    )


def _build_country(
    id: int, data: CountryCreate, domain_id: int, actor_id: int, now: datetime
) -> CountryResult:
    return CountryResult(
        id=id,
        name=data.name,
        capital=data.capital,
        population=data.population,
        area=data.area,
        currency=data.currency,
        continent=data.continent.value,
        domain_id=domain_id,
        created_at=now,
        updated_at=now,
        created_by=actor_id,
        updated_by=actor_id,
    )


def _build_animal(
    id: int, data: AnimalCreate, domain_id: int, actor_id: int, now: datetime
) -> AnimalResult:
    return AnimalResult(
        id=id,
        name=data.name,
        species=data.species,
        habitat=data.habitat,
        diet=data.diet,
        conservation_status=data.conservation_status,
        category=data.category.value,
        domain_id=domain_id,
        created_at=now,
        updated_at=now,
        created_by=actor_id,
        updated_by=actor_id,
    )


def country_repo(records: Iterable[CountryResult] = ()) -> InMemoryCatalogRepository:
    return InMemoryCatalogRepository(_build_country, records)


def animal_repo(records: Iterable[AnimalResult] = ()) -> InMemoryCatalogRepository:
    return InMemoryCatalogRepository(_build_animal, records)


class DomainStore:
    """Shared state behind the domain graph, domain, grant and user fakes."""

    def __init__(self) -> None:
        self.domains: dict[int, DomainResult] = {}
        self.grants: list[GrantResult] = []
        self.users: dict[int, UserResult] = {}
        self._next_domain_id = 1
        self._next_grant_id = 1
        self._next_user_id = 1

    def add_user(
        self,
        user_id: int | None = None,
        username: str | None = None,
        email: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> UserResult:
        user_id = user_id if user_id is not None else self._next_user_id
        self._next_user_id = max(self._next_user_id, user_id + 1)
        user = UserResult(
            id=user_id,
            username=username or f"user{user_id}",
            email=email or f"user{user_id}@example.com",
            first_name=first_name,
            last_name=last_name,
            created_at=BASE_TIME + timedelta(minutes=user_id),
            updated_at=BASE_TIME + timedelta(minutes=user_id),
        )
        self.users[user_id] = user
        return user

    def add_domain(self, name: str, parent_id: int | None = None, id: int | None = None) -> DomainResult:
        domain_id = id if id is not None else self._next_domain_id
        self._next_domain_id = max(self._next_domain_id, domain_id + 1)
        domain = DomainResult(
            id=domain_id,
            name=name,
            parent_id=parent_id,
            created_at=BASE_TIME + timedelta(minutes=domain_id),
            updated_at=BASE_TIME + timedelta(minutes=domain_id),
        )
        self.domains[domain_id] = domain
        return domain

    def add_grant(self, user_id: int, domain_id: int, granted_by: int | None = None) -> GrantResult:
        grant = GrantResult(
            id=self._next_grant_id,
            user_id=user_id,
            domain_id=domain_id,
            created_at=BASE_TIME + timedelta(minutes=self._next_grant_id),
            created_by=granted_by,
        )
        self._next_grant_id += 1
        self.grants.append(grant)
        return grant


class InMemoryDomainGraph:
    """IDomainGraphSource over a DomainStore. Counts children_of/grants_of calls."""

    def __init__(self, store: DomainStore) -> None:
        self.store = store
        self.children_calls = 0
        self.grants_calls = 0

    async def children_of(self, domain_id: int) -> set[int]:
        self.children_calls += 1
        return {d.id for d in self.store.domains.values() if d.parent_id == domain_id}

    async def parent_of(self, domain_id: int) -> int | None:
        domain = self.store.domains.get(domain_id)
        return domain.parent_id if domain else None

    async def grants_of(self, user_id: int) -> set[int]:
        self.grants_calls += 1
        return {g.domain_id for g in self.store.grants if g.user_id == user_id}


class InMemoryDomainRepository:
    """IDomainRepository over a DomainStore."""

    def __init__(self, store: DomainStore) -> None:
        self.store = store

    async def find_many(
        self, where: Condition | None, order: Sequence[SortKey], limit: int
    ) -> list[DomainResult]:
        selected = [d for d in self.store.domains.values() if matches(d, where)]
        return sort_records(selected, order)[:limit]

    async def count(self, where: Condition | None) -> int:
        return sum(1 for d in self.store.domains.values() if matches(d, where))

    async def get_by_id(self, domain_id: int) -> DomainResult | None:
        return self.store.domains.get(domain_id)

    async def create_domain(
        self, name: str, parent_id: int | None, actor_id: int
    ) -> DomainResult:
        domain = self.store.add_domain(name, parent_id)
        domain = dataclasses.replace(domain, created_by=actor_id, updated_by=actor_id)
        self.store.domains[domain.id] = domain
        return domain

    async def update_domain(
        self, domain_id: int, changes: dict[str, Any], actor_id: int
    ) -> DomainResult | None:
        current = self.store.domains.get(domain_id)
        if current is None:
            return None
        values = {k: v for k, v in changes.items() if k in ("name", "parent_id")}
        updated = dataclasses.replace(current, **values, updated_by=actor_id)
        self.store.domains[domain_id] = updated
        return updated

    async def delete_domain(self, domain_id: int) -> DomainResult | None:
        self.store.grants = [g for g in self.store.grants if g.domain_id != domain_id]
        return self.store.domains.pop(domain_id, None)


class InMemoryGrantRepository:
    """IGrantRepository over a DomainStore."""

    def __init__(self, store: DomainStore) -> None:
        self.store = store

    async def find_many(
        self, where: Condition | None, order: Sequence[SortKey], limit: int
    ) -> list[GrantResult]:
        selected = [g for g in self.store.grants if matches(g, where)]
        return sort_records(selected, order)[:limit]

    async def count(self, where: Condition | None) -> int:
        return sum(1 for g in self.store.grants if matches(g, where))

    async def get(self, user_id: int, domain_id: int) -> GrantResult | None:
        for g in self.store.grants:
            if g.user_id == user_id and g.domain_id == domain_id:
                return g
        return None

    async def create_grant(
        self, user_id: int, domain_id: int, granted_by: int
    ) -> GrantResult:
        return self.store.add_grant(user_id, domain_id, granted_by)

    async def delete_grant(self, user_id: int, domain_id: int) -> GrantResult | None:
        grant = await self.get(user_id, domain_id)
        if grant is not None:
            self.store.grants.remove(grant)
        return grant


class InMemoryUserRepository:
    """IUserRepository over a DomainStore. Deleting a user drops their grants."""

    def __init__(self, store: DomainStore) -> None:
        self.store = store

    async def find_many(
        self, where: Condition | None, order: Sequence[SortKey], limit: int
    ) -> list[UserResult]:
        selected = [u for u in self.store.users.values() if matches(u, where)]
        return sort_records(selected, order)[:limit]

    async def count(self, where: Condition | None) -> int:
        return sum(1 for u in self.store.users.values() if matches(u, where))

    async def get_by_id(self, user_id: int) -> UserResult | None:
        return self.store.users.get(user_id)

    async def get_by_username(self, username: str) -> UserResult | None:
        return next((u for u in self.store.users.values() if u.username == username), None)

    async def get_by_email(self, email: str) -> UserResult | None:
        return next(
            (u for u in self.store.users.values() if u.email.lower() == email.lower()), None
        )

    async def create_user(self, data: UserCreate, actor_id: int | None) -> UserResult:
        user = self.store.add_user(
            username=data.username,
            email=data.email,
            first_name=data.first_name,
            last_name=data.last_name,
        )
        user = dataclasses.replace(user, created_by=actor_id, updated_by=actor_id)
        self.store.users[user.id] = user
        return user

    async def update_user(
        self, user_id: int, changes: dict[str, Any], actor_id: int
    ) -> UserResult | None:
        current = self.store.users.get(user_id)
        if current is None:
            return None
        updated = dataclasses.replace(current, **changes, updated_by=actor_id)
        self.store.users[user_id] = updated
        return updated

    async def delete_user(self, user_id: int) -> UserResult | None:
        self.store.grants = [g for g in self.store.grants if g.user_id != user_id]
        return self.store.users.pop(user_id, None)


def sample_tree() -> DomainStore:
    """Root(1) -> Child(2) -> Grandchild(3), plus unrelated root Other(4).

    User 1 is granted Root; user 2 is granted Child; user 3 has no grants.
    """
    store = DomainStore()
    for user_id in (1, 2, 3):
        store.add_user(user_id)
    store.add_domain("Root", id=1)
    store.add_domain("Child", parent_id=1, id=2)
    store.add_domain("Grandchild", parent_id=2, id=3)
    store.add_domain("Other", id=4)
    store.add_grant(1, 1)
    store.add_grant(2, 2)
    return store
