"""Build filter conditions and sort orders from list-request inputs.

Text filters are case-insensitive substring matches; numeric bounds are
inclusive. A free-text search ORs substring matches over the text fields
with an exact match on the enum field (only when the term is a valid
enum value). Filters and search are AND-ed.
"""

from __future__ import annotations

from enum import Enum

from app.application.dtos.catalog import AnimalFilter, CountryFilter
from app.application.dtos.user import UserFilter
from app.domain.enums import (
    AnimalCategory,
    AnimalOrderField,
    Continent,
    CountryOrderField,
    DomainOrderField,
    GrantOrderField,
    SortDirection,
    UserOrderField,
)
from app.domain.value_objects.ordering import SortKey
from app.domain.value_objects.predicates import (
    Condition,
    all_of,
    any_of,
    contains,
    eq,
    gte,
    lte,
)

COUNTRY_ORDER_FIELDS: dict[CountryOrderField, str] = {
    CountryOrderField.NAME: "name",
    CountryOrderField.POPULATION: "population",
    CountryOrderField.AREA: "area",
    CountryOrderField.ID: "id",
}

ANIMAL_ORDER_FIELDS: dict[AnimalOrderField, str] = {
    AnimalOrderField.NAME: "name",
    AnimalOrderField.SPECIES: "species",
    AnimalOrderField.CATEGORY: "category",
    AnimalOrderField.ID: "id",
}

DOMAIN_ORDER_FIELDS: dict[DomainOrderField, str] = {
    DomainOrderField.NAME: "name",
    DomainOrderField.CREATED_AT: "created_at",
    DomainOrderField.ID: "id",
}

GRANT_ORDER_FIELDS: dict[GrantOrderField, str] = {
    GrantOrderField.CREATED_AT: "created_at",
    GrantOrderField.ID: "id",
}

USER_ORDER_FIELDS: dict[UserOrderField, str] = {
    UserOrderField.USERNAME: "username",
    UserOrderField.EMAIL: "email",
    UserOrderField.FIRST_NAME: "first_name",
    UserOrderField.LAST_NAME: "last_name",
    UserOrderField.CREATED_AT: "created_at",
    UserOrderField.ID: "id",
}

_COUNTRY_SEARCH_FIELDS = ("name", "capital", "currency")
_ANIMAL_SEARCH_FIELDS = ("name", "species", "habitat", "diet", "conservation_status")
_USER_FIELDS = ("username", "email", "first_name", "last_name")


def _enum_match(enum_cls: type[Enum], field: str, term: str) -> Condition | None:
    try:
        return eq(field, enum_cls(term.strip().lower()).value)
    except ValueError:
        return None


def _search(
    fields: tuple[str, ...], term: str | None, extra: Condition | None = None
) -> Condition | None:
    if not term:
        return None
    return any_of(*(contains(f, term) for f in fields), extra)


def build_country_filter(
    filter: CountryFilter | None = None, search: str | None = None
) -> Condition | None:
    """Return the country condition for filter and search (None = everything)."""
    parts: list[Condition | None] = []
    if filter is not None:
        if filter.continent is not None:
            parts.append(eq("continent", Continent(filter.continent).value))
        if filter.population_min is not None:
            parts.append(gte("population", filter.population_min))
        if filter.population_max is not None:
            parts.append(lte("population", filter.population_max))
        if filter.area_min is not None:
            parts.append(gte("area", filter.area_min))
        if filter.area_max is not None:
            parts.append(lte("area", filter.area_max))
        if filter.name:
            parts.append(contains("name", filter.name))
        if filter.capital:
            parts.append(contains("capital", filter.capital))
        if filter.currency:
            parts.append(contains("currency", filter.currency))
    if search:
        parts.append(
            _search(
                _COUNTRY_SEARCH_FIELDS,
                search,
                _enum_match(Continent, "continent", search),
            )
        )
    return all_of(*parts)


def build_animal_filter(
    filter: AnimalFilter | None = None, search: str | None = None
) -> Condition | None:
    """Return the animal condition for filter and search (None = everything)."""
    parts: list[Condition | None] = []
    if filter is not None:
        if filter.category is not None:
            parts.append(eq("category", AnimalCategory(filter.category).value))
        for field in ("species", "habitat", "diet", "conservation_status", "name"):
            value = getattr(filter, field)
            if value:
                parts.append(contains(field, value))
    if search:
        parts.append(
            _search(
                _ANIMAL_SEARCH_FIELDS,
                search,
                _enum_match(AnimalCategory, "category", search),
            )
        )
    return all_of(*parts)


def build_user_filter(
    filter: UserFilter | None = None, search: str | None = None
) -> Condition | None:
    """Return the user condition for filter and search (None = everything)."""
    parts: list[Condition | None] = []
    if filter is not None:
        for field in _USER_FIELDS:
            value = getattr(filter, field)
            if value:
                parts.append(contains(field, value))
    if search:
        parts.append(_search(_USER_FIELDS, search))
    return all_of(*parts)


def build_order(field: str, direction: SortDirection = SortDirection.ASC) -> list[SortKey]:
    """Single-key order; the page engine appends the id tiebreaker."""
    return [SortKey(field, direction)]


def country_order(
    order_by: CountryOrderField = CountryOrderField.NAME,
    direction: SortDirection = SortDirection.ASC,
) -> list[SortKey]:
    return build_order(COUNTRY_ORDER_FIELDS[order_by], direction)


def animal_order(
    order_by: AnimalOrderField = AnimalOrderField.NAME,
    direction: SortDirection = SortDirection.ASC,
) -> list[SortKey]:
    return build_order(ANIMAL_ORDER_FIELDS[order_by], direction)


def domain_order(
    order_by: DomainOrderField = DomainOrderField.NAME,
    direction: SortDirection = SortDirection.ASC,
) -> list[SortKey]:
    return build_order(DOMAIN_ORDER_FIELDS[order_by], direction)


def grant_order(
    order_by: GrantOrderField = GrantOrderField.CREATED_AT,
    direction: SortDirection = SortDirection.ASC,
) -> list[SortKey]:
    return build_order(GRANT_ORDER_FIELDS[order_by], direction)


def user_order(
    order_by: UserOrderField = UserOrderField.USERNAME,
    direction: SortDirection = SortDirection.ASC,
) -> list[SortKey]:
    return build_order(USER_ORDER_FIELDS[order_by], direction)
