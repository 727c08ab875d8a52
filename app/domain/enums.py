"""Domain enumerations for the catalog service.

Enums represent fixed sets of domain values (continents, animal
categories, sort direction, sortable fields per resource).
"""

from enum import Enum


class Continent(str, Enum):
    """Continents used to classify countries."""

    AFRICA = "africa"
    ASIA = "asia"
    EUROPE = "europe"
    NORTH_AMERICA = "northamerica"
    SOUTH_AMERICA = "southamerica"
    OCEANIA = "oceania"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid continent values as strings."""
        return [c.value for c in cls]


class AnimalCategory(str, Enum):
    """Categories used to classify animals."""

    MAMMALS = "mammals"
    BIRDS = "birds"
    REPTILES = "reptiles"
    AMPHIBIANS = "amphibians"
    FISH = "fish"
    INSECTS = "insects"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid category values as strings."""
        return [c.value for c in cls]


class SortDirection(str, Enum):
    """Sort direction for one key of a compound order."""

    ASC = "ASC"
    DESC = "DESC"

    def reversed(self) -> "SortDirection":
        """Return the opposite direction."""
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class CountryOrderField(str, Enum):
    """Sortable country fields (the id tiebreaker is always appended)."""

    NAME = "NAME"
    POPULATION = "POPULATION"
    AREA = "AREA"
    ID = "ID"


class AnimalOrderField(str, Enum):
    """Sortable animal fields."""

    NAME = "NAME"
    SPECIES = "SPECIES"
    CATEGORY = "CATEGORY"
    ID = "ID"


class DomainOrderField(str, Enum):
    """Sortable domain fields."""

    NAME = "NAME"
    CREATED_AT = "CREATED_AT"
    ID = "ID"


class GrantOrderField(str, Enum):
    """Sortable grant fields."""

    CREATED_AT = "CREATED_AT"
    ID = "ID"


class UserOrderField(str, Enum):
    """Sortable user fields."""

    USERNAME = "USERNAME"
    EMAIL = "EMAIL"
    FIRST_NAME = "FIRST_NAME"
    LAST_NAME = "LAST_NAME"
    CREATED_AT = "CREATED_AT"
    ID = "ID"
