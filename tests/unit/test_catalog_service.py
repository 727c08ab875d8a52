"""CatalogService: domain-scoped list/get/create/update/delete over fakes."""

import pytest

from app.application.dtos.catalog import CountryCreate
from app.application.dtos.pagination import WindowSpec
from app.application.services import AccessGate, DomainAccessResolver, PageEngine
from app.application.use_cases.catalog import CatalogService
from app.domain.enums import Continent
from app.domain.exceptions import DomainAccessDeniedException, ValidationException
from app.domain.value_objects.ordering import SortKey
from tests.fakes import InMemoryDomainGraph, country_repo, make_country, sample_tree

NAME = [SortKey("name")]


@pytest.fixture
def repo():
    return country_repo(
        [
            make_country(1, "Austria", domain_id=1),
            make_country(2, "Belgium", domain_id=2),
            make_country(3, "Chile", domain_id=3),
            make_country(4, "Denmark", domain_id=4),
            make_country(5, "Fiji", domain_id=None),
        ]
    )


@pytest.fixture
def service(repo) -> CatalogService:
    resolver = DomainAccessResolver(InMemoryDomainGraph(sample_tree()))
    return CatalogService(repo, AccessGate(resolver), PageEngine())


def _names(page) -> list[str]:
    return [c.name for c in page.items]


async def test_list_returns_only_accessible_records(service) -> None:
    page = await service.list_page(1, None, NAME, WindowSpec())
    assert _names(page) == ["Austria", "Belgium", "Chile"]
    assert page.total_count == 3


async def test_list_for_child_grant_excludes_parent_records(service) -> None:
    page = await service.list_page(2, None, NAME, WindowSpec())
    assert _names(page) == ["Belgium", "Chile"]


async def test_list_narrowed_by_requested_view_domains(service) -> None:
    page = await service.list_page(1, None, NAME, WindowSpec(), view_domains=[3, 4])
    assert _names(page) == ["Chile"]


async def test_list_with_nothing_visible_is_empty(service) -> None:
    page = await service.list_page(3, None, NAME, WindowSpec())
    assert page.items == [] and page.total_count == 0
    page = await service.list_page(2, None, NAME, WindowSpec(), view_domains=[4])
    assert page.items == []


async def test_list_validates_window_even_when_nothing_visible(service) -> None:
    with pytest.raises(ValidationException):
        await service.list_page(3, None, NAME, WindowSpec(first=0))


async def test_orphaned_records_are_never_listed(service) -> None:
    page = await service.list_page(1, None, NAME, WindowSpec(first=100))
    assert "Fiji" not in _names(page)


async def test_get_hides_inaccessible_and_missing_records(service) -> None:
    assert (await service.get(1, 3)).name == "Chile"
    assert await service.get(2, 1) is None
    assert await service.get(1, 5) is None
    assert await service.get(1, 404) is None
    assert await service.get(1, 3, view_domains=[1]) is None


async def test_create_in_accessible_domain(service, repo) -> None:
    created = await service.create(2, CountryCreate(name="Estonia", continent=Continent.EUROPE), 3)
    assert created.domain_id == 3
    assert created.created_by == 2
    assert await repo.get_by_id(created.id) == created


@pytest.mark.parametrize("domain_id", [1, 4, None])
async def test_create_outside_accessible_domains_is_denied(service, domain_id) -> None:
    with pytest.raises(DomainAccessDeniedException) as exc_info:
        await service.create(2, CountryCreate(name="X", continent=Continent.ASIA), domain_id)
    assert exc_info.value.domain_id == domain_id


async def test_update_applies_changes(service) -> None:
    updated = await service.update(1, 2, {"name": "Belgique", "domain_id": 3})
    assert updated.name == "Belgique"
    assert updated.domain_id == 3
    assert updated.updated_by == 1


async def test_update_cannot_move_record_out_of_reach(service, repo) -> None:
    with pytest.raises(DomainAccessDeniedException) as exc_info:
        await service.update(2, 2, {"domain_id": 1})
    assert exc_info.value.domain_id == 1
    assert (await repo.get_by_id(2)).domain_id == 2


async def test_update_of_inaccessible_record_looks_missing(service, repo) -> None:
    assert await service.update(2, 1, {"name": "Nope"}) is None
    assert await service.update(1, 5, {"domain_id": 1}) is None
    assert (await repo.get_by_id(1)).name == "Austria"
    assert (await repo.get_by_id(5)).domain_id is None


async def test_update_or_delete_missing_record_returns_none(service) -> None:
    assert await service.update(1, 404, {"name": "x"}) is None
    assert await service.delete(1, 404) is None


async def test_delete(service, repo) -> None:
    deleted = await service.delete(1, 1)
    assert deleted.name == "Austria"
    assert await repo.get_by_id(1) is None


async def test_delete_of_inaccessible_record_looks_missing(service, repo) -> None:
    assert await service.delete(1, 4) is None
    assert await service.delete(1, 5) is None
    assert await repo.get_by_id(4) is not None
    assert await repo.get_by_id(5) is not None
