"""Country API: thin routes delegating to CatalogService."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response

from app.api.v1.dependencies import (
    get_country_service,
    get_create_domain,
    get_user_id,
    get_view_domains,
)
from app.application.dtos.catalog import CountryCreate, CountryFilter, CountryResult
from app.application.dtos.pagination import WindowSpec
from app.application.services.query_builders import build_country_filter, country_order
from app.application.use_cases.catalog import CatalogService
from app.core.limiter import limit_writes
from app.domain.enums import Continent, CountryOrderField, SortDirection
from app.schemas.catalog import (
    CountryCreateRequest,
    CountryResponse,
    CountryUpdateRequest,
)
from app.schemas.pagination import Page

router = APIRouter()

CountryService = CatalogService[CountryResult]

# Explicit null is ignored for these (the columns are NOT NULL)
_REQUIRED_FIELDS = frozenset({"name", "continent"})


@router.get("", response_model=Page[CountryResponse])
async def list_countries(
    user_id: Annotated[int, Depends(get_user_id)],
    view_domains: Annotated[list[int] | None, Depends(get_view_domains)],
    country_svc: Annotated[CountryService, Depends(get_country_service)],
    search: Annotated[str | None, Query(max_length=200)] = None,
    continent: Continent | None = None,
    population_min: Annotated[int | None, Query(ge=0)] = None,
    population_max: Annotated[int | None, Query(ge=0)] = None,
    area_min: Annotated[float | None, Query(ge=0)] = None,
    area_max: Annotated[float | None, Query(ge=0)] = None,
    name: Annotated[str | None, Query(max_length=200)] = None,
    capital: Annotated[str | None, Query(max_length=200)] = None,
    currency: Annotated[str | None, Query(max_length=100)] = None,
    order_by: CountryOrderField = CountryOrderField.NAME,
    direction: SortDirection = SortDirection.ASC,
    first: Annotated[int | None, Query(description="Forward window size")] = None,
    after: Annotated[str | None, Query(description="Cursor to read after")] = None,
    last: Annotated[int | None, Query(description="Backward window size")] = None,
    before: Annotated[str | None, Query(description="Cursor to read before")] = None,
):
    """List countries in the caller's view domains (cursor-paginated)."""
    filter = build_country_filter(
        CountryFilter(
            continent=continent,
            population_min=population_min,
            population_max=population_max,
            area_min=area_min,
            area_max=area_max,
            name=name,
            capital=capital,
            currency=currency,
        ),
        search=search,
    )
    result = await country_svc.list_page(
        user_id,
        filter,
        country_order(order_by, direction),
        WindowSpec(first=first, after=after, last=last, before=before),
        view_domains=view_domains,
    )
    return Page[CountryResponse].from_result(
        result, [CountryResponse.model_validate(c) for c in result.items]
    )


@router.post("", response_model=CountryResponse, status_code=201)
@limit_writes
async def create_country(
    request: Request,
    body: CountryCreateRequest,
    user_id: Annotated[int, Depends(get_user_id)],
    header_domain: Annotated[int | None, Depends(get_create_domain)],
    country_svc: Annotated[CountryService, Depends(get_country_service)],
):
    """Create a country in body.domain_id (or the create-domain header)."""
    data = CountryCreate(**body.model_dump(exclude={"domain_id"}))
    domain_id = body.domain_id if body.domain_id is not None else header_domain
    created = await country_svc.create(user_id, data, domain_id)
    return CountryResponse.model_validate(created)


@router.get("/{country_id}", response_model=CountryResponse)
async def get_country(
    country_id: int,
    user_id: Annotated[int, Depends(get_user_id)],
    view_domains: Annotated[list[int] | None, Depends(get_view_domains)],
    country_svc: Annotated[CountryService, Depends(get_country_service)],
):
    """Get a country visible to the caller."""
    country = await country_svc.get(user_id, country_id, view_domains=view_domains)
    if not country:
        raise HTTPException(status_code=404, detail="Country not found")
    return CountryResponse.model_validate(country)


@router.patch("/{country_id}", response_model=CountryResponse)
@limit_writes
async def update_country(
    request: Request,
    country_id: int,
    body: CountryUpdateRequest,
    user_id: Annotated[int, Depends(get_user_id)],
    country_svc: Annotated[CountryService, Depends(get_country_service)],
):
    """Update a country (partial). Moving it requires access to the new domain."""
    changes = {
        k: v
        for k, v in body.model_dump(exclude_unset=True).items()
        if v is not None or k not in _REQUIRED_FIELDS
    }
    updated = await country_svc.update(user_id, country_id, changes)
    if not updated:
        raise HTTPException(status_code=404, detail="Country not found")
    return CountryResponse.model_validate(updated)


@router.delete("/{country_id}", status_code=204)
@limit_writes
async def delete_country(
    request: Request,
    country_id: int,
    user_id: Annotated[int, Depends(get_user_id)],
    country_svc: Annotated[CountryService, Depends(get_country_service)],
):
    """Delete a country in one of the caller's domains."""
    deleted = await country_svc.delete(user_id, country_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Country not found")
    return Response(status_code=204)
