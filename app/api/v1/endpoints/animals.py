"""Animal API: thin routes delegating to CatalogService."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response

from app.api.v1.dependencies import (
    get_animal_service,
    get_create_domain,
    get_user_id,
    get_view_domains,
)
from app.application.dtos.catalog import AnimalCreate, AnimalFilter, AnimalResult
from app.application.dtos.pagination import WindowSpec
from app.application.services.query_builders import animal_order, build_animal_filter
from app.application.use_cases.catalog import CatalogService
from app.core.limiter import limit_writes
from app.domain.enums import AnimalCategory, AnimalOrderField, SortDirection
from app.schemas.catalog import (
    AnimalCreateRequest,
    AnimalResponse,
    AnimalUpdateRequest,
)
from app.schemas.pagination import Page

router = APIRouter()

AnimalService = CatalogService[AnimalResult]

_REQUIRED_FIELDS = frozenset({"name", "category"})


@router.get("", response_model=Page[AnimalResponse])
async def list_animals(
    user_id: Annotated[int, Depends(get_user_id)],
    view_domains: Annotated[list[int] | None, Depends(get_view_domains)],
    animal_svc: Annotated[AnimalService, Depends(get_animal_service)],
    search: Annotated[str | None, Query(max_length=200)] = None,
    category: AnimalCategory | None = None,
    species: Annotated[str | None, Query(max_length=200)] = None,
    habitat: Annotated[str | None, Query(max_length=200)] = None,
    diet: Annotated[str | None, Query(max_length=200)] = None,
    conservation_status: Annotated[str | None, Query(max_length=100)] = None,
    name: Annotated[str | None, Query(max_length=200)] = None,
    order_by: AnimalOrderField = AnimalOrderField.NAME,
    direction: SortDirection = SortDirection.ASC,
    first: int | None = None,
    after: str | None = None,
    last: int | None = None,
    before: str | None = None,
):
    """List animals in the caller's view domains (cursor-paginated)."""
    filter = build_animal_filter(
        AnimalFilter(
            category=category,
            species=species,
            habitat=habitat,
            diet=diet,
            conservation_status=conservation_status,
            name=name,
        ),
        search=search,
    )
    result = await animal_svc.list_page(
        user_id,
        filter,
        animal_order(order_by, direction),
        WindowSpec(first=first, after=after, last=last, before=before),
        view_domains=view_domains,
    )
    return Page[AnimalResponse].from_result(
        result, [AnimalResponse.model_validate(a) for a in result.items]
    )


@router.post("", response_model=AnimalResponse, status_code=201)
@limit_writes
async def create_animal(
    request: Request,
    body: AnimalCreateRequest,
    user_id: Annotated[int, Depends(get_user_id)],
    header_domain: Annotated[int | None, Depends(get_create_domain)],
    animal_svc: Annotated[AnimalService, Depends(get_animal_service)],
):
    """Create an animal in body.domain_id (or the create-domain header)."""
    data = AnimalCreate(**body.model_dump(exclude={"domain_id"}))
    domain_id = body.domain_id if body.domain_id is not None else header_domain
    created = await animal_svc.create(user_id, data, domain_id)
    return AnimalResponse.model_validate(created)


@router.get("/{animal_id}", response_model=AnimalResponse)
async def get_animal(
    animal_id: int,
    user_id: Annotated[int, Depends(get_user_id)],
    view_domains: Annotated[list[int] | None, Depends(get_view_domains)],
    animal_svc: Annotated[AnimalService, Depends(get_animal_service)],
):
    """Get an animal visible to the caller."""
    animal = await animal_svc.get(user_id, animal_id, view_domains=view_domains)
    if not animal:
        raise HTTPException(status_code=404, detail="Animal not found")
    return AnimalResponse.model_validate(animal)


@router.patch("/{animal_id}", response_model=AnimalResponse)
@limit_writes
async def update_animal(
    request: Request,
    animal_id: int,
    body: AnimalUpdateRequest,
    user_id: Annotated[int, Depends(get_user_id)],
    animal_svc: Annotated[AnimalService, Depends(get_animal_service)],
):
    """Update an animal (partial)."""
    changes = {
        k: v
        for k, v in body.model_dump(exclude_unset=True).items()
        if v is not None or k not in _REQUIRED_FIELDS
    }
    updated = await animal_svc.update(user_id, animal_id, changes)
    if not updated:
        raise HTTPException(status_code=404, detail="Animal not found")
    return AnimalResponse.model_validate(updated)


@router.delete("/{animal_id}", status_code=204)
@limit_writes
async def delete_animal(
    request: Request,
    animal_id: int,
    user_id: Annotated[int, Depends(get_user_id)],
    animal_svc: Annotated[AnimalService, Depends(get_animal_service)],
):
    """Delete an animal in one of the caller's domains."""
    deleted = await animal_svc.delete(user_id, animal_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Animal not found")
    return Response(status_code=204)
