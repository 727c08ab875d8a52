"""Domain API: the organizational tree visible to the caller."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response

from app.api.v1.dependencies import get_domain_service, get_user_id
from app.application.dtos.pagination import WindowSpec
from app.application.services.query_builders import domain_order
from app.application.use_cases.domains import DomainService
from app.core.limiter import limit_writes
from app.domain.enums import DomainOrderField, SortDirection
from app.schemas.domain import (
    AccessibleDomainsResponse,
    DomainCreateRequest,
    DomainResponse,
    DomainUpdateRequest,
)
from app.schemas.pagination import Page

router = APIRouter()


@router.get("", response_model=Page[DomainResponse])
async def list_domains(
    user_id: Annotated[int, Depends(get_user_id)],
    domain_svc: Annotated[DomainService, Depends(get_domain_service)],
    name: Annotated[str | None, Query(max_length=200)] = None,
    order_by: DomainOrderField = DomainOrderField.NAME,
    direction: SortDirection = SortDirection.ASC,
    first: int | None = None,
    after: str | None = None,
    last: int | None = None,
    before: str | None = None,
):
    """List domains the caller can access (cursor-paginated)."""
    result = await domain_svc.list_page(
        user_id,
        domain_order(order_by, direction),
        WindowSpec(first=first, after=after, last=last, before=before),
        name=name,
    )
    return Page[DomainResponse].from_result(
        result, [DomainResponse.model_validate(d) for d in result.items]
    )


@router.get("/accessible", response_model=AccessibleDomainsResponse)
async def list_accessible_domain_ids(
    user_id: Annotated[int, Depends(get_user_id)],
    domain_svc: Annotated[DomainService, Depends(get_domain_service)],
):
    """Return every domain id the caller can access (grants plus descendants)."""
    return AccessibleDomainsResponse(
        user_id=user_id, domain_ids=await domain_svc.accessible_ids(user_id)
    )


@router.post("", response_model=DomainResponse, status_code=201)
@limit_writes
async def create_domain(
    request: Request,
    body: DomainCreateRequest,
    user_id: Annotated[int, Depends(get_user_id)],
    domain_svc: Annotated[DomainService, Depends(get_domain_service)],
):
    """Create a domain under an accessible parent, or a new root granted to the caller."""
    created = await domain_svc.create(user_id, body.name, parent_id=body.parent_id)
    return DomainResponse.model_validate(created)


@router.get("/{domain_id}", response_model=DomainResponse)
async def get_domain(
    domain_id: int,
    user_id: Annotated[int, Depends(get_user_id)],
    domain_svc: Annotated[DomainService, Depends(get_domain_service)],
):
    """Get an accessible domain."""
    domain = await domain_svc.get(user_id, domain_id)
    if not domain:
        raise HTTPException(status_code=404, detail="Domain not found")
    return DomainResponse.model_validate(domain)


@router.patch("/{domain_id}", response_model=DomainResponse)
@limit_writes
async def update_domain(
    request: Request,
    domain_id: int,
    body: DomainUpdateRequest,
    user_id: Annotated[int, Depends(get_user_id)],
    domain_svc: Annotated[DomainService, Depends(get_domain_service)],
):
    """Rename and/or move a domain."""
    changes = body.model_dump(exclude_unset=True)
    if changes.get("name", "") is None:
        del changes["name"]
    updated = await domain_svc.update(user_id, domain_id, changes)
    if not updated:
        raise HTTPException(status_code=404, detail="Domain not found")
    return DomainResponse.model_validate(updated)


@router.delete("/{domain_id}", status_code=204)
@limit_writes
async def delete_domain(
    request: Request,
    domain_id: int,
    user_id: Annotated[int, Depends(get_user_id)],
    domain_svc: Annotated[DomainService, Depends(get_domain_service)],
):
    """Delete a leaf domain; its records stay, visible to nobody."""
    deleted = await domain_svc.delete(user_id, domain_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Domain not found")
    return Response(status_code=204)
