"""Grant API: direct user-to-domain access."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response

from app.api.v1.dependencies import get_grant_service, get_user_id
from app.application.dtos.pagination import WindowSpec
from app.application.services.query_builders import grant_order
from app.application.use_cases.domains import GrantService
from app.core.limiter import limit_writes
from app.domain.enums import GrantOrderField, SortDirection
from app.schemas.domain import GrantCreateRequest, GrantResponse
from app.schemas.pagination import Page

router = APIRouter()


@router.get("", response_model=Page[GrantResponse])
async def list_grants(
    actor_id: Annotated[int, Depends(get_user_id)],
    grant_svc: Annotated[GrantService, Depends(get_grant_service)],
    user_id: Annotated[int | None, Query(gt=0)] = None,
    domain_id: Annotated[int | None, Query(gt=0)] = None,
    order_by: GrantOrderField = GrantOrderField.CREATED_AT,
    direction: SortDirection = SortDirection.ASC,
    first: int | None = None,
    after: str | None = None,
    last: int | None = None,
    before: str | None = None,
):
    """List grants on domains the caller can access."""
    result = await grant_svc.list_page(
        actor_id,
        grant_order(order_by, direction),
        WindowSpec(first=first, after=after, last=last, before=before),
        user_id=user_id,
        domain_id=domain_id,
    )
    return Page[GrantResponse].from_result(
        result, [GrantResponse.model_validate(g) for g in result.items]
    )


@router.post("", response_model=GrantResponse, status_code=201)
@limit_writes
async def create_grant(
    request: Request,
    body: GrantCreateRequest,
    actor_id: Annotated[int, Depends(get_user_id)],
    grant_svc: Annotated[GrantService, Depends(get_grant_service)],
):
    """Grant a user access to a domain (and its descendants). Idempotent."""
    grant = await grant_svc.grant(actor_id, body.user_id, body.domain_id)
    return GrantResponse.model_validate(grant)


@router.get("/{user_id}/{domain_id}", response_model=GrantResponse)
async def get_grant(
    user_id: int,
    domain_id: int,
    actor_id: Annotated[int, Depends(get_user_id)],
    grant_svc: Annotated[GrantService, Depends(get_grant_service)],
):
    """Get the direct grant of domain_id to user_id."""
    grant = await grant_svc.get(actor_id, user_id, domain_id)
    if not grant:
        raise HTTPException(status_code=404, detail="Grant not found")
    return GrantResponse.model_validate(grant)


@router.delete("/{user_id}/{domain_id}", status_code=204)
@limit_writes
async def revoke_grant(
    request: Request,
    user_id: int,
    domain_id: int,
    actor_id: Annotated[int, Depends(get_user_id)],
    grant_svc: Annotated[GrantService, Depends(get_grant_service)],
):
    """Revoke the direct grant. Access inherited through an ancestor grant remains."""
    removed = await grant_svc.revoke(actor_id, user_id, domain_id)
    if not removed:
        raise HTTPException(status_code=404, detail="Grant not found")
    return Response(status_code=204)
