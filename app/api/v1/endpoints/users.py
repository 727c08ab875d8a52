"""User API: thin routes delegating to UserService."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response

from app.api.v1.dependencies import get_optional_user_id, get_user_id, get_user_service
from app.application.dtos.pagination import WindowSpec
from app.application.dtos.user import UserCreate, UserFilter
from app.application.services.query_builders import build_user_filter, user_order
from app.application.use_cases.users import UserService
from app.core.limiter import limit_writes
from app.domain.enums import SortDirection, UserOrderField
from app.schemas.pagination import Page
from app.schemas.user import UserCreateRequest, UserResponse, UserUpdateRequest

router = APIRouter()

# Explicit null is ignored for these (the columns are NOT NULL)
_REQUIRED_FIELDS = frozenset({"username", "email"})


@router.get("", response_model=Page[UserResponse])
async def list_users(
    actor_id: Annotated[int, Depends(get_user_id)],
    user_svc: Annotated[UserService, Depends(get_user_service)],
    search: Annotated[str | None, Query(max_length=200)] = None,
    username: Annotated[str | None, Query(max_length=150)] = None,
    email: Annotated[str | None, Query(max_length=320)] = None,
    first_name: Annotated[str | None, Query(max_length=150)] = None,
    last_name: Annotated[str | None, Query(max_length=150)] = None,
    order_by: UserOrderField = UserOrderField.USERNAME,
    direction: SortDirection = SortDirection.ASC,
    first: int | None = None,
    after: str | None = None,
    last: int | None = None,
    before: str | None = None,
):
    """List users (cursor-paginated), optionally searched and filtered."""
    filter = build_user_filter(
        UserFilter(
            username=username, email=email, first_name=first_name, last_name=last_name
        ),
        search=search,
    )
    result = await user_svc.list_page(
        filter,
        user_order(order_by, direction),
        WindowSpec(first=first, after=after, last=last, before=before),
    )
    return Page[UserResponse].from_result(
        result, [UserResponse.model_validate(u) for u in result.items]
    )


@router.post("", response_model=UserResponse, status_code=201)
@limit_writes
async def create_user(
    request: Request,
    body: UserCreateRequest,
    actor_id: Annotated[int | None, Depends(get_optional_user_id)],
    user_svc: Annotated[UserService, Depends(get_user_service)],
):
    """Create a user. The user header is optional (self-registration)."""
    created = await user_svc.create(actor_id, UserCreate(**body.model_dump()))
    return UserResponse.model_validate(created)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    actor_id: Annotated[int, Depends(get_user_id)],
    user_svc: Annotated[UserService, Depends(get_user_service)],
):
    """Get a user by id."""
    user = await user_svc.get(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return UserResponse.model_validate(user)


@router.patch("/{user_id}", response_model=UserResponse)
@limit_writes
async def update_user(
    request: Request,
    user_id: int,
    body: UserUpdateRequest,
    actor_id: Annotated[int, Depends(get_user_id)],
    user_svc: Annotated[UserService, Depends(get_user_service)],
):
    """Update a user (partial)."""
    changes = {
        k: v
        for k, v in body.model_dump(exclude_unset=True).items()
        if v is not None or k not in _REQUIRED_FIELDS
    }
    updated = await user_svc.update(actor_id, user_id, changes)
    if not updated:
        raise HTTPException(status_code=404, detail="User not found")
    return UserResponse.model_validate(updated)


@router.delete("/{user_id}", status_code=204)
@limit_writes
async def delete_user(
    request: Request,
    user_id: int,
    actor_id: Annotated[int, Depends(get_user_id)],
    user_svc: Annotated[UserService, Depends(get_user_service)],
):
    """Delete a user and their domain grants."""
    deleted = await user_svc.delete(actor_id, user_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="User not found")
    return Response(status_code=204)
