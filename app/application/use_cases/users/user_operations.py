"""User operations: list, get, create, update, delete.

Usernames and emails are unique; emails must be syntactically valid and
are stored in normalized form. Users are not domain-scoped.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from email_validator import EmailNotValidError, validate_email

from app.application.dtos.pagination import PageResult, WindowSpec
from app.application.dtos.user import UserCreate, UserResult
from app.application.interfaces.repositories import IUserRepository
from app.application.services.domain_access_resolver import DomainAccessResolver
from app.application.services.page_engine import PageEngine
from app.domain.exceptions import UserAlreadyExistsException, ValidationException
from app.domain.value_objects.ordering import SortKey
from app.domain.value_objects.predicates import Condition

logger = logging.getLogger(__name__)

_NAME_FIELDS = ("first_name", "last_name")


def clean_username(value: str | None) -> str:
    """Return the stripped username.

    Raises:
        ValidationException: If it is missing or blank.
    """
    username = (value or "").strip()
    if not username:
        raise ValidationException("username must be a non-empty string", field="username")
    return username


def clean_email(value: str | None) -> str:
    """Return the normalized email address.

    Raises:
        ValidationException: If it is missing or not a valid address.
    """
    try:
        return validate_email((value or "").strip(), check_deliverability=False).normalized
    except EmailNotValidError as e:
        raise ValidationException("a valid email is required", field="email") from e


def _clean_name(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


class UserService:
    """Manage users.

    Creating a user does not require a known caller (self-registration);
    created_by is then left empty. Deleting a user drops their grants, so
    their cached access set is invalidated.
    """

    def __init__(
        self,
        user_repo: IUserRepository,
        resolver: DomainAccessResolver,
        page_engine: PageEngine,
    ) -> None:
        self.user_repo = user_repo
        self.resolver = resolver
        self.page_engine = page_engine

    async def list_page(
        self,
        filter: Condition | None,
        order: Sequence[SortKey],
        window: WindowSpec,
    ) -> PageResult[UserResult]:
        """Return one page of users matching filter."""
        return await self.page_engine.resolve_page(self.user_repo, filter, order, window)

    async def get(self, user_id: int) -> UserResult | None:
        return await self.user_repo.get_by_id(user_id)

    async def create(self, actor_id: int | None, data: UserCreate) -> UserResult:
        """Create a user on behalf of actor_id (None for self-registration).

        Raises:
            ValidationException: If the username is blank or the email invalid.
            UserAlreadyExistsException: If the username or email is taken.
        """
        clean = UserCreate(
            username=clean_username(data.username),
            email=clean_email(data.email),
            first_name=_clean_name(data.first_name),
            last_name=_clean_name(data.last_name),
        )
        await self._ensure_unique(clean.username, clean.email)
        user = await self.user_repo.create_user(clean, actor_id)
        logger.info("User %s created user %s", actor_id, user.id)
        return user

    async def update(
        self, actor_id: int, user_id: int, changes: dict[str, Any]
    ) -> UserResult | None:
        """Apply changes to a user; None if it does not exist.

        changes may hold username, email, first_name and last_name; a None
        or blank name clears it.

        Raises:
            ValidationException: If a new username is blank or a new email invalid.
            UserAlreadyExistsException: If the new username or email is taken.
        """
        current = await self.user_repo.get_by_id(user_id)
        if current is None:
            return None
        values: dict[str, Any] = {}
        if "username" in changes:
            values["username"] = clean_username(changes["username"])
        if "email" in changes:
            values["email"] = clean_email(changes["email"])
        for field in _NAME_FIELDS:
            if field in changes:
                values[field] = _clean_name(changes[field])
        if not values:
            return current
        await self._ensure_unique(
            values.get("username"), values.get("email"), exclude_id=user_id
        )
        return await self.user_repo.update_user(user_id, values, actor_id)

    async def delete(self, actor_id: int, user_id: int) -> UserResult | None:
        """Delete a user and their grants; None if it does not exist."""
        deleted = await self.user_repo.delete_user(user_id)
        if deleted is not None:
            await self.resolver.invalidate_user(user_id)
            logger.info("User %s deleted user %s", actor_id, user_id)
        return deleted

    async def _ensure_unique(
        self,
        username: str | None,
        email: str | None,
        exclude_id: int | None = None,
    ) -> None:
        if username is not None:
            other = await self.user_repo.get_by_username(username)
            if other is not None and other.id != exclude_id:
                raise UserAlreadyExistsException("username")
        if email is not None:
            other = await self.user_repo.get_by_email(email)
            if other is not None and other.id != exclude_id:
                raise UserAlreadyExistsException("email")
