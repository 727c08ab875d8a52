"""SQLAlchemy mixins for common model patterns (DRY).

Provides: IntIdMixin, DomainScopedMixin, TimestampMixin, UserAuditMixin,
and the combined AuditedModel / AuditedDomainScopedModel.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func


class IntIdMixin:
    """Mixin for models using an autoincrement integer primary key."""

    @declared_attr
    def id(cls) -> Mapped[int]:
        return mapped_column(Integer, primary_key=True, autoincrement=True)


class DomainScopedMixin:
    """Mixin for records owned by a domain.

    Deleting the domain keeps the record with domain_id NULL; such records
    are visible to nobody.
    """

    @declared_attr
    def domain_id(cls) -> Mapped[int | None]:
        return mapped_column(
            Integer,
            ForeignKey("domain.id", ondelete="SET NULL"),
            nullable=True,
            index=True,
        )


class TimestampMixin:
    """Mixin for created_at and updated_at (server defaults, timezone-aware)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class UserAuditMixin(TimestampMixin):
    """Mixin for user audit: created_by, updated_by (FK to app_user.id)."""

    @declared_attr
    def created_by(cls) -> Mapped[int | None]:
        return mapped_column(
            Integer,
            ForeignKey("app_user.id", ondelete="SET NULL"),
            nullable=True,
            index=True,
        )

    @declared_attr
    def updated_by(cls) -> Mapped[int | None]:
        return mapped_column(
            Integer, ForeignKey("app_user.id", ondelete="SET NULL"), nullable=True
        )


class AuditedModel(IntIdMixin, UserAuditMixin):
    """Combined mixin: integer id + timestamps + created_by/updated_by."""

    __abstract__ = True


class AuditedDomainScopedModel(IntIdMixin, DomainScopedMixin, UserAuditMixin):
    """Combined mixin: integer id + owning domain + user audit."""

    __abstract__ = True
