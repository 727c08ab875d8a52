"""Domain ORM model: node of the organizational tree."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import AuditedModel


class Domain(AuditedModel, Base):
    """Domain. Table: domain. parent_id NULL marks a root.

    Deleting a parent is blocked while children exist (RESTRICT); the
    service layer reports it as a validation error first.
    """

    __tablename__ = "domain"

    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    parent_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("domain.id", ondelete="RESTRICT"),
        nullable=True,
        index=True,
    )
