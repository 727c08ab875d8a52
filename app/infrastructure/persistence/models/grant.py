"""User-to-domain access grant ORM model."""

from sqlalchemy import ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import AuditedModel


class UserDomainAccess(AuditedModel, Base):
    """Direct grant. Table: user_domain_access. Unique (user_id, domain_id).

    created_by is the granting user. Grants go away with their user or domain.
    """

    __tablename__ = "user_domain_access"

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("app_user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    domain_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("domain.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    __table_args__ = (
        UniqueConstraint("user_id", "domain_id", name="uq_user_domain_access"),
    )
