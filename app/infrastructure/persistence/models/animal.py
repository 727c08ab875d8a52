"""Animal ORM model (domain-scoped catalog record)."""

from sqlalchemy import CheckConstraint, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.enums import AnimalCategory
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import AuditedDomainScopedModel

_CATEGORIES = ", ".join(f"'{c}'" for c in AnimalCategory.values())


class Animal(AuditedDomainScopedModel, Base):
    """Animal. Table: animal. category is one of AnimalCategory values."""

    __tablename__ = "animal"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    species: Mapped[str | None] = mapped_column(String(200), nullable=True)
    habitat: Mapped[str | None] = mapped_column(String(200), nullable=True)
    diet: Mapped[str | None] = mapped_column(String(200), nullable=True)
    conservation_status: Mapped[str | None] = mapped_column(String(100), nullable=True)
    category: Mapped[str] = mapped_column(String(32), nullable=False)

    __table_args__ = (
        CheckConstraint(f"category IN ({_CATEGORIES})", name="ck_animal_category"),
        Index("ix_animal_name_id", "name", "id"),
        Index("ix_animal_species_id", "species", "id"),
        Index("ix_animal_category_id", "category", "id"),
    )
