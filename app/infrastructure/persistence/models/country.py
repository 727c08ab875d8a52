"""Country ORM model (domain-scoped catalog record)."""

from sqlalchemy import BigInteger, CheckConstraint, Float, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.enums import Continent
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import AuditedDomainScopedModel

_CONTINENTS = ", ".join(f"'{c}'" for c in Continent.values())


class Country(AuditedDomainScopedModel, Base):
    """Country. Table: country. continent is one of Continent values."""

    __tablename__ = "country"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    capital: Mapped[str | None] = mapped_column(String(200), nullable=True)
    population: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    area: Mapped[float | None] = mapped_column(Float, nullable=True)
    currency: Mapped[str | None] = mapped_column(String(100), nullable=True)
    continent: Mapped[str] = mapped_column(String(32), nullable=False)

    __table_args__ = (
        CheckConstraint(f"continent IN ({_CONTINENTS})", name="ck_country_continent"),
        # Compound keys used by the default orders (field, id)
        Index("ix_country_name_id", "name", "id"),
        Index("ix_country_population_id", "population", "id"),
        Index("ix_country_area_id", "area", "id"),
    )
