"""initial_catalog_schema: users, domains, grants, countries, animals

Revision ID: a1c4e7f20b3d
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "a1c4e7f20b3d"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_CONTINENTS = "'africa', 'asia', 'europe', 'northamerica', 'southamerica', 'oceania'"
_CATEGORIES = "'mammals', 'birds', 'reptiles', 'amphibians', 'fish', 'insects'"


def _audit_columns() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "created_by",
            sa.Integer(),
            sa.ForeignKey("app_user.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column(
            "updated_by",
            sa.Integer(),
            sa.ForeignKey("app_user.id", ondelete="SET NULL"),
            nullable=True,
        ),
    ]


def _domain_column() -> sa.Column:
    return sa.Column(
        "domain_id",
        sa.Integer(),
        sa.ForeignKey("domain.id", ondelete="SET NULL"),
        nullable=True,
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "app_user",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(length=150), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
        sa.UniqueConstraint("email"),
    )
    op.create_index("ix_app_user_created_by", "app_user", ["created_by"])

    op.create_table(
        "domain",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("parent_id", sa.Integer(), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["parent_id"], ["domain.id"], ondelete="RESTRICT"),
    )
    op.create_index("ix_domain_name", "domain", ["name"])
    op.create_index("ix_domain_parent_id", "domain", ["parent_id"])
    op.create_index("ix_domain_created_by", "domain", ["created_by"])

    op.create_table(
        "user_domain_access",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("domain_id", sa.Integer(), nullable=False),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["app_user.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["domain_id"], ["domain.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("user_id", "domain_id", name="uq_user_domain_access"),
    )
    op.create_index("ix_user_domain_access_user_id", "user_domain_access", ["user_id"])
    op.create_index("ix_user_domain_access_domain_id", "user_domain_access", ["domain_id"])
    op.create_index("ix_user_domain_access_created_by", "user_domain_access", ["created_by"])

    op.create_table(
        "country",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("capital", sa.String(length=200), nullable=True),
        sa.Column("population", sa.BigInteger(), nullable=True),
        sa.Column("area", sa.Float(), nullable=True),
        sa.Column("currency", sa.String(length=100), nullable=True),
        sa.Column("continent", sa.String(length=32), nullable=False),
        _domain_column(),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(f"continent IN ({_CONTINENTS})", name="ck_country_continent"),
    )
    op.create_index("ix_country_domain_id", "country", ["domain_id"])
    op.create_index("ix_country_created_by", "country", ["created_by"])
    op.create_index("ix_country_name_id", "country", ["name", "id"])
    op.create_index("ix_country_population_id", "country", ["population", "id"])
    op.create_index("ix_country_area_id", "country", ["area", "id"])

    op.create_table(
        "animal",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("species", sa.String(length=200), nullable=True),
        sa.Column("habitat", sa.String(length=200), nullable=True),
        sa.Column("diet", sa.String(length=200), nullable=True),
        sa.Column("conservation_status", sa.String(length=100), nullable=True),
        sa.Column("category", sa.String(length=32), nullable=False),
        _domain_column(),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(f"category IN ({_CATEGORIES})", name="ck_animal_category"),
    )
    op.create_index("ix_animal_domain_id", "animal", ["domain_id"])
    op.create_index("ix_animal_created_by", "animal", ["created_by"])
    op.create_index("ix_animal_name_id", "animal", ["name", "id"])
    op.create_index("ix_animal_species_id", "animal", ["species", "id"])
    op.create_index("ix_animal_category_id", "animal", ["category", "id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("animal")
    op.drop_table("country")
    op.drop_table("user_domain_access")
    op.drop_table("domain")
    op.drop_table("app_user")
