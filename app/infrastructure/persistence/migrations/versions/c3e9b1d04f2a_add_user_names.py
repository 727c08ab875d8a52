"""add app_user first_name/last_name and listing indexes

Revision ID: c3e9b1d04f2a
Revises: a1c4e7f20b3d
Create Date: 2026-10-19 14:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "c3e9b1d04f2a"
down_revision: Union[str, Sequence[str], None] = "a1c4e7f20b3d"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.add_column("app_user", sa.Column("first_name", sa.String(length=150), nullable=True))
    op.add_column("app_user", sa.Column("last_name", sa.String(length=150), nullable=True))
    # Keyset walks order by (field, id)
    op.create_index("ix_app_user_first_name_id", "app_user", ["first_name", "id"])
    op.create_index("ix_app_user_last_name_id", "app_user", ["last_name", "id"])


def downgrade() -> None:
    op.drop_index("ix_app_user_last_name_id", table_name="app_user")
    op.drop_index("ix_app_user_first_name_id", table_name="app_user")
    op.drop_column("app_user", "last_name")
    op.drop_column("app_user", "first_name")
