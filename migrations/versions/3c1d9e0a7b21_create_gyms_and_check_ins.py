"""create gyms and check_ins tables

Revision ID: 3c1d9e0a7b21
Revises:
Create Date: 2026-10-19 00:00:00.000000
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3c1d9e0a7b21"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "gyms",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("phone", sa.String(), nullable=True),
        sa.Column("latitude", sa.Numeric(), nullable=False),
        sa.Column("longitude", sa.Numeric(), nullable=False),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
        ),
    )
    op.create_index("ix_gyms_title", "gyms", ["title"])

    op.create_table(
        "check_ins",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("gym_id", sa.String(), sa.ForeignKey("gyms.id"), nullable=False),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
        ),
        sa.Column("validated_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("check_in_date", sa.Date(), nullable=False),
        # One check-in per user per calendar day; the repository maps violations
        # of this constraint to MaxNumberOfCheckInsError.
        sa.UniqueConstraint("user_id", "check_in_date", name="uq_check_ins_user_id_check_in_date"),
    )
    op.create_index("ix_check_ins_user_id", "check_ins", ["user_id"])
    op.create_index("ix_check_ins_gym_id", "check_ins", ["gym_id"])


def downgrade() -> None:
    op.drop_index("ix_check_ins_gym_id", table_name="check_ins")
    op.drop_index("ix_check_ins_user_id", table_name="check_ins")
    op.drop_table("check_ins")
    op.drop_index("ix_gyms_title", table_name="gyms")
    op.drop_table("gyms")
