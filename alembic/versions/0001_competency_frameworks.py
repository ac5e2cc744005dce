"""competency frameworks: roles, role levels, competencies, sub-competencies

Revision ID: 0001_competency_frameworks
Revises:
Create Date: 2026-10-17
"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision = "0001_competency_frameworks"
down_revision = None
branch_labels = None
depends_on = None

JsonType = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")


def upgrade() -> None:
    op.create_table(
        "roles",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("type", sa.String(length=32), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=False), nullable=False),
    )

    op.create_table(
        "role_levels",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("role_id", sa.Uuid(), sa.ForeignKey("roles.id"), nullable=False),
        sa.Column("key", sa.String(length=64), nullable=False),
        sa.Column("label", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("order_index", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=False), nullable=False),
        sa.UniqueConstraint("role_id", "key", name="uq_role_levels_role_key"),
    )
    op.create_index("ix_role_levels_role_order", "role_levels", ["role_id", "order_index"])

    op.create_table(
        "competencies",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("role_id", sa.Uuid(), sa.ForeignKey("roles.id"), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("code", sa.Text(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("order_index", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=False), nullable=False),
    )
    op.create_index("ix_competencies_role_order", "competencies", ["role_id", "order_index"])

    op.create_table(
        "sub_competencies",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("competency_id", sa.Uuid(), sa.ForeignKey("competencies.id"), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("code", sa.Text(), nullable=True),
        sa.Column("order_index", sa.Integer(), nullable=False),
        sa.Column("level_criteria", JsonType, nullable=True),
        sa.Column("associate_level", JsonType, nullable=True),
        sa.Column("intermediate_level", JsonType, nullable=True),
        sa.Column("senior_level", JsonType, nullable=True),
        sa.Column("lead_level", JsonType, nullable=True),
        sa.Column("principal_level", JsonType, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=False), nullable=False),
    )
    op.create_index(
        "ix_sub_competencies_competency_order", "sub_competencies", ["competency_id", "order_index"]
    )


def downgrade() -> None:
    op.drop_index("ix_sub_competencies_competency_order", table_name="sub_competencies")
    op.drop_table("sub_competencies")
    op.drop_index("ix_competencies_role_order", table_name="competencies")
    op.drop_table("competencies")
    op.drop_index("ix_role_levels_role_order", table_name="role_levels")
    op.drop_table("role_levels")
    op.drop_table("roles")
