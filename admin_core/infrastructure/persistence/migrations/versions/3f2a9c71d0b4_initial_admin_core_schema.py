"""initial_admin_core_schema

Revision ID: 3f2a9c71d0b4
Revises:
Create Date: 2026-10-19 09:12:40.118204

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f2a9c71d0b4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
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
    ]


def _admin_columns() -> list[sa.Column]:
    return [
        sa.Column("display_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("is_system", sa.Boolean(), nullable=False, server_default="false"),
    ]


def upgrade() -> None:
    """Upgrade schema - master codes, roles, users' role lists, sequence counters."""

    # Create master_code_group table
    op.create_table(
        "master_code_group",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("group_code", sa.String(length=64), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        *_admin_columns(),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("group_code", name="uq_master_code_group_code"),
    )

    # Create master_code_subcode table (group_code FK cannot change under subcodes)
    op.create_table(
        "master_code_subcode",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("group_code", sa.String(length=64), nullable=False),
        sa.Column("subcode", sa.String(length=128), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("remark", sa.Text(), nullable=True),
        sa.Column("value1", sa.String(length=255), nullable=True),
        sa.Column("value2", sa.String(length=255), nullable=True),
        sa.Column("value3", sa.String(length=255), nullable=True),
        *_admin_columns(),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["group_code"],
            ["master_code_group.group_code"],
            onupdate="RESTRICT",
            ondelete="RESTRICT",
        ),
        sa.UniqueConstraint("group_code", "subcode", name="uq_master_code_subcode"),
    )
    op.create_index(
        "ix_master_code_subcode_listing",
        "master_code_subcode",
        ["group_code", "display_order", "subcode"],
    )

    # Create role table (permissions inline as JSON)
    op.create_table(
        "role",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("role_code", sa.String(length=64), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("permissions", sa.JSON(), nullable=False),
        *_admin_columns(),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("role_code", name="uq_role_code"),
    )

    # Create app_user table (assigned_roles: ordered JSON list of role codes)
    op.create_table(
        "app_user",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("username", sa.String(length=255), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("assigned_roles", sa.JSON(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username", name="uq_app_user_username"),
    )

    # Create sequence_counter table
    op.create_table(
        "sequence_counter",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("prefix", sa.String(length=64), nullable=False),
        sa.Column("period", sa.String(length=8), nullable=False),
        sa.Column("last_value", sa.BigInteger(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("prefix", "period", name="uq_sequence_counter_key"),
    )


def downgrade() -> None:
    """Downgrade schema - drop admin-core tables."""
    op.drop_table("sequence_counter")
    op.drop_table("app_user")
    op.drop_table("role")
    op.drop_index("ix_master_code_subcode_listing", table_name="master_code_subcode")
    op.drop_table("master_code_subcode")
    op.drop_table("master_code_group")
