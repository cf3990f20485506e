"""Initial tables

Revision ID: 001
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "records",
        sa.Column("seq", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("id", sa.Uuid(), nullable=False, unique=True),
        sa.Column("number", sa.Text(), server_default=""),
        sa.Column("full_name", sa.Text(), server_default=""),
        sa.Column("birth_info", sa.Text(), server_default=""),
        sa.Column("specialization", sa.Text(), server_default=""),
        sa.Column("cycle", sa.Text(), server_default=""),
        sa.Column("group_name", sa.Text(), server_default=""),
        sa.Column("intermediary", sa.Text(), server_default=""),
        sa.Column("diploma", sa.Text(), server_default=""),
        sa.Column("note", sa.Text(), server_default=""),
        sa.Column("file_amount", sa.Float(), server_default="0"),
        sa.Column("payment1", sa.Float(), server_default="0"),
        sa.Column("payment_date1", sa.Text(), server_default=""),
        sa.Column("payment2", sa.Float(), server_default="0"),
        sa.Column("payment_date2", sa.Text(), server_default=""),
        sa.Column("remaining", sa.Float(), server_default="0"),
        sa.Column("row_color", sa.Text(), server_default=""),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
        ),
    )
    op.create_index("ix_records_created_at", "records", ["created_at"])

    op.create_table(
        "column_colors",
        sa.Column("field", sa.Text(), primary_key=True),
        sa.Column("color", sa.Text(), server_default=""),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
        ),
    )


def downgrade() -> None:
    op.drop_table("column_colors")
    op.drop_index("ix_records_created_at", table_name="records")
    op.drop_table("records")
