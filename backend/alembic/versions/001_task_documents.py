"""Task documents table for the SQL document store backend.

Revision ID: 001_task_documents
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_task_documents"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "task_documents",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("collection", sa.String(100), nullable=False, server_default="tasks"),
        sa.Column("data", sa.JSON, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index(
        "ix_task_documents_collection", "task_documents", ["collection"],
    )


def downgrade() -> None:
    op.drop_index("ix_task_documents_collection", table_name="task_documents")
    op.drop_table("task_documents")
