"""Task Document ORM: one row per task document for the SQL backend.

Invariants:
    - id is a store-generated uuid hex string, unique across collections
    - collection scopes every query (one table can hold several collections)
    - data holds the task field map as-is (title, description, completed, category)
    - created_at is assigned by the database server at insert time

Design Decisions:
    - JSON column for data: the row mirrors a schemaless document, not a typed table
    - server_default=func.now(): the timestamp comes from the store, not the app host
"""

import uuid
from datetime import datetime

from sqlalchemy import JSON, DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from tasks_api.db.base import Base


class TaskDocument(Base):
    """Task document stored as a JSON field map."""
    __tablename__ = "task_documents"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: uuid.uuid4().hex,
    )
    collection: Mapped[str] = mapped_column(
        String(100), nullable=False, index=True, default="tasks",
    )
    data: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now(),
    )
