"""SQL Task Store: document semantics over a SQLAlchemy async engine.

Invariants:
    - Same observable behavior as FirestoreTaskStore for every TaskStore method
    - update_document with an empty map raises InvalidUpdateError before any lookup
    - update_document on a missing id raises ResourceNotFoundError
    - delete_document on a missing id is a silent no-op
    - createdAt comes from the created_at column (database server default)

Design Decisions:
    - Update merges into a fresh dict and reassigns data: plain JSON columns
      do not track in-place mutation
"""

import logging
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from tasks_api.core.errors import (
    ErrorContext, InvalidUpdateError, ResourceNotFoundError,
)
from tasks_api.core.task_fields import CREATED_AT_FIELD, with_document_id
from tasks_api.infrastructure.database import DatabaseSessionManager
from tasks_api.models.task_document import TaskDocument

logger = logging.getLogger(__name__)

EMPTY_UPDATE_MESSAGE = "Cannot update with an empty document."


class SqlTaskStore:
    """TaskStore backed by the task_documents table."""

    backend = "sql"

    def __init__(self, manager: DatabaseSessionManager, collection: str = "tasks"):
        self._manager = manager
        self.collection = collection

    async def list_documents(self) -> list[dict[str, Any]]:
        async with self._manager.session() as db:
            result = await db.execute(
                select(TaskDocument).where(
                    TaskDocument.collection == self.collection,
                ),
            )
            return [self._to_task(row) for row in result.scalars().all()]

    async def add_document(self, data: dict[str, Any]) -> str:
        async with self._manager.session() as db:
            doc = TaskDocument(collection=self.collection, data=dict(data))
            db.add(doc)
            await db.commit()
            return doc.id

    async def update_document(self, task_id: str, updates: dict[str, Any]) -> None:
        if not updates:
            raise InvalidUpdateError(
                EMPTY_UPDATE_MESSAGE,
                ErrorContext(task_id=task_id, collection=self.collection),
            )
        async with self._manager.session() as db:
            doc = await self._get(db, task_id)
            if doc is None:
                logger.warning(
                    f"Update on missing task {task_id}",
                    extra={"task_id": task_id, "collection": self.collection},
                )
                raise ResourceNotFoundError(
                    "Task", task_id, ErrorContext(collection=self.collection),
                )
            doc.data = {**doc.data, **updates}
            await db.commit()

    async def delete_document(self, task_id: str) -> None:
        async with self._manager.session() as db:
            await db.execute(
                delete(TaskDocument).where(
                    TaskDocument.id == task_id,
                    TaskDocument.collection == self.collection,
                ),
            )
            await db.commit()

    async def health_check(self) -> bool:
        return await self._manager.health_check()

    async def close(self) -> None:
        await self._manager.dispose()

    async def _get(self, db: AsyncSession, task_id: str) -> TaskDocument | None:
        result = await db.execute(
            select(TaskDocument).where(
                TaskDocument.id == task_id,
                TaskDocument.collection == self.collection,
            ),
        )
        return result.scalar_one_or_none()

    @staticmethod
    def _to_task(row: TaskDocument) -> dict[str, Any]:
        data = dict(row.data or {})
        data[CREATED_AT_FIELD] = row.created_at
        return with_document_id(data, row.id)
