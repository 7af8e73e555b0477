"""Task Service: the four task operations, shaped fields in, store calls out.

Invariants:
    - Each operation is a single TaskStore call (no reads before writes)
    - Confirmation strings are fixed; the new task id is never returned
    - Store errors propagate unchanged (typed by the store implementation)
    - The update map always reaches the store, even when empty (the store rejects it)

Design Decisions:
    - Plain async functions over a service class: nothing to hold between calls
"""

import logging
from typing import Any

from tasks_api.core.repository_protocols import TaskStore
from tasks_api.core.task_fields import build_new_task, build_update_map
from tasks_api.schemas.task import TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)

TASK_CREATED = "Task created"
TASK_UPDATED = "Task updated"
TASK_DELETED = "Task deleted"


async def list_tasks(store: TaskStore) -> list[dict[str, Any]]:
    """Every task in the collection, each with its id. No ordering guarantee."""
    return await store.list_documents()


async def create_task(
    store: TaskStore, body: TaskCreate, default_category: str,
) -> str:
    task_id = await store.add_document(
        build_new_task(body.supplied(), default_category),
    )
    logger.info(
        f"Task {task_id} created",
        extra={"task_id": task_id, "collection": store.collection},
    )
    return TASK_CREATED


async def update_task(store: TaskStore, task_id: str, body: TaskUpdate) -> str:
    """Apply only the recognized fields present in body; others stay untouched."""
    updates = build_update_map(body.supplied())
    await store.update_document(task_id, updates)
    logger.info(
        f"Task {task_id} updated ({', '.join(updates)})",
        extra={"task_id": task_id, "collection": store.collection},
    )
    return TASK_UPDATED


async def delete_task(store: TaskStore, task_id: str) -> str:
    await store.delete_document(task_id)
    logger.info(
        f"Task {task_id} deleted",
        extra={"task_id": task_id, "collection": store.collection},
    )
    return TASK_DELETED
