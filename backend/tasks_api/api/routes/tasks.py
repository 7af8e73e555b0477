"""Task Routes: list, create, update and delete over the tasks collection.

Invariants:
    - GET returns a JSON array; every item carries its store-assigned id
    - POST/PUT/DELETE answer 200 with a plain-text confirmation string
    - No existence check before update or delete (the store decides)
    - Request bodies validated by Pydantic before reaching the handler

Design Decisions:
    - PlainTextResponse for confirmations: clients receive `Task created`,
      not a JSON-quoted string
"""

from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from tasks_api.config import Settings, get_settings
from tasks_api.core.repository_protocols import TaskStore
from tasks_api.infrastructure.document_store import get_task_store
from tasks_api.schemas.task import TaskCreate, TaskUpdate
from tasks_api.services import task_service

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("")
async def get_all_tasks(
    store: TaskStore = Depends(get_task_store),
) -> list[dict[str, Any]]:
    """List every task with its id."""
    return await task_service.list_tasks(store)


@router.post("", response_class=PlainTextResponse)
async def create_task(
    body: TaskCreate,
    store: TaskStore = Depends(get_task_store),
    settings: Settings = Depends(get_settings),
):
    """Create a task. Absent completed/category take their defaults."""
    return await task_service.create_task(
        store, body, settings.default_category,
    )


@router.put("/{task_id}", response_class=PlainTextResponse)
async def update_task(
    task_id: str,
    body: TaskUpdate,
    store: TaskStore = Depends(get_task_store),
):
    """Partially update a task with the fields present in the body."""
    return await task_service.update_task(store, task_id, body)


@router.delete("/{task_id}", response_class=PlainTextResponse)
async def delete_task(
    task_id: str, store: TaskStore = Depends(get_task_store),
):
    """Delete a task. Unknown ids are not an error."""
    return await task_service.delete_task(store, task_id)
