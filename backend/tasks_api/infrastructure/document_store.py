"""Document Store Registry: process-wide TaskStore handle and FastAPI dependency.

Invariants:
    - Exactly one TaskStore per process, created by init_store() in the lifespan
    - shutdown_store() closes whichever backend is active
    - Routes obtain the store only through get_task_store (overridable in tests)
    - get_task_store raises StoreNotInitializedError before startup

Design Decisions:
    - Module-level singleton initialized on startup (no import-time client creation)
    - Backend chosen by Settings.store_backend
"""

import logging

from tasks_api.config import Settings
from tasks_api.core.errors import StoreNotInitializedError
from tasks_api.core.repository_protocols import TaskStore
from tasks_api.infrastructure.database import DatabaseSessionManager
from tasks_api.infrastructure.firestore_store import FirestoreTaskStore
from tasks_api.infrastructure.sql_store import SqlTaskStore

logger = logging.getLogger(__name__)

# Singleton (initialized on startup)
task_store: TaskStore | None = None


def init_store(settings: Settings) -> TaskStore:
    global task_store
    if settings.store_backend == "sql":
        manager = DatabaseSessionManager(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        task_store = SqlTaskStore(manager, settings.tasks_collection)
    else:
        task_store = FirestoreTaskStore.from_settings(settings)
    logger.info(
        "Document store initialized",
        extra={"backend": task_store.backend, "collection": task_store.collection},
    )
    return task_store


async def shutdown_store() -> None:
    global task_store
    if task_store is not None:
        await task_store.close()
        logger.info(
            "Document store closed",
            extra={"backend": task_store.backend, "collection": task_store.collection},
        )
    task_store = None


def get_task_store() -> TaskStore:
    """FastAPI dependency for the document store."""
    if task_store is None:
        raise StoreNotInitializedError()
    return task_store
