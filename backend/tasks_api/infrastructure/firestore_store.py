"""Firestore Task Store: the managed document database behind /api/tasks.

Invariants:
    - createdAt written as firestore.SERVER_TIMESTAMP (stamped by Firestore at commit)
    - NotFound on update mapped to ResourceNotFoundError (404)
    - Client-side ValueError on update (empty map) mapped to InvalidUpdateError (400)
    - Every other google.api_core error mapped to DocumentStoreError (503)
    - delete_document on a missing id is a silent no-op (Firestore semantics)

Design Decisions:
    - One AsyncClient per process, built in from_settings() on startup
    - Explicit service-account file optional; otherwise Application Default
      Credentials (and FIRESTORE_EMULATOR_HOST) are resolved by the library
"""

import inspect
import logging
from typing import Any

from google.api_core import exceptions as gcp_exceptions
from google.cloud import firestore
from google.oauth2 import service_account

from tasks_api.config import Settings
from tasks_api.core.errors import (
    DocumentStoreError, ErrorContext, InvalidUpdateError, ResourceNotFoundError,
)
from tasks_api.core.task_fields import CREATED_AT_FIELD, with_document_id

logger = logging.getLogger(__name__)


class FirestoreTaskStore:
    """TaskStore backed by a Firestore collection."""

    backend = "firestore"

    def __init__(self, client: firestore.AsyncClient, collection: str = "tasks"):
        self._client = client
        self.collection = collection

    @classmethod
    def from_settings(cls, settings: Settings) -> "FirestoreTaskStore":
        credentials = None
        if settings.firestore_credentials_file:
            credentials = service_account.Credentials.from_service_account_file(
                settings.firestore_credentials_file,
            )
        client = firestore.AsyncClient(
            project=settings.firestore_project_id,
            credentials=credentials,
            database=settings.firestore_database,
        )
        return cls(client, settings.tasks_collection)

    def _collection_ref(self):
        return self._client.collection(self.collection)

    async def list_documents(self) -> list[dict[str, Any]]:
        try:
            return [
                with_document_id(snapshot.to_dict(), snapshot.id)
                async for snapshot in self._collection_ref().stream()
            ]
        except gcp_exceptions.GoogleAPIError as e:
            raise self._store_error(e, "list")

    async def add_document(self, data: dict[str, Any]) -> str:
        document = {**data, CREATED_AT_FIELD: firestore.SERVER_TIMESTAMP}
        try:
            _, doc_ref = await self._collection_ref().add(document)
        except gcp_exceptions.GoogleAPIError as e:
            raise self._store_error(e, "add")
        return doc_ref.id

    async def update_document(self, task_id: str, updates: dict[str, Any]) -> None:
        try:
            await self._collection_ref().document(task_id).update(updates)
        except gcp_exceptions.NotFound:
            raise ResourceNotFoundError(
                "Task", task_id, ErrorContext(collection=self.collection),
            )
        except ValueError as e:
            raise InvalidUpdateError(
                str(e), ErrorContext(task_id=task_id, collection=self.collection),
            )
        except gcp_exceptions.GoogleAPIError as e:
            raise self._store_error(e, "update", task_id)

    async def delete_document(self, task_id: str) -> None:
        try:
            await self._collection_ref().document(task_id).delete()
        except gcp_exceptions.GoogleAPIError as e:
            raise self._store_error(e, "delete", task_id)

    async def health_check(self) -> bool:
        """One-document query against the collection (for readiness probes)."""
        try:
            await self._collection_ref().limit(1).get()
            return True
        except Exception as e:
            logger.error(f"Firestore health check failed: {e}")
            return False

    async def close(self) -> None:
        """Release the client transport (gRPC channel)."""
        result = self._client.close()
        if inspect.isawaitable(result):
            await result

    def _store_error(
        self, exc: Exception, operation: str, task_id: str | None = None,
    ) -> DocumentStoreError:
        logger.error(
            f"Firestore {operation} error: {exc}",
            extra={
                "backend": self.backend, "operation": operation,
                "collection": self.collection, "task_id": task_id,
            },
        )
        return DocumentStoreError(
            type(exc).__name__, operation, self.backend,
            ErrorContext(task_id=task_id, collection=self.collection),
        )
