"""Boundary Protocols: contract between services and the document store.

Invariants:
    - Services depend on TaskStore only, never on a concrete client
    - Every implementation maps its client errors to core/errors.py types

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async methods: every implementation does network or database IO
"""

from typing import Any, Protocol


class TaskStore(Protocol):
    """Contract for task document persistence, implemented in infrastructure/."""

    backend: str
    collection: str

    async def list_documents(self) -> list[dict[str, Any]]:
        """All documents in the collection, each carrying its id."""
        ...

    async def add_document(self, data: dict[str, Any]) -> str:
        """Insert with a server-assigned createdAt; returns the new id."""
        ...

    async def update_document(self, task_id: str, updates: dict[str, Any]) -> None: ...

    async def delete_document(self, task_id: str) -> None: ...

    async def health_check(self) -> bool: ...

    async def close(self) -> None:
        """Release client connections; called once on shutdown."""
        ...
