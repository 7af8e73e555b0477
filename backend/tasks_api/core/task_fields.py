"""Task Field Shaping: pure builders for new task documents and update maps.

Invariants:
    - Pure functions: no IO, no store access, inputs never mutated
    - "Absent" and "null" differ: defaults apply only to absent keys
    - Only UPDATABLE_FIELDS ever reach the store; unknown keys are dropped
    - createdAt is never set here (the store stamps it at write time)

Design Decisions:
    - Builders take a plain dict of the keys the client actually sent, so
      the Pydantic exclude_unset dump is the single source of "presence"
"""

from typing import Any

UPDATABLE_FIELDS: tuple[str, ...] = ("title", "description", "completed", "category")
CREATED_AT_FIELD = "createdAt"
ID_FIELD = "id"


def build_new_task(payload: dict[str, Any], default_category: str) -> dict[str, Any]:
    """Shape a create request into the document written to the store.

    title and description are copied verbatim (absent becomes None);
    completed defaults to False and category to default_category when absent.
    """
    return {
        "title": payload.get("title"),
        "description": payload.get("description"),
        "completed": payload.get("completed", False),
        "category": payload.get("category", default_category),
    }


def build_update_map(payload: dict[str, Any]) -> dict[str, Any]:
    """Keep only the recognized fields present in an update request."""
    return {
        name: payload[name]
        for name in UPDATABLE_FIELDS
        if name in payload
    }


def with_document_id(data: dict[str, Any] | None, document_id: str) -> dict[str, Any]:
    """Attach the store-assigned identifier to a document's field map."""
    task = dict(data or {})
    task[ID_FIELD] = document_id
    return task
