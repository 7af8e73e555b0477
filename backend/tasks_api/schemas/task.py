"""Task Schemas: request bodies for create and update.

Invariants:
    - Every field optional; presence is read from model_fields_set, not from None
    - Unknown keys ignored (Pydantic default extra="ignore")
    - Explicit null accepted for every field
    - completed accepts only JSON true/false/null: no "false"-string or 0/1 coercion,
      so the stored value is the one the client sent

Design Decisions:
    - One shared field set for create and update: the store document has no
      required fields, the two bodies differ only in how defaults apply
"""

from typing import Any

from pydantic import BaseModel, StrictBool


class TaskFields(BaseModel):
    """Task fields a client may send."""
    title: str | None = None
    description: str | None = None
    completed: StrictBool | None = None
    category: str | None = None

    def supplied(self) -> dict[str, Any]:
        """Only the keys present in the request body."""
        return self.model_dump(exclude_unset=True)


class TaskCreate(TaskFields):
    """POST /api/tasks body."""


class TaskUpdate(TaskFields):
    """PUT /api/tasks/{id} body."""
