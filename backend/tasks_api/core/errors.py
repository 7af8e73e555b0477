"""Error Hierarchy: typed, categorized exceptions for task API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; store errors (500-level) are critical
    - to_response() produces the REST envelope
    - No client library details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with TasksApiError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DOCUMENT_STORE = "document_store"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    task_id: str | None = None
    collection: str | None = None


class TasksApiError(Exception):
    """Base exception for all task API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "task_id": self.context.task_id,
                    "collection": self.context.collection,
                },
            }
        }

    def log_extra(self) -> dict:
        """Fields for the structured log line (observability.EXTRA_FIELDS)."""
        return {
            "error_code": self.code,
            "task_id": self.context.task_id,
            "collection": self.context.collection,
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(TasksApiError):
    """Requested document does not exist in the store."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.task_id = ctx.task_id or resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )


class InvalidUpdateError(TasksApiError):
    """Store refused the update map (e.g. no recognized fields to apply)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_UPDATE", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


# ─── Store Errors (500-level) ───────────────────────────────────

class DocumentStoreError(TasksApiError):
    """Document store call failed."""
    def __init__(
        self,
        message: str,
        operation: str,
        backend: str,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Document store {operation} failed: {message}",
            "DOCUMENT_STORE_ERROR", ErrorCategory.DOCUMENT_STORE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
        self.backend = backend

    def log_extra(self) -> dict:
        return {
            **super().log_extra(),
            "operation": self.operation, "backend": self.backend,
        }


class StoreNotInitializedError(TasksApiError):
    """A request arrived before the store was initialized on startup."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Document store not initialized",
            "STORE_NOT_INITIALIZED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 503,
        )
