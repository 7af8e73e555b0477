"""Error hierarchy: status, category and structured log fields per error type."""

from tasks_api.core.errors import (
    DocumentStoreError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    InvalidUpdateError,
)


def test_invalid_update_is_a_400_validation_warning():
    exc = InvalidUpdateError("Cannot update with an empty document.")
    assert exc.http_status == 400
    assert exc.category == ErrorCategory.VALIDATION
    assert exc.severity == ErrorSeverity.WARNING
    assert exc.to_response()["error"]["code"] == "INVALID_UPDATE"


def test_store_error_log_extra_names_operation_and_backend():
    exc = DocumentStoreError(
        "Unavailable", "delete", "sql",
        ErrorContext(task_id="t7", collection="tasks"),
    )
    assert exc.log_extra() == {
        "error_code": "DOCUMENT_STORE_ERROR",
        "task_id": "t7",
        "collection": "tasks",
        "operation": "delete",
        "backend": "sql",
    }
