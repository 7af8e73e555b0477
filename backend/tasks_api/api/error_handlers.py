"""Error Handlers: turn task API failures into the JSON error envelope.

Invariants:
    - TasksApiError answers with its own http_status and to_response() body
    - 4xx errors log at WARNING, store and internal errors at ERROR
    - Log lines carry the error's log_extra() (task_id, collection, and for
      store failures operation and backend) plus the request path
    - Unexpected exceptions answer 500 without exception text or traceback

Design Decisions:
    - One envelope builder shared by the validation and catch-all handlers,
      fed by the ErrorCategory/ErrorSeverity enums from core/errors.py
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tasks_api.core.errors import ErrorCategory, ErrorSeverity, TasksApiError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(TasksApiError, handle_tasks_api_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


async def handle_tasks_api_error(request: Request, exc: TasksApiError):
    log = logger.warning if exc.http_status < 500 else logger.error
    log(
        f"{exc.code} on {request.method} {request.url.path}: {exc.message}",
        extra={**exc.log_extra(), "path": request.url.path},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_validation_error(request: Request, exc: RequestValidationError):
    """Malformed task body: field-level details, 400."""
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    logger.warning(
        f"Invalid task body on {request.method} {request.url.path}: "
        f"{[d['field'] for d in details]}",
        extra={
            "error_code": "VALIDATION_ERROR", "path": request.url.path,
            "task_id": request.path_params.get("task_id"),
        },
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, details=details,
        ),
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )


def _envelope(
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
    **fields: object,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            **fields,
        },
    }
