"""Tasks API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TasksApiError → structured JSON responses
    - CORS configured from settings (any origin by default)
    - Document store initialized on startup and released on shutdown via lifespan

Run with: uvicorn tasks_api.main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tasks_api.api.error_handlers import register_error_handlers
from tasks_api.api.routes import health, tasks
from tasks_api.config import get_settings
from tasks_api.infrastructure.document_store import init_store, shutdown_store
from tasks_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_store(settings)
    logger.info("Tasks API started")
    yield
    await shutdown_store()
    logger.info("Tasks API shutting down")


app = FastAPI(title="Tasks API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(tasks.router)

register_error_handlers(app)
