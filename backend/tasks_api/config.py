"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - All credentials come from environment variables or files (never hardcoded)
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - Firestore is the default backend; the SQL backend serves local runs and tests
    - Firestore emulator picked up by the client library from FIRESTORE_EMULATOR_HOST
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Document store
    store_backend: Literal["firestore", "sql"] = "firestore"
    tasks_collection: str = "tasks"
    default_category: str = "Общее"

    # Firestore
    firestore_project_id: str | None = None
    firestore_database: str = "(default)"
    firestore_credentials_file: str | None = None

    # SQL backend
    database_url: str = "postgresql+asyncpg://tasks:tasks@db:5432/tasks"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres hands out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
