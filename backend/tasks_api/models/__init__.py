"""ORM Models: SQLAlchemy declarative models for the SQL document backend.

Design Decisions:
    - Models imported here so Base.metadata is populated by a single import
"""

from tasks_api.models.task_document import TaskDocument  # noqa: F401
