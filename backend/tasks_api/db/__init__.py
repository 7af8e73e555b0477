"""Database Infrastructure: SQLAlchemy Base for the SQL document backend.

Invariants:
    - All sessions are async (AsyncSession)

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for tests
"""
