"""Database Infrastructure: SQLAlchemy declarative Base.

Invariants:
    - All sessions are async (AsyncSession)
    - aiosqlite for local files and tests, asyncpg for PostgreSQL
"""
