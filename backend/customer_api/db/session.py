"""Async Session Factory — provides async DB sessions for direct usage outside FastAPI.

Invariants:
    - Sessions never expire attributes on commit (rows stay readable after persist)
    - Meant for scripts, migrations, and test fixtures

Design Decisions:
    - Separate from infrastructure/database.py: a convenience for non-FastAPI contexts
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)


def create_session_factory(
    database_url: str | AsyncEngine, echo: bool = False,
) -> async_sessionmaker[AsyncSession]:
    """Create an async session factory for the given database URL or engine."""
    if isinstance(database_url, AsyncEngine):
        engine = database_url
    else:
        engine = create_async_engine(database_url, echo=echo)
    return async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
