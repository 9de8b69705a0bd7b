"""
Pytest fixtures for infrastructure persistence tests.

Each test gets a fresh SQLite database file (aiosqlite driver) with all
tables created.
"""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from msgvault.infrastructure.persistence.sqlalchemy.models.base import Base


@pytest_asyncio.fixture(scope="function")
async def async_engine(tmp_path):
    """Create an async engine bound to a throwaway SQLite file."""
    # Import models to register them with Base.metadata
    import msgvault.infrastructure.persistence.sqlalchemy.models  # noqa: F401

    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'messages.db'}",
        echo=False,
        poolclass=NullPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_maker(async_engine):
    return async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest_asyncio.fixture
async def async_session(session_maker):
    """Provide a session for the test."""
    async with session_maker() as session:
        yield session
