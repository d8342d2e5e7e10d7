"""
Pytest configuration for tessera_identity integration tests.

Each test gets its own in-memory SQLite database through aiosqlite.
"""

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from tessera_identity.infrastructure.persistence.sqlalchemy import Base


@pytest_asyncio.fixture(scope="function")
async def async_engine():
    """Create an in-memory SQLite engine with the identity schema."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(async_engine):
    """Session rolled back after each test."""
    session_maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with session_maker() as session:
        yield session
        await session.rollback()
