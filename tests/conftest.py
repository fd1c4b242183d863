"""Pytest configuration and fixtures."""

from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from tests.support import ACCOUNTS, ARTICLES, PRODUCTS, Account, Article, Base, Product, RecordingQuery

# In-memory SQLite shared across connections via a static pool
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture(scope="function")
async def db_engine():
    """Create test database engine."""
    engine = create_async_engine(TEST_DATABASE_URL, poolclass=StaticPool)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture(scope="function")
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create database session for tests."""
    async_session = async_sessionmaker(
        db_engine, class_=AsyncSession, expire_on_commit=False
    )

    async with async_session() as session:
        yield session


@pytest.fixture
async def articles(db_session: AsyncSession) -> list[Article]:
    """Insert the eight article rows."""
    rows = [Article(**data) for data in ARTICLES]
    db_session.add_all(rows)
    await db_session.commit()
    return rows


@pytest.fixture
async def products(db_session: AsyncSession) -> list[Product]:
    """Insert the four product rows."""
    rows = [Product(**data) for data in PRODUCTS]
    db_session.add_all(rows)
    await db_session.commit()
    return rows


@pytest.fixture
async def accounts(db_session: AsyncSession) -> list[Account]:
    """Insert the four account rows."""
    rows = [Account(**data) for data in ACCOUNTS]
    db_session.add_all(rows)
    await db_session.commit()
    return rows


@pytest.fixture
def recording_query() -> RecordingQuery:
    """Query double that records predicate calls."""
    return RecordingQuery()
