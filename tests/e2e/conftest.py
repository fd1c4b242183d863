"""E2E test fixtures and configuration."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from tests.e2e.listing_app import app, get_db


@pytest.fixture
async def client(db_session: AsyncSession, articles) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with database override and the article rows loaded."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
