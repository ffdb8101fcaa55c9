"""API test configuration and fixtures."""

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from tests.utils.app_factory import create_app


@pytest_asyncio.fixture
async def client(fake_processor) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client for an app with dynamic rendering enabled."""
    app = create_app(fake_processor)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test.host") as ac:
        yield ac
