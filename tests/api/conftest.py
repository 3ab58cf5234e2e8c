"""Fixtures for in-process API tests."""

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from editsync.api.routes.editing import get_editing_service
from editsync.main import app
from editsync.services.editing_service import EditingService


@pytest.fixture
def mock_completion_client() -> AsyncMock:
    """Completion client returning a fixed answer."""
    client = AsyncMock()
    client.complete = AsyncMock(return_value="The cat sat.")
    return client


@pytest.fixture
async def client(mock_completion_client: AsyncMock) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the app, with the completion service mocked."""
    app.dependency_overrides[get_editing_service] = lambda: EditingService(
        completion_client=mock_completion_client
    )
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://testserver"
    ) as ac:
        yield ac
    app.dependency_overrides.clear()
