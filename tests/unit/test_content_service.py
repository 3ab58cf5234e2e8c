"""Content service tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from editsync.domain.content.models import Page
from editsync.services.content_service import ContentService, PageNotFoundError


class TestContentService:
    """ContentService tests."""

    async def test_returns_page(self) -> None:
        """A published page is returned as-is."""
        # Given
        page = Page(uid="blt1", title="Home", url="/")
        client = MagicMock()
        client.get_page = AsyncMock(return_value=page)
        service = ContentService(client=client)

        # When
        result = await service.get_page("/")

        # Then
        assert result is page
        client.get_page.assert_called_once_with("/")

    async def test_missing_page_raises(self) -> None:
        """No entry at the URL raises PageNotFoundError."""
        client = MagicMock()
        client.get_page = AsyncMock(return_value=None)
        service = ContentService(client=client)

        with pytest.raises(PageNotFoundError, match="/editor"):
            await service.get_page("/editor")
