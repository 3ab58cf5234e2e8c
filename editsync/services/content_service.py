"""Page content service."""

from editsync.domain.content.models import Page
from editsync.infrastructure.external.contentstack_client import ContentstackClient


class PageNotFoundError(Exception):
    """No page is published at the requested URL."""

    pass


class ContentService:
    """Reads page content from the CMS."""

    def __init__(self, client: ContentstackClient | None = None) -> None:
        self.client = client or ContentstackClient()

    async def get_page(self, url: str) -> Page:
        """Return the page published at a URL path.

        Raises:
            PageNotFoundError: Nothing is published at the URL
            ContentstackClientError: CMS call failed
        """
        page = await self.client.get_page(url)
        if page is None:
            raise PageNotFoundError(f"No page published at {url}")
        return page
