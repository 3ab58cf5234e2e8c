"""Contentstack Content Delivery API client.

Fetches page entries for the marketing and editor pages.
"""

import json
import logging

import httpx
from pydantic import ValidationError

from editsync.core.config.settings import settings
from editsync.domain.content.models import Page

logger = logging.getLogger(__name__)


class ContentstackClientError(Exception):
    """Contentstack client error."""

    pass


class ContentstackClient:
    """Contentstack Content Delivery API client.

    Only reads published entries; nothing is ever written back.
    """

    def __init__(
        self,
        api_key: str | None = None,
        delivery_token: str | None = None,
        environment: str | None = None,
        host: str | None = None,
        content_type_uid: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: Stack API key. Taken from settings if None.
            delivery_token: Delivery token. Taken from settings if None.
            environment: Publishing environment. Taken from settings if None.
            host: CDN host. Derived from the configured region if None.
            content_type_uid: Content type of page entries.
            timeout: HTTP timeout in seconds.
            transport: Custom httpx transport.
        """
        self.api_key = api_key if api_key is not None else settings.contentstack_api_key
        self.delivery_token = (
            delivery_token
            if delivery_token is not None
            else settings.contentstack_delivery_token
        )
        self.environment = environment or settings.contentstack_environment
        self.base_url = f"https://{host or settings.contentstack_host}/v3"
        self.content_type_uid = content_type_uid or settings.contentstack_content_type_uid
        self.timeout = timeout or settings.contentstack_timeout_seconds
        self.transport = transport

    async def get_page(self, url: str) -> Page | None:
        """Fetch the page entry published at a URL path.

        Args:
            url: Page URL path, e.g. "/" or "/editor"

        Returns:
            The first matching entry, or None when nothing is published there

        Raises:
            ContentstackClientError: API call failed or returned an unusable entry
        """
        endpoint = f"{self.base_url}/content_types/{self.content_type_uid}/entries"
        params = {
            "environment": self.environment,
            "query": json.dumps({"url": url}),
            "include[]": "blocks.block.image",
        }
        headers = {
            "api_key": self.api_key,
            "access_token": self.delivery_token,
        }

        logger.info("Contentstack page request", extra={"page_url": url})

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.get(endpoint, params=params, headers=headers)

                if response.status_code in (401, 412):
                    logger.error(
                        "Contentstack authentication failed",
                        extra={"page_url": url, "status_code": response.status_code},
                    )
                    raise ContentstackClientError(
                        "Contentstack authentication failed: check API key and delivery token"
                    )

                response.raise_for_status()
                entries = response.json().get("entries", [])

        except httpx.HTTPStatusError as e:
            logger.error(
                "Contentstack HTTP error",
                extra={
                    "page_url": url,
                    "status_code": e.response.status_code,
                    "response": e.response.text[:500],
                },
            )
            raise ContentstackClientError(
                f"Contentstack request failed: {e.response.status_code}"
            ) from e

        except httpx.RequestError as e:
            logger.error(
                "Contentstack connection error",
                extra={"page_url": url, "error": str(e)},
            )
            raise ContentstackClientError(f"Contentstack connection failed: {e}") from e

        if not entries:
            logger.info("Contentstack page not found", extra={"page_url": url})
            return None

        try:
            return Page.model_validate(entries[0])
        except ValidationError as e:
            raise ContentstackClientError(f"Unexpected page entry shape: {e}") from e
