"""External API client module."""

from editsync.infrastructure.external.contentstack_client import (
    ContentstackClient,
    ContentstackClientError,
)

__all__ = [
    "ContentstackClient",
    "ContentstackClientError",
]
