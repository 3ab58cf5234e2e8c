"""Service layer.

Provides service modules for business logic processing.
"""

from editsync.services.auth_service import (
    AuthService,
    CredentialVerifier,
    StaticCredentialVerifier,
)
from editsync.services.content_service import ContentService, PageNotFoundError
from editsync.services.editing_service import EditingService, InvalidInputError

__all__ = [
    "AuthService",
    "ContentService",
    "CredentialVerifier",
    "EditingService",
    "InvalidInputError",
    "PageNotFoundError",
    "StaticCredentialVerifier",
]
