"""Session token infrastructure."""

from editsync.infrastructure.auth.session_tokens import SessionTokenError, SessionTokenIssuer

__all__ = [
    "SessionTokenError",
    "SessionTokenIssuer",
]
