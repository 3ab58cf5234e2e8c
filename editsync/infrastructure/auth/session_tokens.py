"""Signed session tokens.

Session tokens are self-contained JWTs; nothing is stored server-side.
"""

from datetime import UTC, datetime, timedelta

import jwt
from pydantic import ValidationError

from editsync.core.config.settings import settings
from editsync.domain.auth.models import SessionClaims, UserIdentity


class SessionTokenError(Exception):
    """Raised when a session token cannot be validated."""

    pass


class SessionTokenIssuer:
    """Issues and decodes signed session tokens."""

    def __init__(
        self,
        secret: str | None = None,
        algorithm: str | None = None,
        max_age_seconds: int | None = None,
    ) -> None:
        """Initialize the issuer.

        Args:
            secret: Signing secret. Taken from settings if None.
            algorithm: JWT algorithm. Taken from settings if None.
            max_age_seconds: Token lifetime. Taken from settings if None.
        """
        self.secret = secret if secret is not None else settings.session_secret
        self.algorithm = algorithm or settings.session_algorithm
        self.max_age_seconds = max_age_seconds or settings.session_max_age_seconds

        if not self.secret:
            raise SessionTokenError("Session secret is not configured")

    def issue(self, identity: UserIdentity, now: datetime | None = None) -> str:
        """Create a signed token for the identity.

        Args:
            identity: Authenticated user
            now: Issue time, defaults to the current UTC time

        Returns:
            Encoded JWT
        """
        issued_at = now or datetime.now(UTC)
        expires_at = issued_at + timedelta(seconds=self.max_age_seconds)

        payload = {
            "sub": identity.id,
            "name": identity.name,
            "email": identity.email,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode(self, token: str) -> SessionClaims:
        """Validate a token and return its claims.

        Raises:
            SessionTokenError: Token is expired, tampered with or malformed
        """
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError as e:
            raise SessionTokenError("Session token has expired") from e
        except jwt.InvalidTokenError as e:
            raise SessionTokenError(f"Invalid session token: {e}") from e

        try:
            return SessionClaims.model_validate(payload)
        except ValidationError as e:
            raise SessionTokenError(f"Malformed session token: {e}") from e
