"""Credential gate service.

Checks submitted credentials against a verifier and turns a successful check
into a signed session token.
"""

import logging
from typing import Protocol

from editsync.domain.auth.models import UserIdentity
from editsync.infrastructure.auth.session_tokens import SessionTokenError, SessionTokenIssuer

logger = logging.getLogger(__name__)


class CredentialVerifier(Protocol):
    """Credential check capability."""

    def verify(self, email: str | None, password: str | None) -> UserIdentity | None: ...


class StaticCredentialVerifier:
    """Accepts exactly one configured email/password pair.

    There is no account store and no hashing.
    """

    def __init__(
        self,
        email: str,
        password: str,
        user_id: str = "1",
        name: str = "Test User",
    ) -> None:
        self.email = email
        self.password = password
        self.user_id = user_id
        self.name = name

    def verify(self, email: str | None, password: str | None) -> UserIdentity | None:
        """Return the identity on an exact match, otherwise None."""
        if email == self.email and password == self.password:
            return UserIdentity(id=self.user_id, name=self.name, email=email)
        return None


class AuthService:
    """Credential gate and session lookup."""

    def __init__(
        self,
        verifier: CredentialVerifier,
        token_issuer: SessionTokenIssuer,
    ) -> None:
        """Initialize the service.

        Args:
            verifier: Credential check capability
            token_issuer: Session token issuer
        """
        self.verifier = verifier
        self.token_issuer = token_issuer

    def authorize(self, email: str | None, password: str | None) -> UserIdentity | None:
        """Check credentials without issuing a session."""
        return self.verifier.verify(email, password)

    def sign_in(
        self, email: str | None, password: str | None
    ) -> tuple[UserIdentity, str] | None:
        """Check credentials and issue a session token.

        Args:
            email: Submitted email
            password: Submitted password

        Returns:
            The identity and its session token, or None when the check fails
        """
        identity = self.authorize(email, password)
        if identity is None:
            logger.info("Sign-in rejected", extra={"email": email})
            return None

        logger.info("Sign-in accepted", extra={"user_id": identity.id})
        return identity, self.token_issuer.issue(identity)

    def get_session(self, token: str | None) -> UserIdentity | None:
        """Resolve a session token to its identity.

        Absent, expired and invalid tokens all mean a guest session.
        """
        if not token:
            return None

        try:
            claims = self.token_issuer.decode(token)
        except SessionTokenError as e:
            logger.debug("Session token rejected", extra={"reason": str(e)})
            return None

        return claims.to_identity()
