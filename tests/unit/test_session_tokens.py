"""Session token tests."""

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from editsync.domain.auth.models import UserIdentity
from editsync.infrastructure.auth.session_tokens import SessionTokenError, SessionTokenIssuer

SECRET = "unit-test-secret-with-enough-length-for-hs256"


@pytest.fixture
def issuer() -> SessionTokenIssuer:
    """Issuer with a fixed secret and a one hour lifetime."""
    return SessionTokenIssuer(secret=SECRET, algorithm="HS256", max_age_seconds=3600)


class TestSessionTokenIssuer:
    """SessionTokenIssuer tests."""

    def test_issued_token_decodes_to_identity(
        self, issuer: SessionTokenIssuer, test_identity: UserIdentity
    ) -> None:
        """A freshly issued token carries the identity."""
        # When
        claims = issuer.decode(issuer.issue(test_identity))

        # Then
        assert claims.to_identity() == test_identity
        assert claims.exp - claims.iat == 3600

    def test_expired_token_is_rejected(
        self, issuer: SessionTokenIssuer, test_identity: UserIdentity
    ) -> None:
        """A token past its expiry raises SessionTokenError."""
        token = issuer.issue(test_identity, now=datetime.now(UTC) - timedelta(hours=2))

        with pytest.raises(SessionTokenError, match="expired"):
            issuer.decode(token)

    def test_token_signed_with_other_secret_is_rejected(
        self, issuer: SessionTokenIssuer, test_identity: UserIdentity
    ) -> None:
        """A token signed with a different secret is invalid."""
        other = SessionTokenIssuer(
            secret="another-secret-with-enough-length-for-hs256", max_age_seconds=3600
        )

        with pytest.raises(SessionTokenError, match="Invalid session token"):
            issuer.decode(other.issue(test_identity))

    def test_garbage_token_is_rejected(self, issuer: SessionTokenIssuer) -> None:
        """A non-JWT string is invalid."""
        with pytest.raises(SessionTokenError):
            issuer.decode("not-a-token")

    def test_token_without_identity_claims_is_rejected(
        self, issuer: SessionTokenIssuer
    ) -> None:
        """A validly signed token missing claims is malformed."""
        now = int(datetime.now(UTC).timestamp())
        token = jwt.encode({"iat": now, "exp": now + 60}, SECRET, algorithm="HS256")

        with pytest.raises(SessionTokenError, match="Malformed"):
            issuer.decode(token)

    def test_defaults_come_from_settings(self) -> None:
        """Without arguments the issuer uses the configured values."""
        from editsync.core.config.settings import settings

        issuer = SessionTokenIssuer()

        assert issuer.secret == settings.session_secret
        assert issuer.max_age_seconds == settings.session_max_age_seconds

    def test_empty_secret_is_rejected(self) -> None:
        """An issuer cannot be built without a signing secret."""
        with pytest.raises(SessionTokenError, match="not configured"):
            SessionTokenIssuer(secret="")
