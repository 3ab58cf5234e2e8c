"""Authentication domain models."""

from pydantic import BaseModel, Field


class UserIdentity(BaseModel):
    """Identity returned by the credential gate."""

    id: str = Field(description="User ID")
    name: str = Field(description="Display name")
    email: str = Field(description="Email address")


class SessionClaims(BaseModel):
    """Decoded session token payload."""

    sub: str = Field(description="User ID")
    name: str = Field(description="Display name")
    email: str = Field(description="Email address")
    iat: int = Field(description="Issued-at timestamp")
    exp: int = Field(description="Expiry timestamp")

    def to_identity(self) -> UserIdentity:
        """Return the identity carried by the token."""
        return UserIdentity(id=self.sub, name=self.name, email=self.email)
