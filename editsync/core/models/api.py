"""API request/response models (DTO)."""

from pydantic import BaseModel, Field

from editsync.domain.auth.models import UserIdentity


class OperationListResponse(BaseModel):
    """Available editing operations."""

    operations: list[str] = Field(description="Operation names accepted by the editor")


class SessionResponse(BaseModel):
    """Session state returned by the auth endpoints.

    ``user`` is null for guests.
    """

    authenticated: bool = Field(description="Whether a valid session exists")
    user: UserIdentity | None = Field(default=None, description="Signed-in user")

    class Config:
        """Pydantic settings."""

        json_schema_extra = {
            "example": {
                "authenticated": True,
                "user": {"id": "1", "name": "Test User", "email": "test@editsync.com"},
            }
        }


class HealthCheckResponse(BaseModel):
    """Health check response model."""

    status: str = Field(default="healthy", description="Service status")
    version: str = Field(description="Application version")
    service: str = Field(description="Service name")
