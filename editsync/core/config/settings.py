"""Application settings backed by pydantic-settings."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ContentstackRegion = Literal["US", "EU", "AZURE_NA", "AZURE_EU", "GCP_NA"]

# Content Delivery API hosts per Contentstack region
CONTENTSTACK_CDN_HOSTS: dict[str, str] = {
    "US": "cdn.contentstack.io",
    "EU": "eu-cdn.contentstack.com",
    "AZURE_NA": "azure-na-cdn.contentstack.com",
    "AZURE_EU": "azure-eu-cdn.contentstack.com",
    "GCP_NA": "gcp-na-cdn.contentstack.com",
}


class Settings(BaseSettings):
    """Application environment settings.

    Values are loaded from environment variables or a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="editsync", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )

    # Server
    host: str = Field(default="0.0.0.0", description="Server bind address")
    port: int = Field(default=8000, gt=0, description="Server port")

    # API
    api_prefix: str = Field(default="/api", description="API path prefix")
    cors_origins: list[str] = Field(
        default=["http://localhost:3000"], description="Allowed CORS origins"
    )

    # OpenAI
    openai_api_key: str = Field(description="OpenAI API key")
    openai_model: str = Field(
        default="gpt-4o-mini", description="Model used for editing operations"
    )
    openai_temperature: float = Field(
        default=1.0, ge=0.0, le=2.0, description="OpenAI temperature"
    )
    openai_max_tokens: int = Field(
        default=2000, gt=0, description="Maximum tokens per completion"
    )

    # Credential gate
    auth_email: str = Field(
        default="test@editsync.com", description="Email of the single allowed account"
    )
    auth_password: str = Field(
        default="1234", description="Password of the single allowed account"
    )
    session_secret: str = Field(description="Secret used to sign session tokens")
    session_algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    session_max_age_seconds: int = Field(
        default=30 * 24 * 60 * 60, gt=0, description="Session lifetime in seconds"
    )
    session_cookie_name: str = Field(
        default="editsync.session-token", description="Session cookie name"
    )
    session_cookie_secure: bool = Field(
        default=False, description="Send the session cookie over HTTPS only"
    )

    # Contentstack
    contentstack_api_key: str = Field(default="", description="Stack API key")
    contentstack_delivery_token: str = Field(
        default="", description="Content Delivery API token"
    )
    contentstack_environment: str = Field(
        default="preview", description="Publishing environment"
    )
    contentstack_region: ContentstackRegion = Field(
        default="US", description="Stack region"
    )
    contentstack_cdn_host: str | None = Field(
        default=None, description="Explicit CDN host, overrides the region"
    )
    contentstack_content_type_uid: str = Field(
        default="page", description="Content type of page entries"
    )
    contentstack_timeout_seconds: float = Field(
        default=10.0, gt=0.0, description="HTTP timeout for Contentstack requests"
    )

    @property
    def contentstack_host(self) -> str:
        """CDN host for the configured region."""
        return self.contentstack_cdn_host or CONTENTSTACK_CDN_HOSTS[self.contentstack_region]


# Global settings instance
settings = Settings()
