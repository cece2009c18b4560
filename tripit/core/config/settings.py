"""Settings for the TripIt client.

Uses Pydantic Settings for automatic env var loading. Every field can be set
through an environment variable with the ``TRIPIT_`` prefix, for example
``TRIPIT_API_URL`` or ``TRIPIT_OAUTH_ENCODE_SECRETS=true``.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tripit.core.config.enums import Environment


class Settings(BaseSettings):
    """Client settings with automatic env var loading."""

    model_config = SettingsConfigDict(
        env_prefix="TRIPIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    ENVIRONMENT: Environment = Field(Environment.LOCAL, description="Deployment environment")

    API_URL: str = Field("https://api.tripit.com", description="TripIt API base URL")
    API_VERSION: str = Field("v1", description="TripIt API version path segment")
    TIMEOUT: float = Field(30.0, description="HTTP timeout in seconds")

    CONSUMER_KEY: Optional[str] = Field(None, description="OAuth consumer key issued by TripIt")
    CONSUMER_SECRET: Optional[str] = Field(
        None, description="OAuth consumer secret issued by TripIt"
    )
    OAUTH_ENCODE_SECRETS: bool = Field(
        False,
        description=(
            "Percent-encode consumer and token secrets in the HMAC key (RFC 5849). "
            "Off by default: secrets are concatenated raw."
        ),
    )

    @field_validator("API_URL")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Paths are appended with a leading slash."""
        return v.rstrip("/")

    @field_validator("TIMEOUT")
    @classmethod
    def positive_timeout(cls, v: float) -> float:
        """Reject zero or negative timeouts."""
        if v <= 0:
            raise ValueError("TIMEOUT must be positive")
        return v
