"""12-factor configuration adapter using environment variables."""

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

FALLBACK_POLICIES = ("error", "static")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=8000, description="Port to bind the server to")

    # HAFAS mgate (primary source)
    hafas_aid: str | None = Field(
        default=None,
        description="Access credential for the ÖBB HAFAS mgate endpoint. If unset, mgate is skipped",
    )
    hafas_timeout_seconds: float = Field(
        default=10.0, description="Timeout for HAFAS mgate requests in seconds"
    )

    # REST chain
    rest_timeout_seconds: float = Field(
        default=10.0, description="Timeout for each REST journey request in seconds"
    )
    user_agent: str = Field(
        default="Mozilla/5.0", description="User-Agent header sent to upstream sources"
    )

    # Boundary behavior
    fallback_policy: str = Field(
        default="error",
        description="What to serve when all sources fail: 'error' or 'static' (static schedule)",
    )
    timezone: str = Field(
        default="Europe/Vienna",
        description="Timezone of the static fallback schedule (IANA timezone name)",
    )

    # Rate limiting configuration
    rate_limit_per_minute: int = Field(
        default=100,
        description="Maximum number of requests allowed per IP address per minute (0 disables)",
    )

    @field_validator("fallback_policy")
    @classmethod
    def validate_fallback_policy(cls, v: str) -> str:
        """Validate fallback policy is either 'error' or 'static'."""
        if v.lower() not in FALLBACK_POLICIES:
            raise ValueError("fallback_policy must be either 'error' or 'static'")
        return v.lower()

    @field_validator("hafas_timeout_seconds", "rest_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate upstream timeouts stay within 1-15 seconds."""
        if not 1 <= v <= 15:
            raise ValueError("upstream timeouts must be between 1 and 15 seconds")
        return v

    @field_validator("hafas_aid")
    @classmethod
    def validate_hafas_aid(cls, v: str | None) -> str | None:
        """Treat a blank credential as not configured."""
        if v is None or not v.strip():
            return None
        return v.strip()

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone '{v}'") from e
        return v

    @property
    def hafas_enabled(self) -> bool:
        """Whether the credential-gated mgate source is available."""
        return self.hafas_aid is not None
