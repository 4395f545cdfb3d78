"""Configuration management for HOLONET.

Loads settings from environment variables (and an optional .env file) using
Pydantic. Every field has a default, so the demo starts with no configuration.

Usage:
    from holonet.config import settings

    print(settings.request_timeout_ms)
    print(settings.port)
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """HOLONET configuration from environment variables.

    Attributes:
        debug: Verbose logging plus the end-of-run stats summary
        request_timeout_ms: Per-request timeout for the Star Wars API (milliseconds)
        port: Listen port for the demo server (PORT)
        host: Bind address for the demo server
        base_url: Star Wars API root
        verify_tls: Validate the API's TLS certificate (off by default)
        cursor_limit: Last character/vehicle number the cursor visits
        log_level: Logging verbosity when debug is off
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unknown env vars
    )

    debug: bool = Field(default=True, description="Debug mode")
    request_timeout_ms: int = Field(
        default=5000,
        ge=1,
        description="Request timeout in milliseconds",
    )

    # Demo server
    port: int = Field(default=3000, ge=1, le=65535, description="HTTP listen port")
    host: str = Field(default="0.0.0.0", description="HTTP bind address")

    # Upstream API
    base_url: str = Field(default="https://swapi.dev/api", description="Star Wars API root")
    # Upstream certificate is not validated unless enabled
    verify_tls: bool = Field(default=False, description="Verify upstream TLS certificates")

    cursor_limit: int = Field(
        default=4,
        ge=1,
        description="Highest vehicle number fetched by the sequential cursor",
    )

    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the API root so paths join with a single slash."""
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid:
            raise ValueError(f"log_level must be one of {valid}, got {v}")
        return v_upper

    @property
    def request_timeout(self) -> float:
        """Request timeout in seconds, as httpx and asyncio expect."""
        return self.request_timeout_ms / 1000.0


# Global settings instance — loaded once at import
settings = Settings()
