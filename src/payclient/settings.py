"""Client configuration using pydantic-settings.

All configuration is loaded from environment variables (prefix ``PAYCLIENT_``)
and ``.env`` files.
"""

from enum import Enum
from functools import lru_cache

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log renderers."""

    JSON = "json"
    CONSOLE = "console"


class ClientSettings(BaseSettings):
    """Settings for talking to the payment service.

    Every field can be overridden via environment variables,
    e.g. ``PAYCLIENT_API_KEY=sk_test_...``.
    """

    model_config = SettingsConfigDict(
        env_prefix="PAYCLIENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Remote service
    api_key: SecretStr = Field(SecretStr(""), description="Secret API key")
    api_base: str = Field("https://api.stripe.com", description="Base URL of the service")
    api_version: str | None = Field(None, description="Pinned API version header")
    timeout: float = Field(80.0, gt=0, description="Request timeout in seconds")
    user_agent: str = Field("payclient/1.0.0", description="User-Agent header")

    # Listing
    page_size: int | None = Field(
        None, ge=1, le=100, description="Default page size for list calls"
    )

    # Logging
    log_level: LogLevel = Field(LogLevel.INFO, description="Log level")
    log_format: LogFormat = Field(LogFormat.CONSOLE, description="Log output format")

    @field_validator("api_base")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalise the base URL so paths can be appended directly."""
        return v.rstrip("/")

    @property
    def is_configured(self) -> bool:
        """Check if an API key has been supplied."""
        return bool(self.api_key.get_secret_value())


@lru_cache
def get_settings() -> ClientSettings:
    """Return the process-wide settings instance."""
    return ClientSettings()
