"""Configuration management for Unifeed.

This module provides the FeedSettings class for managing all
configuration options, supporting both environment variables and
configuration files.
"""

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FeedSettings(BaseSettings):
    """Global configuration for Unifeed.

    Settings can be configured via:
    - Environment variables (prefixed with UNIFEED_)
    - .env file
    - Direct instantiation

    Example:
        >>> settings = FeedSettings(http_timeout=30)
        >>> # Or via environment: UNIFEED_HTTP_TIMEOUT=30
    """

    # HTTP retrieval
    http_timeout: float = Field(
        default=15.0,
        gt=0.0,
        description="Overall timeout for feed requests in seconds",
    )
    tls_handshake_timeout: float = Field(
        default=10.0,
        gt=0.0,
        description="Connect and TLS handshake timeout in seconds",
    )
    follow_redirects: bool = Field(
        default=True,
        description="Whether to follow HTTP redirects",
    )
    user_agent: str = Field(
        default="Unifeed/0.1",
        description="User-Agent header sent with feed requests",
    )

    # Parsing
    read_chunk_size: int = Field(
        default=4096,
        ge=64,
        description="Number of bytes read from the stream per parser feed",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_format: str = Field(
        default="structured",
        description="Log format: 'structured' or 'plain'",
    )

    model_config = SettingsConfigDict(
        env_prefix="UNIFEED_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert settings to dictionary."""
        return self.model_dump()


# Global settings instance (lazy-loaded)
_settings: FeedSettings | None = None


def get_settings() -> FeedSettings:
    """Get the global settings instance.

    Returns:
        The global FeedSettings instance, creating it if needed.
    """
    global _settings
    if _settings is None:
        _settings = FeedSettings()
    return _settings


def configure(**kwargs: Any) -> FeedSettings:
    """Configure global settings.

    Args:
        **kwargs: Settings to override

    Returns:
        The updated global settings instance

    Example:
        >>> configure(http_timeout=30, log_level="DEBUG")
    """
    global _settings
    _settings = FeedSettings(**kwargs)
    return _settings
