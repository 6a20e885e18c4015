"""Configuration management using pydantic-settings.

Supports environment variables and .env file loading.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration.

    Every field can be overridden with a ``FEEDLOADER_`` prefixed
    environment variable, e.g. ``FEEDLOADER_FEED_URL``.
    """

    model_config = SettingsConfigDict(
        env_prefix="FEEDLOADER_",
        env_file=(".env", ".env.local"),  # .env.local overrides .env
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "feedloader"
    log_level: str = "INFO"
    log_json: bool = False  # Set True in production for structured logs

    # Feed
    feed_url: str = Field(
        default="https://example.com/feed",
        description="Feed endpoint returning the items JSON payload",
    )

    # HTTP
    http_timeout: float = Field(default=30, gt=0, description="Request timeout in seconds")
    http_user_agent: str = "feedloader/1.0"
    http_follow_redirects: bool = True


settings = Settings()
