"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Google Cloud
    gcp_project: str = ""  # Project name used for resource paths and console links

    # Slack
    slack_webhook: str = ""  # Incoming Webhook URL; empty disables Slack messages
    slack_channel: str = ""  # Overrides the webhook's default channel

    # Logging
    json_log: bool = False
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()
