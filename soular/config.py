"""Client configuration."""

from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseModel):
    """REST API configuration."""

    # Base URL of the platform API, including the /api prefix
    base_url: str = "http://localhost:3000/api"

    # Default deadline (seconds) for a single remote call
    # Individual controller calls may override it with their own timeout
    request_timeout: float = Field(default=10.0, gt=0)

    # Resource prefix for item collections
    # "items" -> /items/{parentId}, "films" style deployments can rename it
    items_resource: str = "items"

    # Number of items requested per page on load
    page_size: int = Field(default=50, ge=1, le=200)


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Client settings.

    Set environment variables to override:

    Development (default):
        ENVIRONMENT=development
        API__BASE_URL=http://localhost:3000/api

    Production:
        ENVIRONMENT=production
        API__BASE_URL=https://soular.id/api
        API__REQUEST_TIMEOUT=5
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows API__BASE_URL syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Nested settings
    api: APISettings = APISettings()
    observability: ObservabilitySettings = ObservabilitySettings()
