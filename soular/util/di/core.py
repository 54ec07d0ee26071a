"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from soular.config import APISettings, Settings
from soular.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide client settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_api_settings(self, settings: Settings) -> APISettings:
        """Provide API settings."""
        return settings.api
