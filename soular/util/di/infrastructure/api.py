"""REST API infrastructure providers."""

from collections.abc import AsyncIterator

import httpx
import logfire
from dishka import Scope, provide

from soular.adapter.api import HttpAccountGateway, HttpItemGateway
from soular.config import APISettings
from soular.domain.gateway import AccountGateway, ItemGateway
from soular.util.di.base import ProviderBase


class ApiProvider(ProviderBase):
    """REST API component base."""

    __mock_component__ = "api"


class ProdApiProvider(ApiProvider):
    """Production API provider using httpx."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_http_client(
        self, api_settings: APISettings
    ) -> AsyncIterator[httpx.AsyncClient]:
        """Provide the shared HTTP client, closed with the container."""
        async with httpx.AsyncClient(
            base_url=api_settings.base_url,
            timeout=api_settings.request_timeout,
            headers={"Content-Type": "application/json"},
        ) as client:
            logfire.info("API client opened", base_url=api_settings.base_url)
            yield client

    @provide(scope=Scope.APP)
    def get_item_gateway(
        self, client: httpx.AsyncClient, api_settings: APISettings
    ) -> ItemGateway:
        """Provide HTTP item gateway."""
        return HttpItemGateway(client=client, api_settings=api_settings)

    @provide(scope=Scope.APP)
    def get_account_gateway(self, client: httpx.AsyncClient) -> AccountGateway:
        """Provide HTTP account gateway."""
        return HttpAccountGateway(client=client)
