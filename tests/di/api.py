"""Mock API providers for testing."""

from dishka import Scope, provide

from soular.adapter.api import InMemoryAccountGateway, InMemoryItemGateway
from soular.domain.gateway import AccountGateway, ItemGateway
from soular.util.di.infrastructure.api import ApiProvider


class MockApiProvider(ApiProvider):
    """Mock API provider using in-memory gateways.

    Uses REQUEST scope to ensure test isolation - each test gets fresh gateways.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_item_gateway(self) -> ItemGateway:
        """Provide in-memory item gateway."""
        return InMemoryItemGateway()

    @provide(scope=Scope.REQUEST)
    def get_account_gateway(self) -> AccountGateway:
        """Provide in-memory account gateway."""
        return InMemoryAccountGateway()
