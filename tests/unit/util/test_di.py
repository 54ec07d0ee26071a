"""Unit tests for dependency injection wiring."""

import pytest

from soular.adapter.api import HttpItemGateway, InMemoryItemGateway
from soular.application.controller import ItemControllerFactory
from soular.domain.gateway import ItemGateway
from soular.domain.service import RatingService
from tests.di import build_test_container
from tests.harness import create_env_fixture

# Unit test fixture - in-memory API
unit_env = create_env_fixture()

# Real httpx gateways, no requests are sent
http_env = create_env_fixture(unmock={"api"})


class TestContainer:
    """Tests for the test and production container wiring."""

    @pytest.mark.asyncio
    async def test_mocked_api_uses_in_memory_gateway(self, unit_env):
        gateway = await unit_env.get(ItemGateway)
        factory = await unit_env.get(ItemControllerFactory)

        assert isinstance(gateway, InMemoryItemGateway)
        assert factory.item_gateway is gateway
        assert isinstance(factory.rating_service, RatingService)

    @pytest.mark.asyncio
    async def test_unmocked_api_uses_http_gateway(self, http_env):
        gateway = await http_env.get(ItemGateway)

        assert isinstance(gateway, HttpItemGateway)

    def test_unknown_component_is_rejected(self):
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"database"})
