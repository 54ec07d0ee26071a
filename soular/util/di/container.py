"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container

from soular.config import Settings
from soular.util.di import PROVIDERS, get_provider
from soular.util.logging import setup_logging
from soular.util.observability import configure_logfire, instrument_httpx


def create_container() -> AsyncContainer:
    """Build production container (all prod implementations).

    Settings are loaded from environment variables automatically.

    Usage:
        container = create_container()
        async with container() as request_container:
            factory = await request_container.get(ItemControllerFactory)
            controller = factory.create(parent_id, viewer)
        await container.close()

    Returns:
        Configured DI container with production providers
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*provider_instances)


def bootstrap(settings: Settings | None = None) -> AsyncContainer:
    """Configure logging and observability, then build the production container.

    Logfire must be configured before httpx is instrumented, so entry points
    call this instead of create_container() directly.

    Args:
        settings: Settings to configure logging with, loaded from env if omitted

    Returns:
        Production DI container
    """
    settings = settings or Settings()
    setup_logging(settings)
    configure_logfire(settings)
    instrument_httpx()
    return create_container()
