"""Application layer DI providers."""

from dishka import Scope, provide

from soular.application.controller import ItemControllerFactory
from soular.application.usecase.account import (
    GetProfileUseCase,
    GetSettingsUseCase,
    UpdateProfileUseCase,
    UpdateSettingsUseCase,
)
from soular.config import APISettings
from soular.domain.gateway import AccountGateway, ItemGateway
from soular.domain.service import RatingService
from soular.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application controllers and use cases provider - concrete, no mocks needed."""

    # Controllers
    @provide(scope=Scope.REQUEST)
    def get_item_controller_factory(
        self,
        item_gateway: ItemGateway,
        api_settings: APISettings,
        rating_service: RatingService,
    ) -> ItemControllerFactory:
        """Provide item controller factory."""
        return ItemControllerFactory(
            item_gateway=item_gateway,
            api_settings=api_settings,
            rating_service=rating_service,
        )

    # Account use cases
    @provide(scope=Scope.REQUEST)
    def get_get_settings_use_case(
        self, account_gateway: AccountGateway
    ) -> GetSettingsUseCase:
        """Provide get settings use case."""
        return GetSettingsUseCase(account_gateway=account_gateway)

    @provide(scope=Scope.REQUEST)
    def get_update_settings_use_case(
        self, account_gateway: AccountGateway
    ) -> UpdateSettingsUseCase:
        """Provide update settings use case."""
        return UpdateSettingsUseCase(account_gateway=account_gateway)

    @provide(scope=Scope.REQUEST)
    def get_get_profile_use_case(
        self, account_gateway: AccountGateway
    ) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(account_gateway=account_gateway)

    @provide(scope=Scope.REQUEST)
    def get_update_profile_use_case(
        self, account_gateway: AccountGateway
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(account_gateway=account_gateway)
