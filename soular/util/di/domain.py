"""Domain layer DI providers."""

from dishka import Scope, provide

from soular.domain.service import RatingService
from soular.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider - concrete, no mocks needed."""

    scope = Scope.APP

    @provide
    def get_rating_service(self) -> RatingService:
        """Provide average rating arithmetic."""
        return RatingService()
