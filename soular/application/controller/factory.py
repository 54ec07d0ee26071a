"""Controller factory."""

from typing import Optional

from soular.config import APISettings
from soular.domain.gateway import ItemGateway
from soular.domain.model import ViewerSession
from soular.domain.service import RatingService
from soular.domain.value import ParentId

from .item_collection import ItemCollectionController


class ItemControllerFactory:
    """Builds one controller per parent, bound to an explicit viewer session."""

    def __init__(
        self,
        item_gateway: ItemGateway,
        api_settings: APISettings,
        rating_service: RatingService,
    ) -> None:
        """Initialize controller factory.

        Args:
            item_gateway: Remote item API shared by all controllers
            api_settings: API settings
            rating_service: Average rating arithmetic
        """
        self.item_gateway = item_gateway
        self.api_settings = api_settings
        self.rating_service = rating_service

    def create(
        self, parent_id: ParentId, viewer: Optional[ViewerSession] = None
    ) -> ItemCollectionController:
        """Create a controller for one film or discussion.

        Args:
            parent_id: Parent whose items the controller manages
            viewer: Acting user, None for read-only viewing

        Returns:
            A controller with an empty collection; call load() to fill it
        """
        return ItemCollectionController(
            gateway=self.item_gateway,
            parent_id=parent_id,
            viewer=viewer,
            api_settings=self.api_settings,
            rating_service=self.rating_service,
        )
