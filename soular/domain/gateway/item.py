"""Item gateway interface."""

from abc import ABC, abstractmethod
from typing import Optional

from soular.domain.model.collection import ItemPage
from soular.domain.model.item import Item
from soular.domain.model.session import ViewerSession
from soular.domain.value import ItemId, ParentId


class ItemGateway(ABC):
    """Remote source of truth for item collections.

    Defines the contract of the item REST endpoints. Implementations live in
    the adapter layer. Every method raises ValidationError, AuthError or
    NotFoundError for the matching server answers and RemoteError for any
    other failure.
    """

    @abstractmethod
    async def list_items(
        self,
        parent_id: ParentId,
        viewer: Optional[ViewerSession] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> ItemPage:
        """List items of a parent, newest first.

        Args:
            parent_id: Film or discussion the items belong to
            viewer: Acting user, used to fill viewer_has_liked
            limit: Maximum number of items to return
            offset: Number of items to skip

        Returns:
            Page of items with server-computed total and average rating
        """
        pass

    @abstractmethod
    async def create_item(
        self,
        parent_id: ParentId,
        viewer: ViewerSession,
        body: str,
        rating: Optional[int] = None,
    ) -> Item:
        """Create an item. The server assigns id and timestamps.

        Returns:
            The created item
        """
        pass

    @abstractmethod
    async def update_item(
        self,
        parent_id: ParentId,
        item_id: ItemId,
        viewer: ViewerSession,
        body: str,
        rating: Optional[int] = None,
    ) -> Item:
        """Update body and rating of an item.

        Returns:
            The item as stored after the update
        """
        pass

    @abstractmethod
    async def delete_item(
        self, parent_id: ParentId, item_id: ItemId, viewer: ViewerSession
    ) -> None:
        """Delete an item."""
        pass

    @abstractmethod
    async def like_item(
        self, parent_id: ParentId, item_id: ItemId, viewer: ViewerSession
    ) -> None:
        """Record that the viewer likes an item."""
        pass

    @abstractmethod
    async def unlike_item(
        self, parent_id: ParentId, item_id: ItemId, viewer: ViewerSession
    ) -> None:
        """Remove the viewer's like from an item."""
        pass
