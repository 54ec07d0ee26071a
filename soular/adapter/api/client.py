"""HTTP gateways for the Soular REST API."""

from typing import Any, Optional

import httpx
import logfire

from soular.adapter.api.response import parse_json, parse_model, raise_for_status
from soular.adapter.error import RemoteError
from soular.config import APISettings
from soular.domain.gateway import AccountGateway, ItemGateway
from soular.domain.model import (
    Item,
    ItemPage,
    Profile,
    ProfilePatch,
    SettingsPatch,
    UserSettings,
    ViewerSession,
)
from soular.domain.value import ItemId, ParentId
from soular.util.logging import get_logger

logger = get_logger(__name__)


async def send(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    viewer: Optional[ViewerSession] = None,
    json: Any = None,
    params: Optional[dict[str, Any]] = None,
) -> httpx.Response:
    """Send one request, turning transport failures into RemoteError.

    Args:
        client: Shared HTTP client (base URL and timeout already configured)
        method: HTTP method
        url: Path relative to the API base URL
        viewer: Acting user; its access token is sent as a bearer token
        json: JSON request body
        params: Query parameters

    Returns:
        The response, whatever its status

    Raises:
        RemoteError: On timeout or any transport error
    """
    headers = {}
    if viewer is not None and viewer.access_token:
        headers["Authorization"] = f"Bearer {viewer.access_token}"

    logger.debug(f"{method} {url} params={params}")
    try:
        return await client.request(
            method, url, json=json, params=params, headers=headers
        )
    except httpx.TimeoutException as e:
        logfire.error("API request timed out", method=method, url=url)
        raise RemoteError(f"Request timed out: {method} {url}") from e
    except httpx.HTTPError as e:
        logfire.error("API request HTTP error", method=method, url=url, error=str(e))
        raise RemoteError(f"HTTP error during {method} {url}: {e}") from e


def _item_body(body: str, rating: Optional[int]) -> dict[str, Any]:
    payload: dict[str, Any] = {"body": body}
    if rating is not None:
        payload["rating"] = rating
    return payload


class HttpItemGateway(ItemGateway):
    """Item gateway over the REST API.

    Paths:
        GET    /{resource}/{parentId}
        POST   /{resource}/{parentId}
        PATCH  /{resource}/{parentId}/{itemId}
        DELETE /{resource}/{parentId}/{itemId}
        POST   /{resource}/{parentId}/{itemId}/like
        DELETE /{resource}/{parentId}/{itemId}/like
    """

    def __init__(self, client: httpx.AsyncClient, api_settings: APISettings) -> None:
        """Initialize HTTP item gateway.

        Args:
            client: Shared HTTP client bound to the API base URL
            api_settings: API settings (resource prefix)
        """
        self.client = client
        self.resource = api_settings.items_resource.strip("/")

    def _collection_path(self, parent_id: ParentId) -> str:
        return f"/{self.resource}/{parent_id}"

    def _item_path(self, parent_id: ParentId, item_id: ItemId) -> str:
        return f"/{self.resource}/{parent_id}/{item_id}"

    async def list_items(
        self,
        parent_id: ParentId,
        viewer: Optional[ViewerSession] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> ItemPage:
        """List items of a parent."""
        params: dict[str, Any] = {}
        if limit is not None:
            params["limit"] = limit
        if offset:
            params["offset"] = offset

        response = await send(
            self.client,
            "GET",
            self._collection_path(parent_id),
            viewer=viewer,
            params=params or None,
        )
        raise_for_status(response, "parent", str(parent_id))
        return parse_model(ItemPage, parse_json(response))

    async def create_item(
        self,
        parent_id: ParentId,
        viewer: ViewerSession,
        body: str,
        rating: Optional[int] = None,
    ) -> Item:
        """Create an item."""
        response = await send(
            self.client,
            "POST",
            self._collection_path(parent_id),
            viewer=viewer,
            json=_item_body(body, rating),
        )
        raise_for_status(response, "parent", str(parent_id))
        return parse_model(Item, parse_json(response), key="item")

    async def update_item(
        self,
        parent_id: ParentId,
        item_id: ItemId,
        viewer: ViewerSession,
        body: str,
        rating: Optional[int] = None,
    ) -> Item:
        """Update an item."""
        response = await send(
            self.client,
            "PATCH",
            self._item_path(parent_id, item_id),
            viewer=viewer,
            json=_item_body(body, rating),
        )
        raise_for_status(response, "item", str(item_id))
        return parse_model(Item, parse_json(response), key="item")

    async def delete_item(
        self, parent_id: ParentId, item_id: ItemId, viewer: ViewerSession
    ) -> None:
        """Delete an item."""
        response = await send(
            self.client, "DELETE", self._item_path(parent_id, item_id), viewer=viewer
        )
        raise_for_status(response, "item", str(item_id))

    async def like_item(
        self, parent_id: ParentId, item_id: ItemId, viewer: ViewerSession
    ) -> None:
        """Like an item."""
        response = await send(
            self.client,
            "POST",
            f"{self._item_path(parent_id, item_id)}/like",
            viewer=viewer,
        )
        raise_for_status(response, "item", str(item_id))

    async def unlike_item(
        self, parent_id: ParentId, item_id: ItemId, viewer: ViewerSession
    ) -> None:
        """Unlike an item."""
        response = await send(
            self.client,
            "DELETE",
            f"{self._item_path(parent_id, item_id)}/like",
            viewer=viewer,
        )
        raise_for_status(response, "item", str(item_id))


class HttpAccountGateway(AccountGateway):
    """Settings and profile gateway over the REST API."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        """Initialize HTTP account gateway with the shared API client."""
        self.client = client

    async def get_settings(self, viewer: ViewerSession) -> UserSettings:
        """Get the viewer's settings."""
        response = await send(self.client, "GET", "/settings", viewer=viewer)
        raise_for_status(response, "settings", str(viewer.user_id))
        return parse_model(UserSettings, parse_json(response))

    async def update_settings(
        self, viewer: ViewerSession, patch: SettingsPatch
    ) -> UserSettings:
        """Patch the viewer's settings with the fields the patch sets."""
        # Response is { success, settings }
        response = await send(
            self.client, "PATCH", "/settings", viewer=viewer, json=patch.changes()
        )
        raise_for_status(response, "settings", str(viewer.user_id))
        return parse_model(UserSettings, parse_json(response), key="settings")

    async def get_profile(self, viewer: ViewerSession) -> Profile:
        """Get the viewer's profile."""
        response = await send(self.client, "GET", "/profile", viewer=viewer)
        raise_for_status(response, "profile", str(viewer.user_id))
        return parse_model(Profile, parse_json(response))

    async def update_profile(
        self, viewer: ViewerSession, patch: ProfilePatch
    ) -> Profile:
        """Patch the viewer's profile."""
        response = await send(
            self.client, "PATCH", "/profile", viewer=viewer, json=patch.changes()
        )
        raise_for_status(response, "profile", str(viewer.user_id))
        return parse_model(Profile, parse_json(response))
