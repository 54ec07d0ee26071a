"""Optimistic item collection controller.

Keeps a local, renderable projection of one parent's items in sync with the
remote API. Create, update and delete are applied only after the server
confirms them. Like toggles are applied immediately and rolled back if the
call fails, times out or is cancelled.

All state changes happen on the event loop thread between awaits, so the
only hazards are logical races between overlapping remote calls.
"""

import asyncio
from typing import Awaitable, Callable, Optional, TypeVar

import logfire
from pydantic import ValidationError as PydanticValidationError

from soular.adapter.error import AdapterError, RemoteError
from soular.config import APISettings
from soular.domain.error import (
    AuthError,
    DomainError,
    LikeInFlightError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from soular.domain.gateway import ItemGateway
from soular.domain.model import CollectionState, Item, ViewerSession
from soular.domain.service import RatingService
from soular.domain.value import MAX_RATING, MIN_RATING, BodyText, ItemId, ParentId

T = TypeVar("T")

# Fields the server owns on update; like fields stay local so an edit never
# clobbers a pending like toggle.
_MERGED_ON_UPDATE = {
    "body_text",
    "rating",
    "updated_at",
    "author_display_name",
    "author_avatar",
}


def validate_body(body: str) -> str:
    """Return the stripped body or raise ValidationError."""
    try:
        return BodyText(body).root
    except PydanticValidationError as e:
        error = e.errors()[0]
        cause = error.get("ctx", {}).get("error")
        raise ValidationError(str(cause) if cause else error["msg"]) from e


def validate_rating(rating: Optional[int]) -> None:
    """Raise ValidationError unless rating is None or an integer in 1..5."""
    if rating is None:
        return
    if (
        isinstance(rating, bool)
        or not isinstance(rating, int)
        or not MIN_RATING <= rating <= MAX_RATING
    ):
        raise ValidationError(
            f"Rating must be between {MIN_RATING} and {MAX_RATING}"
        )


class ItemCollectionController:
    """Local projection of one parent's items.

    Usage:
        controller = ItemCollectionController(gateway, parent_id, viewer, api_settings)
        await controller.load()
        item = await controller.create("Great film!", rating=5)
        await controller.toggle_like(item.id)

    Every mutation validates locally first, then awaits one remote call. The
    remote call is bounded by the per-call timeout (or the configured default)
    and raises RemoteError when it runs out.
    """

    def __init__(
        self,
        gateway: ItemGateway,
        parent_id: ParentId,
        viewer: Optional[ViewerSession],
        api_settings: APISettings,
        rating_service: Optional[RatingService] = None,
    ) -> None:
        """Initialize controller.

        Args:
            gateway: Remote item API
            parent_id: Film or discussion whose items are shown
            viewer: Acting user, None for read-only viewing
            api_settings: Request timeout and page size
            rating_service: Average rating arithmetic
        """
        self.gateway = gateway
        self.parent_id = parent_id
        self.viewer = viewer
        self.api_settings = api_settings
        self.rating_service = rating_service or RatingService()

        self._state = CollectionState()
        self._pending_likes: set[ItemId] = set()

    # ------------------------------------------------------------------
    # Exposed state
    # ------------------------------------------------------------------

    @property
    def state(self) -> CollectionState:
        """Current immutable snapshot for rendering."""
        return self._state

    @property
    def items(self) -> tuple[Item, ...]:
        return self._state.items

    @property
    def total_count(self) -> int:
        return self._state.total_count

    @property
    def average_rating(self) -> float:
        return self._state.average_rating

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    @property
    def error(self) -> Optional[str]:
        return self._state.error

    @property
    def has_more(self) -> bool:
        return self._state.has_more

    def get(self, item_id: ItemId) -> Optional[Item]:
        """Find a local item by id."""
        for item in self._state.items:
            if item.id == item_id:
                return item
        return None

    def is_like_pending(self, item_id: ItemId) -> bool:
        """Whether a like toggle for the item awaits the server."""
        return item_id in self._pending_likes

    def can_modify(self, item_id: ItemId) -> bool:
        """Whether the viewer may edit or delete the item (for UI affordances)."""
        item = self.get(item_id)
        return (
            self.viewer is not None
            and item is not None
            and item.is_authored_by(self.viewer.user_id)
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require_viewer(self, action: str) -> ViewerSession:
        if self.viewer is None:
            raise AuthError(f"You must be logged in to {action}")
        return self.viewer

    def _require_owner(self, viewer: ViewerSession, item_id: ItemId) -> None:
        # Items not held locally are left to the server to authorize
        item = self.get(item_id)
        if item is not None and not item.is_authored_by(viewer.user_id):
            raise NotAuthorizedError("item", str(item_id), str(viewer.user_id))

    async def _call(self, call: Awaitable[T], timeout: Optional[float]) -> T:
        """Await a remote call under a deadline."""
        deadline = timeout if timeout is not None else self.api_settings.request_timeout
        try:
            async with asyncio.timeout(deadline):
                return await call
        except TimeoutError as e:
            raise RemoteError(f"Request timed out after {deadline}s") from e

    def _replace(self, item_id: ItemId, change: Callable[[Item], Item]) -> Optional[Item]:
        """Apply change to the matching local item. No-op when it is gone."""
        updated: Optional[Item] = None
        items = []
        for item in self._state.items:
            if item.id == item_id:
                updated = change(item)
                items.append(updated)
            else:
                items.append(item)
        if updated is not None:
            self._state = self._state.model_copy(update={"items": tuple(items)})
        return updated

    def _rollback_like(self, item_id: ItemId, was_liked: bool, delta: int) -> None:
        """Reverse an optimistic like change if it is still in local state.

        A reload while the call was pending replaces the item with server
        data; there is nothing left to undo then.
        """

        def revert(item: Item) -> Item:
            if item.viewer_has_liked == was_liked:
                return item
            return item.model_copy(
                update={
                    "viewer_has_liked": was_liked,
                    "like_count": max(item.like_count - delta, 0),
                }
            )

        self._replace(item_id, revert)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def load(self, timeout: Optional[float] = None) -> CollectionState:
        """Replace local state with the server's first page.

        While pending, the collection is empty and is_loading is True. A
        failure is recorded in error (with an empty collection) and not
        raised; there is no automatic retry.

        Returns:
            The resulting state
        """
        self._state = CollectionState(is_loading=True)

        with logfire.span(
            "item_collection.load", parent_id=str(self.parent_id)
        ):
            try:
                page = await self._call(
                    self.gateway.list_items(
                        self.parent_id,
                        viewer=self.viewer,
                        limit=self.api_settings.page_size,
                    ),
                    timeout,
                )
            except (DomainError, AdapterError) as e:
                logfire.error(
                    "Loading items failed",
                    parent_id=str(self.parent_id),
                    error=str(e),
                )
                self._state = CollectionState(error=str(e) or "Failed to load comments")
                return self._state
            except asyncio.CancelledError:
                self._state = CollectionState()
                raise

            # Aggregates come from the server on load, never recomputed here
            self._state = CollectionState(
                items=tuple(page.items),
                total_count=page.total,
                average_rating=page.average_rating,
                has_more=len(page.items) < page.total,
            )
            logfire.info(
                "Items loaded",
                parent_id=str(self.parent_id),
                count=len(page.items),
                total=page.total,
            )
            return self._state

    async def refetch(self, timeout: Optional[float] = None) -> CollectionState:
        """Reload from the server (the UI "reload" action)."""
        return await self.load(timeout=timeout)

    async def load_more(self, timeout: Optional[float] = None) -> tuple[Item, ...]:
        """Append the next page.

        Items already present are skipped. Total and average are refreshed
        from the server response.

        Returns:
            The newly appended items

        Raises:
            RemoteError: If the call fails; local state is left unchanged
        """
        offset = len(self._state.items)
        with logfire.span(
            "item_collection.load_more",
            parent_id=str(self.parent_id),
            offset=offset,
        ):
            page = await self._call(
                self.gateway.list_items(
                    self.parent_id,
                    viewer=self.viewer,
                    limit=self.api_settings.page_size,
                    offset=offset,
                ),
                timeout,
            )

        known = {item.id for item in self._state.items}
        appended = tuple(item for item in page.items if item.id not in known)
        items = self._state.items + appended
        self._state = self._state.model_copy(
            update={
                "items": items,
                "total_count": page.total,
                "average_rating": page.average_rating,
                "has_more": bool(appended) and len(items) < page.total,
            }
        )
        return appended

    # ------------------------------------------------------------------
    # Mutations confirmed before they are applied
    # ------------------------------------------------------------------

    async def create(
        self,
        body: str,
        rating: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> Item:
        """Create an item and prepend it once the server confirms.

        Args:
            body: Item text, must not be blank
            rating: Optional rating 1..5
            timeout: Deadline in seconds, defaults to the configured one

        Returns:
            The created item

        Raises:
            AuthError: No viewer session
            ValidationError: Blank body or rating out of range (no network call)
            RemoteError: Transport or server failure; nothing changes locally
        """
        viewer = self._require_viewer("comment")
        text = validate_body(body)
        validate_rating(rating)

        with logfire.span(
            "item_collection.create",
            parent_id=str(self.parent_id),
            author_id=str(viewer.user_id),
            has_rating=rating is not None,
        ):
            try:
                item = await self._call(
                    self.gateway.create_item(
                        self.parent_id, viewer, text, rating=rating
                    ),
                    timeout,
                )
            except (DomainError, AdapterError) as e:
                logfire.error(
                    "Creating item failed",
                    parent_id=str(self.parent_id),
                    error=str(e),
                )
                raise

            total = self._state.total_count + 1
            self._state = self._state.model_copy(
                update={
                    "items": (item,) + self._state.items,
                    "total_count": total,
                    "average_rating": self.rating_service.average_after_add(
                        self._state.average_rating, total, rating
                    ),
                }
            )
            logfire.info(
                "Item created", item_id=str(item.id), parent_id=str(self.parent_id)
            )
            return item

    async def update(
        self,
        item_id: ItemId,
        body: str,
        rating: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> Item:
        """Update body and rating of an item the viewer wrote.

        The server's answer is merged into the local item; other items are
        untouched. On failure nothing changes locally.

        Raises:
            AuthError: No viewer session, or the viewer is not the author
            ValidationError: Blank body or rating out of range
            NotFoundError: The item no longer exists
            RemoteError: Transport or server failure
        """
        viewer = self._require_viewer("update comments")
        text = validate_body(body)
        validate_rating(rating)
        self._require_owner(viewer, item_id)

        with logfire.span(
            "item_collection.update",
            parent_id=str(self.parent_id),
            item_id=str(item_id),
        ):
            try:
                updated = await self._call(
                    self.gateway.update_item(
                        self.parent_id, item_id, viewer, text, rating=rating
                    ),
                    timeout,
                )
            except (DomainError, AdapterError) as e:
                logfire.error(
                    "Updating item failed", item_id=str(item_id), error=str(e)
                )
                raise

            previous = self.get(item_id)
            merged = self._replace(
                item_id,
                lambda current: current.model_copy(
                    update=updated.model_dump(include=_MERGED_ON_UPDATE)
                ),
            )

            if previous is not None and previous.rating != updated.rating:
                total = self._state.total_count
                average = self.rating_service.average_after_remove(
                    self._state.average_rating, total - 1, previous.rating
                )
                average = self.rating_service.average_after_add(
                    average, total, updated.rating
                )
                self._state = self._state.model_copy(
                    update={"average_rating": average}
                )

            logfire.info("Item updated", item_id=str(item_id))
            return merged if merged is not None else updated

    async def delete(self, item_id: ItemId, timeout: Optional[float] = None) -> None:
        """Delete an item the viewer wrote, once the server confirms.

        Removes exactly that item, decrements total_count and folds its rating
        out of the average. On failure nothing changes locally.

        Raises:
            AuthError: No viewer session, or the viewer is not the author
            NotFoundError: The item no longer exists
            RemoteError: Transport or server failure
        """
        viewer = self._require_viewer("delete comments")
        self._require_owner(viewer, item_id)

        with logfire.span(
            "item_collection.delete",
            parent_id=str(self.parent_id),
            item_id=str(item_id),
        ):
            try:
                await self._call(
                    self.gateway.delete_item(self.parent_id, item_id, viewer),
                    timeout,
                )
            except (DomainError, AdapterError) as e:
                logfire.error(
                    "Deleting item failed", item_id=str(item_id), error=str(e)
                )
                raise

            removed = self.get(item_id)
            total = max(self._state.total_count - 1, 0)
            average = self._state.average_rating
            if removed is not None:
                average = self.rating_service.average_after_remove(
                    average, total, removed.rating
                )
            self._state = self._state.model_copy(
                update={
                    "items": tuple(i for i in self._state.items if i.id != item_id),
                    "total_count": total,
                    "average_rating": average,
                }
            )
            logfire.info("Item deleted", item_id=str(item_id))

    # ------------------------------------------------------------------
    # Optimistic mutation
    # ------------------------------------------------------------------

    async def toggle_like(
        self, item_id: ItemId, timeout: Optional[float] = None
    ) -> Item:
        """Flip the viewer's like on an item immediately, then confirm.

        The flip and the +/-1 count change are applied before the remote call.
        If the call fails, times out or is cancelled, exactly that change is
        reversed and the error is re-raised. While a toggle is pending for an
        item, further toggles on it are rejected.

        Returns:
            The item as it stands after confirmation

        Raises:
            AuthError: No viewer session
            NotFoundError: The item is not in the local collection, or the
                server no longer has it
            LikeInFlightError: A toggle for this item is still pending
            RemoteError: Transport or server failure, or timeout
        """
        viewer = self._require_viewer("like comments")
        item = self.get(item_id)
        if item is None:
            raise NotFoundError("item", str(item_id))
        if item_id in self._pending_likes:
            raise LikeInFlightError(str(item_id))

        was_liked = item.viewer_has_liked
        # Counter never goes below zero; the delta records what was applied
        delta = -1 if was_liked else 1
        if item.like_count + delta < 0:
            delta = 0

        self._replace(item_id, lambda i: i.with_like_delta(not was_liked, delta))
        self._pending_likes.add(item_id)

        with logfire.span(
            "item_collection.toggle_like",
            item_id=str(item_id),
            user_id=str(viewer.user_id),
            from_state=item.like_state.value,
        ):
            try:
                call = self.gateway.unlike_item if was_liked else self.gateway.like_item
                await self._call(call(self.parent_id, item_id, viewer), timeout)
            except asyncio.CancelledError:
                self._rollback_like(item_id, was_liked, delta)
                logfire.warn("Like toggle cancelled, rolled back", item_id=str(item_id))
                raise
            except Exception as e:
                self._rollback_like(item_id, was_liked, delta)
                logfire.error(
                    "Like toggle failed, rolled back",
                    item_id=str(item_id),
                    error=str(e),
                )
                raise
            finally:
                self._pending_likes.discard(item_id)

        current = self.get(item_id)
        return current if current is not None else item.with_like_delta(not was_liked, delta)
