"""In-memory gateways for testing.

They behave like the REST API (ownership checks, like bookkeeping, server-side
aggregates) and let tests script failures and slow calls per operation.
"""

import asyncio
from collections import defaultdict
from datetime import datetime
from typing import Optional
from uuid import uuid4

from soular.domain.error import (
    AuthError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from soular.domain.gateway import AccountGateway, ItemGateway
from soular.domain.model import (
    Item,
    ItemPage,
    Profile,
    ProfilePatch,
    SettingsPatch,
    UserSettings,
    ViewerSession,
    apply_settings_patch,
)
from soular.domain.service import round_rating
from soular.domain.value import MAX_RATING, MIN_RATING, ItemId, ParentId, UserId


class ScriptedGateway:
    """Call log, scripted failures and gates shared by the in-memory gateways."""

    def __init__(self) -> None:
        self.calls: list[str] = []
        self._failures: dict[str, list[Exception]] = defaultdict(list)
        self._gates: dict[str, asyncio.Event] = {}

    def fail_next(self, operation: str, error: Exception) -> None:
        """Make the next call of an operation raise error."""
        self._failures[operation].append(error)

    def hold(self, operation: str) -> asyncio.Event:
        """Block calls of an operation until the returned event is set."""
        gate = asyncio.Event()
        self._gates[operation] = gate
        return gate

    def release(self, operation: str) -> None:
        """Unblock an operation held with hold()."""
        gate = self._gates.pop(operation, None)
        if gate is not None:
            gate.set()

    def count(self, operation: str) -> int:
        """Number of calls made to an operation."""
        return self.calls.count(operation)

    async def _enter(self, operation: str) -> None:
        self.calls.append(operation)
        gate = self._gates.get(operation)
        if gate is not None:
            await gate.wait()
        if self._failures[operation]:
            raise self._failures[operation].pop(0)


def _require_viewer(viewer: Optional[ViewerSession]) -> ViewerSession:
    if viewer is None:
        raise AuthError("Unauthorized")
    return viewer


class InMemoryItemGateway(ScriptedGateway, ItemGateway):
    """In-memory implementation of ItemGateway for testing."""

    def __init__(self) -> None:
        super().__init__()
        self._items: dict[ItemId, Item] = {}
        self._likes: set[tuple[ItemId, UserId]] = set()

    def seed(self, item: Item, liked_by: tuple[UserId, ...] = ()) -> Item:
        """Store an item directly, bypassing the call log.

        like_count is kept as given; liked_by only records who the viewers are.
        """
        self._items[item.id] = item.model_copy(update={"viewer_has_liked": False})
        for user_id in liked_by:
            self._likes.add((item.id, user_id))
        return item

    def stored(self, item_id: ItemId) -> Optional[Item]:
        """Server-side copy of an item (viewer_has_liked always False)."""
        return self._items.get(item_id)

    def has_liked(self, item_id: ItemId, user_id: UserId) -> bool:
        """Whether the server recorded a like."""
        return (item_id, user_id) in self._likes

    def _view(self, item: Item, viewer: Optional[ViewerSession]) -> Item:
        liked = viewer is not None and (item.id, viewer.user_id) in self._likes
        return item.model_copy(update={"viewer_has_liked": liked})

    def _find(self, parent_id: ParentId, item_id: ItemId) -> Item:
        item = self._items.get(item_id)
        if item is None or item.parent_id != parent_id:
            raise NotFoundError("item", str(item_id), "Comment not found")
        return item

    @staticmethod
    def _validate(body: str, rating: Optional[int]) -> str:
        if not body or not body.strip():
            raise ValidationError("Comment is required")
        if rating is not None and not MIN_RATING <= rating <= MAX_RATING:
            raise ValidationError("Rating must be between 1 and 5")
        return body.strip()

    async def list_items(
        self,
        parent_id: ParentId,
        viewer: Optional[ViewerSession] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> ItemPage:
        await self._enter("list")
        items = sorted(
            (i for i in self._items.values() if i.parent_id == parent_id),
            key=lambda i: i.created_at,
            reverse=True,
        )
        ratings = [i.rating for i in items if i.rating is not None]
        average = round_rating(sum(ratings) / len(ratings)) if ratings else 0.0

        start = offset or 0
        end = start + limit if limit is not None else None
        return ItemPage(
            items=[self._view(i, viewer) for i in items[start:end]],
            total=len(items),
            average_rating=average,
            limit=limit,
            offset=start,
        )

    async def create_item(
        self,
        parent_id: ParentId,
        viewer: ViewerSession,
        body: str,
        rating: Optional[int] = None,
    ) -> Item:
        await self._enter("create")
        viewer = _require_viewer(viewer)
        text = self._validate(body, rating)
        now = datetime.now()
        item = Item(
            id=ItemId(uuid4()),
            parent_id=parent_id,
            author_id=viewer.user_id,
            author_display_name=viewer.display_name,
            author_avatar=viewer.avatar,
            body_text=text,
            rating=rating,
            like_count=0,
            created_at=now,
            updated_at=now,
            viewer_has_liked=False,
        )
        self._items[item.id] = item
        return item

    async def update_item(
        self,
        parent_id: ParentId,
        item_id: ItemId,
        viewer: ViewerSession,
        body: str,
        rating: Optional[int] = None,
    ) -> Item:
        await self._enter("update")
        viewer = _require_viewer(viewer)
        item = self._find(parent_id, item_id)
        if not item.is_authored_by(viewer.user_id):
            raise NotAuthorizedError("item", str(item_id), str(viewer.user_id))
        text = self._validate(body, rating)
        updated = item.model_copy(
            update={
                "body_text": text,
                "rating": rating,
                "updated_at": max(datetime.now(), item.created_at),
            }
        )
        self._items[item_id] = updated
        return self._view(updated, viewer)

    async def delete_item(
        self, parent_id: ParentId, item_id: ItemId, viewer: ViewerSession
    ) -> None:
        await self._enter("delete")
        viewer = _require_viewer(viewer)
        item = self._find(parent_id, item_id)
        if not item.is_authored_by(viewer.user_id):
            raise NotAuthorizedError("item", str(item_id), str(viewer.user_id))
        del self._items[item_id]
        self._likes = {like for like in self._likes if like[0] != item_id}

    async def like_item(
        self, parent_id: ParentId, item_id: ItemId, viewer: ViewerSession
    ) -> None:
        await self._enter("like")
        viewer = _require_viewer(viewer)
        item = self._find(parent_id, item_id)
        key = (item_id, viewer.user_id)
        if key in self._likes:
            raise ValidationError("You already liked this comment")
        self._likes.add(key)
        self._items[item_id] = item.model_copy(
            update={"like_count": item.like_count + 1}
        )

    async def unlike_item(
        self, parent_id: ParentId, item_id: ItemId, viewer: ViewerSession
    ) -> None:
        await self._enter("unlike")
        viewer = _require_viewer(viewer)
        item = self._find(parent_id, item_id)
        key = (item_id, viewer.user_id)
        # Unlike is idempotent on the server
        if key in self._likes:
            self._likes.discard(key)
            self._items[item_id] = item.model_copy(
                update={"like_count": max(item.like_count - 1, 0)}
            )


class InMemoryAccountGateway(ScriptedGateway, AccountGateway):
    """In-memory implementation of AccountGateway for testing."""

    def __init__(self) -> None:
        super().__init__()
        self._settings: dict[UserId, UserSettings] = {}
        self._profiles: dict[UserId, Profile] = {}

    def seed_settings(self, settings: UserSettings) -> UserSettings:
        self._settings[settings.user_id] = settings
        return settings

    def seed_profile(self, profile: Profile) -> Profile:
        self._profiles[profile.id] = profile
        return profile

    def _settings_for(self, viewer: ViewerSession) -> UserSettings:
        settings = self._settings.get(viewer.user_id)
        if settings is None:
            raise NotFoundError("settings", str(viewer.user_id))
        return settings

    def _profile_for(self, viewer: ViewerSession) -> Profile:
        profile = self._profiles.get(viewer.user_id)
        if profile is None:
            raise NotFoundError("profile", str(viewer.user_id))
        return profile

    async def get_settings(self, viewer: ViewerSession) -> UserSettings:
        await self._enter("get_settings")
        return self._settings_for(_require_viewer(viewer))

    async def update_settings(
        self, viewer: ViewerSession, patch: SettingsPatch
    ) -> UserSettings:
        await self._enter("update_settings")
        current = self._settings_for(_require_viewer(viewer))
        merged = apply_settings_patch(current, patch)
        updated = merged.model_copy(update={"updated_at": datetime.now()})
        self._settings[viewer.user_id] = updated
        return updated

    async def get_profile(self, viewer: ViewerSession) -> Profile:
        await self._enter("get_profile")
        return self._profile_for(_require_viewer(viewer))

    async def update_profile(
        self, viewer: ViewerSession, patch: ProfilePatch
    ) -> Profile:
        await self._enter("update_profile")
        current = self._profile_for(_require_viewer(viewer))
        updated = current.model_copy(
            update={**patch.model_dump(exclude_none=True), "updated_at": datetime.now()}
        )
        self._profiles[viewer.user_id] = updated
        return updated
