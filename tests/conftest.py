"""Test configuration and helpers."""

import asyncio
from datetime import datetime, timedelta
from uuid import uuid4

from soular.adapter.api.inmemory import ScriptedGateway
from soular.domain.model import Item, ViewerSession
from soular.domain.value import ItemId, ParentId, UserId

BASE_TIME = datetime(2025, 1, 1, 12, 0, 0)


def make_viewer(name: str = "rani") -> ViewerSession:
    """Build a viewer session with a fresh user id."""
    return ViewerSession(
        user_id=UserId(uuid4()),
        display_name=name,
        avatar=None,
        access_token=f"token-{name}",
    )


def make_item(
    parent_id: ParentId,
    author_id: UserId | None = None,
    body: str = "Sinematografinya indah",
    rating: int | None = None,
    like_count: int = 0,
    liked: bool = False,
    minutes: int = 0,
) -> Item:
    """Build an item created `minutes` after BASE_TIME."""
    created = BASE_TIME + timedelta(minutes=minutes)
    return Item(
        id=ItemId(uuid4()),
        parent_id=parent_id,
        author_id=author_id or UserId(uuid4()),
        author_display_name="penonton",
        author_avatar=None,
        body_text=body,
        rating=rating,
        like_count=like_count,
        created_at=created,
        updated_at=created,
        viewer_has_liked=liked,
    )


async def wait_for_call(gateway: ScriptedGateway, operation: str, count: int = 1) -> None:
    """Yield to the event loop until the gateway saw `count` calls of operation."""
    for _ in range(100):
        if gateway.count(operation) >= count:
            return
        await asyncio.sleep(0)
    raise AssertionError(f"{operation} was not called {count} time(s)")
