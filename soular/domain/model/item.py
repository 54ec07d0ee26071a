"""Item entity.

An item is a single piece of user-authored content: a film comment, a forum
post or a discussion. The like relation is stored separately on the server but
is denormalized onto the item as like_count/viewer_has_liked for display.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from soular.domain.model.common import DomainModel
from soular.domain.value import ItemId, LikeState, ParentId, Rating, UserId


class Item(DomainModel):
    """Item entity.

    Invariants:
    - like_count is never negative
    - updated_at >= created_at (equal when never edited)
    - rating, when present, is an integer in 1..5
    """

    id: ItemId
    parent_id: ParentId
    author_id: UserId
    author_display_name: str
    author_avatar: Optional[str] = None
    body_text: str = Field(min_length=1)
    rating: Optional[Rating] = None
    like_count: int = Field(default=0, ge=0)
    created_at: datetime
    updated_at: datetime
    viewer_has_liked: bool = False

    @model_validator(mode="after")
    def check_timestamps(self) -> "Item":
        """Reject items edited before they were created."""
        if self.updated_at < self.created_at:
            raise ValueError("updated_at must not precede created_at")
        return self

    @property
    def like_state(self) -> LikeState:
        """Like relation of the viewer to this item."""
        return LikeState.LIKED if self.viewer_has_liked else LikeState.NOT_LIKED

    @property
    def is_edited(self) -> bool:
        """Whether the author changed the item after creating it."""
        return self.updated_at > self.created_at

    def is_authored_by(self, user_id: UserId) -> bool:
        """Check whether the given user wrote this item."""
        return self.author_id == user_id

    def with_like_delta(self, liked: bool, delta: int) -> "Item":
        """Return a copy with the like flag set and the count shifted by delta."""
        return self.model_copy(
            update={
                "viewer_has_liked": liked,
                "like_count": self.like_count + delta,
            }
        )
