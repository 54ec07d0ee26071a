"""User profile and its typed partial update."""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from soular.domain.model.common import DomainModel
from soular.domain.value import UserId


class Profile(DomainModel):
    """Public profile of a user."""

    id: UserId
    name: str
    email: str
    avatar: Optional[str] = None
    bio: Optional[str] = None
    is_premium: bool = False
    created_at: datetime
    updated_at: datetime


class ProfilePatch(DomainModel):
    """Partial update of a Profile.

    Only name, bio and avatar can be changed. Email and premium status are
    managed elsewhere.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    bio: Optional[str] = Field(default=None, max_length=500)
    avatar: Optional[str] = None

    def changes(self) -> dict:
        """Fields this patch sets, in wire form."""
        return self.model_dump(mode="json", exclude_none=True)

    @property
    def is_empty(self) -> bool:
        """Whether the patch changes nothing."""
        return not self.changes()
