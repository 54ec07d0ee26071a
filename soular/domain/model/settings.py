"""User settings and their typed partial update."""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from soular.domain.model.common import DomainModel
from soular.domain.value import EmailDigest, Language, Theme, UserId

MIN_POSTS_PER_PAGE = 1
MAX_POSTS_PER_PAGE = 100


class UserSettings(DomainModel):
    """Notification, privacy and display preferences of one user.

    The field set is fixed. Unknown keys from the server are ignored on read.
    """

    id: str
    user_id: UserId

    # Notification preferences
    email_notifications: bool = True
    email_on_reply: bool = True
    email_on_mention: bool = True
    email_on_like: bool = False
    email_on_event: bool = True
    email_on_moderation: bool = True

    push_notifications: bool = True
    push_on_reply: bool = True
    push_on_mention: bool = True
    push_on_like: bool = True
    push_on_event: bool = True
    push_on_moderation: bool = True

    # Privacy settings
    show_email: bool = False
    show_activity: bool = True
    allow_mentions: bool = True
    allow_direct_messages: bool = True

    # Display preferences
    theme: Theme = Theme.SYSTEM
    language: Language = Language.INDONESIAN
    posts_per_page: int = Field(
        default=20, ge=MIN_POSTS_PER_PAGE, le=MAX_POSTS_PER_PAGE
    )

    # Email digest
    email_digest: EmailDigest = EmailDigest.WEEKLY
    digest_day: int = Field(default=0, ge=0, le=6)  # 0 = Sunday, 6 = Saturday

    created_at: datetime
    updated_at: datetime


class SettingsPatch(DomainModel):
    """Partial update of UserSettings.

    Every field is optional; a field left as None is not changed. Unknown
    fields are rejected so typos never reach the server.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    email_notifications: Optional[bool] = None
    email_on_reply: Optional[bool] = None
    email_on_mention: Optional[bool] = None
    email_on_like: Optional[bool] = None
    email_on_event: Optional[bool] = None
    email_on_moderation: Optional[bool] = None

    push_notifications: Optional[bool] = None
    push_on_reply: Optional[bool] = None
    push_on_mention: Optional[bool] = None
    push_on_like: Optional[bool] = None
    push_on_event: Optional[bool] = None
    push_on_moderation: Optional[bool] = None

    show_email: Optional[bool] = None
    show_activity: Optional[bool] = None
    allow_mentions: Optional[bool] = None
    allow_direct_messages: Optional[bool] = None

    theme: Optional[Theme] = None
    language: Optional[Language] = None
    posts_per_page: Optional[int] = Field(
        default=None, ge=MIN_POSTS_PER_PAGE, le=MAX_POSTS_PER_PAGE
    )

    email_digest: Optional[EmailDigest] = None
    digest_day: Optional[int] = Field(default=None, ge=0, le=6)

    def changes(self) -> dict:
        """Fields this patch sets, in wire form."""
        return self.model_dump(mode="json", exclude_none=True)

    @property
    def is_empty(self) -> bool:
        """Whether the patch changes nothing."""
        return not self.changes()


def apply_settings_patch(settings: UserSettings, patch: SettingsPatch) -> UserSettings:
    """Merge a patch into settings.

    The merged record is validated again as a whole, so the result always
    satisfies the UserSettings constraints.
    """
    merged = settings.model_dump()
    merged.update(patch.model_dump(exclude_none=True))
    return UserSettings.model_validate(merged)
