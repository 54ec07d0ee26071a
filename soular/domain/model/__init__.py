"""Domain model entities for Soular."""

from soular.domain.model.collection import CollectionState, ItemPage
from soular.domain.model.item import Item
from soular.domain.model.profile import Profile, ProfilePatch
from soular.domain.model.session import ViewerSession
from soular.domain.model.settings import (
    SettingsPatch,
    UserSettings,
    apply_settings_patch,
)

__all__ = [
    "Item",
    "ItemPage",
    "CollectionState",
    "ViewerSession",
    "UserSettings",
    "SettingsPatch",
    "apply_settings_patch",
    "Profile",
    "ProfilePatch",
]
