"""Account gateway interface."""

from abc import ABC, abstractmethod

from soular.domain.model.profile import Profile, ProfilePatch
from soular.domain.model.session import ViewerSession
from soular.domain.model.settings import SettingsPatch, UserSettings


class AccountGateway(ABC):
    """Remote settings and profile endpoints of the current user."""

    @abstractmethod
    async def get_settings(self, viewer: ViewerSession) -> UserSettings:
        """Fetch the viewer's settings."""
        pass

    @abstractmethod
    async def update_settings(
        self, viewer: ViewerSession, patch: SettingsPatch
    ) -> UserSettings:
        """Apply a settings patch and return the stored settings."""
        pass

    @abstractmethod
    async def get_profile(self, viewer: ViewerSession) -> Profile:
        """Fetch the viewer's profile."""
        pass

    @abstractmethod
    async def update_profile(
        self, viewer: ViewerSession, patch: ProfilePatch
    ) -> Profile:
        """Apply a profile patch and return the stored profile."""
        pass
