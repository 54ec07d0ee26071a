"""Update profile use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from soular.application.usecase.base import BaseUseCase
from soular.domain.error import ValidationError
from soular.domain.gateway import AccountGateway
from soular.domain.model import Profile, ProfilePatch, ViewerSession

from .common import require_viewer


class UpdateProfileRequest(BaseModel):
    """Update profile request."""

    viewer: Optional[ViewerSession] = None
    patch: ProfilePatch


class UpdateProfileResponse(BaseModel):
    """Update profile response."""

    profile: Profile


class UpdateProfileUseCase(BaseUseCase):
    """Use case for updating the viewer's profile.

    Users can change their name, bio and avatar. Email and premium status
    cannot be changed here.
    """

    def __init__(self, account_gateway: AccountGateway) -> None:
        """Initialize update profile use case.

        Args:
            account_gateway: Remote settings and profile API
        """
        self.account_gateway = account_gateway

    async def execute(self, request: UpdateProfileRequest) -> UpdateProfileResponse:
        """Execute update profile flow.

        Raises:
            AuthError: No viewer session
            ValidationError: The patch changes nothing
        """
        viewer = require_viewer(request.viewer, "update your profile")
        if request.patch.is_empty:
            raise ValidationError("No profile fields to update")

        with logfire.span(
            "update_profile",
            user_id=str(viewer.user_id),
            fields=sorted(request.patch.changes()),
        ):
            profile = await self.account_gateway.update_profile(
                viewer, request.patch
            )
            logfire.info("Profile updated", user_id=str(viewer.user_id))

        return UpdateProfileResponse(profile=profile)
