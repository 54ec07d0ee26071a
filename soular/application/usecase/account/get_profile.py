"""Get profile use case."""

from typing import Optional

from pydantic import BaseModel

from soular.application.usecase.base import BaseUseCase
from soular.domain.gateway import AccountGateway
from soular.domain.model import Profile, ViewerSession

from .common import require_viewer


class GetProfileRequest(BaseModel):
    """Get profile request."""

    viewer: Optional[ViewerSession] = None


class GetProfileResponse(BaseModel):
    """Get profile response."""

    profile: Profile


class GetProfileUseCase(BaseUseCase):
    """Use case for reading the viewer's profile."""

    def __init__(self, account_gateway: AccountGateway) -> None:
        self.account_gateway = account_gateway

    async def execute(self, request: GetProfileRequest) -> GetProfileResponse:
        viewer = require_viewer(request.viewer, "view your profile")
        profile = await self.account_gateway.get_profile(viewer)
        return GetProfileResponse(profile=profile)
