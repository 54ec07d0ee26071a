"""Get settings use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from soular.application.usecase.base import BaseUseCase
from soular.domain.gateway import AccountGateway
from soular.domain.model import UserSettings, ViewerSession

from .common import require_viewer


class GetSettingsRequest(BaseModel):
    """Get settings request."""

    viewer: Optional[ViewerSession] = None


class GetSettingsResponse(BaseModel):
    """Get settings response."""

    settings: UserSettings


class GetSettingsUseCase(BaseUseCase):
    """Use case for reading the viewer's settings."""

    def __init__(self, account_gateway: AccountGateway) -> None:
        self.account_gateway = account_gateway

    async def execute(self, request: GetSettingsRequest) -> GetSettingsResponse:
        viewer = require_viewer(request.viewer, "view settings")
        with logfire.span("get_settings", user_id=str(viewer.user_id)):
            settings = await self.account_gateway.get_settings(viewer)
        return GetSettingsResponse(settings=settings)
