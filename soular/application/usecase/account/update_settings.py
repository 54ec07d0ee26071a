"""Update settings use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from soular.application.usecase.base import BaseUseCase
from soular.domain.error import ValidationError
from soular.domain.gateway import AccountGateway
from soular.domain.model import SettingsPatch, UserSettings, ViewerSession

from .common import require_viewer


class UpdateSettingsRequest(BaseModel):
    """Update settings request."""

    viewer: Optional[ViewerSession] = None
    patch: SettingsPatch


class UpdateSettingsResponse(BaseModel):
    """Update settings response."""

    success: bool
    settings: UserSettings


class UpdateSettingsUseCase(BaseUseCase):
    """Use case for applying a typed partial update to the viewer's settings.

    The patch is validated when it is built (unknown fields and out-of-range
    values are rejected), so only well-formed changes reach the server.
    """

    def __init__(self, account_gateway: AccountGateway) -> None:
        """Initialize update settings use case.

        Args:
            account_gateway: Remote settings and profile API
        """
        self.account_gateway = account_gateway

    async def execute(self, request: UpdateSettingsRequest) -> UpdateSettingsResponse:
        """Execute update settings flow.

        Args:
            request: Viewer and the patch to apply

        Returns:
            The settings as stored by the server

        Raises:
            AuthError: No viewer session
            ValidationError: The patch changes nothing
        """
        viewer = require_viewer(request.viewer, "update settings")
        if request.patch.is_empty:
            raise ValidationError("No settings to update")

        with logfire.span(
            "update_settings",
            user_id=str(viewer.user_id),
            fields=sorted(request.patch.changes()),
        ):
            settings = await self.account_gateway.update_settings(
                viewer, request.patch
            )
            logfire.info("Settings updated", user_id=str(viewer.user_id))

        return UpdateSettingsResponse(success=True, settings=settings)
