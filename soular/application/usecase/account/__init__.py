"""Account use cases."""

from .get_profile import GetProfileRequest, GetProfileResponse, GetProfileUseCase
from .get_settings import GetSettingsRequest, GetSettingsResponse, GetSettingsUseCase
from .update_profile import (
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
)
from .update_settings import (
    UpdateSettingsRequest,
    UpdateSettingsResponse,
    UpdateSettingsUseCase,
)

__all__ = [
    "GetProfileRequest",
    "GetProfileResponse",
    "GetProfileUseCase",
    "GetSettingsRequest",
    "GetSettingsResponse",
    "GetSettingsUseCase",
    "UpdateProfileRequest",
    "UpdateProfileResponse",
    "UpdateProfileUseCase",
    "UpdateSettingsRequest",
    "UpdateSettingsResponse",
    "UpdateSettingsUseCase",
]
