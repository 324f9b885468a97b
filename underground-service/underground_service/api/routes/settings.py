"""
Settings panel routes
"""
from fastapi import APIRouter, Depends

from ...application.services import SettingsService
from ...schemas import MessageResponse, PreferenceToggleResponse, PreferencesResponse
from ..dependencies import get_settings_service


router = APIRouter(prefix="/api/v1/settings", tags=["Settings"])


@router.get("", response_model=PreferencesResponse)
async def get_preferences(settings_service: SettingsService = Depends(get_settings_service)):
    """Notification, privacy and theme preferences"""
    return PreferencesResponse(**settings_service.get_preferences())


@router.post("/reset", response_model=PreferencesResponse)
async def reset_preferences(settings_service: SettingsService = Depends(get_settings_service)):
    """Restore the default preferences"""
    preferences, notification = settings_service.reset_preferences()
    return PreferencesResponse(**preferences, notification=notification)


@router.post("/actions/{action}", response_model=MessageResponse)
async def run_action(
    action: str,
    settings_service: SettingsService = Depends(get_settings_service)
):
    """
    Simulated account action

    - **action**: change-password, export-data, delete-account or clear-cache
    """
    notification = settings_service.run_action(action)
    return MessageResponse(message=notification.message, notification=notification)


@router.post("/{group}/{name}/toggle", response_model=PreferenceToggleResponse)
async def toggle_preference(
    group: str,
    name: str,
    settings_service: SettingsService = Depends(get_settings_service)
):
    """
    Flip one preference

    - **group**: notifications, privacy or theme
    - **name**: Preference name within the group
    """
    return settings_service.toggle_preference(group, name)
