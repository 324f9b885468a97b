"""
FastAPI dependencies
"""
from fastapi import Depends, Header, HTTPException, status
from typing import Optional

from ..application.services import CatalogService, ContactService, SessionService, SettingsService
from ..domain.repositories import IKeyValueStore
from ..infrastructure.contact_client import ContactFormClient, get_contact_client
from ..infrastructure.state import ViewerState, get_viewer_state
from ..infrastructure.storage import ViewerStorage, get_key_value_store


async def get_viewer_id(
    x_viewer_id: Optional[str] = Header(None, alias="X-Viewer-Id")
) -> str:
    """
    Identify the browser tab/profile making the request

    Raises:
        HTTPException: If the header is missing or malformed
    """
    if not x_viewer_id or not x_viewer_id.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="X-Viewer-Id header is required"
        )

    viewer_id = x_viewer_id.strip()
    if len(viewer_id) > 128:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="X-Viewer-Id header is too long"
        )
    return viewer_id


async def get_viewer_storage(
    viewer_id: str = Depends(get_viewer_id),
    store: IKeyValueStore = Depends(get_key_value_store)
) -> ViewerStorage:
    """Get the viewer's own key-value namespace"""
    return ViewerStorage(store, viewer_id)


async def get_catalog_service(
    viewer_id: str = Depends(get_viewer_id),
    state: ViewerState = Depends(get_viewer_state)
) -> CatalogService:
    """Get catalog service dependency"""
    return CatalogService(state, viewer_id)


async def get_session_service(
    viewer_id: str = Depends(get_viewer_id),
    storage: ViewerStorage = Depends(get_viewer_storage),
    state: ViewerState = Depends(get_viewer_state)
) -> SessionService:
    """Get session service dependency"""
    return SessionService(storage, state, viewer_id)


async def get_settings_service(
    viewer_id: str = Depends(get_viewer_id),
    state: ViewerState = Depends(get_viewer_state)
) -> SettingsService:
    """Get settings service dependency"""
    return SettingsService(state, viewer_id)


async def get_contact_service(
    client: ContactFormClient = Depends(get_contact_client)
) -> ContactService:
    """Get contact service dependency"""
    return ContactService(client)
