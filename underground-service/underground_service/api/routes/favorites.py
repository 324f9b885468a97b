"""
Favorites routes
"""
from fastapi import APIRouter, Depends

from ...application.services import CatalogService
from ...domain.models import CatalogKind
from ...schemas import FavoritesResponse, MessageResponse
from ..dependencies import get_catalog_service


router = APIRouter(prefix="/api/v1/favorites", tags=["Favorites"])


@router.get("/{kind}", response_model=FavoritesResponse)
async def list_favorites(
    kind: CatalogKind,
    service: CatalogService = Depends(get_catalog_service)
):
    """Items the viewer has liked, registered for or favorited"""
    return service.favorites(kind)


@router.delete("/{kind}/{item_id}", response_model=MessageResponse)
async def remove_favorite(
    kind: CatalogKind,
    item_id: int,
    service: CatalogService = Depends(get_catalog_service)
):
    """Remove an item from the viewer's favorites"""
    notification = service.remove_favorite(kind, item_id)
    return MessageResponse(message=notification.message, notification=notification)
