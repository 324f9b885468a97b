"""
My listings routes
"""
from fastapi import APIRouter, Depends

from ...application.services import CatalogService
from ...domain.models import CatalogKind
from ...schemas import ListingsResponse, MessageResponse
from ..dependencies import get_catalog_service


router = APIRouter(prefix="/api/v1/listings", tags=["Listings"])


@router.get("", response_model=ListingsResponse)
async def list_own_listings(service: CatalogService = Depends(get_catalog_service)):
    """The viewer's own posts, events and marketplace items"""
    return service.own_listings()


@router.post("/{kind}/{item_id}/toggle-status", response_model=MessageResponse)
async def toggle_listing_status(
    kind: CatalogKind,
    item_id: int,
    service: CatalogService = Depends(get_catalog_service)
):
    """Activate or deactivate a listing (simulated)"""
    notification = service.toggle_listing_status(kind, item_id)
    return MessageResponse(message=notification.message, notification=notification)


@router.delete("/{kind}/{item_id}", response_model=MessageResponse)
async def delete_listing(
    kind: CatalogKind,
    item_id: int,
    service: CatalogService = Depends(get_catalog_service)
):
    """Delete a listing (simulated)"""
    notification = service.delete_listing(kind, item_id)
    return MessageResponse(message=notification.message, notification=notification)
