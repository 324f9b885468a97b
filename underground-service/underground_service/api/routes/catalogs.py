"""
Catalog routes - feed posts, events and marketplace items
"""
from fastapi import APIRouter, Depends, Query, status
from typing import Optional

from ...application.services import CatalogService
from ...domain.filters import ALL_CATEGORIES
from ...domain.models import CatalogKind, Page
from ...schemas import CatalogResponse, CategoriesResponse, ToggleResponse
from ..dependencies import get_catalog_service


router = APIRouter(prefix="/api/v1/catalogs", tags=["Catalogs"])


@router.get("/{kind}/categories", response_model=CategoriesResponse)
async def list_categories(
    kind: CatalogKind,
    service: CatalogService = Depends(get_catalog_service)
):
    """
    Category filter options for a catalog

    "All" is always the first entry.
    """
    return service.list_categories(kind)


@router.get("/{kind}", response_model=CatalogResponse)
async def list_items(
    kind: CatalogKind,
    category: str = Query(ALL_CATEGORIES, description="Exact category, or All"),
    q: str = Query("", max_length=200, description="Case-insensitive search term"),
    service: CatalogService = Depends(get_catalog_service)
):
    """
    Filtered catalog

    - **category**: Exact, case-sensitive category name, or "All"
    - **q**: Matched against title, description, author/organizer/seller and tags
    """
    return service.list_items(kind, category, q)


@router.post("/{kind}/items/{item_id}/toggle", response_model=ToggleResponse)
async def toggle_item(
    kind: CatalogKind,
    item_id: int,
    page: Optional[Page] = Query(None, description="Page showing the catalog"),
    service: CatalogService = Depends(get_catalog_service)
):
    """
    Like/unlike a post, register/unregister for an event or
    favorite/unfavorite a marketplace item

    - **page**: home or feed for posts; defaults to the catalog's own page
    """
    return service.toggle(kind, item_id, page)


@router.delete("/{kind}/toggles", status_code=status.HTTP_204_NO_CONTENT)
async def reset_toggles(
    kind: CatalogKind,
    service: CatalogService = Depends(get_catalog_service)
):
    """Forget the viewer's toggles for a catalog page"""
    service.reset_toggles(kind)
