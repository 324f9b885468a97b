"""
Application services - Business logic layer
"""
import asyncio
import json
import logging
from dataclasses import replace
from typing import Any, Dict, Optional, Tuple

from fastapi import HTTPException, status

from ..config import settings
from ..domain.filters import ALL_CATEGORIES, EMPTY_RESULT_MESSAGE, filter_catalog
from ..domain.interactions import ToggleSet, toggle_message
from ..domain.models import (
    CatalogKind,
    Item,
    NotificationKind,
    Page,
    Profile,
    Session,
    SignedIn,
    SignedOut,
    UserStats,
)
from ..domain.repositories import IKeyValueStore
from ..infrastructure.catalogs import (
    OWN_LISTING_AUTHOR,
    find_item,
    get_catalog,
    get_categories,
)
from ..infrastructure.contact_client import ContactFormClient
from ..infrastructure.state import DEFAULT_PREFERENCES, ViewerState
from ..schemas import (
    CatalogResponse,
    CategoriesResponse,
    FavoritesResponse,
    ItemResponse,
    ListingsResponse,
    NotificationResponse,
    PreferenceToggleResponse,
    ToggleResponse,
)

logger = logging.getLogger(__name__)


# Pages showing each catalog, the first one is the default
CATALOG_PAGES = {
    CatalogKind.POSTS: (Page.FEED, Page.HOME),
    CatalogKind.EVENTS: (Page.EVENTS,),
    CatalogKind.MARKETPLACE: (Page.MARKETPLACE,),
}


def catalog_page(kind: CatalogKind, page: Optional[Page] = None) -> Page:
    """
    Page whose notification channel reports toggles for a catalog

    Raises:
        HTTPException: If the page does not show the catalog
    """
    pages = CATALOG_PAGES[kind]
    if page is None:
        return pages[0]
    if page not in pages:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Page {page.value} does not show {kind.value}"
        )
    return page

FAVORITE_LABELS = {
    CatalogKind.POSTS: "post",
    CatalogKind.EVENTS: "event",
    CatalogKind.MARKETPLACE: "item",
}


class NotifyingService:
    """Base for services that surface notifications on a viewer's pages"""

    def __init__(self, state: ViewerState, viewer_id: str):
        self.state = state
        self.viewer_id = viewer_id

    def notify(
        self,
        page: Page,
        message: str,
        kind: NotificationKind = NotificationKind.INFO
    ) -> NotificationResponse:
        """Show a notification on a page and return its response form"""
        notifier = self.state.notifier(self.viewer_id, page)
        notification = notifier.show(message, kind)
        return NotificationResponse(
            message=notification.message,
            kind=notification.kind,
            expires_in_ms=notifier.remaining_ms(),
        )


class CatalogService(NotifyingService):
    """Catalog browsing, toggles, favorites and own listings"""

    def _item_response(self, item: Item, toggles: ToggleSet) -> ItemResponse:
        return ItemResponse(
            id=item.id,
            kind=item.kind,
            category=item.category,
            title=item.title,
            description=item.description,
            author=item.author,
            tags=list(item.tags),
            base_count=item.base_count,
            displayed_count=toggles.displayed_count(item),
            is_toggled=toggles.is_toggled(item.id),
            details=dict(item.details),
        )

    def list_categories(self, kind: CatalogKind) -> CategoriesResponse:
        return CategoriesResponse(kind=kind, categories=get_categories(kind))

    def list_items(
        self,
        kind: CatalogKind,
        category: str = ALL_CATEGORIES,
        search_term: str = ""
    ) -> CatalogResponse:
        """Visible subset of a catalog for the current viewer"""
        toggles = self.state.peek_toggles(self.viewer_id, kind)
        visible = filter_catalog(get_catalog(kind), category, search_term)

        logger.debug(
            f"Catalog {kind.value} filtered by category={category!r} q={search_term!r}: "
            f"{len(visible)} items"
        )

        return CatalogResponse(
            kind=kind,
            category=category,
            q=search_term,
            items=[self._item_response(item, toggles) for item in visible],
            total=len(visible),
            empty_message=None if visible else EMPTY_RESULT_MESSAGE,
        )

    def toggle(self, kind: CatalogKind, item_id: int, page: Optional[Page] = None) -> ToggleResponse:
        """
        Like a post, register for an event or favorite a marketplace item

        Toggling an already toggled item reverses it. The notification goes
        to page, or to the catalog's default page.

        Raises:
            HTTPException: If page does not show the catalog, or the viewer
                already has the maximum number of toggled items
        """
        target = catalog_page(kind, page)
        current = self.state.peek_toggles(self.viewer_id, kind)
        if not current.is_toggled(item_id) and len(current) >= settings.MAX_TOGGLES_PER_CATALOG:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Too many toggled {kind.value}"
            )

        toggles = self.state.toggles(self.viewer_id, kind)
        outcome = toggles.toggle(item_id)
        notification = self.notify(
            target,
            toggle_message(kind, outcome),
            NotificationKind.SUCCESS,
        )

        item = find_item(kind, item_id)
        logger.info(f"Viewer {self.viewer_id} toggled {kind.value} {item_id}: {outcome.value}")

        return ToggleResponse(
            kind=kind,
            item_id=item_id,
            outcome=outcome,
            is_toggled=toggles.is_toggled(item_id),
            displayed_count=toggles.displayed_count(item) if item else None,
            notification=notification,
        )

    def reset_toggles(self, kind: CatalogKind) -> None:
        """Discard the toggle set, as when the viewer leaves the page"""
        self.state.discard_toggles(self.viewer_id, kind)

    def favorites(self, kind: CatalogKind) -> FavoritesResponse:
        toggles = self.state.peek_toggles(self.viewer_id, kind)
        items = [
            self._item_response(item, toggles)
            for item in get_catalog(kind)
            if toggles.is_toggled(item.id)
        ]
        return FavoritesResponse(kind=kind, items=items, total=len(items))

    def remove_favorite(self, kind: CatalogKind, item_id: int) -> NotificationResponse:
        if self.state.peek_toggles(self.viewer_id, kind).is_toggled(item_id):
            self.state.toggles(self.viewer_id, kind).toggle(item_id)
        return self.notify(
            Page.FAVORITES,
            f"Removed from {FAVORITE_LABELS[kind]} favorites!",
            NotificationKind.SUCCESS,
        )

    def own_listings(self) -> ListingsResponse:
        listings = {}
        for kind in CatalogKind:
            toggles = self.state.peek_toggles(self.viewer_id, kind)
            listings[kind.value] = [
                self._item_response(item, toggles)
                for item in get_catalog(kind)
                if item.author == OWN_LISTING_AUTHOR
            ]
        return ListingsResponse(**listings)

    def _own_listing(self, kind: CatalogKind, item_id: int) -> Item:
        item = find_item(kind, item_id)
        if not item or item.author != OWN_LISTING_AUTHOR:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Listing not found"
            )
        return item

    def toggle_listing_status(self, kind: CatalogKind, item_id: int) -> NotificationResponse:
        """Simulated: the catalog itself is never modified"""
        self._own_listing(kind, item_id)
        return self.notify(Page.MYLISTINGS, "Listing status updated!", NotificationKind.SUCCESS)

    def delete_listing(self, kind: CatalogKind, item_id: int) -> NotificationResponse:
        """Simulated: the catalog itself is never modified"""
        self._own_listing(kind, item_id)
        return self.notify(Page.MYLISTINGS, "Listing deleted successfully!", NotificationKind.SUCCESS)


MOCK_PROFILE = Profile(
    name="Alex Student",
    email="astudent@gmu.edu",
    join_date="2024-08-15",
    avatar="AS",
    stats=UserStats(posts_created=12, events_attended=8, items_sold=3, items_bought=5),
)


class SessionService(NotifyingService):
    """
    Mock session kept in viewer storage

    There is no password check and no expiry; the stored profile is the
    whole of the "authentication".
    """

    def __init__(self, storage: IKeyValueStore, state: ViewerState, viewer_id: str):
        super().__init__(state, viewer_id)
        self.storage = storage
        self.key = settings.SESSION_STORAGE_KEY

    async def _read(self) -> Session:
        raw = await self.storage.get(self.key)
        if raw is None:
            return SignedOut()

        try:
            profile = Profile.from_storage(json.loads(raw))
        except (ValueError, TypeError, RecursionError) as e:
            logger.warning(f"Discarding malformed session for viewer {self.viewer_id}: {e}")
            await self.storage.delete(self.key)
            return SignedOut()

        return SignedIn(profile)

    async def write_profile(self, profile: Profile) -> bool:
        """Store a profile under the session key"""
        return await self.storage.set(self.key, json.dumps(profile.to_storage()))

    async def load_session(self, page: Page = Page.PROFILE) -> Session:
        """
        Read the stored session; never raises on bad stored data

        The simulated auth check takes longer on the account page.
        """
        if page == Page.ACCOUNT:
            delay = settings.ACCOUNT_AUTH_CHECK_DELAY_SECONDS
        else:
            delay = settings.AUTH_CHECK_DELAY_SECONDS
        if delay > 0:
            await asyncio.sleep(delay)
        return await self._read()

    async def _start_session(self, profile: Profile, message: str) -> Tuple[Profile, NotificationResponse]:
        if not await self.write_profile(profile):
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Session storage unavailable"
            )
        logger.info(f"Viewer {self.viewer_id} signed in as {profile.email}")
        return profile, self.notify(Page.ACCOUNT, message, NotificationKind.SUCCESS)

    async def sign_in(self, email: str) -> Tuple[Profile, NotificationResponse]:
        """Mock sign in: the mock user with the given email"""
        profile = replace(MOCK_PROFILE, email=email, stats=replace(MOCK_PROFILE.stats), extra={})
        return await self._start_session(profile, "Welcome back!")

    async def sign_up(self, name: str, email: str) -> Tuple[Profile, NotificationResponse]:
        """Mock sign up: the mock user with the given name and email"""
        profile = replace(MOCK_PROFILE, name=name, email=email, stats=replace(MOCK_PROFILE.stats), extra={})
        return await self._start_session(profile, "Account created successfully!")

    async def sign_out(self) -> None:
        await self.storage.delete(self.key)
        logger.info(f"Viewer {self.viewer_id} signed out")

    async def save_profile(self, updates: Dict[str, Any]) -> Tuple[Profile, NotificationResponse]:
        """
        Merge profile edits into the stored profile

        Args:
            updates: Profile attribute -> new value, None values are ignored

        Raises:
            HTTPException: If the viewer is not signed in
        """
        session = await self._read()
        if not isinstance(session, SignedIn):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Not signed in"
            )

        if settings.PROFILE_SAVE_DELAY_SECONDS > 0:
            await asyncio.sleep(settings.PROFILE_SAVE_DELAY_SECONDS)

        changes = {field: value for field, value in updates.items() if value is not None}
        profile = replace(session.profile, **changes)

        if not await self.write_profile(profile):
            self.notify(Page.PROFILE, "Failed to update profile. Please try again.", NotificationKind.ERROR)
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Failed to update profile"
            )

        return profile, self.notify(Page.PROFILE, "Profile updated successfully!", NotificationKind.SUCCESS)


SIMULATED_ACTIONS: Dict[str, Tuple[str, NotificationKind]] = {
    "change-password": ("Password change functionality would open here", NotificationKind.INFO),
    "export-data": ("Data export started. You'll receive an email when ready.", NotificationKind.INFO),
    "delete-account": ("Account deletion requires additional verification", NotificationKind.ERROR),
    "clear-cache": ("Cache cleared successfully!", NotificationKind.SUCCESS),
}


class SettingsService(NotifyingService):
    """Settings panel preferences and canned account actions"""

    def get_preferences(self) -> Dict[str, Dict[str, bool]]:
        return self.state.preferences(self.viewer_id)

    def toggle_preference(self, group: str, name: str) -> PreferenceToggleResponse:
        if group not in DEFAULT_PREFERENCES or name not in DEFAULT_PREFERENCES[group]:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Unknown setting {group}.{name}"
            )

        preferences = self.state.editable_preferences(self.viewer_id)
        enabled = not preferences[group][name]
        preferences[group][name] = enabled

        state_word = "enabled" if enabled else "disabled"
        if group == "notifications":
            message = f"{name} notifications {state_word}"
        else:
            message = f"{name} {state_word}"

        return PreferenceToggleResponse(
            group=group,
            name=name,
            enabled=enabled,
            notification=self.notify(Page.SETTINGS, message),
        )

    def reset_preferences(self) -> Tuple[Dict[str, Dict[str, bool]], NotificationResponse]:
        preferences = self.state.reset_preferences(self.viewer_id)
        return preferences, self.notify(Page.SETTINGS, "Settings reset to defaults")

    def run_action(self, action: str) -> NotificationResponse:
        """Simulated account actions that only report a canned message"""
        if action not in SIMULATED_ACTIONS:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Unknown action {action}"
            )
        message, kind = SIMULATED_ACTIONS[action]
        return self.notify(Page.SETTINGS, message, kind)


CONTACT_SUCCESS_MESSAGE = "Thank you for your message! I'll get back to you soon."
CONTACT_FAILURE_MESSAGE = "Oops! There was a problem submitting your form. Please try again."


class ContactService:
    """Relays contact form submissions"""

    def __init__(self, client: ContactFormClient):
        self.client = client

    async def submit(self, name: str, email: str, subject: str, message: str) -> Tuple[bool, str]:
        """
        Send one submission, no retry

        Returns:
            Tuple of (success, message to show inline)
        """
        success = await self.client.submit({
            "name": name,
            "email": email,
            "subject": subject,
            "message": message,
        })
        if success:
            return True, CONTACT_SUCCESS_MESSAGE
        return False, CONTACT_FAILURE_MESSAGE
