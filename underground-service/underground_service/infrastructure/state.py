"""
In-memory per-viewer page state (toggle sets, notifications, settings)
"""
import copy
import logging
import time
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from ..config import settings
from ..domain.interactions import ToggleSet
from ..domain.models import CatalogKind, Page
from ..domain.notifications import Notifier

logger = logging.getLogger(__name__)


# Pages whose notifications stay up for the extended timeout
EXTENDED_TIMEOUT_PAGES = frozenset({Page.PROFILE, Page.SETTINGS, Page.FAVORITES, Page.MYLISTINGS})

DEFAULT_PREFERENCES: Dict[str, Dict[str, bool]] = {
    "notifications": {
        "email": True,
        "events": True,
        "marketplace": False,
        "posts": True,
    },
    "privacy": {
        "publicProfile": True,
        "showActivity": True,
        "allowMessages": True,
    },
    "theme": {
        "darkMode": True,
        "compactView": False,
    },
}


def notification_timeout_ms(page: Page) -> int:
    """Auto-hide timeout for a page's notifications"""
    if page in EXTENDED_TIMEOUT_PAGES:
        return settings.NOTIFICATION_TIMEOUT_EXTENDED_MS
    return settings.NOTIFICATION_TIMEOUT_MS


@dataclass
class ViewerEntry:
    """Everything held in memory for one viewer"""
    last_seen: float
    toggles: Dict[CatalogKind, ToggleSet] = field(default_factory=dict)
    notifiers: Dict[Page, Notifier] = field(default_factory=dict)
    preferences: Optional[Dict[str, Dict[str, bool]]] = None


class ViewerState:
    """
    Registry of per-viewer state, discarded on process restart

    Only write paths register a viewer. Viewers idle for longer than
    ttl_seconds are dropped, and past max_viewers the least recently
    seen viewer is dropped first.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        ttl_seconds: Optional[float] = None,
        max_viewers: Optional[int] = None
    ):
        self.clock = clock
        self.ttl_seconds = settings.VIEWER_STATE_TTL_SECONDS if ttl_seconds is None else ttl_seconds
        self.max_viewers = settings.VIEWER_STATE_MAX_VIEWERS if max_viewers is None else max_viewers
        self._viewers: "OrderedDict[str, ViewerEntry]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._viewers)

    def __contains__(self, viewer_id: object) -> bool:
        return viewer_id in self._viewers

    def _evict_expired(self, now: float) -> None:
        while self._viewers:
            viewer_id, entry = next(iter(self._viewers.items()))
            if now - entry.last_seen < self.ttl_seconds:
                break
            del self._viewers[viewer_id]
            logger.debug(f"Dropped idle state for viewer {viewer_id}")

    def _existing(self, viewer_id: str) -> Optional[ViewerEntry]:
        """Entry for a known viewer, refreshed; None if unknown or expired"""
        now = self.clock()
        self._evict_expired(now)
        entry = self._viewers.get(viewer_id)
        if entry is not None:
            entry.last_seen = now
            self._viewers.move_to_end(viewer_id)
        return entry

    def _entry(self, viewer_id: str) -> ViewerEntry:
        """Entry for a viewer, registered on first write"""
        entry = self._existing(viewer_id)
        if entry is None:
            entry = ViewerEntry(last_seen=self.clock())
            self._viewers[viewer_id] = entry
            while len(self._viewers) > self.max_viewers:
                dropped, _ = self._viewers.popitem(last=False)
                logger.info(f"Viewer state full, dropped viewer {dropped}")
        return entry

    def toggles(self, viewer_id: str, kind: CatalogKind) -> ToggleSet:
        """Toggle set for a viewer's catalog page, created empty on first use"""
        entry = self._entry(viewer_id)
        if kind not in entry.toggles:
            entry.toggles[kind] = ToggleSet()
        return entry.toggles[kind]

    def peek_toggles(self, viewer_id: str, kind: CatalogKind) -> ToggleSet:
        """Toggle set for reading; an unregistered empty set if there is none"""
        entry = self._existing(viewer_id)
        if entry is None or kind not in entry.toggles:
            return ToggleSet()
        return entry.toggles[kind]

    def discard_toggles(self, viewer_id: str, kind: CatalogKind) -> None:
        entry = self._existing(viewer_id)
        if entry is not None:
            entry.toggles.pop(kind, None)

    def notifier(self, viewer_id: str, page: Page) -> Notifier:
        entry = self._entry(viewer_id)
        if page not in entry.notifiers:
            entry.notifiers[page] = Notifier(notification_timeout_ms(page), clock=self.clock)
        return entry.notifiers[page]

    def peek_notifier(self, viewer_id: str, page: Page) -> Optional[Notifier]:
        """Notifier for reading, None if the page never showed anything"""
        entry = self._existing(viewer_id)
        if entry is None:
            return None
        return entry.notifiers.get(page)

    def preferences(self, viewer_id: str) -> Dict[str, Dict[str, bool]]:
        """Current preferences for reading; defaults if never changed"""
        entry = self._existing(viewer_id)
        if entry is None or entry.preferences is None:
            return copy.deepcopy(DEFAULT_PREFERENCES)
        return entry.preferences

    def editable_preferences(self, viewer_id: str) -> Dict[str, Dict[str, bool]]:
        entry = self._entry(viewer_id)
        if entry.preferences is None:
            entry.preferences = copy.deepcopy(DEFAULT_PREFERENCES)
        return entry.preferences

    def reset_preferences(self, viewer_id: str) -> Dict[str, Dict[str, bool]]:
        entry = self._existing(viewer_id)
        if entry is not None:
            entry.preferences = None
        return copy.deepcopy(DEFAULT_PREFERENCES)

    def clear(self) -> None:
        self._viewers.clear()


# Global viewer state instance
viewer_state = ViewerState()


async def get_viewer_state() -> ViewerState:
    """Dependency for getting viewer state"""
    return viewer_state
