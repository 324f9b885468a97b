"""
Per-viewer toggle state (likes, event registrations, favorites)
"""
from typing import Dict, FrozenSet, Iterable

from .models import CatalogKind, Item, ToggleOutcome


TOGGLE_MESSAGES: Dict[CatalogKind, Dict[ToggleOutcome, str]] = {
    CatalogKind.POSTS: {
        ToggleOutcome.ADDED: "Post liked!",
        ToggleOutcome.REMOVED: "Post unliked",
    },
    CatalogKind.EVENTS: {
        ToggleOutcome.ADDED: "Registered for event!",
        ToggleOutcome.REMOVED: "Unregistered from event",
    },
    CatalogKind.MARKETPLACE: {
        ToggleOutcome.ADDED: "Added to favorites!",
        ToggleOutcome.REMOVED: "Removed from favorites",
    },
}


def toggle_message(kind: CatalogKind, outcome: ToggleOutcome) -> str:
    """Notification text for a toggle outcome"""
    return TOGGLE_MESSAGES[kind][outcome]


class ToggleSet:
    """Set of item ids the viewer has toggled on"""

    def __init__(self, item_ids: Iterable[int] = ()):
        self._ids = set(item_ids)

    def toggle(self, item_id: int) -> ToggleOutcome:
        """Flip membership of item_id"""
        if item_id in self._ids:
            self._ids.discard(item_id)
            return ToggleOutcome.REMOVED
        self._ids.add(item_id)
        return ToggleOutcome.ADDED

    def is_toggled(self, item_id: int) -> bool:
        return item_id in self._ids

    def displayed_count(self, item: Item) -> int:
        """Base count plus one when the viewer has toggled the item"""
        return item.base_count + (1 if self.is_toggled(item.id) else 0)

    def clear(self) -> None:
        self._ids.clear()

    @property
    def ids(self) -> FrozenSet[int]:
        return frozenset(self._ids)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)
