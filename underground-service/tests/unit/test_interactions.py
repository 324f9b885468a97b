"""
Unit Tests for toggle tracking
"""
import pytest

from underground_service.domain.interactions import ToggleSet, toggle_message
from underground_service.domain.models import CatalogKind, ToggleOutcome
from underground_service.infrastructure.catalogs import POSTS, find_item


class TestToggleSet:
    """Test ToggleSet membership"""

    def test_starts_empty(self):
        """Test new toggle set has no items"""
        toggles = ToggleSet()
        assert len(toggles) == 0
        assert not toggles.is_toggled(1)

    def test_toggle_adds_then_removes(self):
        """Test toggling twice reports added then removed"""
        toggles = ToggleSet()

        assert toggles.toggle(7) == ToggleOutcome.ADDED
        assert 7 in toggles
        assert toggles.toggle(7) == ToggleOutcome.REMOVED
        assert 7 not in toggles

    @pytest.mark.parametrize("initial", [(), (1,), (1, 2, 3)])
    def test_double_toggle_is_identity(self, initial):
        """Test toggling the same id twice restores the set"""
        toggles = ToggleSet(initial)
        before = toggles.ids

        toggles.toggle(2)
        toggles.toggle(2)

        assert toggles.ids == before

    def test_unknown_id_can_be_toggled(self):
        """Test ids not in any catalog are still tracked"""
        toggles = ToggleSet()
        assert toggles.toggle(9999) == ToggleOutcome.ADDED
        assert toggles.is_toggled(9999)

    def test_clear(self):
        """Test clear empties the set"""
        toggles = ToggleSet((1, 2))
        toggles.clear()
        assert toggles.ids == frozenset()

    def test_ids_is_a_snapshot(self):
        """Test ids cannot be used to mutate the set"""
        toggles = ToggleSet((1,))
        ids = toggles.ids
        toggles.toggle(2)
        assert ids == frozenset({1})


class TestDisplayedCount:
    """Test displayed counts"""

    @pytest.mark.parametrize("item", POSTS)
    def test_count_is_base_plus_toggle(self, item):
        """Test displayed count equals base count plus one when toggled"""
        toggles = ToggleSet()
        assert toggles.displayed_count(item) == item.base_count

        toggles.toggle(item.id)
        assert toggles.displayed_count(item) == item.base_count + 1

    def test_marketplace_count(self):
        """Test marketplace items count from zero"""
        item = find_item(CatalogKind.MARKETPLACE, 1)
        toggles = ToggleSet((1,))
        assert toggles.displayed_count(item) == 1


class TestToggleMessages:
    """Test notification text per catalog"""

    @pytest.mark.parametrize("kind,outcome,message", [
        (CatalogKind.POSTS, ToggleOutcome.ADDED, "Post liked!"),
        (CatalogKind.POSTS, ToggleOutcome.REMOVED, "Post unliked"),
        (CatalogKind.EVENTS, ToggleOutcome.ADDED, "Registered for event!"),
        (CatalogKind.EVENTS, ToggleOutcome.REMOVED, "Unregistered from event"),
        (CatalogKind.MARKETPLACE, ToggleOutcome.ADDED, "Added to favorites!"),
        (CatalogKind.MARKETPLACE, ToggleOutcome.REMOVED, "Removed from favorites"),
    ])
    def test_message(self, kind, outcome, message):
        """Test message for each catalog and outcome"""
        assert toggle_message(kind, outcome) == message
