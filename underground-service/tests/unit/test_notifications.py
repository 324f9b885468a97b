"""
Unit Tests for transient notifications
"""
from underground_service.domain.models import CatalogKind, NotificationKind, Page
from underground_service.domain.notifications import Notifier
from underground_service.infrastructure.state import ViewerState, notification_timeout_ms


class TestNotifier:
    """Test show, replace and auto-hide"""

    def test_initially_hidden(self, clock):
        """Test no notification before show"""
        notifier = Notifier(3000, clock=clock)
        assert notifier.current() is None
        assert not notifier.is_visible
        assert notifier.remaining_ms() == 0

    def test_show_is_visible(self, clock):
        """Test shown notification is current"""
        notifier = Notifier(3000, clock=clock)

        notifier.show("Post liked!", NotificationKind.SUCCESS)

        current = notifier.current()
        assert current.message == "Post liked!"
        assert current.kind == NotificationKind.SUCCESS
        assert notifier.remaining_ms() == 3000

    def test_default_kind_is_info(self, clock):
        """Test kind defaults to info"""
        notifier = Notifier(3000, clock=clock)
        assert notifier.show("Hello").kind == NotificationKind.INFO

    def test_hides_after_timeout(self, clock):
        """Test notification hides once the timeout elapses"""
        notifier = Notifier(3000, clock=clock)
        notifier.show("Post liked!")

        clock.advance(2.999)
        assert notifier.is_visible
        assert notifier.remaining_ms() == 1

        clock.advance(0.01)
        assert notifier.current() is None

    def test_replace_restarts_timeout(self, clock):
        """Test showing a new message replaces the old one and restarts the timer"""
        notifier = Notifier(3000, clock=clock)
        notifier.show("Post liked!")
        clock.advance(2.5)

        notifier.show("Post unliked")
        clock.advance(2.5)

        assert notifier.current().message == "Post unliked"
        clock.advance(0.5)
        assert notifier.current() is None

    def test_dismiss(self, clock):
        """Test dismiss hides immediately"""
        notifier = Notifier(5000, clock=clock)
        notifier.show("Profile updated successfully!")
        notifier.dismiss()
        assert notifier.current() is None


class TestPageTimeouts:
    """Test per-page timeouts"""

    def test_catalog_pages_use_short_timeout(self):
        """Test catalog and account pages hide after 3 seconds"""
        for page in (Page.FEED, Page.EVENTS, Page.MARKETPLACE, Page.ACCOUNT):
            assert notification_timeout_ms(page) == 3000

    def test_panel_pages_use_extended_timeout(self):
        """Test profile, settings, favorites and listings hide after 5 seconds"""
        for page in (Page.PROFILE, Page.SETTINGS, Page.FAVORITES, Page.MYLISTINGS):
            assert notification_timeout_ms(page) == 5000


class TestViewerState:
    """Test per-viewer registries"""

    def test_toggle_sets_are_per_viewer(self, clock):
        """Test viewers do not share toggles"""
        state = ViewerState(clock)
        state.toggles("a", CatalogKind.POSTS).toggle(1)

        assert state.toggles("a", CatalogKind.POSTS).is_toggled(1)
        assert not state.toggles("b", CatalogKind.POSTS).is_toggled(1)
        assert not state.toggles("a", CatalogKind.EVENTS).is_toggled(1)

    def test_discard_toggles(self, clock):
        """Test discarded toggle set comes back empty"""
        state = ViewerState(clock)
        state.toggles("a", CatalogKind.EVENTS).toggle(2)
        state.discard_toggles("a", CatalogKind.EVENTS)

        assert len(state.toggles("a", CatalogKind.EVENTS)) == 0

    def test_notifier_uses_shared_clock(self, clock):
        """Test notifiers created by the registry use its clock"""
        state = ViewerState(clock)
        notifier = state.notifier("a", Page.FEED)
        notifier.show("Post liked!")

        clock.advance(3)

        assert state.notifier("a", Page.FEED).current() is None

    def test_preferences_are_copied(self, clock):
        """Test one viewer's changes do not leak into defaults"""
        state = ViewerState(clock)
        state.editable_preferences("a")["theme"]["darkMode"] = False

        assert state.preferences("a")["theme"]["darkMode"] is False
        assert state.preferences("b")["theme"]["darkMode"] is True
        assert state.reset_preferences("a")["theme"]["darkMode"] is True
        assert state.preferences("a")["theme"]["darkMode"] is True


class TestViewerStateBounds:
    """Test that reads do not register viewers and that the registry is bounded"""

    def test_reads_do_not_register(self, clock):
        """Test peeking at toggles, notifications and preferences leaves no state"""
        state = ViewerState(clock)

        assert len(state.peek_toggles("a", CatalogKind.POSTS)) == 0
        assert state.peek_notifier("a", Page.FEED) is None
        assert state.preferences("a")["privacy"]["publicProfile"] is True
        state.discard_toggles("a", CatalogKind.POSTS)
        state.reset_preferences("a")

        assert "a" not in state
        assert len(state) == 0

    def test_peek_sees_written_toggles(self, clock):
        """Test reads see what writes registered"""
        state = ViewerState(clock)
        state.toggles("a", CatalogKind.EVENTS).toggle(3)

        assert state.peek_toggles("a", CatalogKind.EVENTS).is_toggled(3)
        assert state.peek_notifier("a", Page.EVENTS) is None

    def test_unregistered_peek_is_not_kept(self, clock):
        """Test changes to a peeked empty set are not stored"""
        state = ViewerState(clock)
        state.peek_toggles("a", CatalogKind.POSTS).toggle(1)

        assert not state.peek_toggles("a", CatalogKind.POSTS).is_toggled(1)

    def test_idle_viewers_expire(self, clock):
        """Test viewers idle past the TTL are dropped"""
        state = ViewerState(clock, ttl_seconds=60, max_viewers=100)
        state.toggles("a", CatalogKind.POSTS).toggle(1)
        clock.advance(30)
        state.toggles("b", CatalogKind.POSTS).toggle(1)

        clock.advance(30)
        state.peek_toggles("c", CatalogKind.POSTS)

        assert "a" not in state
        assert "b" in state

    def test_activity_keeps_viewer_alive(self, clock):
        """Test reads refresh a viewer's idle timer"""
        state = ViewerState(clock, ttl_seconds=60, max_viewers=100)
        state.toggles("a", CatalogKind.POSTS).toggle(1)

        for _ in range(3):
            clock.advance(45)
            assert state.peek_toggles("a", CatalogKind.POSTS).is_toggled(1)

        assert "a" in state

    def test_max_viewers_drops_least_recent(self, clock):
        """Test the oldest viewer is dropped once the registry is full"""
        state = ViewerState(clock, ttl_seconds=3600, max_viewers=2)
        state.toggles("a", CatalogKind.POSTS)
        clock.advance(1)
        state.toggles("b", CatalogKind.POSTS)
        clock.advance(1)
        state.peek_toggles("a", CatalogKind.POSTS)
        clock.advance(1)

        state.notifier("c", Page.FEED)

        assert len(state) == 2
        assert "a" in state
        assert "b" not in state
        assert "c" in state
