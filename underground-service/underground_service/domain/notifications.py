"""
Transient notification with auto-hide
"""
import time
from typing import Callable, Optional

from .models import Notification, NotificationKind


class Notifier:
    """
    Holds at most one live notification

    show() replaces any visible message and restarts the timeout.
    The message hides once the timeout elapses or on dismiss().
    """

    def __init__(self, timeout_ms: int, clock: Callable[[], float] = time.monotonic):
        self.timeout_ms = timeout_ms
        self._clock = clock
        self._current: Optional[Notification] = None

    def show(self, message: str, kind: NotificationKind = NotificationKind.INFO) -> Notification:
        now = self._clock()
        self._current = Notification(
            message=message,
            kind=kind,
            shown_at=now,
            expires_at=now + self.timeout_ms / 1000.0,
        )
        return self._current

    def dismiss(self) -> None:
        self._current = None

    def current(self) -> Optional[Notification]:
        """Visible notification, or None once hidden"""
        if self._current is not None and self._clock() >= self._current.expires_at:
            self._current = None
        return self._current

    @property
    def is_visible(self) -> bool:
        return self.current() is not None

    def remaining_ms(self) -> int:
        """Milliseconds until the visible notification hides, 0 if hidden"""
        current = self.current()
        if current is None:
            return 0
        return max(0, int(round((current.expires_at - self._clock()) * 1000)))
