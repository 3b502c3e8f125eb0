"""Single-slot notification relay for operator status messages.

Call context:
    Each controller (``BorrowersVM``, ``DisburseVM``) owns one instance and
    publishes success/error messages to it; the web page renders
    ``NotificationVM.state`` and calls ``dismiss`` from the close button.

Timers:
    Auto-dismissal goes through a ``TimerPort`` so the relay itself holds no
    event-loop references. Every publish bumps a generation counter; a timer
    callback from an older generation is ignored.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Optional

from lendpay.domain.entities import Notification, NotificationType
from lendpay.domain.ports import TimerPort

LOGGER = logging.getLogger(__name__)

AUTO_HIDE_MS = 6000
_TYPES = ("success", "error")


class NotificationVM:
    """Holds the one active notification; a new publish overwrites the old."""

    def __init__(
        self,
        timers: Optional[TimerPort] = None,
        *,
        auto_hide_ms: int = AUTO_HIDE_MS,
        key: str = "notification",
        on_changed: Optional[Callable[[], None]] = None,
    ) -> None:
        self.timers = timers
        self.auto_hide_ms = int(auto_hide_ms)
        self.key = key
        self.on_changed = on_changed
        self.state = Notification()
        self._generation = 0

    @property
    def open(self) -> bool:
        return self.state.open

    @property
    def message(self) -> str:
        return self.state.message

    @property
    def type(self) -> NotificationType:
        return self.state.type

    def publish(self, message: str, type: NotificationType = "success") -> None:
        """Show ``message`` immediately, replacing whatever was shown before."""
        if type not in _TYPES:
            raise ValueError(f"Unsupported notification type: {type!r}")
        self._generation += 1
        generation = self._generation
        self.state = Notification(open=True, message=str(message), type=type)
        LOGGER.debug("notification[%s] %s: %s", self.key, type, message)
        if self.timers is not None:
            self.timers.schedule(self.key, self.auto_hide_ms, lambda: self._expire(generation))
        self._changed()

    def success(self, message: str) -> None:
        self.publish(message, "success")

    def error(self, message: str) -> None:
        self.publish(message, "error")

    def dismiss(self) -> None:
        """Close the notification, keeping its text for the fade-out."""
        if self.timers is not None:
            self.timers.cancel(self.key)
        if not self.state.open:
            return
        self.state = replace(self.state, open=False)
        self._changed()

    def _expire(self, generation: int) -> None:
        if generation != self._generation or not self.state.open:
            return
        self.state = replace(self.state, open=False)
        self._changed()

    def _changed(self) -> None:
        if self.on_changed is not None:
            self.on_changed()


__all__ = ["AUTO_HIDE_MS", "NotificationVM"]
