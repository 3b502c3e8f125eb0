"""Scheduler helper that owns one-shot UI timers keyed by channel.

The web runtime passes NiceGUI-backed ``schedule`` and ``cancel`` callables
into this class so timer state is tracked in one place. A pending timer is
canceled when its notification is replaced or dismissed; NiceGUI removes the
timer elements themselves together with the page client.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict

LOGGER = logging.getLogger(__name__)

ScheduleFn = Callable[[int, Callable[[], None]], Any]
CancelFn = Callable[[Any], None]


@dataclass
class TimerHandle:
    """Timer token associated with a single channel.

    Attributes:
        key: Channel key (for example ``notification``).
        token: Token returned by the UI scheduler implementation.
    """
    key: str
    token: Any


class UiScheduler:
    """Manage keyed one-shot timers using a UI scheduler (``TimerPort``)."""

    def __init__(self, schedule: ScheduleFn, cancel: CancelFn) -> None:
        """Store schedule/cancel functions and initialize handle registry.

        Args:
            schedule: Function compatible with ``schedule(delay_ms, callback)``
                that returns a cancel token.
            cancel: Function that cancels a token returned by ``schedule``.
        """
        self._schedule = schedule
        self._cancel = cancel
        self._handles: Dict[str, TimerHandle] = {}

    def schedule(self, key: str, delay_ms: int, callback: Callable[[], None]) -> None:
        """Schedule ``callback`` once, replacing any pending timer for ``key``."""
        delay = max(1, int(delay_ms))
        self.cancel(key)
        handle = TimerHandle(key=key, token=None)

        def fire() -> None:
            if self._handles.get(key) is handle:
                del self._handles[key]
            callback()

        handle.token = self._schedule(delay, fire)
        self._handles[key] = handle

    def cancel(self, key: str) -> None:
        """Cancel a pending timer for ``key``; unknown keys are ignored."""
        handle = self._handles.pop(key, None)
        if not handle:
            return
        try:
            self._cancel(handle.token)
        except Exception:
            LOGGER.debug("cancel failed for timer %s", key, exc_info=True)


__all__ = ["TimerHandle", "UiScheduler"]
