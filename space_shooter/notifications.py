import logging
from dataclasses import dataclass
from typing import Optional

from .timers import Scheduler, TimerHandle

logger = logging.getLogger(__name__)

PROP_DESCRIPTIONS = {
    "rapid_fire": ("Rapid Fire", "Shorter firing interval for 5 seconds"),
    "shield": ("Shield", "Absorbs one hit for 8 seconds"),
    "score_boost": ("Score Boost", "Double score for 10 seconds"),
    "speed_boost": ("Speed Boost", "Faster movement for 6 seconds"),
}
UNKNOWN_ITEM = ("Unknown Item", "Special effect gained")


def describe(effect):
    """Display name and description for an effect kind, never raising."""
    key = getattr(effect, "value", effect)
    return PROP_DESCRIPTIONS.get(key, UNKNOWN_ITEM)


@dataclass
class Notification:
    title: str
    body: str
    expires_at: int


class NotificationChannel:
    """Single-slot message panel; a newer message preempts the pending one."""

    def __init__(self, scheduler: Scheduler):
        self.scheduler = scheduler
        self.current: Optional[Notification] = None
        self._dismiss: Optional[TimerHandle] = None

    def show(self, title: str, body: str, auto_dismiss_ms: int):
        self._cancel_timer()
        self.current = Notification(title, body, self.scheduler.now + auto_dismiss_ms)
        self._dismiss = self.scheduler.call_later(auto_dismiss_ms, self._expire)
        logger.debug("notify %r (%d ms)", title, auto_dismiss_ms)

    def hide(self):
        self._cancel_timer()
        self.current = None

    def _expire(self):
        self._dismiss = None
        self.current = None

    def _cancel_timer(self):
        if self._dismiss is not None:
            self._dismiss.cancel()
            self._dismiss = None

    @property
    def visible(self) -> bool:
        return self.current is not None
