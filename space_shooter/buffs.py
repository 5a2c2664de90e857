"""Time-bounded effects granted by collected props.

Each effect kind has a forward action applied when the buff starts and an
inverse action applied when it ends. Only one buff per kind is kept:
collecting a kind that is already running refreshes its window instead of
applying the forward action a second time.
"""

import logging
import math
from dataclasses import dataclass
from typing import List

from .config import (
    BOOSTED_SCORE_MULT, DEFAULT_SHOT_INTERVAL, EXPIRED_NOTICE_MS, PROP_NOTICE_MS,
    PROP_TABLE, RAPID_SHOT_INTERVAL, SPEED_BOOST_MULT,
)
from .entities import EffectKind
from .notifications import NotificationChannel, describe

logger = logging.getLogger(__name__)


@dataclass
class Buff:
    effect: EffectKind
    start_time: int
    end_time: int

    @property
    def duration(self) -> int:
        return self.end_time - self.start_time


def _rapid_on(session):
    session.shot_interval = RAPID_SHOT_INTERVAL


def _rapid_off(session):
    session.shot_interval = DEFAULT_SHOT_INTERVAL


def _shield_on(session):
    session.player.set_shield(True)


def _shield_off(session):
    if session.player is not None:
        session.player.set_shield(False)


def _score_on(session):
    session.score_multiplier = BOOSTED_SCORE_MULT


def _score_off(session):
    session.score_multiplier = 1


def _speed_on(session):
    session.player.speed *= SPEED_BOOST_MULT


def _speed_off(session):
    if session.player is not None:
        session.player.speed /= SPEED_BOOST_MULT


EFFECTS = {
    EffectKind.RAPID_FIRE: (_rapid_on, _rapid_off),
    EffectKind.SHIELD: (_shield_on, _shield_off),
    EffectKind.SCORE_BOOST: (_score_on, _score_off),
    EffectKind.SPEED_BOOST: (_speed_on, _speed_off),
}


def duration_of(effect: EffectKind) -> int:
    return PROP_TABLE[effect.value][0]


class BuffEngine:
    def __init__(self, session, notifications: NotificationChannel):
        self.session = session
        self.notifications = notifications
        self.active: List[Buff] = []

    def find(self, effect: EffectKind):
        for buff in self.active:
            if buff.effect == effect:
                return buff
        return None

    def is_active(self, effect: EffectKind) -> bool:
        return self.find(effect) is not None

    def apply(self, effect: EffectKind, now: int) -> Buff:
        end = now + duration_of(effect)
        buff = self.find(effect)
        if buff is not None:
            buff.start_time, buff.end_time = now, end
            logger.debug("buff %s refreshed until %d", effect.value, end)
        else:
            buff = Buff(effect, now, end)
            self.active.append(buff)
            forward, _ = EFFECTS[effect]
            forward(self.session)
            logger.debug("buff %s applied until %d", effect.value, end)
        name, desc = describe(effect)
        self.notifications.show(name, desc, PROP_NOTICE_MS)
        return buff

    def update(self, now: int) -> List[EffectKind]:
        expired = [b for b in self.active if now >= b.end_time]
        if not expired:
            return []
        self.active = [b for b in self.active if now < b.end_time]
        for buff in expired:
            _, inverse = EFFECTS[buff.effect]
            inverse(self.session)
            logger.debug("buff %s expired", buff.effect.value)
        for buff in expired:
            name, _ = describe(buff.effect)
            self.notifications.show(f"{name} expired", "", EXPIRED_NOTICE_MS)
        return [b.effect for b in expired]

    def break_shield(self):
        """Drop the shield early after it absorbed a hit; no expiry notice."""
        kept = [b for b in self.active if b.effect != EffectKind.SHIELD]
        broken = len(kept) != len(self.active)
        self.active = kept
        _shield_off(self.session)
        if broken:
            logger.debug("shield broken")
        return broken

    def clear(self):
        self.active = []

    @staticmethod
    def remaining(buff: Buff, now: int) -> int:
        return max(0, buff.end_time - now)

    @staticmethod
    def remaining_seconds(buff: Buff, now: int) -> int:
        return math.ceil(BuffEngine.remaining(buff, now) / 1000)

    @staticmethod
    def progress(buff: Buff, now: int) -> float:
        if buff.duration <= 0:
            return 0.0
        return BuffEngine.remaining(buff, now) / buff.duration

    def __iter__(self):
        return iter(self.active)

    def __len__(self):
        return len(self.active)
