import logging
import random

from .config import ENEMY_SPAWN_INTERVAL, ENEMY_TABLE, PROP_SIZE, PROP_SPAWN_SCORE
from .entities import EffectKind, Enemy, EnemyKind, Prop

logger = logging.getLogger(__name__)

EFFECT_KINDS = tuple(EffectKind)


def pick_enemy_kind(rng=random) -> EnemyKind:
    # second draw is independent of the first: 70% small, 24% medium, 6% large
    if rng.random() < 0.7:
        return EnemyKind.SMALL
    if rng.random() < 0.8:
        return EnemyKind.MEDIUM
    return EnemyKind.LARGE


class EnemySpawner:
    """Drops one enemy per tick once the spawn interval has elapsed."""

    def __init__(self, rng=random, interval=ENEMY_SPAWN_INTERVAL):
        self.rng = rng
        self.interval = interval
        self.last_spawn = None

    def reset(self):
        self.last_spawn = None

    def ready(self, now) -> bool:
        return self.last_spawn is None or now - self.last_spawn > self.interval

    def maybe_spawn(self, now, canvas_w, enemies):
        if not self.ready(now):
            return None
        kind = pick_enemy_kind(self.rng)
        width, height = ENEMY_TABLE[kind.value][:2]
        x = self.rng.random() * (canvas_w - width)
        enemy = Enemy(x, -height, kind)
        enemies.append(enemy)
        self.last_spawn = now
        return enemy


class PropSpawner:
    """Drops exactly one prop for every score threshold crossed."""

    def __init__(self, rng=random, threshold=PROP_SPAWN_SCORE):
        self.rng = rng
        self.threshold = threshold
        self.last_spawn_score = 0

    def reset(self):
        self.last_spawn_score = 0

    def maybe_spawn(self, score, canvas_w, props):
        reached = (score // self.threshold) * self.threshold
        if reached <= self.last_spawn_score:
            return None
        effect = self.rng.choice(EFFECT_KINDS)
        prop = Prop(self.rng.random() * (canvas_w - PROP_SIZE), 0, effect)
        props.append(prop)
        self.last_spawn_score = reached
        logger.debug("prop %s spawned at score %d", effect.value, score)
        return prop
