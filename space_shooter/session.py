"""Game session: owns every live entity and drives the per-tick pipeline.

Per tick while playing::

    timers -> player -> shoot -> enemy spawn -> prop spawn
           -> move & cull -> buff expiry -> collisions -> publish score

The session is the only writer of its collections; the renderer and the
audio device just consume what it exposes.
"""

import logging
import random
from enum import Enum

from .buffs import BuffEngine
from .collisions import resolve_collisions
from .config import (
    DEFAULT_SHOT_INTERVAL, HEIGHT, PLAYER_BOTTOM_OFFSET, PLAYER_SIZE, WIDTH, Settings,
)
from .entities import Bullet, Player
from .notifications import NotificationChannel
from .sound import SoundManager
from .spawner import EnemySpawner, PropSpawner
from .timers import Scheduler

logger = logging.getLogger(__name__)


class GameState(Enum):
    START = "start"
    SETTINGS = "settings"
    PLAYING = "playing"
    OVER = "over"


TRANSITIONS = {
    "start_game": ({GameState.START, GameState.OVER}, GameState.PLAYING),
    "end_game": ({GameState.PLAYING}, GameState.OVER),
    "return_to_menu": ({GameState.OVER}, GameState.START),
    "open_settings": ({GameState.START}, GameState.SETTINGS),
    "close_settings": ({GameState.SETTINGS}, GameState.START),
}


class StateError(RuntimeError):
    pass


class GameSession:
    def __init__(self, settings: Settings = None, sound=None, high_scores=None,
                 rng=random, canvas=(WIDTH, HEIGHT)):
        self.settings = settings or Settings()
        self.sound = sound if sound is not None else SoundManager(enabled=False)
        self.high_scores = high_scores
        self.rng = rng
        self.canvas_w, self.canvas_h = canvas
        self.state = GameState.START

        self.scheduler = Scheduler()
        self.notifications = NotificationChannel(self.scheduler)
        self.buffs = BuffEngine(self, self.notifications)
        self.enemy_spawner = EnemySpawner(rng)
        self.prop_spawner = PropSpawner(rng)

        self.player = None
        self.bullets = []
        self.enemies = []
        self.props = []
        self.particles = []

        self.score = 0
        self.displayed_score = 0
        self.score_multiplier = 1
        self.shot_interval = DEFAULT_SHOT_INTERVAL
        self.last_shot = None
        self.high_score = high_scores.load() if high_scores is not None else 0

    # -- state machine -------------------------------------------------

    def _transition(self, action):
        allowed, target = TRANSITIONS[action]
        if self.state not in allowed:
            raise StateError(f"cannot {action} while {self.state.value}")
        self.state = target

    @property
    def playing(self) -> bool:
        return self.state == GameState.PLAYING

    @property
    def last_prop_spawn_score(self) -> int:
        return self.prop_spawner.last_spawn_score

    def start_game(self):
        self._transition("start_game")
        self.score = 0
        self.displayed_score = 0
        self.score_multiplier = 1
        self.shot_interval = DEFAULT_SHOT_INTERVAL
        self.last_shot = None
        self.bullets = []
        self.enemies = []
        self.props = []
        self.particles = []
        self.buffs.clear()
        self.notifications.hide()
        self.enemy_spawner.reset()
        self.prop_spawner.reset()
        self.player = Player(
            self.canvas_w / 2 - PLAYER_SIZE / 2,
            self.canvas_h - PLAYER_BOTTOM_OFFSET,
            self.settings.sensitivity,
        )
        logger.info("Session started (sensitivity=%d, control=%s)",
                    self.settings.sensitivity, self.settings.control_type)

    restart = start_game

    def end_game(self):
        self._transition("end_game")
        self.sound.play("game_over")
        if self.score > self.high_score:
            self.high_score = self.score
            if self.high_scores is not None:
                self.high_scores.save(self.high_score)
            logger.info("New high score: %d", self.high_score)
        self.notifications.hide()
        self.buffs.clear()
        self.player = None
        logger.info("Session over, score %d (high %d)", self.score, self.high_score)

    def return_to_menu(self):
        self._transition("return_to_menu")

    def open_settings(self):
        self._transition("open_settings")

    def close_settings(self, settings: Settings = None):
        self._transition("close_settings")
        if settings is not None:
            self.settings = settings

    def resize(self, w, h):
        self.canvas_w, self.canvas_h = w, h

    # -- simulation ----------------------------------------------------

    def add_score(self, base: int) -> int:
        gained = int(round(base * self.score_multiplier))
        self.score += gained
        return gained

    def shoot(self, now):
        if self.last_shot is not None and now - self.last_shot <= self.shot_interval:
            return None
        p = self.player
        bullet = Bullet(p.x + p.width / 2 - 2.5, p.y)
        self.bullets.append(bullet)
        self.last_shot = now
        self.sound.play("shoot")
        return bullet

    def _advance_entities(self):
        for b in self.bullets:
            b.update()
        self.bullets = [b for b in self.bullets if not b.dead]
        for e in self.enemies:
            e.update()
        self.enemies = [e for e in self.enemies if not e.below(self.canvas_h)]
        for pr in self.props:
            pr.update()
        self.props = [pr for pr in self.props if not pr.below(self.canvas_h)]
        for pa in self.particles:
            pa.update()
        self.particles = [pa for pa in self.particles if not pa.dead]

    def tick(self, now, inputs):
        self.scheduler.advance(now)
        if not self.playing:
            return
        self.player.update(inputs, self.settings.control_type, self.canvas_w, self.canvas_h)
        self.shoot(now)
        self.enemy_spawner.maybe_spawn(now, self.canvas_w, self.enemies)
        self.prop_spawner.maybe_spawn(self.score, self.canvas_w, self.props)
        self._advance_entities()
        self.buffs.update(now)
        resolve_collisions(self, now)
        self.displayed_score = self.score
