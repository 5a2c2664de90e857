from enum import Enum

import pygame

from .config import (
    BULLET_COLOR, BULLET_HEIGHT, BULLET_SPEED, BULLET_WIDTH, ENEMY_COLORS,
    ENEMY_TABLE, PARTICLE_GRAVITY, PLAYER_COLOR, PLAYER_SIZE, PLAYER_SLOW_MULT,
    PROP_SIZE, PROP_SPEED, PROP_TABLE, TOUCH_SMOOTHING, clamp,
)


class EnemyKind(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class EffectKind(str, Enum):
    RAPID_FIRE = "rapid_fire"
    SHIELD = "shield"
    SCORE_BOOST = "score_boost"
    SPEED_BOOST = "speed_boost"


LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)
UP_KEYS = (pygame.K_UP, pygame.K_w)
DOWN_KEYS = (pygame.K_DOWN, pygame.K_s)
SLOW_KEYS = (pygame.K_LSHIFT, pygame.K_RSHIFT)


def intersects(a, b) -> bool:
    """Strict axis-aligned overlap; touching edges do not count."""
    return (a.x < b.x + b.width and a.x + a.width > b.x
            and a.y < b.y + b.height and a.y + a.height > b.y)


class Entity:
    def __init__(self, x, y, width, height, speed=0.0):
        self.x = float(x)
        self.y = float(y)
        self.width = width
        self.height = height
        self.speed = speed

    @property
    def center(self):
        return self.x + self.width / 2, self.y + self.height / 2

    @property
    def rect(self):
        return pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))

    def update(self):
        pass

    def draw(self, surf):
        pass


class Player(Entity):
    def __init__(self, x, y, speed, size=PLAYER_SIZE):
        super().__init__(x, y, size, size, speed)
        self.shield_active = False
        self._touch_offset = None

    def set_shield(self, active: bool):
        self.shield_active = active

    def update(self, inputs, control_type, canvas_w, canvas_h):
        if inputs.touch_active:
            self._follow_touch(inputs.pointer)
        else:
            self._touch_offset = None
            if control_type == "mouse":
                px, py = inputs.pointer
                self.x = px - self.width / 2
                self.y = py - self.height / 2
            else:
                self._steer(inputs)
        self.x = clamp(self.x, 0, canvas_w - self.width)
        self.y = clamp(self.y, 0, canvas_h - self.height)

    def _steer(self, inputs):
        step = self.speed * (PLAYER_SLOW_MULT if inputs.any_pressed(SLOW_KEYS) else 1.0)
        if inputs.any_pressed(LEFT_KEYS):
            self.x -= step
        if inputs.any_pressed(RIGHT_KEYS):
            self.x += step
        if inputs.any_pressed(UP_KEYS):
            self.y -= step
        if inputs.any_pressed(DOWN_KEYS):
            self.y += step

    def _follow_touch(self, pointer):
        cx, cy = self.center
        if self._touch_offset is None:
            # offset between finger and craft centre, held for the whole drag
            self._touch_offset = (pointer[0] - cx, pointer[1] - cy)
        ox, oy = self._touch_offset
        tx = pointer[0] - ox - self.width / 2
        ty = pointer[1] - oy - self.height / 2
        self.x += (tx - self.x) * TOUCH_SMOOTHING
        self.y += (ty - self.y) * TOUCH_SMOOTHING

    def draw(self, surf):
        cx, cy = self.center
        if self.shield_active:
            pygame.draw.circle(surf, PLAYER_COLOR, (int(cx), int(cy)), int(self.width / 2 + 10), width=3)
        x, y, w, h = self.x, self.y, self.width, self.height
        pygame.draw.polygon(surf, PLAYER_COLOR, [(x + w / 2, y), (x, y + h), (x + w, y + h)])
        pygame.draw.rect(surf, (255, 255, 255), (int(x + w / 2 - 3), int(y + 10), 6, 20))


class Bullet(Entity):
    def __init__(self, x, y, width=BULLET_WIDTH, height=BULLET_HEIGHT, speed=BULLET_SPEED):
        super().__init__(x, y, width, height, speed)

    def update(self):
        self.y -= self.speed

    @property
    def dead(self):
        return self.y <= -self.height

    def draw(self, surf):
        pygame.draw.rect(surf, BULLET_COLOR, self.rect)


class Enemy(Entity):
    def __init__(self, x, y, kind: EnemyKind):
        width, height, speed, health, score = ENEMY_TABLE[kind.value]
        super().__init__(x, y, width, height, speed)
        self.kind = kind
        self.health = health
        self.max_health = health
        self.score_value = score

    def update(self):
        self.y += self.speed

    def below(self, canvas_h):
        return self.y >= canvas_h

    def draw(self, surf):
        pygame.draw.rect(surf, ENEMY_COLORS[self.kind.value], self.rect)
        bar = int(self.width * max(0, self.health) / self.max_health)
        pygame.draw.rect(surf, PLAYER_COLOR, (int(self.x), int(self.y) - 5, bar, 3))


class Particle(Entity):
    def __init__(self, x, y, size, vx, vy, color, life):
        super().__init__(x, y, size, size)
        self.vx = vx
        self.vy = vy
        self.color = color
        self.life = life
        self.max_life = life

    def update(self):
        self.x += self.vx
        self.y += self.vy
        self.vy += PARTICLE_GRAVITY
        self.life -= 1

    @property
    def dead(self):
        return self.life <= 0

    def draw(self, surf):
        if self.life <= 0:
            return
        a = clamp(self.life / self.max_life, 0, 1)
        faded = tuple(int(c * a) for c in self.color)
        pygame.draw.rect(surf, faded, (int(self.x), int(self.y), max(1, int(self.width)), max(1, int(self.height))))


class Prop(Entity):
    def __init__(self, x, y, effect: EffectKind, speed=PROP_SPEED):
        super().__init__(x, y, PROP_SIZE, PROP_SIZE, speed)
        self.effect = effect
        self.duration, self.color, self.icon = PROP_TABLE[effect.value]

    def update(self):
        self.y += self.speed

    def below(self, canvas_h):
        return self.y >= canvas_h

    def draw(self, surf, font=None):
        pygame.draw.rect(surf, self.color, self.rect)
        if font is not None:
            glyph = font.render(self.icon, True, (255, 255, 255))
            surf.blit(glyph, glyph.get_rect(center=(int(self.center[0]), int(self.center[1]))))
