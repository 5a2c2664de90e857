"""Tunable constants and the persisted user settings record."""

from dataclasses import dataclass, asdict

WIDTH, HEIGHT = 960, 720
FPS = 60

PLAYER_SIZE = 50
PLAYER_BOTTOM_OFFSET = 100
PLAYER_SLOW_MULT = 0.5
TOUCH_SMOOTHING = 0.8

BULLET_WIDTH = 5
BULLET_HEIGHT = 15
BULLET_SPEED = 8

DEFAULT_SHOT_INTERVAL = 150   # ms
RAPID_SHOT_INTERVAL = 80      # ms
ENEMY_SPAWN_INTERVAL = 800    # ms

PROP_SPAWN_SCORE = 100
PROP_SIZE = 30
PROP_SPEED = 2

SPEED_BOOST_MULT = 1.5
BOOSTED_SCORE_MULT = 2

PARTICLE_GRAVITY = 0.1
PLAYER_BURST = 30
ENEMY_BURST = 15

PROP_NOTICE_MS = 4000
EXPIRED_NOTICE_MS = 2000

# (width, height, speed, health, score)
ENEMY_TABLE = {
    "small": (30, 30, 3, 1, 10),
    "medium": (45, 45, 2, 2, 20),
    "large": (60, 60, 1, 3, 30),
}

# duration ms, color, icon
PROP_TABLE = {
    "rapid_fire": (5000, (255, 107, 107), "R"),
    "shield": (8000, (78, 205, 196), "S"),
    "score_boost": (10000, (254, 202, 87), "x2"),
    "speed_boost": (6000, (255, 159, 243), ">>"),
}

PLAYER_COLOR = (78, 205, 196)
BULLET_COLOR = (255, 107, 107)
ENEMY_COLORS = {
    "small": (255, 159, 243),
    "medium": (243, 104, 224),
    "large": (238, 90, 36),
}
PLAYER_PALETTE = ((255, 107, 107), (255, 142, 83), (254, 202, 87))
ENEMY_PALETTE = ((72, 219, 251), (10, 189, 227), (16, 172, 132))

SAMPLE_RATE = 44100

SETTINGS_FILE = "settings.json"
HIGHSCORE_FILE = "highscore.txt"

SENSITIVITY_RANGE = (1, 10)
VOLUME_RANGE = (0.0, 1.0)
SCALE_RANGE = (0.75, 1.5)
CONTROL_TYPES = ("keyboard", "mouse")


def clamp(v, a, b):
    return max(a, min(b, v))


def default_interface_scale(screen_height: int) -> float:
    if screen_height > 2160:
        return 1.5
    if screen_height > 1080:
        return 1.25
    return 1.0


@dataclass
class Settings:
    """User preferences that survive between runs.

    Values outside their documented range are pulled back in by
    :meth:`clamped`, which the settings store calls on load and save.
    """
    sensitivity: int = 5
    sound_enabled: bool = True
    volume: float = 0.5
    control_type: str = "keyboard"
    interface_scale: float = 1.0

    def clamped(self) -> "Settings":
        control = self.control_type if self.control_type in CONTROL_TYPES else "keyboard"
        # hand-edited files may hold "false"; only real booleans count
        sound = self.sound_enabled if isinstance(self.sound_enabled, bool) else True
        return Settings(
            sensitivity=int(clamp(int(self.sensitivity), *SENSITIVITY_RANGE)),
            sound_enabled=sound,
            volume=float(clamp(float(self.volume), *VOLUME_RANGE)),
            control_type=control,
            interface_scale=float(clamp(float(self.interface_scale), *SCALE_RANGE)),
        )

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict, defaults: "Settings" = None) -> "Settings":
        base = asdict(defaults or cls())
        for key in base:
            if key in data:
                base[key] = data[key]
        return cls(**base).clamped()
