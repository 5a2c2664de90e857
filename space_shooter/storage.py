"""File-backed persistence for the high score and the user settings.

Both stores degrade instead of failing: unreadable or corrupt files load as
defaults and write errors are logged, so the game loop never sees an
I/O exception.
"""

import json
import logging
from pathlib import Path

from .config import HIGHSCORE_FILE, SETTINGS_FILE, Settings

logger = logging.getLogger(__name__)


class HighScoreStore:
    def __init__(self, path=HIGHSCORE_FILE):
        self.path = Path(path)

    def load(self) -> int:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return max(0, int(f.read().strip() or "0"))
        except FileNotFoundError:
            return 0
        except (OSError, ValueError) as e:
            logger.warning("High score unreadable at %s: %s", self.path, e)
            return 0

    def save(self, v: int):
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(str(int(v)))
        except OSError as e:
            logger.warning("High score not saved to %s: %s", self.path, e)


class SettingsStore:
    def __init__(self, path=SETTINGS_FILE, defaults: Settings = None):
        self.path = Path(path)
        self.defaults = defaults or Settings()

    def load(self) -> Settings:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("settings root is not an object")
            return Settings.from_dict(data, self.defaults)
        except FileNotFoundError:
            return self.defaults.clamped()
        except (OSError, ValueError, TypeError) as e:
            logger.warning("Settings unreadable at %s, using defaults: %s", self.path, e)
            return self.defaults.clamped()

    def save(self, settings: Settings) -> Settings:
        settings = settings.clamped()
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(settings.to_dict(), f, indent=2)
            logger.info("Settings saved to %s", self.path)
        except OSError as e:
            logger.warning("Settings not saved to %s: %s", self.path, e)
        return settings
