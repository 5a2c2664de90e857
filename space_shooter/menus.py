"""Settings screen editor.

Works on a draft copy of the saved settings. Volume and mute are previewed
on the sound device as they change; backing out restores the saved values.
"""

from dataclasses import replace

import pygame

from .config import CONTROL_TYPES, SCALE_RANGE, SENSITIVITY_RANGE, Settings, clamp

ROWS = ("sensitivity", "sound_enabled", "volume", "control_type", "interface_scale", "save", "back")
ROW_LABELS = {
    "sensitivity": "Sensitivity",
    "sound_enabled": "Sound",
    "volume": "Volume",
    "control_type": "Control",
    "interface_scale": "Interface Scale",
    "save": "Save",
    "back": "Back",
}

VOLUME_STEP = 0.05
SCALE_STEP = 0.05


class SettingsMenu:
    def __init__(self, saved: Settings, sound):
        self.saved = saved
        self.draft = replace(saved)
        self.sound = sound
        self.index = 0

    @property
    def row(self):
        return ROWS[self.index]

    def value_text(self, row):
        d = self.draft
        if row == "sensitivity":
            return str(d.sensitivity)
        if row == "sound_enabled":
            return "On" if d.sound_enabled else "Off"
        if row == "volume":
            return f"{round(d.volume * 100)}%"
        if row == "control_type":
            return d.control_type.capitalize()
        if row == "interface_scale":
            return f"{round(d.interface_scale * 100)}%"
        return ""

    def move(self, delta):
        self.index = (self.index + delta) % len(ROWS)

    def adjust(self, direction):
        d = self.draft
        row = self.row
        if row == "sensitivity":
            d.sensitivity = int(clamp(d.sensitivity + direction, *SENSITIVITY_RANGE))
        elif row == "sound_enabled":
            d.sound_enabled = not d.sound_enabled
            self.sound.set_muted(not d.sound_enabled)
        elif row == "volume":
            d.volume = round(clamp(d.volume + direction * VOLUME_STEP, 0.0, 1.0), 2)
            self.sound.set_volume(d.volume)
        elif row == "control_type":
            i = CONTROL_TYPES.index(d.control_type)
            d.control_type = CONTROL_TYPES[(i + direction) % len(CONTROL_TYPES)]
        elif row == "interface_scale":
            d.interface_scale = round(clamp(d.interface_scale + direction * SCALE_STEP, *SCALE_RANGE), 2)

    def revert(self) -> Settings:
        self.sound.set_muted(not self.saved.sound_enabled)
        self.sound.set_volume(self.saved.volume)
        return self.saved

    def handle_key(self, key):
        """Returns ``"save"`` or ``"back"`` when the screen should close."""
        if key in (pygame.K_UP, pygame.K_w):
            self.move(-1)
        elif key in (pygame.K_DOWN, pygame.K_s):
            self.move(1)
        elif key in (pygame.K_LEFT, pygame.K_a):
            self.adjust(-1)
        elif key in (pygame.K_RIGHT, pygame.K_d):
            self.adjust(1)
        elif key == pygame.K_RETURN:
            if self.row in ("save", "back"):
                return self.row
            self.adjust(1)
        elif key in (pygame.K_ESCAPE, pygame.K_BACKSPACE):
            return "back"
        return None
