"""Input snapshot shared between the event pump and the simulation tick."""

import pygame


class InputState:
    """Last-write-wins view of the keyboard, pointer and touch devices.

    The app feeds every pygame event through :meth:`handle_event`; the
    session samples the result once per tick. Only key up/down booleans and
    the latest pointer coordinate are kept.
    """

    def __init__(self):
        self.pressed = set()
        self.pointer = (0.0, 0.0)
        self.touch_active = False

    def press(self, key):
        self.pressed.add(key)

    def release(self, key):
        self.pressed.discard(key)

    def is_pressed(self, key) -> bool:
        return key in self.pressed

    def any_pressed(self, keys) -> bool:
        return any(k in self.pressed for k in keys)

    def move_pointer(self, x, y):
        self.pointer = (float(x), float(y))

    def clear(self):
        self.pressed.clear()
        self.touch_active = False

    def handle_event(self, event, window_size):
        if event.type == pygame.KEYDOWN:
            self.press(event.key)
        elif event.type == pygame.KEYUP:
            self.release(event.key)
        elif event.type == pygame.MOUSEMOTION:
            self.move_pointer(*event.pos)
        elif event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION):
            # finger coordinates arrive normalised to [0, 1]
            w, h = window_size
            self.move_pointer(event.x * w, event.y * h)
            self.touch_active = True
        elif event.type == pygame.FINGERUP:
            self.touch_active = False
        elif event.type == pygame.WINDOWFOCUSLOST:
            self.clear()
