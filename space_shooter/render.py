import random

import pygame

from .buffs import BuffEngine
from .menus import ROW_LABELS, ROWS
from .notifications import describe
from .session import GameState

STAR_COUNT = 100
TEXT = (245, 245, 250)
DIM = (180, 180, 190)
PANEL = (20, 24, 40)
ACCENT = (78, 205, 196)


class Renderer:
    """Draws one frame from a session; never touches simulation state."""

    def __init__(self, screen, scale=1.0):
        self.screen = screen
        self.set_scale(scale)

    def set_scale(self, scale):
        self.scale = scale
        self.font = pygame.font.Font(None, int(24 * scale))
        self.bigfont = pygame.font.Font(None, int(60 * scale))
        self.icon_font = pygame.font.Font(None, 20)

    def draw(self, session, menu=None):
        surf = self.screen
        surf.fill((0, 0, 0))
        self.draw_stars(surf)
        if session.playing:
            session.player.draw(surf)
            for b in session.bullets:
                b.draw(surf)
            for e in session.enemies:
                e.draw(surf)
            for pr in session.props:
                pr.draw(surf, self.icon_font)
            for pa in session.particles:
                pa.draw(surf)
            self.draw_hud(surf, session)
            self.draw_notification(surf, session)
        self.draw_overlays(surf, session, menu)

    def draw_stars(self, surf):
        w, h = surf.get_size()
        for i in range(STAR_COUNT):
            size = random.random() * 2
            if size < 1:
                continue
            surf.fill((255, 255, 255), (int((i * 137.5) % w), int((i * 277.5) % h), int(size), int(size)))

    def draw_hud(self, surf, session):
        surf.blit(self.font.render(f"Score: {session.displayed_score}", True, TEXT), (16, 14))
        now = session.scheduler.now
        x, y = 16, int(44 * self.scale)
        bar_w, bar_h = int(140 * self.scale), 6
        for buff in session.buffs:
            name, _ = describe(buff.effect)
            secs = BuffEngine.remaining_seconds(buff, now)
            surf.blit(self.font.render(f"{name}  {secs}s", True, TEXT), (x, y))
            by = y + self.font.get_height()
            pygame.draw.rect(surf, (40, 40, 60), (x, by, bar_w, bar_h), border_radius=3)
            fill = int(bar_w * BuffEngine.progress(buff, now))
            pygame.draw.rect(surf, ACCENT, (x, by, fill, bar_h), border_radius=3)
            y = by + bar_h + 8

    def draw_notification(self, surf, session):
        note = session.notifications.current
        if note is None:
            return
        w = surf.get_width()
        title = self.font.render(note.title, True, TEXT)
        body = self.font.render(note.body, True, DIM) if note.body else None
        width = max(title.get_width(), body.get_width() if body else 0) + 32
        height = title.get_height() + (body.get_height() + 4 if body else 0) + 20
        box = pygame.Rect(w - width - 16, 16, width, height)
        bg = pygame.Surface(box.size, pygame.SRCALPHA)
        bg.fill((*PANEL, 200))
        surf.blit(bg, box.topleft)
        pygame.draw.rect(surf, ACCENT, box, width=2, border_radius=6)
        surf.blit(title, (box.x + 16, box.y + 10))
        if body:
            surf.blit(body, (box.x + 16, box.y + 14 + title.get_height()))

    def draw_overlays(self, surf, session, menu):
        line = int(30 * self.scale)
        cy = surf.get_height() // 2
        if session.state == GameState.START:
            self._center(surf, self.bigfont, "SPACE SHOOTER", cy - 3 * line)
            self._center(surf, self.font, f"High Score: {session.high_score}", cy - line)
            self._center(surf, self.font, "ENTER to Start  |  S for Settings  |  ESC to Quit", cy)
            self._center(surf, self.font, "Move: WASD/Arrows or Mouse | Shift: Slow | Fire is automatic", cy + line)
        elif session.state == GameState.SETTINGS and menu is not None:
            self._center(surf, self.bigfont, "SETTINGS", cy - 5 * line)
            for i, row in enumerate(ROWS):
                label = ROW_LABELS[row]
                value = menu.value_text(row)
                text = f"{label}: {value}" if value else label
                color = ACCENT if i == menu.index else TEXT
                self._center(surf, self.font, text, cy + (i - 3) * line, color)
            self._center(surf, self.font, "UP/DOWN select | LEFT/RIGHT change | ENTER confirm | ESC back",
                         cy + 5 * line, DIM)
        elif session.state == GameState.OVER:
            self._center(surf, self.bigfont, "GAME OVER", cy - 2 * line)
            self._center(surf, self.font, f"Score: {session.score}   High: {session.high_score}", cy)
            self._center(surf, self.font, "R to Restart  |  M for Menu  |  ESC to Quit", cy + line)

    @staticmethod
    def _center(surf, font, text, y, color=TEXT):
        s = font.render(text, True, color)
        surf.blit(s, s.get_rect(center=(surf.get_width() // 2, y)))
