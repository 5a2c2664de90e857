import logging
import os

import pygame

from .config import FPS, HEIGHT, SAMPLE_RATE, WIDTH, Settings, default_interface_scale
from .controls import InputState
from .menus import SettingsMenu
from .render import Renderer
from .session import GameSession, GameState
from .sound import SoundManager
from .storage import HighScoreStore, SettingsStore

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level=None):
    level = level or os.environ.get("SPACE_SHOOTER_LOG", "INFO")
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO), format=LOG_FORMAT)


def apply_audio(sound, settings: Settings):
    sound.set_muted(not settings.sound_enabled)
    sound.set_volume(settings.volume)


class App:
    def __init__(self, screen, settings_store: SettingsStore, high_scores: HighScoreStore):
        self.screen = screen
        self.settings_store = settings_store
        settings = settings_store.load()
        self.sound = SoundManager(enabled=True, volume=settings.volume)
        apply_audio(self.sound, settings)
        self.session = GameSession(settings, self.sound, high_scores, canvas=screen.get_size())
        self.inputs = InputState()
        self.renderer = Renderer(screen, settings.interface_scale)
        self.menu = None
        self.running = True

    def on_key(self, key):
        s = self.session
        if s.state == GameState.START:
            if key == pygame.K_RETURN:
                s.start_game()
            elif key == pygame.K_s:
                s.open_settings()
                self.menu = SettingsMenu(s.settings, self.sound)
            elif key == pygame.K_ESCAPE:
                self.running = False
        elif s.state == GameState.SETTINGS:
            action = self.menu.handle_key(key)
            if action == "save":
                saved = self.settings_store.save(self.menu.draft)
                apply_audio(self.sound, saved)
                self.close_settings(saved)
            elif action == "back":
                self.close_settings(self.menu.revert())
            else:
                self.renderer.set_scale(self.menu.draft.interface_scale)
        elif s.state == GameState.OVER:
            if key == pygame.K_r:
                s.restart()
            elif key == pygame.K_m:
                s.return_to_menu()
            elif key == pygame.K_ESCAPE:
                self.running = False
        elif s.state == GameState.PLAYING and key == pygame.K_ESCAPE:
            self.running = False

    def close_settings(self, settings):
        self.session.close_settings(settings)
        self.renderer.set_scale(settings.interface_scale)
        self.menu = None

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.running = False
            return
        if event.type == pygame.VIDEORESIZE:
            self.session.resize(event.w, event.h)
        self.inputs.handle_event(event, self.screen.get_size())
        if event.type == pygame.KEYDOWN:
            self.on_key(event.key)

    def run(self):
        clock = pygame.time.Clock()
        while self.running:
            clock.tick(FPS)
            for event in pygame.event.get():
                self.handle_event(event)
            self.session.tick(pygame.time.get_ticks(), self.inputs)
            self.renderer.draw(self.session, self.menu)
            pygame.display.flip()


def main():
    setup_logging()
    pygame.mixer.pre_init(SAMPLE_RATE, size=-16, channels=1, buffer=512)
    pygame.init()
    pygame.display.set_caption("Space Shooter")
    screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
    defaults = Settings(interface_scale=default_interface_scale(pygame.display.Info().current_h))
    app = App(screen, SettingsStore(defaults=defaults), HighScoreStore())
    logger.info("Starting Space Shooter (%dx%d)", *screen.get_size())
    try:
        app.run()
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
