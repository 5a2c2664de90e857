import pygame
import pytest

from space_shooter.app import App
from space_shooter.collisions import spawn_explosion
from space_shooter.entities import EffectKind, Enemy, EnemyKind, Prop
from space_shooter.session import GameState
from space_shooter.storage import SettingsStore

from .conftest import MemoryScores


@pytest.fixture
def store(tmp_path):
    return SettingsStore(tmp_path / "settings.json")


@pytest.fixture
def app(store):
    pygame.init()
    screen = pygame.display.set_mode((960, 720))
    return App(screen, store, MemoryScores(50))


def press(app, *keys):
    for key in keys:
        app.handle_event(pygame.event.Event(pygame.KEYDOWN, key=key))
        app.handle_event(pygame.event.Event(pygame.KEYUP, key=key))


def snapshot(session):
    return (
        session.state,
        session.score,
        session.displayed_score,
        None if session.player is None else (session.player.x, session.player.y, session.player.shield_active),
        [(b.x, b.y) for b in session.bullets],
        [(e.x, e.y, e.health) for e in session.enemies],
        [(p.x, p.y, p.effect) for p in session.props],
        [(p.x, p.y, p.life) for p in session.particles],
        [(b.effect, b.start_time, b.end_time) for b in session.buffs],
        session.notifications.current,
    )


def test_s_opens_settings_from_start(app):
    press(app, pygame.K_s)
    assert app.session.state == GameState.SETTINGS
    assert app.menu is not None


def test_save_persists_clamped_draft_and_applies_audio(app, store):
    press(app, pygame.K_s)
    press(app, pygame.K_RIGHT, pygame.K_RIGHT)
    press(app, pygame.K_DOWN, pygame.K_RETURN)
    press(app, pygame.K_DOWN, pygame.K_RIGHT)
    press(app, pygame.K_DOWN, pygame.K_DOWN, pygame.K_DOWN, pygame.K_RETURN)
    assert app.session.state == GameState.START
    assert app.menu is None
    saved = store.load()
    assert (saved.sensitivity, saved.sound_enabled, saved.volume) == (7, False, 0.55)
    assert app.session.settings == saved
    assert app.sound.muted
    assert app.sound.volume == 0.55


def test_back_restores_saved_audio(app, store):
    press(app, pygame.K_s)
    press(app, pygame.K_DOWN, pygame.K_RETURN)
    press(app, pygame.K_DOWN, pygame.K_LEFT)
    assert app.sound.muted and app.sound.volume == 0.45
    press(app, pygame.K_ESCAPE)
    assert app.session.state == GameState.START
    assert not app.sound.muted
    assert app.sound.volume == 0.5
    assert not store.path.exists()
    assert app.running


def test_restart_and_menu_from_game_over(app):
    press(app, pygame.K_RETURN)
    assert app.session.state == GameState.PLAYING
    app.session.score = 30
    app.session.end_game()
    press(app, pygame.K_r)
    assert app.session.state == GameState.PLAYING
    assert app.session.score == 0
    app.session.end_game()
    press(app, pygame.K_m)
    assert app.session.state == GameState.START


def test_quit_paths(app):
    press(app, pygame.K_ESCAPE)
    assert not app.running
    app.running = True
    app.handle_event(pygame.event.Event(pygame.QUIT))
    assert not app.running


def test_resize_updates_canvas(app):
    app.handle_event(pygame.event.Event(pygame.VIDEORESIZE, w=800, h=600, size=(800, 600)))
    assert (app.session.canvas_w, app.session.canvas_h) == (800, 600)


def test_drawing_never_changes_the_session(app):
    session = app.session
    app.renderer.draw(session, app.menu)
    assert session.state == GameState.START

    press(app, pygame.K_s)
    before = snapshot(session)
    app.renderer.draw(session, app.menu)
    assert snapshot(session) == before
    press(app, pygame.K_ESCAPE)

    press(app, pygame.K_RETURN)
    session.enemy_spawner.last_spawn = 10 ** 9
    session.enemies.append(Enemy(100, 100, EnemyKind.MEDIUM))
    session.props.append(Prop(300, 100, EffectKind.SHIELD))
    session.buffs.apply(EffectKind.SCORE_BOOST, 0)
    for now in range(16, 200, 16):
        session.tick(now, app.inputs)
    spawn_explosion(session.particles, 200, 200)
    before = snapshot(session)
    app.renderer.draw(session, app.menu)
    assert snapshot(session) == before

    session.end_game()
    before = snapshot(session)
    app.renderer.draw(session, app.menu)
    assert snapshot(session) == before
