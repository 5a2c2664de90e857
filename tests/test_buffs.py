import pytest

from space_shooter.buffs import BuffEngine
from space_shooter.config import DEFAULT_SHOT_INTERVAL, RAPID_SHOT_INTERVAL
from space_shooter.entities import EffectKind
from space_shooter.notifications import describe


def test_rapid_fire_window_is_half_open(session):
    session.buffs.apply(EffectKind.RAPID_FIRE, 1000)
    assert session.shot_interval == RAPID_SHOT_INTERVAL
    session.buffs.update(5999)
    assert session.shot_interval == RAPID_SHOT_INTERVAL
    assert session.buffs.update(6000) == [EffectKind.RAPID_FIRE]
    assert session.shot_interval == DEFAULT_SHOT_INTERVAL
    assert len(session.buffs) == 0


def test_score_boost_drives_multiplier(session):
    session.buffs.apply(EffectKind.SCORE_BOOST, 0)
    assert session.score_multiplier == 2
    session.buffs.update(10000)
    assert session.score_multiplier == 1


def test_shield_toggles_player(session):
    session.buffs.apply(EffectKind.SHIELD, 0)
    assert session.player.shield_active
    session.buffs.update(8000)
    assert not session.player.shield_active


def test_speed_boost_does_not_compound(session):
    base = session.player.speed
    session.buffs.apply(EffectKind.SPEED_BOOST, 0)
    session.buffs.apply(EffectKind.SPEED_BOOST, 3000)
    assert session.player.speed == pytest.approx(base * 1.5)
    assert len(session.buffs) == 1
    session.buffs.update(6000)
    assert session.player.speed == pytest.approx(base * 1.5)
    session.buffs.update(9000)
    assert session.player.speed == pytest.approx(base)


def test_refresh_keeps_display_order(session):
    session.buffs.apply(EffectKind.SHIELD, 0)
    session.buffs.apply(EffectKind.RAPID_FIRE, 10)
    session.buffs.apply(EffectKind.SHIELD, 20)
    assert [b.effect for b in session.buffs] == [EffectKind.SHIELD, EffectKind.RAPID_FIRE]
    assert session.buffs.find(EffectKind.SHIELD).end_time == 8020


def test_acquire_and_expire_notifications(session):
    session.scheduler.advance(100)
    session.buffs.apply(EffectKind.RAPID_FIRE, 100)
    note = session.notifications.current
    assert note.title == "Rapid Fire"
    assert note.expires_at == 4100
    session.scheduler.advance(4100)
    assert session.notifications.current is None
    session.scheduler.advance(5100)
    session.buffs.update(5100)
    assert session.notifications.current.title == "Rapid Fire expired"
    assert session.notifications.current.expires_at == 7100


def test_break_shield_is_silent(session):
    session.buffs.apply(EffectKind.SHIELD, 0)
    assert session.buffs.break_shield()
    assert not session.player.shield_active
    assert not session.buffs.is_active(EffectKind.SHIELD)
    assert session.notifications.current.title == "Shield"
    assert session.buffs.update(9000) == []


def test_progress_and_remaining(session):
    buff = session.buffs.apply(EffectKind.RAPID_FIRE, 0)
    assert BuffEngine.remaining(buff, 2500) == 2500
    assert BuffEngine.progress(buff, 2500) == 0.5
    assert BuffEngine.remaining_seconds(buff, 2500) == 3
    assert BuffEngine.remaining(buff, 9000) == 0


def test_describe_falls_back_for_unknown():
    assert describe(EffectKind.SHIELD)[0] == "Shield"
    assert describe("warp_drive") == ("Unknown Item", "Special effect gained")
