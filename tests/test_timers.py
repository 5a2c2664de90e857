from space_shooter.notifications import NotificationChannel
from space_shooter.timers import Scheduler


def test_actions_fire_in_deadline_order():
    s = Scheduler()
    fired = []
    s.call_later(300, lambda: fired.append("b"))
    s.call_later(100, lambda: fired.append("a"))
    assert s.advance(99) == 0
    assert s.advance(300) == 2
    assert fired == ["a", "b"]
    assert len(s) == 0


def test_cancelled_handle_never_fires():
    s = Scheduler()
    fired = []
    handle = s.call_later(50, lambda: fired.append(1))
    handle.cancel()
    s.advance(1000)
    assert fired == []
    assert len(s) == 0


def test_clock_never_moves_backwards():
    s = Scheduler(now=500)
    s.advance(100)
    assert s.now == 500
    h = s.call_later(10, lambda: None)
    assert h.deadline == 510
    s.advance(509)
    assert len(s) == 1


def test_new_notification_preempts_pending_dismiss():
    s = Scheduler()
    channel = NotificationChannel(s)
    channel.show("first", "", 4000)
    s.advance(1000)
    channel.show("second", "", 4000)
    s.advance(4500)
    assert channel.current.title == "second"
    s.advance(5000)
    assert not channel.visible
    assert len(s) == 0


def test_hide_cancels_timer():
    s = Scheduler()
    channel = NotificationChannel(s)
    channel.show("t", "b", 2000)
    channel.hide()
    assert len(s) == 0
    channel.show("again", "", 2000)
    s.advance(2000)
    assert channel.current is None
