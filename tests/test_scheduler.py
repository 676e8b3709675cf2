import pytest

from engine import TickScheduler


def test_action_fires_once_when_due(scheduler, clock):
    calls = []
    action = scheduler.call_later(1.0, lambda: calls.append("x"))
    assert action.pending
    assert scheduler.next_due() == clock.now + 1.0

    assert scheduler.run_due() == 0
    clock.advance(1.0)
    assert scheduler.run_due() == 1
    assert scheduler.run_due() == 0
    assert calls == ["x"]
    assert action.done and not action.pending


def test_cancelled_action_never_fires(scheduler, clock):
    calls = []
    action = scheduler.call_later(0.5, lambda: calls.append("x"))
    action.cancel()
    clock.advance(1)
    assert scheduler.run_due() == 0
    assert calls == []
    assert scheduler.pending() == 0


def test_actions_fire_in_due_order(scheduler, clock):
    calls = []
    scheduler.call_later(2.0, lambda: calls.append("late"))
    scheduler.call_later(1.0, lambda: calls.append("early"))
    scheduler.call_later(1.0, lambda: calls.append("early-2"))
    clock.advance(3)
    assert scheduler.run_due() == 3
    assert calls == ["early", "early-2", "late"]


def test_action_scheduled_while_firing_waits_for_next_pass(scheduler, clock):
    calls = []

    def chain():
        calls.append("first")
        scheduler.call_later(0, lambda: calls.append("second"))

    scheduler.call_later(0, chain)
    assert scheduler.run_due() == 1
    assert calls == ["first"]
    assert scheduler.run_due() == 1
    assert calls == ["first", "second"]


def test_negative_delay_rejected(scheduler):
    with pytest.raises(ValueError):
        scheduler.call_later(-0.1, lambda: None)


def test_cancel_all(scheduler, clock):
    a = scheduler.call_later(1, lambda: None)
    b = scheduler.call_later(2, lambda: None)
    scheduler.cancel_all()
    assert a.cancelled and b.cancelled
    assert scheduler.next_due() is None
    clock.advance(5)
    assert scheduler.run_due() == 0


def test_explicit_now_overrides_clock():
    sched = TickScheduler(lambda: 0.0)
    calls = []
    sched.call_later(5, lambda: calls.append(1))
    assert sched.run_due(now=5.0) == 1
    assert calls == [1]
