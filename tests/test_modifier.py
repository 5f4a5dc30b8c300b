"""Tests for Modifier: hold, one-shot and lock."""

from __future__ import annotations

import pytest

from symlayer.core.modifiers import Modifier
from symlayer.log import TRACE


@pytest.fixture
def mod(clock):
    return Modifier(clock, name="shift")


def tap(mod, clock, hold_ms=50):
    mod.on_key_down()
    clock.advance(hold_ms)
    mod.on_key_up()


def assert_invariant(mod):
    s = mod.state
    assert mod.get() == (s.locked or s.held or s.one_shot_armed)


def test_initial_state(mod):
    assert not mod.get()
    assert not mod.is_locked()
    assert not mod.is_held()
    assert mod.state.last_transition_ms is None


def test_hold_activates_while_down(mod, clock):
    mod.on_key_down()
    assert mod.is_held()
    assert mod.get()
    assert not mod.state.one_shot_armed
    clock.advance(1000)
    mod.on_key_up()
    assert not mod.get()
    assert not mod.state.one_shot_armed


def test_quick_tap_arms_one_shot(mod, clock):
    tap(mod, clock, hold_ms=100)
    assert mod.state.one_shot_armed
    assert mod.get()
    assert not mod.is_held()


def test_release_at_next_threshold_does_not_arm(mod, clock):
    tap(mod, clock, hold_ms=350)
    assert not mod.state.one_shot_armed


def test_next_did_consume_clears_and_prevents_rearm(mod, clock):
    mod.on_key_down()
    clock.advance(50)
    mod.on_key_up()
    assert mod.state.one_shot_armed
    mod.next_did_consume()
    assert not mod.get()
    assert mod.state.suppress_next_one_shot


def test_consume_while_held_blocks_one_shot(mod, clock):
    mod.on_key_down()
    mod.next_did_consume()
    clock.advance(50)
    mod.on_key_up()
    assert not mod.state.one_shot_armed
    assert not mod.get()


def test_double_tap_locks(mod, clock):
    tap(mod, clock, hold_ms=50)
    clock.advance(100)  # 150ms between the two downs
    mod.on_key_down()
    assert mod.is_locked()
    clock.advance(50)
    mod.on_key_up()
    assert mod.is_locked()
    assert not mod.state.one_shot_armed
    assert mod.get()


def test_third_quick_down_unlocks(mod, clock):
    mod.on_key_down()
    clock.advance(100)
    mod.on_key_down()
    assert mod.is_locked()
    clock.advance(100)
    mod.on_key_down()
    assert not mod.is_locked()


def test_slow_second_press_clears_lock(mod, clock):
    mod.on_key_down()
    clock.advance(100)
    mod.on_key_down()
    clock.advance(50)
    mod.on_key_up()
    assert mod.is_locked()

    clock.advance(1000)
    mod.on_key_down()
    assert not mod.is_locked()
    clock.advance(50)
    mod.on_key_up()
    # Pressing to leave the lock does not arm a stale one-shot
    assert not mod.state.one_shot_armed
    assert not mod.get()


def test_tap_while_one_shot_armed_disarms(mod, clock):
    tap(mod, clock)
    assert mod.state.one_shot_armed
    clock.advance(1000)
    tap(mod, clock)
    assert not mod.state.one_shot_armed


def test_suppress_next_one_shot_once(mod, clock):
    mod.on_key_down()
    mod.suppress_next_one_shot_once()
    clock.advance(50)
    mod.on_key_up()
    assert not mod.state.one_shot_armed
    clock.advance(1000)
    tap(mod, clock)
    assert mod.state.one_shot_armed


def test_activate_for_next(mod):
    mod.activate_for_next()
    assert mod.get()
    assert mod.state.one_shot_armed


def test_stray_release_arms_nothing(mod):
    mod.on_key_up()
    assert not mod.get()


def test_invariant_holds_after_every_call(mod, clock):
    steps = [
        mod.on_key_down, mod.on_key_up, mod.on_key_down, mod.on_key_down,
        mod.on_key_up, mod.activate_for_next, mod.next_did_consume,
        mod.on_key_down, mod.suppress_next_one_shot_once, mod.on_key_up,
        mod.reset,
    ]
    for i, step in enumerate(steps):
        clock.advance(40 * (i % 4) + 30)
        step()
        assert_invariant(mod)


def test_reset_restores_initial_fields(mod, clock):
    mod.on_key_down()
    clock.advance(10)
    mod.on_key_down()
    mod.activate_for_next()
    mod.reset()
    s = mod.state
    assert (s.held, s.locked, s.one_shot_armed, s.suppress_next_one_shot) == (False,) * 4
    assert s.last_transition_ms is None
    # A press right after reset is not taken as a double tap
    mod.on_key_down()
    assert not mod.is_locked()


def test_custom_thresholds(clock):
    mod = Modifier(clock, lock_threshold_ms=100, next_threshold_ms=500)
    mod.on_key_down()
    clock.advance(400)
    mod.on_key_up()
    assert mod.state.one_shot_armed
    clock.advance(1000)
    mod.on_key_down()
    clock.advance(150)
    mod.on_key_down()
    assert not mod.is_locked()


def test_transitions_logged_at_trace(mod, clock, caplog):
    caplog.set_level(TRACE, logger="symlayer")
    mod.on_key_down()
    mod.suppress_next_one_shot_once()
    clock.advance(50)
    mod.on_key_up()
    mod.activate_for_next()
    mod.next_did_consume()
    messages = [r.getMessage() for r in caplog.records if r.levelno == TRACE]
    assert messages == [
        "shift: down, suppress_one_shot=False",
        "shift: one-shot suppressed for next release",
        "shift: up, one_shot=False locked=False",
        "shift: one-shot armed",
        "shift: one-shot consumed",
    ]
