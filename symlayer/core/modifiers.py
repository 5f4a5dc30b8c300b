"""Virtual modifier keys: hold, one-shot and lock semantics.

A :class:`Modifier` can be used in three ways:

- hold to activate, release to deactivate
- tap to activate until the next printing key is consumed (one-shot)
- double tap to lock until the next press of this modifier

:class:`SimpleModifier` only knows hold and lock. :class:`TripleModifier`
additionally reports a short-press / long-press key and a secondary mod key,
for a key that works as a modifier when held and as a regular key when tapped.

All timing is evaluated retrospectively at the next event, using the clock
passed in. There are no timers.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import symlayer.log  # registers TRACE level and logger.trace()
from symlayer.core.states import (
    ExtendedModifierState,
    ModifierState,
    SimpleModifierState,
    elapsed_ms,
)

if TYPE_CHECKING:
    from symlayer.clock import Clock

logger = logging.getLogger(__name__)

LOCK_THRESHOLD_MS = 250
NEXT_THRESHOLD_MS = 350
SIMPLE_LOCK_THRESHOLD_MS = 350


class Modifier:
    """Three-state modifier (hold / one-shot / lock)."""

    state_class = ModifierState

    def __init__(
        self,
        clock: "Clock",
        lock_threshold_ms: int = LOCK_THRESHOLD_MS,
        next_threshold_ms: int = NEXT_THRESHOLD_MS,
        name: str = "modifier",
    ):
        self.clock = clock
        # Max gap between two downs that counts as a double tap
        self.lock_threshold_ms = lock_threshold_ms
        # Max hold duration that still arms a one-shot on release
        self.next_threshold_ms = next_threshold_ms
        self.name = name
        self.state = self.state_class()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r} {self.state}>"

    def reset(self) -> None:
        self.state.reset()
        logger.trace("%s: reset", self.name)  # type: ignore[attr-defined]

    def get(self) -> bool:
        return self.state.active

    def is_locked(self) -> bool:
        return self.state.locked

    def is_held(self) -> bool:
        return self.state.held

    def on_key_down(self) -> None:
        s = self.state
        s.held = True
        now = self.clock.now_ms()
        if elapsed_ms(now, s.last_transition_ms) < self.lock_threshold_ms:
            s.locked = not s.locked
            # The release of a double tap must not also arm a one-shot
            s.suppress_next_one_shot = True
            logger.trace("%s: double tap, locked=%s", self.name, s.locked)  # type: ignore[attr-defined]
        else:
            s.suppress_next_one_shot = s.locked or s.one_shot_armed
            s.locked = False
            logger.trace(  # type: ignore[attr-defined]
                "%s: down, suppress_one_shot=%s", self.name, s.suppress_next_one_shot
            )
        s.last_transition_ms = now

    def on_key_up(self) -> None:
        s = self.state
        now = self.clock.now_ms()
        s.one_shot_armed = (
            not s.locked
            and elapsed_ms(now, s.last_transition_ms) < self.next_threshold_ms
            and not s.suppress_next_one_shot
        )
        s.suppress_next_one_shot = False
        s.held = False
        logger.trace(  # type: ignore[attr-defined]
            "%s: up, one_shot=%s locked=%s", self.name, s.one_shot_armed, s.locked
        )

    def suppress_next_one_shot_once(self) -> None:
        """Keep the upcoming key up from arming a one-shot.

        Use when a combo (this modifier + another key) consumed the
        modifier action, so releasing it should not also apply it to the
        next key.
        """
        self.state.suppress_next_one_shot = True
        logger.trace("%s: one-shot suppressed for next release", self.name)  # type: ignore[attr-defined]

    def activate_for_next(self) -> None:
        """Arm the one-shot as if the key had just been tapped."""
        self.state.one_shot_armed = True
        logger.trace("%s: one-shot armed", self.name)  # type: ignore[attr-defined]

    def next_did_consume(self) -> None:
        """Report that a key consumed the one-shot.

        Clears the one-shot and suppresses re-arming on the next release.
        """
        self.state.one_shot_armed = False
        self.state.suppress_next_one_shot = True
        logger.trace("%s: one-shot consumed", self.name)  # type: ignore[attr-defined]


class SimpleModifier:
    """Two-state modifier (hold / lock), no one-shot.

    Every press flips the lock. A release after a long hold drops the lock
    again, so a slow press behaves as a plain hold while a quick tap leaves
    the modifier locked.
    """

    def __init__(
        self,
        clock: "Clock",
        lock_threshold_ms: int = SIMPLE_LOCK_THRESHOLD_MS,
        name: str = "simple",
    ):
        self.clock = clock
        self.lock_threshold_ms = lock_threshold_ms
        self.name = name
        self.state = SimpleModifierState()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r} {self.state}>"

    def reset(self) -> None:
        self.state.reset()
        logger.trace("%s: reset", self.name)  # type: ignore[attr-defined]

    def get(self) -> bool:
        return self.state.locked or self.state.held

    def is_locked(self) -> bool:
        return self.state.locked

    def is_held(self) -> bool:
        return self.state.held

    def on_key_down(self) -> None:
        s = self.state
        s.held = True
        s.locked = not s.locked
        s.last_transition_ms = self.clock.now_ms()
        logger.trace("%s: down, locked=%s", self.name, s.locked)  # type: ignore[attr-defined]

    def on_key_up(self) -> None:
        s = self.state
        if elapsed_ms(self.clock.now_ms(), s.last_transition_ms) > self.lock_threshold_ms:
            s.locked = False
        s.held = False
        logger.trace("%s: up, locked=%s", self.name, s.locked)  # type: ignore[attr-defined]


class TripleModifier(Modifier):
    """Modifier that can also act as a short-press key or a long-press key.

    - hold to activate a modifier, release to deactivate
    - press and immediately release to send ``key_code``
    - hold long enough without other keys to send ``long_press_key_code``
      (the host decides when and calls :meth:`activate_long_press`)
    - while held with other keys, optionally send ``mod_key_code`` instead
      (:meth:`activate_mod_key`)

    Key codes are host key identifiers (evdev codes in practice); ``0``
    means "none". How the four outputs combine is up to the host.
    """

    state_class = ExtendedModifierState

    def __init__(
        self,
        clock: "Clock",
        key_code: int = 0,
        long_press_key_code: int = 0,
        mod_key_code: int = 0,
        lock_threshold_ms: int = LOCK_THRESHOLD_MS,
        next_threshold_ms: int = NEXT_THRESHOLD_MS,
        name: str = "triple",
    ):
        super().__init__(clock, lock_threshold_ms, next_threshold_ms, name)
        self.key_code = key_code
        self.long_press_key_code = long_press_key_code
        self.mod_key_code = mod_key_code

    def is_long_press(self) -> bool:
        return self.state.long_press_active

    def get_key(self) -> int:
        if self.state.long_press_active:
            return self.long_press_key_code
        return self.key_code

    def get_alt_key(self) -> int:
        return self.long_press_key_code

    def get_mod_key(self) -> int:
        return self.mod_key_code if self.state.mod_key_mode_active else 0

    def on_key_down(self) -> None:
        super().on_key_down()
        self.state.skip_next_key_up = False

    def on_key_up(self) -> None:
        super().on_key_up()
        self.state.long_press_active = False
        self.state.mod_key_mode_active = False

    def activate_long_press(self) -> None:
        self.state.long_press_active = True
        logger.trace("%s: long press", self.name)  # type: ignore[attr-defined]

    def activate_mod_key(self) -> None:
        if self.mod_key_code:
            self.state.mod_key_mode_active = True
            logger.trace("%s: mod key mode", self.name)  # type: ignore[attr-defined]

    def activate_skip_key_up(self) -> None:
        """Mark the upcoming release as not producing a key.

        The release still updates modifier state; only the host's key
        emission should skip it. Cleared by the next key down.
        """
        self.state.skip_next_key_up = True
        logger.trace("%s: skip next key up", self.name)  # type: ignore[attr-defined]

    def skip_key_up(self) -> bool:
        return self.state.skip_next_key_up
