"""KeyRouter: sends evdev key events to the modifiers and the composer.

Host-side glue. Right Shift is the Korean layer trigger (long press, or
Right Shift + Space for an instant toggle). Left Shift is a one-shot /
lock / hold shift modifier and Left Alt a hold / lock modifier. While the
Korean layer is on, letter keys are composed into Hangul instead of reaching
the application, unless Alt is active (shortcuts pass through).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from evdev import ecodes

from symlayer.config import validate_config
from symlayer.core.layer_toggle import LayerToggle
from symlayer.core.modifiers import Modifier, SimpleModifier
from symlayer.hangul.composer import HangulComposer
from symlayer.input.key_mapper import TEXT_KEYS, keycode_to_char

if TYPE_CHECKING:
    from symlayer.clock import Clock
    from symlayer.sink import TextSink

logger = logging.getLogger(__name__)

# evdev key event values
KEY_RELEASE = 0
KEY_PRESS = 1
KEY_REPEAT = 2


class KeyRouter:
    """Routes key events; :meth:`handle_key` returns True when consumed.

    Consumed events must not be forwarded to the application. Everything
    else is passed through by the host unchanged.
    """

    def __init__(
        self,
        sink: "TextSink",
        clock: "Clock",
        shift: Modifier | None = None,
        layer: LayerToggle | None = None,
        alt: SimpleModifier | None = None,
    ):
        self.sink = sink
        self.clock = clock
        self.shift = shift or Modifier(clock, name="shift")
        self.layer = layer or LayerToggle.korean(clock)
        self.alt = alt or SimpleModifier(clock, name="alt")
        self.composer = HangulComposer(sink)
        # Codes whose press was consumed; their release is swallowed too
        self._consumed: set[int] = set()
        # A non-modifier key was pressed while Alt was held (a shortcut)
        self._alt_combo = False

    @classmethod
    def from_config(cls, sink: "TextSink", clock: "Clock", config: dict | None = None) -> "KeyRouter":
        conf = validate_config(config)
        shift = Modifier(
            clock,
            lock_threshold_ms=conf['lock_threshold_ms'],
            next_threshold_ms=conf['next_threshold_ms'],
            name="shift",
        )
        layer = LayerToggle.korean(clock, long_press_threshold_ms=conf['long_press_threshold_ms'])
        alt = SimpleModifier(clock, lock_threshold_ms=conf['simple_lock_threshold_ms'], name="alt")
        return cls(sink, clock, shift=shift, layer=layer, alt=alt)

    def reset(self) -> None:
        """Start over, e.g. when the focused text field changes."""
        self.shift.reset()
        self.alt.reset()
        self.layer.reset()
        self.composer.reset()
        self._consumed.clear()
        self._alt_combo = False

    def handle_key(self, code: int, value: int) -> bool:
        if value == KEY_RELEASE:
            return self._handle_release(code)
        return self._handle_press(code, repeat=value == KEY_REPEAT)

    # ------------------------------------------------------------------

    def _handle_press(self, code: int, repeat: bool) -> bool:
        if code == ecodes.KEY_RIGHTSHIFT:
            if not repeat:
                self.layer.on_trigger_down()
            return True
        if code == ecodes.KEY_LEFTSHIFT:
            if not repeat:
                self.shift.on_key_down()
            return False
        if code == ecodes.KEY_LEFTALT:
            if not repeat:
                self.alt.on_key_down()
                self._alt_combo = False
            return False
        if code == ecodes.KEY_SPACE and self.layer.is_trigger_pressed():
            if not repeat:
                self.layer.instant_toggle()
                self._after_toggle()
            self._consumed.add(code)
            return True
        if self.alt.is_held():
            self._alt_combo = True
        if not self.layer.is_active():
            if not repeat and keycode_to_char(code):
                # A passed-through Latin letter uses up a one-shot shift
                self._consume_shift()
            return False
        if self.alt.get():
            self.composer.reset()
            return False

        consumed = self._route_to_composer(code)
        if consumed:
            self._consumed.add(code)
        return consumed

    def _handle_release(self, code: int) -> bool:
        if code == ecodes.KEY_RIGHTSHIFT:
            self.layer.on_trigger_up()
            self._after_toggle()
            return True
        if code == ecodes.KEY_LEFTSHIFT:
            self.shift.on_key_up()
            return False
        if code == ecodes.KEY_LEFTALT:
            self.alt.on_key_up()
            if self._alt_combo:
                # Alt was used for a shortcut, not tapped: never leave it locked
                self.alt.reset()
                self._alt_combo = False
            return False
        if code in self._consumed:
            self._consumed.discard(code)
            return True
        return False

    def _route_to_composer(self, code: int) -> bool:
        if code in TEXT_KEYS:
            self.composer.handle_space_or_enter(TEXT_KEYS[code])
            return True
        if code == ecodes.KEY_BACKSPACE:
            # Nothing composing: let the application delete
            return self.composer.backspace()

        ch = keycode_to_char(code, shift=self.shift.get())
        if not ch:
            # Navigation and other keys finish the syllable first
            self.composer.reset()
            return False
        self._consume_shift()
        self.composer.input_latin_char(ch)
        return True

    def _consume_shift(self) -> None:
        if self.shift.is_held():
            # Shift+key combo: releasing shift must not arm a one-shot
            self.shift.suppress_next_one_shot_once()
        elif self.shift.get() and not self.shift.is_locked():
            self.shift.next_did_consume()

    def _after_toggle(self) -> None:
        if self.layer.was_just_toggled():
            self.composer.reset()
            if self.shift.get() and not self.shift.is_locked() and not self.shift.is_held():
                # A pending one-shot does not carry over into the other layer
                self.shift.next_did_consume()
            logger.debug("Korean layer %s", "on" if self.layer.is_active() else "off")
