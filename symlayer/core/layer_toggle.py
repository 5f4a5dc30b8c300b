"""Long-press layer toggle for alternate script layers."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

import symlayer.log  # registers TRACE level and logger.trace()
from symlayer.core.states import LayerToggleState

if TYPE_CHECKING:
    from symlayer.clock import Clock

logger = logging.getLogger(__name__)

LONG_PRESS_THRESHOLD_MS = 500


class Layer(Enum):
    CYRILLIC = "cyrillic"
    KOREAN = "korean"


class LayerToggle:
    """Turns an alternate layer on/off by long-pressing a trigger key.

    A release at least ``long_press_threshold_ms`` after the press flips the
    layer. A combo (trigger + another key) can flip it immediately with
    :meth:`instant_toggle`; the trigger release that follows is then ignored.

    Toggles for different layers are independent. Keeping only one of them
    active is left to the host.
    """

    def __init__(
        self,
        layer: Layer,
        clock: "Clock",
        long_press_threshold_ms: int = LONG_PRESS_THRESHOLD_MS,
    ):
        self.layer = layer
        self.clock = clock
        self.long_press_threshold_ms = long_press_threshold_ms
        self.state = LayerToggleState()

    @classmethod
    def cyrillic(cls, clock: "Clock", **kwargs) -> "LayerToggle":
        return cls(Layer.CYRILLIC, clock, **kwargs)

    @classmethod
    def korean(cls, clock: "Clock", **kwargs) -> "LayerToggle":
        return cls(Layer.KOREAN, clock, **kwargs)

    def __repr__(self) -> str:
        return f"<LayerToggle {self.layer.value} {self.state}>"

    def is_active(self) -> bool:
        return self.state.layer_active

    def is_trigger_pressed(self) -> bool:
        return self.state.trigger_pressed

    def on_trigger_down(self) -> None:
        self.state.trigger_pressed = True
        self.state.trigger_press_start_ms = self.clock.now_ms()
        logger.trace("%s trigger: down", self.layer.value)  # type: ignore[attr-defined]

    def on_trigger_up(self) -> bool:
        """Handle the trigger release. Returns True if the layer was toggled."""
        s = self.state
        if s.suppress_next_toggle:
            # Already toggled through a combo while this press was down
            s.suppress_next_toggle = False
            s.trigger_pressed = False
            s.trigger_press_start_ms = None
            logger.trace("%s trigger: up, toggle suppressed", self.layer.value)  # type: ignore[attr-defined]
            return False

        toggled = False
        duration = None
        if s.trigger_press_start_ms is not None:
            duration = self.clock.now_ms() - s.trigger_press_start_ms
            if duration >= self.long_press_threshold_ms:
                self._flip()
                toggled = True
        s.trigger_pressed = False
        logger.trace(  # type: ignore[attr-defined]
            "%s trigger: up after %s ms, toggled=%s", self.layer.value, duration, toggled
        )
        return toggled

    def instant_toggle(self) -> None:
        """Flip the layer now and ignore the in-flight trigger release."""
        self._flip()
        self.state.suppress_next_toggle = True
        logger.trace("%s: instant toggle", self.layer.value)  # type: ignore[attr-defined]

    def was_just_toggled(self) -> bool:
        """Return whether the layer toggled since the last call, and clear it.

        Read-and-clear: a second call returns False until the next toggle.
        """
        result = self.state.just_toggled
        self.state.just_toggled = False
        return result

    def activate(self) -> None:
        self.state.layer_active = True
        logger.trace("%s layer: activated", self.layer.value)  # type: ignore[attr-defined]

    def deactivate(self) -> None:
        self.state.layer_active = False
        logger.trace("%s layer: deactivated", self.layer.value)  # type: ignore[attr-defined]

    def reset(self) -> None:
        self.state.reset()
        logger.trace("%s layer: reset", self.layer.value)  # type: ignore[attr-defined]

    def _flip(self) -> None:
        self.state.layer_active = not self.state.layer_active
        self.state.just_toggled = True
        logger.debug("%s layer %s", self.layer.value,
                     "on" if self.state.layer_active else "off")
