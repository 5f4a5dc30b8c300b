"""State dataclasses for modifiers and layer toggles.

Timestamps are in milliseconds from the injected clock. ``None`` means
"never happened"; it never counts as being within a threshold.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SimpleModifierState:
    held: bool = False
    locked: bool = False
    last_transition_ms: int | None = None

    def reset(self) -> None:
        """Return every field to its initial value."""
        self.held = False
        self.locked = False
        self.last_transition_ms = None


@dataclass
class ModifierState(SimpleModifierState):
    # Armed only on release, so never true while held
    one_shot_armed: bool = False
    suppress_next_one_shot: bool = False

    def reset(self) -> None:
        super().reset()
        self.one_shot_armed = False
        self.suppress_next_one_shot = False

    @property
    def active(self) -> bool:
        return self.locked or self.held or self.one_shot_armed


@dataclass
class ExtendedModifierState(ModifierState):
    long_press_active: bool = False
    mod_key_mode_active: bool = False
    skip_next_key_up: bool = False

    def reset(self) -> None:
        super().reset()
        self.long_press_active = False
        self.mod_key_mode_active = False
        self.skip_next_key_up = False


@dataclass
class LayerToggleState:
    layer_active: bool = False
    trigger_pressed: bool = False
    trigger_press_start_ms: int | None = None
    suppress_next_toggle: bool = False
    just_toggled: bool = False

    def reset(self) -> None:
        self.layer_active = False
        self.trigger_pressed = False
        self.trigger_press_start_ms = None
        self.suppress_next_toggle = False
        self.just_toggled = False


def elapsed_ms(now_ms: int, since_ms: int | None) -> float:
    """Milliseconds between *since_ms* and *now_ms*; infinite if never set."""
    if since_ms is None:
        return float("inf")
    return now_ms - since_ms
