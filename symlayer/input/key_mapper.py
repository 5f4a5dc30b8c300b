"""keycode -> Latin char mapping (evdev keycodes, QWERTY)."""

from __future__ import annotations

from evdev import ecodes

KEYCODE_TO_CHAR_EN: dict[int, str] = {
    ecodes.KEY_Q: "q", ecodes.KEY_W: "w", ecodes.KEY_E: "e", ecodes.KEY_R: "r",
    ecodes.KEY_T: "t", ecodes.KEY_Y: "y", ecodes.KEY_U: "u", ecodes.KEY_I: "i",
    ecodes.KEY_O: "o", ecodes.KEY_P: "p",
    ecodes.KEY_A: "a", ecodes.KEY_S: "s", ecodes.KEY_D: "d", ecodes.KEY_F: "f",
    ecodes.KEY_G: "g", ecodes.KEY_H: "h", ecodes.KEY_J: "j", ecodes.KEY_K: "k",
    ecodes.KEY_L: "l",
    ecodes.KEY_Z: "z", ecodes.KEY_X: "x", ecodes.KEY_C: "c", ecodes.KEY_V: "v",
    ecodes.KEY_B: "b", ecodes.KEY_N: "n", ecodes.KEY_M: "m",
}

# Keys that insert text rather than acting on it
TEXT_KEYS: dict[int, str] = {
    ecodes.KEY_SPACE: " ",
    ecodes.KEY_ENTER: "\n",
}


def keycode_to_char(keycode: int, shift: bool = False) -> str:
    """Return the Latin letter for *keycode*. Empty string if not a letter key."""
    ch = KEYCODE_TO_CHAR_EN.get(keycode, "")
    if ch and shift:
        ch = ch.upper()
    return ch
