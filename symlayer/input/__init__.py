"""evdev-facing helpers: keycode mapping and event routing."""
