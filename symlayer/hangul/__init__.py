"""Hangul composition for 2-beolsik input on a QWERTY keyboard."""

from symlayer.hangul.composer import HangulComposer

__all__ = ["HangulComposer"]
