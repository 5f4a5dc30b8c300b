"""symlayer: modifier state machines and Hangul composition for keyboards."""

from symlayer.__version__ import __version__
from symlayer.clock import ManualClock, MonotonicClock
from symlayer.core import Layer, LayerToggle, Modifier, SimpleModifier, TripleModifier
from symlayer.hangul import HangulComposer
from symlayer.sink import RecordingSink, TextSink

__all__ = [
    "__version__",
    "HangulComposer",
    "Layer",
    "LayerToggle",
    "ManualClock",
    "Modifier",
    "MonotonicClock",
    "RecordingSink",
    "SimpleModifier",
    "TextSink",
    "TripleModifier",
]
