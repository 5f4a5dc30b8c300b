"""Modifier and layer state machines."""

from symlayer.core.layer_toggle import Layer, LayerToggle
from symlayer.core.modifiers import Modifier, SimpleModifier, TripleModifier

__all__ = ["Layer", "LayerToggle", "Modifier", "SimpleModifier", "TripleModifier"]
