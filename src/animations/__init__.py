"""
Animation system for LED strips

- engine: per-strip animation engine (one task per strip)
- base: base animation class
- single_light_travel, shuffling_rainbow: animation implementations
- startup_sequence: boot color sequence
"""

from .base import BaseAnimation
from .engine import AnimationEngine
from .shuffling_rainbow import ShufflingRainbowAnimation
from .single_light_travel import SingleLightTravelAnimation
from .startup_sequence import StartupSequence

__all__ = [
    "AnimationEngine",
    "BaseAnimation",
    "ShufflingRainbowAnimation",
    "SingleLightTravelAnimation",
    "StartupSequence",
]
