"""
Shuffling Rainbow Animation

Palette colors in random order, painted in fixed-length segments that
rotate by one palette slot per tick.
"""

import random
from typing import Optional

from animations.base import BaseAnimation
from hardware.led.led_strip import LedStrip
from models.enums import AnimationID
from services.palette import Palette


class ShufflingRainbowAnimation(BaseAnimation):
    """
    Parameters:
        segment_length: pixels per color segment (>= 1)
        speed_ms: tick interval
        rng: random source (injectable for tests)
    """

    ANIMATION_ID = AnimationID.SHUFFLING_RAINBOW

    def __init__(
        self,
        strip: LedStrip,
        palette: Palette,
        segment_length: int = 1,
        speed_ms: float = 250,
        rng: Optional[random.Random] = None,
    ):
        super().__init__(strip, speed_ms)
        self.palette = palette
        self.segment_length = max(1, int(segment_length))
        self.offset = 0
        self._rng = rng or random.Random()

    def step(self) -> None:
        order = self.palette.names
        self._rng.shuffle(order)
        count = len(order)

        segment = 0
        for i in range(self.strip.length):
            if i % self.segment_length == 0:
                segment = (segment + 1) % count
            name = order[(segment + self.offset) % count]
            self.strip.set_pixel(i, self.palette.get(name))

        self.strip.show()
        self.offset = (self.offset + 1) % count
