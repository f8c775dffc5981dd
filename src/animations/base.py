"""
Base Animation Class

All animations inherit from BaseAnimation and implement step().
"""

from models.enums import AnimationID
from hardware.led.led_strip import LedStrip

# setInterval-style floor: a 0 ms interval must not spin the loop
MIN_INTERVAL_MS = 1.0


class BaseAnimation:
    """
    Base class for all strip animations

    IMPORTANT:
    - One instance of animation = ONE STRIP.
    - AnimationEngine owns the timing: it sleeps `interval` seconds, then
      calls tick(). The first frame is drawn one interval after start.

    Subclasses MUST implement step(), which draws one frame and flushes
    the strip. step() is synchronous so a frame is never interleaved with
    another writer.
    """

    ANIMATION_ID: AnimationID

    def __init__(self, strip: LedStrip, interval_ms: float):
        self.strip = strip
        self.interval_ms = max(MIN_INTERVAL_MS, float(interval_ms))
        self.ticks = 0

    @property
    def interval(self) -> float:
        """Tick interval in seconds"""
        return self.interval_ms / 1000.0

    def step(self) -> None:
        raise NotImplementedError

    def tick(self) -> None:
        self.step()
        self.ticks += 1

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(strip={self.strip.name}, interval_ms={self.interval_ms})"
