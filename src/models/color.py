"""
Color model - immutable RGB triple used by strips, palette and animations
"""

from dataclasses import dataclass
from typing import Sequence, Tuple


@dataclass(frozen=True)
class Color:
    """
    RGB color (0-255 per channel)

    Examples:
        red = Color.from_rgb(255, 0, 0)
        r, g, b = red.to_rgb()
    """

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self):
        for channel, value in (("r", self.r), ("g", self.g), ("b", self.b)):
            if not 0 <= value <= 255:
                raise ValueError(f"Color channel {channel}={value} out of range 0-255")

    # === CONSTRUCTORS ===

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> 'Color':
        return cls(int(r), int(g), int(b))

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> 'Color':
        """Build from a YAML list like [255, 165, 0]"""
        if len(values) != 3:
            raise ValueError(f"Expected 3 channels, got {list(values)}")
        return cls.from_rgb(*values)

    @classmethod
    def black(cls) -> 'Color':
        return cls(0, 0, 0)

    # === RENDERING ===

    def to_rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def is_off(self) -> bool:
        return self.r == 0 and self.g == 0 and self.b == 0

    def __str__(self) -> str:
        return f"RGB({self.r},{self.g},{self.b})"
