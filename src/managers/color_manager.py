"""
Color Manager - Processes palette definitions

Processes color data from ConfigManager (does NOT load files).
Single responsibility: Parse and validate the named palette.
"""

from typing import Dict, List

from models.color import Color
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.CONFIG)


class ColorManager:
    """
    Palette data processor

    Responsibilities:
    - Parse palette colors into Color objects
    - Validate palette order and fallback color
    - Provide lookup methods

    Example:
        color_mgr = ColorManager({
            'palette': {'red': [255, 0, 0], 'blue': [0, 0, 255]},
            'palette_order': ['red', 'blue'],
            'fallback_color': 'red',
        })
        color_mgr.get_color("blue")   # Color(0, 0, 255)
    """

    def __init__(self, data: dict):
        """
        Args:
            data: Config dict with 'palette', 'palette_order' and 'fallback_color' keys
        """
        self.data = data
        self._colors: Dict[str, Color] = {}
        self._order: List[str] = []
        self._fallback: str = ""
        self._process_data()

    def _process_data(self):
        raw = self.data.get('palette', {}) or {}
        self._colors = {name: Color.from_sequence(rgb) for name, rgb in raw.items()}

        order = self.data.get('palette_order') or list(self._colors.keys())
        unknown = [name for name in order if name not in self._colors]
        if unknown:
            raise ValueError(f"palette_order references unknown colors: {unknown}")
        self._order = list(order)

        fallback = self.data.get('fallback_color') or (self._order[0] if self._order else "")
        if self._colors and fallback not in self._colors:
            raise ValueError(f"fallback_color '{fallback}' is not in the palette")
        self._fallback = fallback

        log.debug(f"Palette parsed with {len(self._colors)} colors", fallback=self._fallback)

    @property
    def colors(self) -> Dict[str, Color]:
        """All palette colors as {name: Color}"""
        return self._colors

    @property
    def palette_order(self) -> List[str]:
        """Cycling order used by animations"""
        return self._order

    @property
    def fallback_color(self) -> str:
        """Initial 'last used' color"""
        return self._fallback

    def get_color(self, name: str) -> Color:
        """
        Raises:
            KeyError: If the color doesn't exist
        """
        return self._colors[name]
