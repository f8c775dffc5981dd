"""Palette - named colors plus the shared 'last used color' fallback"""

from typing import Dict, List, Optional

from managers.color_manager import ColorManager
from models.color import Color
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.DISPATCH)


class Palette:
    """
    Resolves color names for the dispatcher.

    A known name becomes the new last_color; an unknown or missing name
    resolves to last_color instead of failing.
    """

    def __init__(self, colors: Dict[str, Color], order: List[str], fallback: str):
        if not colors:
            raise ValueError("Palette needs at least one color")
        self._colors = dict(colors)
        self._order = list(order) or list(colors.keys())
        self.last_color: Color = self._colors[fallback]

    @classmethod
    def from_color_manager(cls, color_manager: ColorManager) -> "Palette":
        return cls(
            colors=color_manager.colors,
            order=color_manager.palette_order,
            fallback=color_manager.fallback_color,
        )

    @property
    def names(self) -> List[str]:
        """Names in cycling order"""
        return list(self._order)

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, name: object) -> bool:
        return name in self._colors

    def resolve(self, name: Optional[str]) -> Color:
        if name is not None and name in self._colors:
            self.last_color = self._colors[name]
            return self.last_color

        log.debug("Unknown color, using last color", color=name, fallback=str(self.last_color))
        return self.last_color

    def get(self, name: str) -> Color:
        """Plain lookup, does not touch last_color (KeyError when unknown)"""
        return self._colors[name]

    def at(self, index: int) -> Color:
        """Color at index in cycling order (wraps)"""
        return self._colors[self._order[index % len(self._order)]]
