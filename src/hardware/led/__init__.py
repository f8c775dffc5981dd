from .strip_interface import IPhysicalStrip
from .virtual_strip import VirtualStrip
from .led_strip import LedStrip
from .strip_factory import create_strip

__all__ = [
    "IPhysicalStrip",
    "VirtualStrip",
    "LedStrip",
    "create_strip",
]
