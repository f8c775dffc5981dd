"""
Managers - configuration loading and parsing
"""

from .config_manager import ConfigManager
from .hardware_manager import HardwareManager
from .color_manager import ColorManager

__all__ = [
    'ConfigManager',
    'HardwareManager',
    'ColorManager',
]
