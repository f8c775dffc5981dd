"""
Models package - Data models for the LED serial bridge
"""

from .enums import CommandType, StripID, AnimationID, StripDriver, ControlFlag, GamePiece, LogLevel, LogCategory
from .color import Color
from .command import Command

__all__ = [
    'CommandType',
    'StripID',
    'AnimationID',
    'StripDriver',
    'ControlFlag',
    'GamePiece',
    'LogLevel',
    'LogCategory',
    'Color',
    'Command',
]
