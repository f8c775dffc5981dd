"""
Services layer

CommandDispatcher depends on the animation engine and is imported from
services.command_dispatcher directly.
"""

from .palette import Palette
from .strip_service import StripService
from .serial_command_reader import SerialCommandReader
from .serial_command_writer import SerialCommandWriter

__all__ = [
    "Palette",
    "StripService",
    "SerialCommandReader",
    "SerialCommandWriter",
]
