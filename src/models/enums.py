"""
Enums for the LED serial bridge (device + host)
"""

from enum import Enum, IntFlag, auto


class CommandType(Enum):
    """Serial protocol commands (value = wire name)"""
    SET_WHOLE_STRIP = "setWholeStrip"
    SET_WHOLE_ROBOT = "setWholeRobot"
    SINGLE_LIGHT_TRAVEL = "singleLightTravel"
    SHUFFLING_RAINBOW = "shufflingRainbow"   # protocol extension
    STOP_ANIMATION = "stopAnimation"         # protocol extension

    @classmethod
    def from_wire(cls, name: str) -> "CommandType | None":
        """Look up by wire name, None for anything unknown"""
        for member in cls:
            if member.value == name:
                return member
        return None


class StripID(Enum):
    """The six robot strips (value = wire name)"""
    PILLAR_FL = "pillarFL"
    PILLAR_FR = "pillarFR"
    PILLAR_BL = "pillarBL"
    PILLAR_BR = "pillarBR"
    CORNER_L = "cornerL"
    CORNER_R = "cornerR"

    @classmethod
    def from_wire(cls, name: str) -> "StripID | None":
        for member in cls:
            if member.value == name:
                return member
        return None


class AnimationID(Enum):
    """Animation identifiers"""
    SINGLE_LIGHT_TRAVEL = auto()
    SHUFFLING_RAINBOW = auto()


class StripDriver(Enum):
    """Which pixel driver backs a strip"""
    AUTO = auto()      # ws281x on a Pi with rpi_ws281x installed, virtual otherwise
    WS281X = auto()
    VIRTUAL = auto()


class ControlFlag(IntFlag):
    """Driver-station control word bits (highest bit first)"""
    DS_ATTACHED = 0b100000
    FMS_ATTACHED = 0b010000
    ESTOP = 0b001000
    TEST_MODE = 0b000100
    AUTONOMOUS = 0b000010
    ENABLED = 0b000001


class GamePiece(Enum):
    """Game-piece tags published by the robot code"""
    NONE = "NONE"
    CONE = "CONE"
    CUBE = "CUBE"


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    HARDWARE = auto()    # Strip drivers
    SERIAL = auto()      # Port open/close, read/write errors
    PROTOCOL = auto()    # Framing, decoding
    DISPATCH = auto()    # Command dispatch
    ANIMATION = auto()   # Animation start/stop
    HOST = auto()        # Host sampling / encoding
    SYSTEM = auto()      # Startup, shutdown, errors
    SHUTDOWN = auto()
    TASK = auto()

    GENERAL = auto()    # Default general category
