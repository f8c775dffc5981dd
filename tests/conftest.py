"""
Shared fixtures: six virtual strips, the robot palette, engine and dispatcher
"""

import pytest

from animations.engine import AnimationEngine
from hardware.led.led_strip import LedStrip
from hardware.led.virtual_strip import VirtualStrip
from lifecycle.task_registry import TaskRegistry
from models.color import Color
from models.enums import StripID
from models.hardware import StripConfig
from services.command_dispatcher import CommandDispatcher
from services.palette import Palette
from services.strip_service import StripService

STRIP_LAYOUT = [
    (StripID.PILLAR_FL, 27, 25),
    (StripID.PILLAR_FR, 22, 25),
    (StripID.PILLAR_BL, 18, 13),
    (StripID.PILLAR_BR, 13, 13),
    (StripID.CORNER_L, 9, 30),
    (StripID.CORNER_R, 5, 30),
]

PALETTE = {
    "red": Color(255, 0, 0),
    "green": Color(0, 255, 0),
    "blue": Color(0, 0, 255),
    "yellow": Color(255, 255, 0),
    "magenta": Color(255, 0, 255),
    "cyan": Color(0, 255, 255),
    "white": Color(255, 255, 255),
    "orange": Color(255, 165, 0),
    "pink": Color(255, 170, 203),
    "redLow": Color(25, 0, 0),
    "blueLow": Color(0, 0, 25),
    "black": Color(0, 0, 0),
}


def make_strip(strip_id: StripID = StripID.PILLAR_FL, length: int = 5, gpio: int = 27) -> LedStrip:
    return LedStrip(StripConfig(id=strip_id, gpio=gpio, pixel_count=length), VirtualStrip(length))


@pytest.fixture
def strip_service():
    return StripService([make_strip(sid, length, gpio) for sid, gpio, length in STRIP_LAYOUT])


@pytest.fixture
def palette():
    return Palette(dict(PALETTE), list(PALETTE.keys()), fallback="pink")


@pytest.fixture
def engine(strip_service, palette):
    return AnimationEngine(strip_service, palette)


@pytest.fixture
def dispatcher(strip_service, palette, engine):
    return CommandDispatcher(strip_service, palette, engine)


@pytest.fixture(autouse=True)
def fresh_task_registry():
    TaskRegistry.reset_instance()
    yield
    TaskRegistry.reset_instance()
