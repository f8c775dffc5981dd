"""
CommandDispatcher: command table, soft validation, fills vs animations
"""

import asyncio

import pytest

from models.color import Color
from models.command import Command
from models.enums import AnimationID, StripID
from protocol.framing import FrameReceiver

from conftest import PALETTE


def frames(strip_service):
    return {s.id: s.driver.shown for s in strip_service.get_all()}


def test_set_whole_robot_frame_turns_every_strip_blue(dispatcher, strip_service):
    """{"command":"setWholeRobot","color":"blue"}/r → all six strips RGB(0,0,255)"""
    rx = FrameReceiver(dispatcher.dispatch)

    rx.feed(b'{"command":"setWholeRobot","color":"blue"}/r')

    for strip in strip_service.get_all():
        assert strip.driver.shown == [Color(0, 0, 255)] * strip.length
        assert strip.driver.show_count == 1


def test_set_whole_strip_only_touches_that_strip(dispatcher, strip_service):
    dispatcher.dispatch(Command.set_whole_strip(StripID.CORNER_R, "orange"))

    assert strip_service.get(StripID.CORNER_R).driver.shown == [PALETTE["orange"]] * 30
    assert strip_service.get(StripID.CORNER_L).driver.show_count == 0


def test_unknown_color_uses_last_used_color(dispatcher, strip_service):
    dispatcher.dispatch(Command.set_whole_strip(StripID.PILLAR_FL, "green"))
    dispatcher.dispatch(Command.set_whole_strip(StripID.PILLAR_FR, "chartreuse"))

    assert strip_service.get(StripID.PILLAR_FR).driver.shown == [PALETTE["green"]] * 25


def test_missing_color_before_any_known_is_pink(dispatcher, strip_service):
    dispatcher.dispatch(Command(command="setWholeRobot"))

    assert strip_service.get(StripID.PILLAR_BR).driver.shown == [PALETTE["pink"]] * 13


def test_unknown_strip_is_noop_but_color_still_resolves(dispatcher, strip_service, palette):
    before = frames(strip_service)

    assert dispatcher.dispatch(Command(command="setWholeStrip", strip="roof", color="cyan")) is True

    assert frames(strip_service) == before
    assert palette.last_color == PALETTE["cyan"]


def test_unknown_command_is_ignored(dispatcher, strip_service):
    before = frames(strip_service)

    assert dispatcher.dispatch(Command(command="makeCoffee", color="red")) is False

    assert frames(strip_service) == before
    assert dispatcher.ignored == 1
    assert dispatcher.dispatched == 0


@pytest.mark.asyncio
async def test_single_light_travel_uses_defaults(dispatcher, engine):
    dispatcher.dispatch(Command(command="singleLightTravel", strip="cornerL", color="red"))

    anim = engine.get_animation(StripID.CORNER_L)
    assert engine.get_current_animation_id(StripID.CORNER_L) == AnimationID.SINGLE_LIGHT_TRAVEL
    assert anim.interval_ms == 70
    assert anim.position == 0
    assert anim.shift_color_index == 0
    assert anim.random is False
    assert anim.color == PALETTE["red"]

    await engine.stop_all()


@pytest.mark.asyncio
async def test_single_light_travel_passes_parameters(dispatcher, engine):
    dispatcher.dispatch(Command.single_light_travel(
        StripID.PILLAR_FL, "blue", time=20, position=4, shift_color_index=3, random=True,
    ))

    anim = engine.get_animation(StripID.PILLAR_FL)
    assert anim.interval_ms == 20
    assert anim.position == 4
    assert anim.shift_color_index == 3
    assert anim.random is True

    await engine.stop_all()


@pytest.mark.asyncio
async def test_single_light_travel_unknown_strip_starts_nothing(dispatcher, engine):
    dispatcher.dispatch(Command(command="singleLightTravel", strip="mast", color="red"))
    assert engine.tasks == {}


@pytest.mark.asyncio
async def test_static_fill_cancels_animation_on_that_strip(dispatcher, engine, strip_service):
    dispatcher.dispatch(Command.single_light_travel(StripID.PILLAR_BL, "red", time=1))
    await asyncio.sleep(0.02)
    assert engine.is_running(StripID.PILLAR_BL)

    dispatcher.dispatch(Command.set_whole_strip(StripID.PILLAR_BL, "green"))
    await asyncio.sleep(0.02)

    assert not engine.is_running(StripID.PILLAR_BL)
    assert strip_service.get(StripID.PILLAR_BL).driver.shown == [PALETTE["green"]] * 13


@pytest.mark.asyncio
async def test_set_whole_robot_cancels_all_animations(dispatcher, engine):
    dispatcher.dispatch(Command(command="shufflingRainbow", speed=1))
    assert len(engine.tasks) == 6

    dispatcher.dispatch(Command.set_whole_robot("white"))

    assert engine.tasks == {}
    await asyncio.sleep(0.01)


@pytest.mark.asyncio
async def test_shuffling_rainbow_one_strip(dispatcher, engine):
    dispatcher.dispatch(Command(command="shufflingRainbow", strip="cornerR", segmentLength=3, speed=100))

    anim = engine.get_animation(StripID.CORNER_R)
    assert list(engine.tasks) == [StripID.CORNER_R]
    assert anim.segment_length == 3
    assert anim.interval_ms == 100

    await engine.stop_all()


@pytest.mark.asyncio
async def test_stop_animation_one_strip_then_all(dispatcher, engine):
    dispatcher.dispatch(Command(command="shufflingRainbow"))
    assert len(engine.tasks) == 6

    dispatcher.dispatch(Command(command="stopAnimation", strip="pillarFL"))
    assert StripID.PILLAR_FL not in engine.tasks
    assert len(engine.tasks) == 5

    dispatcher.dispatch(Command(command="stopAnimation"))
    assert engine.tasks == {}
    await asyncio.sleep(0.01)
