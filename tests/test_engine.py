"""
AnimationEngine: one task per strip, cancel-before-start
"""

import asyncio

import pytest

from animations.base import BaseAnimation
from models.enums import AnimationID, StripID

from conftest import PALETTE

RED = PALETTE["red"]


@pytest.mark.asyncio
async def test_start_runs_animation_task(engine, strip_service):
    engine.start_for_strip(StripID.PILLAR_FL, AnimationID.SINGLE_LIGHT_TRAVEL, color=RED, time_ms=1)

    await asyncio.sleep(0.05)

    assert engine.is_running(StripID.PILLAR_FL)
    assert engine.get_current_animation_id(StripID.PILLAR_FL) == AnimationID.SINGLE_LIGHT_TRAVEL
    assert engine.get_animation(StripID.PILLAR_FL).ticks > 0
    assert strip_service.get(StripID.PILLAR_FL).driver.show_count > 0

    await engine.stop_all()


@pytest.mark.asyncio
async def test_first_frame_waits_one_interval(engine, strip_service):
    engine.start_for_strip(StripID.CORNER_L, AnimationID.SINGLE_LIGHT_TRAVEL, color=RED, time_ms=500)

    await asyncio.sleep(0.05)

    assert strip_service.get(StripID.CORNER_L).driver.show_count == 0
    await engine.stop_all()


@pytest.mark.asyncio
async def test_restart_cancels_previous_task(engine):
    first = engine.start_for_strip(StripID.PILLAR_FR, AnimationID.SINGLE_LIGHT_TRAVEL, color=RED, time_ms=1)
    second = engine.start_for_strip(StripID.PILLAR_FR, AnimationID.SHUFFLING_RAINBOW, speed_ms=1)

    await asyncio.sleep(0.02)

    assert first.cancelled()
    assert not second.done()
    assert engine.tasks[StripID.PILLAR_FR] is second
    assert engine.get_current_animation_id(StripID.PILLAR_FR) == AnimationID.SHUFFLING_RAINBOW

    await engine.stop_all()


@pytest.mark.asyncio
async def test_cancelled_animation_draws_nothing_more(engine, strip_service):
    strip = strip_service.get(StripID.PILLAR_BL)
    engine.start_for_strip(StripID.PILLAR_BL, AnimationID.SINGLE_LIGHT_TRAVEL, color=RED, time_ms=1)
    await asyncio.sleep(0.02)

    assert engine.stop_for_strip(StripID.PILLAR_BL) is True
    frames = strip.driver.show_count
    await asyncio.sleep(0.02)

    assert strip.driver.show_count == frames
    assert not engine.is_running(StripID.PILLAR_BL)


@pytest.mark.asyncio
async def test_strips_animate_independently(engine):
    engine.start_for_strip(StripID.CORNER_L, AnimationID.SINGLE_LIGHT_TRAVEL, color=RED, time_ms=1)
    engine.start_for_strip(StripID.CORNER_R, AnimationID.SHUFFLING_RAINBOW, speed_ms=1)

    engine.stop_for_strip(StripID.CORNER_L)
    await asyncio.sleep(0.02)

    assert not engine.is_running(StripID.CORNER_L)
    assert engine.is_running(StripID.CORNER_R)
    assert engine.is_running()

    await engine.stop_all()
    assert not engine.is_running()
    assert engine.tasks == {}


def test_stop_without_animation_returns_false(engine):
    assert engine.stop_for_strip(StripID.PILLAR_BR) is False


class FlakyAnimation(BaseAnimation):
    """Fails on its first frame, then works"""

    def __init__(self, strip, palette, **params):
        super().__init__(strip, 1)
        self.calls = 0

    def step(self):
        self.calls += 1
        if self.calls == 1:
            raise RuntimeError("first frame fails")
        self.strip.show()


@pytest.mark.asyncio
async def test_step_error_is_logged_and_loop_continues(engine):
    engine.ANIMATIONS = {AnimationID.SINGLE_LIGHT_TRAVEL: FlakyAnimation}

    engine.start_for_strip(StripID.PILLAR_FL, AnimationID.SINGLE_LIGHT_TRAVEL)
    await asyncio.sleep(0.05)

    anim = engine.get_animation(StripID.PILLAR_FL)
    assert anim.calls > 1
    assert anim.ticks == anim.calls - 1
    assert engine.is_running(StripID.PILLAR_FL)

    await engine.stop_all()
