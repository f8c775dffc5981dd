"""
Animation Engine

Per-strip animation lifecycle. Every strip runs at most one animation task;
starting a new one (or writing a static color) cancels the previous task
on that strip before anything else touches its pixels.
"""

import asyncio
from typing import Dict, Optional, Type

from animations.base import BaseAnimation
from animations.shuffling_rainbow import ShufflingRainbowAnimation
from animations.single_light_travel import SingleLightTravelAnimation
from models.enums import AnimationID, StripID
from services.palette import Palette
from services.strip_service import StripService
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.ANIMATION)


def _build_animation_registry() -> Dict[AnimationID, Type[BaseAnimation]]:
    """Build animation registry from AnimationID enum"""
    class_map = {
        AnimationID.SINGLE_LIGHT_TRAVEL: SingleLightTravelAnimation,
        AnimationID.SHUFFLING_RAINBOW: ShufflingRainbowAnimation,
    }
    return {anim_id: anim_class for anim_id, anim_class in class_map.items()}


class AnimationEngine:
    """
    AnimationEngine (per-strip)

    • Each strip gets its own asyncio task
    • The task sleeps one interval, then draws one frame (animation.tick())
    • start/stop are synchronous: the old task is cancelled before the call
      returns, so a cancelled animation never draws another frame
    """

    ANIMATIONS: Dict[AnimationID, Type[BaseAnimation]] = _build_animation_registry()

    def __init__(self, strip_service: StripService, palette: Palette):
        self.strip_service = strip_service
        self.palette = palette

        # active tasks: strip_id → asyncio.Task
        self.tasks: Dict[StripID, asyncio.Task] = {}

        # remembering what runs where
        self.active_anim_ids: Dict[StripID, AnimationID] = {}
        self.animations: Dict[StripID, BaseAnimation] = {}

    # ============================================================
    # Core control methods
    # ============================================================

    def start_for_strip(self, strip_id: StripID, anim_id: AnimationID, **params) -> Optional[asyncio.Task]:
        """
        Start animation on one strip, replacing whatever runs there.

        Must be called from inside the running event loop.
        """
        self.stop_for_strip(strip_id)

        AnimClass = self.ANIMATIONS.get(anim_id)
        if AnimClass is None:
            log.error(f"Animation {anim_id} not registered")
            return None

        strip = self.strip_service.get(strip_id)
        anim = AnimClass(strip=strip, palette=self.palette, **params)

        self.active_anim_ids[strip_id] = anim_id
        self.animations[strip_id] = anim

        task = asyncio.get_running_loop().create_task(
            self._run_loop(strip_id, anim),
            name=f"animation:{strip_id.value}",
        )
        self.tasks[strip_id] = task

        log.info(
            f"Started {anim_id.name} on {strip_id.value}",
            interval_ms=anim.interval_ms,
            active=len(self.tasks),
        )
        return task

    def stop_for_strip(self, strip_id: StripID) -> bool:
        """Cancel the animation on one strip. Returns True if one was running."""
        task = self.tasks.pop(strip_id, None)
        anim_id = self.active_anim_ids.pop(strip_id, None)
        self.animations.pop(strip_id, None)

        if task is None:
            return False

        task.cancel()
        log.debug(f"Stopped {anim_id.name if anim_id else '?'} on {strip_id.value}")
        return True

    def stop_all_nowait(self) -> int:
        """Cancel every animation without waiting. Returns how many were cancelled."""
        return sum(1 for strip_id in list(self.tasks.keys()) if self.stop_for_strip(strip_id))

    async def stop_all(self) -> None:
        """Cancel every animation and wait for the tasks to finish."""
        tasks = list(self.tasks.values())
        self.stop_all_nowait()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
            log.info(f"Stopped {len(tasks)} animation(s)")

    # ------------------------------------------------------------
    # Internal animation loop
    # ------------------------------------------------------------

    async def _run_loop(self, strip_id: StripID, animation: BaseAnimation):
        """Run an animation until cancelled."""
        try:
            while True:
                await asyncio.sleep(animation.interval)
                try:
                    animation.tick()
                except Exception as e:
                    log.error(f"Animation step error on {strip_id.value}: {e}", exc_info=True)

        except asyncio.CancelledError:
            log.debug(f"Animation task for {strip_id.value} cancelled after {animation.ticks} frames")
            raise
        finally:
            # a replacement may already own the slot
            if self.tasks.get(strip_id) is asyncio.current_task():
                self.tasks.pop(strip_id, None)
                self.active_anim_ids.pop(strip_id, None)
                self.animations.pop(strip_id, None)

    # ------------------------------------------------------------------
    # RUNTIME HELPERS
    # ------------------------------------------------------------------

    def get_current_animation_id(self, strip_id: StripID) -> Optional[AnimationID]:
        return self.active_anim_ids.get(strip_id)

    def get_animation(self, strip_id: StripID) -> Optional[BaseAnimation]:
        return self.animations.get(strip_id)

    def is_running(self, strip_id: Optional[StripID] = None) -> bool:
        """
        Check if animations are running.

        If strip_id is None → check if ANY strip has running animation.
        If strip_id provided → check that one strip.
        """
        if strip_id is not None:
            task = self.tasks.get(strip_id)
            return task is not None and not task.done()

        return any(not t.done() for t in self.tasks.values())
