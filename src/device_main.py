"""
device_main.py - LED bridge device entry point
----------------------------------------------

Responsible for:
- loading configuration and building the six strips
- wiring palette, animation engine, dispatcher and serial reader
- playing the startup color sequence
- graceful shutdown on Ctrl+C / SIGTERM (animations stopped, LEDs cleared)
"""

import sys

# ---------------------------------------------------------------------------
# UTF-8 ENCODING FIX (important for Raspberry Pi)
# ---------------------------------------------------------------------------

if hasattr(sys.stdout, 'reconfigure') and sys.stdout.encoding != 'UTF-8':
    sys.stdout.reconfigure(encoding='utf-8')  # type: ignore

import asyncio

from animations.engine import AnimationEngine
from animations.startup_sequence import StartupSequence
from lifecycle import ShutdownCoordinator
from lifecycle.handlers import (
    AnimationShutdownHandler,
    LEDShutdownHandler,
    SerialShutdownHandler,
    TaskCancellationHandler,
)
from lifecycle.task_registry import create_tracked_task, TaskCategory, TaskRegistry
from managers import ConfigManager
from models.enums import LogCategory
from protocol.framing import FrameReceiver
from services.command_dispatcher import CommandDispatcher
from services.palette import Palette
from services.serial_command_reader import SerialCommandReader
from services.strip_service import StripService
from utils.logger import get_logger, configure_logger

log = get_logger().for_category(LogCategory.SYSTEM)


async def main():
    """Build the device stack and run until a shutdown signal."""

    log.info("Starting LED bridge device...")

    # ========================================================================
    # 1. CONFIGURATION
    # ========================================================================

    config_manager = ConfigManager()
    config_manager.load()
    configure_logger(config_manager.logging.level, config_manager.logging.use_colors)

    # ========================================================================
    # 2. STRIPS, PALETTE, ENGINE
    # ========================================================================

    strip_service = StripService.from_config(config_manager.hardware_manager.config)
    palette = Palette.from_color_manager(config_manager.color_manager)
    engine = AnimationEngine(strip_service, palette)

    dispatcher = CommandDispatcher(
        strip_service=strip_service,
        palette=palette,
        engine=engine,
        defaults=config_manager.device.animation_defaults,
    )

    # ========================================================================
    # 3. SERIAL LINK
    # ========================================================================

    serial_config = config_manager.serial
    receiver = FrameReceiver(
        on_command=dispatcher.dispatch,
        terminator=serial_config.terminator,
        max_buffer=serial_config.max_buffer_bytes,
    )
    reader = SerialCommandReader(serial_config, receiver)

    serial_task = create_tracked_task(
        reader.run(),
        category=TaskCategory.SERIAL,
        description="Serial command reader",
    )

    # ========================================================================
    # 4. STARTUP SEQUENCE
    # ========================================================================

    startup = StartupSequence(
        steps=config_manager.device.startup_sequence,
        palette=palette,
        apply=dispatcher.set_whole_robot,
    )
    startup_task = create_tracked_task(
        startup.run(),
        category=TaskCategory.STARTUP,
        description="Startup color sequence",
    )

    # ========================================================================
    # 5. SHUTDOWN COORDINATOR
    # ========================================================================

    coordinator = ShutdownCoordinator()
    coordinator.register(AnimationShutdownHandler(engine, pixel_tasks=[startup_task]))
    coordinator.register(LEDShutdownHandler(strip_service))
    coordinator.register(SerialShutdownHandler(reader))
    coordinator.register(TaskCancellationHandler())

    loop = asyncio.get_running_loop()
    coordinator.setup_signal_handlers(loop)

    log.info(
        "🏁 Device initialized. Waiting for commands...",
        strips=len(strip_service.get_all()),
        pixels=strip_service.get_total_pixel_count(),
        port=serial_config.port,
    )

    await coordinator.wait_for_shutdown()
    await coordinator.shutdown_all()

    if not serial_task.done():
        serial_task.cancel()
    log.info(TaskRegistry.instance().summary())
    log.info("👋 Device shut down cleanly.")


def run() -> None:
    """Console script entry point"""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        log.info("Keyboard interrupt received")
    except Exception as e:
        log.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    run()
