"""
host_main.py - LED bridge host entry point
------------------------------------------

Responsible for:
- loading configuration
- wiring telemetry table, command encoder and serial writer
- running the fixed-rate tick loop
- graceful shutdown on Ctrl+C / SIGTERM

The telemetry table is filled by a telemetry client through
TelemetryTable.put(); with host.stdin_feed enabled it is filled from
"topic=value" lines on stdin instead.
"""

import sys

if hasattr(sys.stdout, 'reconfigure') and sys.stdout.encoding != 'UTF-8':
    sys.stdout.reconfigure(encoding='utf-8')  # type: ignore

import asyncio

from host.bridge import HostBridge
from host.command_encoder import CommandEncoder
from host.stdin_feed import StdinTelemetryFeed
from host.telemetry_table import TelemetryTable
from lifecycle import ShutdownCoordinator
from lifecycle.handlers import SerialShutdownHandler, TaskCancellationHandler
from lifecycle.task_registry import create_tracked_task, TaskCategory, TaskRegistry
from managers import ConfigManager
from models.enums import LogCategory
from services.serial_command_writer import SerialCommandWriter
from utils.logger import get_logger, configure_logger

log = get_logger().for_category(LogCategory.SYSTEM)


async def main():
    """Build the host stack and tick until a shutdown signal."""

    log.info("Starting LED bridge host...")

    config_manager = ConfigManager()
    config_manager.load()
    configure_logger(config_manager.logging.level, config_manager.logging.use_colors)

    host_config = config_manager.host

    table = TelemetryTable()
    encoder = CommandEncoder(table, host_config)
    writer = SerialCommandWriter(config_manager.serial)
    bridge = HostBridge(encoder, writer, tick_ms=host_config.tick_ms)

    create_tracked_task(
        bridge.run(),
        category=TaskCategory.HOST,
        description="Host tick loop",
    )

    if host_config.stdin_feed:
        create_tracked_task(
            StdinTelemetryFeed(table).run(),
            category=TaskCategory.GENERAL,
            description="Stdin telemetry feed",
        )

    coordinator = ShutdownCoordinator()
    coordinator.register(TaskCancellationHandler(priority=90))
    coordinator.register(SerialShutdownHandler(writer))

    loop = asyncio.get_running_loop()
    coordinator.setup_signal_handlers(loop)

    log.info("🏁 Host initialized", port=config_manager.serial.port, tick_ms=host_config.tick_ms)

    await coordinator.wait_for_shutdown()
    await coordinator.shutdown_all()

    log.info(TaskRegistry.instance().summary())
    log.info("👋 Host shut down cleanly.")


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
