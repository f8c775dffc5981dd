"""
Shutdown handler protocol.

Each component that owns a resource (animation tasks, strips, the serial
port) implements IShutdownHandler to take part in the shutdown sequence.
"""

from typing import Protocol


class IShutdownHandler(Protocol):
    """
    ShutdownCoordinator calls shutdown() on each handler, highest
    shutdown_priority first.

    Example:
        class SerialShutdownHandler:
            @property
            def shutdown_priority(self) -> int:
                return 80

            async def shutdown(self) -> None:
                self.link.close()
    """

    @property
    def shutdown_priority(self) -> int:
        """Higher priority shuts down earlier."""
        ...

    async def shutdown(self) -> None:
        ...
