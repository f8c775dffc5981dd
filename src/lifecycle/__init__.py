"""
Lifecycle subsystem
-------------------

Exports the public API for:
- graceful shutdown
- task tracking
- shutdown handlers

External code should import from:
    from lifecycle import ShutdownCoordinator, create_tracked_task
    from lifecycle.handlers import LEDShutdownHandler
"""

from .shutdown_coordinator import ShutdownCoordinator
from .task_registry import TaskRegistry, TaskCategory, TaskInfo, create_tracked_task
from .shutdown_protocol import IShutdownHandler
from . import handlers

__all__ = [
    "ShutdownCoordinator",
    "TaskRegistry",
    "TaskCategory",
    "TaskInfo",
    "create_tracked_task",
    "IShutdownHandler",
    "handlers",
]
