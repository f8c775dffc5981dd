from .animation_shutdown_handler import AnimationShutdownHandler
from .led_shutdown_handler import LEDShutdownHandler
from .serial_shutdown_handler import SerialShutdownHandler
from .task_cancellation_handler import TaskCancellationHandler

__all__ = [
    "AnimationShutdownHandler",
    "LEDShutdownHandler",
    "SerialShutdownHandler",
    "TaskCancellationHandler",
]
