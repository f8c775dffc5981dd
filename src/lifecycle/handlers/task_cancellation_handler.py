import asyncio
from typing import List, Optional

from lifecycle.shutdown_protocol import IShutdownHandler
from lifecycle.task_registry import TaskRegistry
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SHUTDOWN)


class TaskCancellationHandler(IShutdownHandler):
    """
    Cancels every tracked task still running, except the task executing
    this handler and any explicitly excluded tasks, then waits for them.

    Priority: 40 by default (last). The host raises it above the serial
    handler so the tick loop cannot reopen a port that was just closed.
    """

    def __init__(
        self,
        exclude_tasks: Optional[List[asyncio.Task]] = None,
        grace_period: float = 1.0,
        priority: int = 40,
    ):
        self.exclude_tasks = exclude_tasks or []
        self.grace_period = grace_period
        self._priority = priority

    @property
    def shutdown_priority(self) -> int:
        return self._priority

    async def shutdown(self) -> None:
        current = asyncio.current_task()
        exclude = [t for t in [current, *self.exclude_tasks] if t is not None]

        tasks = TaskRegistry.instance().get_tasks_for_shutdown(exclude=exclude)
        if not tasks:
            log.debug("No tracked tasks to cancel")
            return

        log.info(f"Cancelling {len(tasks)} tracked task(s)")
        for t in tasks:
            t.cancel()

        _, pending = await asyncio.wait(tasks, timeout=self.grace_period)
        if pending:
            log.warn(f"{len(pending)} task(s) still running after {self.grace_period}s")
