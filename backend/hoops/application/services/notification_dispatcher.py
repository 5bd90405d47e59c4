"""Fire-and-forget delivery of new-hoop notifications."""

import asyncio
import logging

from hoops.application.interfaces import HoopNotifier
from hoops.domain.entities import Hoop

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    """Runs each notification as a detached asyncio task.

    Tasks are never awaited by the caller and never retried; a failure is
    logged and dropped. References are held until a task finishes so it is
    not garbage-collected mid-flight.
    """

    def __init__(self, notifier: HoopNotifier | None):
        self._notifier = notifier
        self._tasks: set[asyncio.Task] = set()

    @property
    def pending(self) -> set[asyncio.Task]:
        return set(self._tasks)

    def dispatch(self, hoop: Hoop) -> asyncio.Task | None:
        if self._notifier is None or not self._notifier.enabled:
            return None
        task = asyncio.create_task(self._notifier.notify(hoop), name=f"notify-{hoop.id}")
        self._tasks.add(task)
        task.add_done_callback(self._finished)
        return task

    def _finished(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Notification task %s failed: %s", task.get_name(), exc, exc_info=exc)
