from __future__ import annotations

from collections import deque
import logging
from typing import Callable

LOGGER = logging.getLogger(__name__)

Task = Callable[[], None]


class UpdateScheduler:
    """Cooperative single-threaded queue standing in for the UI event loop.

    Tasks scheduled while a flush is running are drained by that same flush, so a
    commit that schedules follow-up work settles before `flush()` returns.
    """

    def __init__(self, max_tasks_per_flush: int = 10_000) -> None:
        if max_tasks_per_flush <= 0:
            raise ValueError("max_tasks_per_flush must be > 0")
        self._max_tasks_per_flush = max_tasks_per_flush
        self._queue: deque[Task] = deque()
        self._flushing = False

    @property
    def pending(self) -> int:
        return len(self._queue)

    @property
    def flushing(self) -> bool:
        return self._flushing

    def schedule(self, task: Task) -> None:
        self._queue.append(task)

    def flush(self) -> int:
        if self._flushing:
            return 0
        self._flushing = True
        ran = 0
        try:
            while self._queue:
                if ran >= self._max_tasks_per_flush:
                    raise RuntimeError(f"update loop did not settle after {ran} tasks")
                task = self._queue.popleft()
                task()
                ran += 1
        finally:
            self._flushing = False
        if ran:
            LOGGER.debug("flushed %d scheduled updates", ran)
        return ran
