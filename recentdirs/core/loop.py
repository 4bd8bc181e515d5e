"""
Single-threaded deferred task queue.
call_soon() queues work for after the current event handler; the host drains it with run_pending().
"""
from collections import deque
from typing import Callable

from .logger import get_logger

logger = get_logger("loop")


class EventLoop:
    def __init__(self) -> None:
        self._queue: deque = deque()

    def call_soon(self, callback: Callable[..., None], *args) -> None:
        self._queue.append((callback, args))

    def pending(self) -> int:
        return len(self._queue)

    def run_pending(self) -> int:
        """Run queued tasks, including ones queued while draining. Returns how many ran."""
        ran = 0
        while self._queue:
            callback, args = self._queue.popleft()
            callback(*args)
            ran += 1
        return ran
