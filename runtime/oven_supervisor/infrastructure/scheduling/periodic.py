"""
Threaded periodic scheduler.

Each scheduled task runs on its own daemon thread and waits on a stop
event between invocations, so cancellation takes effect without waiting
for the next interval to elapse.
"""

import threading
from typing import Callable, Optional

import structlog

from oven_supervisor.domain.ports import ISchedulerPort, IScheduledTask


logger = structlog.get_logger(__name__)


class PeriodicTask(IScheduledTask):
    """A callback invoked every interval seconds on a background thread."""

    def __init__(
        self,
        interval: float,
        callback: Callable[[IScheduledTask], None],
        name: str = "periodic-task",
    ):
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._interval = interval
        self._callback = callback
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._name = name

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def is_cancelled(self) -> bool:
        return self._stop_event.is_set()

    @property
    def is_alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start the background thread."""
        if self.is_alive:
            logger.warning("Periodic task already running", task=self._name)
            return

        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, name=self._name, daemon=True)
        self._thread.start()
        logger.debug("Periodic task started", task=self._name, interval=self._interval)

    def cancel(self) -> None:
        """Signal the thread to stop; does not wait for it."""
        self._stop_event.set()

    def join(self, timeout: Optional[float] = None) -> None:
        """
        Wait for the thread to exit.

        Must not be called from inside the callback or while holding a
        lock the callback acquires.
        """
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout)

    def _run(self) -> None:
        # wait() returns True once cancelled, False on each interval timeout
        while not self._stop_event.wait(self._interval):
            try:
                self._callback(self)
            except Exception as e:
                logger.error(
                    "Error in periodic task",
                    task=self._name,
                    error=str(e),
                    error_type=type(e).__name__,
                )
        logger.debug("Periodic task stopped", task=self._name)


class ThreadedScheduler(ISchedulerPort):
    """Scheduler that backs every periodic task with a daemon thread."""

    def __init__(self, name_prefix: str = "oven-countdown"):
        self._name_prefix = name_prefix
        self._counter = 0
        self._lock = threading.Lock()

    def schedule_periodic(
        self,
        interval: float,
        callback: Callable[[IScheduledTask], None],
    ) -> PeriodicTask:
        with self._lock:
            self._counter += 1
            name = f"{self._name_prefix}-{self._counter}"

        task = PeriodicTask(interval, callback, name=name)
        task.start()
        return task
