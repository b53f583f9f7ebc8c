"""
Scheduler Port Interface

Defines the contract for cancellable periodic tasks.
"""

from abc import ABC, abstractmethod
from typing import Callable


class IScheduledTask(ABC):
    """Handle to a running periodic task."""

    @abstractmethod
    def cancel(self) -> None:
        """
        Stop the task.

        Must not block waiting for an in-flight callback to finish, so it
        can be called while the caller holds a lock the callback needs.
        """
        pass

    @property
    @abstractmethod
    def is_cancelled(self) -> bool:
        """True once cancel() has been called."""
        pass


class ISchedulerPort(ABC):
    """Port interface for creating periodic tasks."""

    @abstractmethod
    def schedule_periodic(
        self,
        interval: float,
        callback: Callable[[IScheduledTask], None],
    ) -> IScheduledTask:
        """
        Invoke callback every interval seconds until cancelled.

        Args:
            interval: Seconds between invocations
            callback: Receives the task that fired it

        Returns:
            Handle used to cancel the task
        """
        pass
