"""
Scheduling Infrastructure

Thread-backed implementation of the scheduler port.
"""

from .periodic import PeriodicTask, ThreadedScheduler

__all__ = ["PeriodicTask", "ThreadedScheduler"]
