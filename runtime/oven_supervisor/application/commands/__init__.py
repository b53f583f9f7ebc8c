"""
Application Commands

Use case handlers invoked by the interface layer.
"""

from .simulate_signal import SimulateSignalCommand

__all__ = ["SimulateSignalCommand"]
