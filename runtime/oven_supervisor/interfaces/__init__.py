"""
Interfaces Layer

Driving adapters that initiate interactions with the system.
Contains HTTP endpoints.
"""

from .http import create_app

__all__ = ["create_app"]
