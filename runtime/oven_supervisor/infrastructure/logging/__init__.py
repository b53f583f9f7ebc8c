"""
Logging Infrastructure

Structured logging setup.
"""

from .logging_config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
