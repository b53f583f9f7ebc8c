"""
HTTP Interface

FastAPI endpoints and HTTP-related adapters.
"""

from .rest import create_app, main

__all__ = ["create_app", "main"]
