"""
HTTP API exposing employee schedules.
"""

from .app import create_app

__all__ = ["create_app"]
