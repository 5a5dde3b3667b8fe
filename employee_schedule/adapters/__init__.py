"""
Adapters layer - Template and holiday stores.
"""

from .http_store import HttpScheduleStore
from .json_store import DEFAULT_DATA_FILE, JsonScheduleStore

__all__ = ["DEFAULT_DATA_FILE", "HttpScheduleStore", "JsonScheduleStore"]
