"""Sliding-window active session tracking on top of Redis sets."""

from .config import TrackerSettings, settings
from .constants import ErrorPolicy, RedisKeys
from .models import TrackerConfigError, TrackerOptions
from .tracker import AsyncSessionTracker, SessionTracker

__all__ = [
    "SessionTracker",
    "AsyncSessionTracker",
    "TrackerOptions",
    "TrackerConfigError",
    "TrackerSettings",
    "settings",
    "ErrorPolicy",
    "RedisKeys",
]
