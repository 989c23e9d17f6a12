"""Tracker engines and track bookkeeping"""

from .base import TrackerEngine
from .csrt import CSRTEngine
from .registry import TrackRegistry

__all__ = ["TrackerEngine", "CSRTEngine", "TrackRegistry"]
