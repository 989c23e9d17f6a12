"""Core data structures for CSRT Track"""

from .geometry import DisplayGeometry, compute_display_geometry
from .seed import TrackSeed
from .track import LOST_RECT, Track

__all__ = ["DisplayGeometry", "compute_display_geometry", "TrackSeed", "Track", "LOST_RECT"]
