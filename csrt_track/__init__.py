# csrt_track/__init__.py

"""
CSRT Track: Real-time Object Tracking Playback
==============================================

Plays a video file at its native frame rate and follows a handful of
objects across it with OpenCV's CSRT (Channel and Spatial Reliability)
tracker.

Key Features:
- Drift-free frame pacing, with pause (any key) and quit (ESC)
- One independent tracker per object, with a grace period before a lost
  object is given up
- Large videos zoomed down to fit a maximum display size
- Initial tracks supplied as a YAML or JSON list of normalized boxes

License: MIT
"""

from csrt_track.__version__ import __version__
from csrt_track.config import PlaybackConfig
from csrt_track.core import DisplayGeometry, Track, TrackSeed
from csrt_track.session import PlaybackResult, PlaybackSession
from csrt_track.trackers import CSRTEngine, TrackerEngine, TrackRegistry

__all__ = [
    "__version__",
    "PlaybackConfig",
    "DisplayGeometry",
    "Track",
    "TrackSeed",
    "PlaybackResult",
    "PlaybackSession",
    "CSRTEngine",
    "TrackerEngine",
    "TrackRegistry",
]
