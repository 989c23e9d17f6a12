"""Utility functions for CSRT Track"""

from .io import load_track_seeds, save_track_seeds, setup_logging
from .pacing import PlaybackPacer, frame_period_ns
from .performance import PerformanceMetrics, PerformanceMonitor
from .video import VideoInfo, VideoSource
from .visualization import ESC_KEY, DisplayWindow, draw_tracks

__all__ = [
    "load_track_seeds",
    "save_track_seeds",
    "setup_logging",
    "PlaybackPacer",
    "frame_period_ns",
    "PerformanceMetrics",
    "PerformanceMonitor",
    "VideoInfo",
    "VideoSource",
    "ESC_KEY",
    "DisplayWindow",
    "draw_tracks",
]
