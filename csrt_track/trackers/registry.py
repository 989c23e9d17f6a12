# csrt_track/trackers/registry.py

"""
Track Registry
==============

Owns every track created at startup and moves each one through its
lifecycle once per frame:

    active -> lost (rectangle invalid, within the grace window) -> deactivated

A lost track becomes active again as soon as its engine relocates the
object. Deactivated tracks stay in the registry but are neither updated nor
drawn.
"""

import logging
from typing import Callable, Dict, Iterator, List

import numpy as np

from ..core import LOST_RECT, Track, TrackSeed
from ..utils.visualization import draw_tracks
from .base import TrackerEngine
from .csrt import CSRTEngine


class TrackRegistry:
    """Per-frame bookkeeping for independently tracked objects"""

    def __init__(self,
                 fps_rounded: int,
                 engine_factory: Callable[[], TrackerEngine] = CSRTEngine,
                 loss_grace_seconds: int = 3):
        """
        Initialize the registry

        Args:
            fps_rounded: Source frame rate rounded to an integer
            engine_factory: Creates one tracker engine per track
            loss_grace_seconds: How long a track may stay lost
        """
        self.fps_rounded = fps_rounded
        self.engine_factory = engine_factory
        self.max_lost_frames = loss_grace_seconds * fps_rounded
        self.tracks: List[Track] = []

        self.logger = logging.getLogger(f"{__name__}.TrackRegistry")

    def __len__(self) -> int:
        return len(self.tracks)

    def __iter__(self) -> Iterator[Track]:
        return iter(self.tracks)

    @property
    def active_tracks(self) -> List[Track]:
        return [track for track in self.tracks if track.is_active]

    def add(self, seed: TrackSeed, frame: np.ndarray, frame_index: int = 0) -> Track:
        """
        Create a track from a seed on the frame it appears in

        The frame must already be resized to the display geometry so the
        pixel rectangle matches the frames the track is updated with.
        """
        height, width = frame.shape[:2]
        rect = seed.to_pixels(width, height)

        engine = self.engine_factory()
        engine.init(frame, rect)

        track = Track(
            name=seed.name,
            color=seed.color,
            rect=rect,
            engine=engine,
            last_successful_frame=frame_index,
        )
        self.tracks.append(track)
        self.logger.info(f"Tracking '{seed.name}' at {rect}")
        return track

    def update(self, frame: np.ndarray, frame_index: int) -> List[Track]:
        """
        Update every track that is not deactivated

        Args:
            frame: Current (resized) frame
            frame_index: Index of the current frame

        Returns:
            Tracks deactivated on this frame
        """
        deactivated = []

        for track in self.tracks:
            if not track.is_active:
                continue

            ok, rect = track.engine.update(frame)
            if ok:
                if track.state == "lost":
                    self.logger.debug(f"'{track.name}' relocated on frame #{frame_index}")
                track.rect = tuple(rect)
                track.last_successful_frame = frame_index
                track.state = "active"
                continue

            track.rect = LOST_RECT
            track.state = "lost"

            if frame_index > track.last_successful_frame + self.max_lost_frames:
                track.state = "deactivated"
                deactivated.append(track)
                self.logger.info(f"-> lost track '{track.name}' on frame #{frame_index}")

        return deactivated

    def visible(self, frame_index: int) -> List[Track]:
        """Tracks whose update succeeded on this frame"""
        return [track for track in self.tracks if track.is_visible(frame_index)]

    def draw(self, frame: np.ndarray, frame_index: int,
             thickness: int = 2, show_labels: bool = True) -> np.ndarray:
        """Draw the visible tracks onto the frame in place"""
        return draw_tracks(frame, self.visible(frame_index),
                           thickness=thickness, show_labels=show_labels)

    def get_statistics(self) -> Dict[str, int]:
        """Number of tracks in each state"""
        stats = {"total": len(self.tracks), "active": 0, "lost": 0, "deactivated": 0}
        for track in self.tracks:
            stats[track.state] += 1
        return stats
