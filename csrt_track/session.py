# csrt_track/session.py

"""
Playback Session
================

Everything one run needs (the capture, display geometry, window, pacer,
track registry and counters) lives on a single PlaybackSession that each
stage works through:

    open -> initialize_tracks -> pause_on_first_frame -> play -> pause_on_last_frame

Each frame goes through decode -> resize -> update tracks -> draw -> wait ->
show on one thread. The key wait is also the pacing delay.
"""

import enum
import logging
from typing import Callable, List, Optional

import cv2
import numpy as np

from .config import PlaybackConfig
from .core import DisplayGeometry, TrackSeed, compute_display_geometry
from .exceptions import VideoError
from .trackers import CSRTEngine, TrackerEngine, TrackRegistry
from .utils.pacing import NANOSECONDS_PER_SECOND, PlaybackPacer
from .utils.performance import PerformanceMonitor
from .utils.video import VideoInfo, VideoSource
from .utils.visualization import ESC_KEY, NO_KEY, WAIT_FOREVER, DisplayWindow


class PlaybackResult(enum.Enum):
    """How a playback stage ended"""

    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PlaybackSession:
    """Plays one video file, optionally tracking objects across it"""

    def __init__(self,
                 config: Optional[PlaybackConfig] = None,
                 display_factory: Optional[Callable[[str], DisplayWindow]] = None,
                 engine_factory: Optional[Callable[[], TrackerEngine]] = None,
                 clock: Optional[Callable[[], int]] = None):
        """
        Initialize the session

        Args:
            config: Playback configuration
            display_factory: Creates the display window from its title, defaults to DisplayWindow
            engine_factory: Creates one tracker engine per track, defaults to CSRTEngine
            clock: Nanosecond clock for the pacer, defaults to perf_counter_ns
        """
        self.config = config or PlaybackConfig()
        self.display_factory = display_factory or DisplayWindow
        self.engine_factory = engine_factory or CSRTEngine
        self.clock = clock

        self.logger = logging.getLogger(f"{__name__}.PlaybackSession")

        self.source: Optional[VideoSource] = None
        self.info: Optional[VideoInfo] = None
        self.geometry: Optional[DisplayGeometry] = None
        self.window_title = self.config.window_title
        self.display: Optional[DisplayWindow] = None
        self.pacer: Optional[PlaybackPacer] = None
        self.registry: Optional[TrackRegistry] = None
        if clock is None:
            self.monitor = PerformanceMonitor()
        else:
            self.monitor = PerformanceMonitor(clock=lambda: clock() / NANOSECONDS_PER_SECOND)

        self.frame_index = 0
        self.first_frame: Optional[np.ndarray] = None
        self.last_frame: Optional[np.ndarray] = None

    def open(self, video_path: str) -> VideoInfo:
        """Open the video and work out how it will be displayed"""
        self.source = VideoSource(video_path)
        self.info = self.source.open()

        self.geometry = compute_display_geometry(
            self.info.width, self.info.height, self.config.max_display_size
        )
        if self.geometry.needs_resize:
            width, height = self.geometry.desired_size
            self.logger.info(
                f"-> each frame will be resized to {width} x {height} "
                f"(zoom factor of {self.geometry.scale_factor:.4f})"
            )
        self.window_title = self.geometry.window_title(self.config.window_title)

        self.registry = TrackRegistry(
            self.info.fps_rounded,
            engine_factory=self.engine_factory,
            loss_grace_seconds=self.config.loss_grace_seconds,
        )
        return self.info

    def resize(self, frame: np.ndarray) -> np.ndarray:
        """Bring a frame to the display size, if it isn't already"""
        width, height = self.geometry.desired_size
        if frame.shape[1] == width and frame.shape[0] == height:
            return frame
        return cv2.resize(frame, (width, height))

    def initialize_tracks(self, seeds: List[TrackSeed]) -> None:
        """
        Create one track per seed on the first frame

        The first frame is read without consuming it, so playback still
        starts from the beginning of the video.
        """
        self._require_open()
        self.first_frame = self.resize(self.source.read_first_frame())

        for seed in seeds:
            self.registry.add(seed, self.first_frame, frame_index=0)

    def _require_open(self) -> None:
        if self.source is None or self.info is None:
            raise VideoError("PlaybackSession: no video opened. Call open() first.")

    def _ensure_display(self) -> DisplayWindow:
        if self.display is None:
            self.display = self.display_factory(self.window_title)
        return self.display

    def pause_on_first_frame(self) -> PlaybackResult:
        """Show the first frame with its tracks and wait for a key"""
        self._require_open()
        if self.first_frame is None:
            self.first_frame = self.resize(self.source.read_first_frame())

        frame = self.first_frame.copy()
        self.registry.draw(frame, 0, self.config.box_thickness, self.config.show_labels)

        display = self._ensure_display()
        self.logger.info("Press any key to start..")
        display.show(frame)
        if display.wait_key(WAIT_FOREVER) == ESC_KEY:
            return PlaybackResult.CANCELLED
        return PlaybackResult.COMPLETED

    def play(self) -> PlaybackResult:
        """
        Show every frame at the source frame rate

        ESC stops playback; any other key pauses it until the next key.

        Returns:
            COMPLETED at end of stream, CANCELLED if the user quit
        """
        self._require_open()
        display = self._ensure_display()

        pacer_args = {"min_wait_ms": self.config.min_wait_ms}
        if self.clock is not None:
            pacer_args["clock"] = self.clock
        self.pacer = PlaybackPacer(self.info.frame_period_ns, **pacer_args)
        self.monitor.reset()
        self.frame_index = 0

        while True:
            ok, frame = self.source.read()
            if not ok:
                self.logger.info(f"-> finished showing {self.frame_index} frames")
                return PlaybackResult.COMPLETED

            self.frame_index += 1
            frame = self.resize(frame)

            if len(self.registry):
                self.registry.update(frame, self.frame_index)
                self.registry.draw(frame, self.frame_index,
                                   self.config.box_thickness, self.config.show_labels)

            # Negative when the loop is behind, reported as is in the progress lines
            remaining_ms = self.pacer.milliseconds_until_deadline()
            key = display.wait_key(self.pacer.wait_ms(remaining_ms))
            if key == ESC_KEY:
                return PlaybackResult.CANCELLED
            if key != NO_KEY:
                self.logger.info(f"-> paused on frame #{self.frame_index}")
                if display.wait_key(WAIT_FOREVER) == ESC_KEY:
                    return PlaybackResult.CANCELLED
                # Time spent paused counts against neither the schedule nor the measured FPS
                self.pacer.reset()
                self.monitor.reset()

            display.show(frame)
            self.last_frame = frame
            self.pacer.advance()

            self.monitor.record_frame(remaining_ms)
            if (self.frame_index == self.info.total_frames
                    or self.frame_index % self.info.fps_rounded == 0):
                self._log_progress()

    def _log_progress(self) -> None:
        metrics = self.monitor.get_metrics()
        total = self.info.total_frames
        percent = 100.0 * self.frame_index / total if total > 0 else 0.0
        self.logger.info(
            f"-> processing frame # {self.frame_index}/{total} ({percent:.1f}%), "
            f"{metrics.fps:.1f} FPS, average pause is {metrics.average_wait_ms:.1f} milliseconds"
        )
        self.monitor.reset()

    def pause_on_last_frame(self) -> PlaybackResult:
        """Keep the last frame on screen until a key is pressed"""
        display = self._ensure_display()
        self.logger.info("Done! Press any key to exit.")
        display.wait_key(WAIT_FOREVER)
        return PlaybackResult.COMPLETED

    def run(self, video_path: str, seeds: Optional[List[TrackSeed]] = None) -> PlaybackResult:
        """
        Open, optionally track, and play a video end to end

        Args:
            video_path: Path to input video
            seeds: Initial tracks; without them the video is only played

        Returns:
            COMPLETED or CANCELLED
        """
        try:
            self.open(video_path)
            if seeds:
                self.initialize_tracks(seeds)

            if self.config.pause_on_first_frame:
                if self.pause_on_first_frame() is PlaybackResult.CANCELLED:
                    return PlaybackResult.CANCELLED

            result = self.play()
            if len(self.registry):
                stats = self.registry.get_statistics()
                self.logger.info(
                    f"Tracks: {stats['active']} active, {stats['lost']} lost, "
                    f"{stats['deactivated']} deactivated"
                )
            if result is PlaybackResult.CANCELLED:
                return result

            if self.config.pause_on_last_frame:
                return self.pause_on_last_frame()
            return result
        finally:
            self.close()

    def close(self) -> None:
        """Release the video and close the window"""
        if self.source is not None:
            self.source.release()
        if self.display is not None:
            self.display.close()
            self.display = None
