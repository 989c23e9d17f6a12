"""Video file source"""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

import cv2
import numpy as np

from ..exceptions import VideoError
from .pacing import NANOSECONDS_PER_MILLISECOND, frame_period_ns


@dataclass(frozen=True)
class VideoInfo:
    """Properties read once when the video is opened"""

    width: int
    height: int
    fps: float
    total_frames: int

    @property
    def fps_rounded(self) -> int:
        return int(round(self.fps))

    @property
    def frame_period_ns(self) -> int:
        return frame_period_ns(self.fps)

    @property
    def minutes(self) -> int:
        return int(math.floor(self.total_frames / (self.fps * 60.0)))

    @property
    def seconds(self) -> float:
        return (self.total_frames - self.minutes * self.fps * 60.0) / self.fps


class VideoSource:
    """Wraps cv2.VideoCapture for a local video file"""

    def __init__(self, filepath: str):
        self.filepath = filepath
        self.capture: Optional[cv2.VideoCapture] = None
        self.info: Optional[VideoInfo] = None
        self.logger = logging.getLogger(f"{__name__}.VideoSource")

    def __enter__(self) -> "VideoSource":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def open(self) -> VideoInfo:
        """
        Open the video and read its timing information

        Returns:
            VideoInfo for the file

        Raises:
            VideoError: If the file cannot be opened or reports no frame rate
        """
        self.capture = cv2.VideoCapture(self.filepath)
        if not self.capture.isOpened():
            self.release()
            raise VideoError(f"failed to open {self.filepath}")

        info = VideoInfo(
            width=int(self.capture.get(cv2.CAP_PROP_FRAME_WIDTH)),
            height=int(self.capture.get(cv2.CAP_PROP_FRAME_HEIGHT)),
            fps=float(self.capture.get(cv2.CAP_PROP_FPS)),
            total_frames=int(self.capture.get(cv2.CAP_PROP_FRAME_COUNT)),
        )
        if info.fps <= 0 or info.fps_rounded < 1:
            self.release()
            raise VideoError(f"{self.filepath} does not report a usable frame rate ({info.fps})")

        self.info = info
        period = info.frame_period_ns

        self.logger.info(f"{self.filepath}:")
        self.logger.info(
            f"-> {info.width} x {info.height} @ {info.fps} FPS for "
            f"{info.minutes}m{info.seconds:.1f}s ({info.total_frames} total frames)"
        )
        self.logger.info(
            f"-> each frame is {period} nanoseconds "
            f"({period / NANOSECONDS_PER_MILLISECOND:.1f} milliseconds)"
        )
        return info

    def read(self) -> Tuple[bool, Optional[np.ndarray]]:
        """Read the next frame; a failed read means the stream has ended"""
        if self.capture is None:
            raise VideoError("VideoSource: file not opened. Call open() first.")
        ok, frame = self.capture.read()
        if not ok or frame is None or frame.size == 0:
            return False, None
        return True, frame

    def rewind(self) -> None:
        """Seek back to the first frame"""
        if self.capture is None:
            raise VideoError("VideoSource: file not opened. Call open() first.")
        self.capture.set(cv2.CAP_PROP_POS_FRAMES, 0.0)

    def read_first_frame(self) -> np.ndarray:
        """Get the first frame without consuming it from playback"""
        self.rewind()
        ok, frame = self.read()
        self.rewind()
        if not ok:
            raise VideoError(f"{self.filepath} contains no frames")
        return frame

    def release(self) -> None:
        """Release the video file"""
        if self.capture is not None:
            self.capture.release()
            self.capture = None
