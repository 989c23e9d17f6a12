"""Display window and track drawing"""

import logging
from typing import List

import cv2
import numpy as np

from ..core import Track

ESC_KEY = 27
NO_KEY = -1
WAIT_FOREVER = 0


class DisplayWindow:
    """OpenCV window that frames are shown in and key presses read from"""

    def __init__(self, window_name: str = "CSRT Example"):
        """
        Create the display window

        Args:
            window_name: Title of the window
        """
        self.window_name = window_name
        self.logger = logging.getLogger(f"{__name__}.DisplayWindow")
        self.frame_count = 0

        cv2.namedWindow(self.window_name, cv2.WINDOW_AUTOSIZE)
        self.logger.debug(f"Opened window: {window_name}")

    def show(self, frame: np.ndarray) -> None:
        cv2.imshow(self.window_name, frame)
        self.frame_count += 1

    def wait_key(self, milliseconds: int = WAIT_FOREVER) -> int:
        """
        Wait for a key press

        Args:
            milliseconds: How long to wait, 0 waits until a key is pressed

        Returns:
            Key code, or -1 if no key was pressed in time
        """
        key = cv2.waitKey(max(0, int(milliseconds)))
        if key == NO_KEY:
            return NO_KEY
        return key & 0xFF

    def close(self) -> None:
        """Close the display window"""
        cv2.destroyWindow(self.window_name)
        self.logger.debug(f"Closed window after {self.frame_count} frames")


def draw_tracks(
    frame: np.ndarray,
    tracks: List[Track],
    thickness: int = 2,
    show_labels: bool = True,
) -> np.ndarray:
    """
    Draw tracks on frame in place

    Args:
        frame: Frame to draw on
        tracks: Tracks to draw, in their own colors
        thickness: Rectangle line thickness
        show_labels: Whether to write each track's name above its box

    Returns:
        The same frame, for chaining
    """
    for track in tracks:
        x1, y1, x2, y2 = track.to_tlbr()
        cv2.rectangle(frame, (x1, y1), (x2, y2), track.bgr, thickness)

        if show_labels:
            cv2.putText(
                frame,
                track.name,
                (x1, max(12, y1 - 5)),
                cv2.FONT_HERSHEY_SIMPLEX,
                0.5,
                track.bgr,
                1,
                cv2.LINE_AA,
            )

    return frame
