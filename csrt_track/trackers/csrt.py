"""OpenCV CSRT tracker engine"""

import logging
from typing import Any, Optional, Tuple

import cv2
import numpy as np

from ..core.seed import Rect
from ..exceptions import TrackerError
from .base import TrackerEngine


def _create_tracker_api(factory_func: str) -> Optional[Any]:
    """Create a tracker from the main API, falling back to cv2.legacy"""
    if hasattr(cv2, factory_func):
        return getattr(cv2, factory_func)()

    legacy = getattr(cv2, "legacy", None)
    if legacy is not None and hasattr(legacy, factory_func):
        return getattr(legacy, factory_func)()

    return None


class CSRTEngine(TrackerEngine):
    """Channel and Spatial Reliability tracker provided by opencv-contrib"""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.CSRTEngine")
        self.tracker = _create_tracker_api("TrackerCSRT_create")
        if self.tracker is None:
            raise TrackerError(
                "OpenCV CSRT tracker not available. Install opencv-contrib-python."
            )

    def init(self, frame: np.ndarray, rect: Rect) -> None:
        x, y, w, h = (int(v) for v in rect)
        if w <= 0 or h <= 0:
            raise TrackerError(f"Cannot track an empty rectangle: {rect}")

        # Older bindings return a bool, newer ones return None
        result = self.tracker.init(frame, (x, y, w, h))
        if result is False:
            raise TrackerError(f"CSRT failed to initialize on {rect}")
        self.logger.debug(f"CSRT initialized on {(x, y, w, h)}")

    def update(self, frame: np.ndarray) -> Tuple[bool, Rect]:
        ok, box = self.tracker.update(frame)
        if not ok:
            return False, (-1, -1, -1, -1)
        x, y, w, h = box
        return True, (int(round(x)), int(round(y)), int(round(w)), int(round(h)))
