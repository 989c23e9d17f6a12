"""Base tracker engine interface"""

from abc import ABC, abstractmethod
from typing import Tuple

import numpy as np

from ..core.seed import Rect


class TrackerEngine(ABC):
    """Abstract base class for single-object visual trackers"""

    @abstractmethod
    def init(self, frame: np.ndarray, rect: Rect) -> None:
        """
        Start tracking an object

        Args:
            frame: Image the object appears in
            rect: Object location as [x, y, w, h]
        """
        pass

    @abstractmethod
    def update(self, frame: np.ndarray) -> Tuple[bool, Rect]:
        """
        Locate the object in the next frame

        Args:
            frame: Next image of the stream

        Returns:
            (success, rect) where a failure only means lost on this frame
        """
        pass
