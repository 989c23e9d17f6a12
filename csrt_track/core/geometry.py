"""Display geometry: how much each frame is zoomed before it is shown"""

from dataclasses import dataclass
from typing import Tuple

Size = Tuple[int, int]

DEFAULT_MAX_SIZE: Size = (1024, 768)


@dataclass(frozen=True)
class DisplayGeometry:
    """Fixed for the whole run once the video is opened"""

    source_size: Size  # (width, height)
    desired_size: Size  # (width, height)
    scale_factor: float = 1.0

    @property
    def needs_resize(self) -> bool:
        return self.source_size != self.desired_size

    @property
    def zoom_percent(self) -> int:
        return int(round(100.0 * self.scale_factor))

    def window_title(self, base_title: str) -> str:
        """Title showing the source resolution and zoom"""
        width, height = self.source_size
        return f"{base_title} ({width} x {height} @ {self.zoom_percent}%)"


def compute_display_geometry(width: int, height: int,
                             max_size: Size = DEFAULT_MAX_SIZE) -> DisplayGeometry:
    """
    Work out the size every frame is shown at

    Frames larger than ``max_size`` in either dimension get a single uniform
    factor, the larger of the two ratios, so the tighter dimension lands
    exactly on its limit and the other may still exceed it.

    Args:
        width: Source frame width
        height: Source frame height
        max_size: Largest (width, height) displayed without zoom

    Returns:
        DisplayGeometry for the run
    """
    max_width, max_height = max_size
    if width > max_width or height > max_height:
        factor = max(max_width / float(width), max_height / float(height))
        desired = (int(round(factor * width)), int(round(factor * height)))
        return DisplayGeometry((width, height), desired, factor)

    return DisplayGeometry((width, height), (width, height), 1.0)
