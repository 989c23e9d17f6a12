"""Track data structure"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .seed import Color, Rect

# Rectangle stored while a track is lost; never drawn
LOST_RECT: Rect = (-1, -1, -1, -1)


@dataclass
class Track:
    """Represents one tracked object and its tracker engine"""

    name: str
    color: Color  # RGB
    rect: Rect  # [x, y, w, h] in pixels
    engine: Optional["TrackerEngine"] = None
    last_successful_frame: int = 0
    state: str = "active"  # active, lost, deactivated

    @property
    def is_active(self) -> bool:
        """Check if track is still being updated"""
        return self.state != "deactivated"

    @property
    def is_lost(self) -> bool:
        """Check if the last update failed"""
        return self.state in ("lost", "deactivated")

    def is_visible(self, frame_index: int) -> bool:
        """Only tracks updated successfully on this very frame are drawn"""
        return self.is_active and self.last_successful_frame == frame_index

    @property
    def bgr(self) -> Tuple[int, int, int]:
        """Color in OpenCV channel order"""
        r, g, b = self.color
        return (b, g, r)

    def to_tlbr(self) -> Tuple[int, int, int, int]:
        """Get current position in tlbr format"""
        x, y, w, h = self.rect
        return (x, y, x + w, y + h)

    def to_dict(self) -> dict:
        """Convert to dictionary representation"""
        return {
            "name": self.name,
            "color": list(self.color),
            "rect": list(self.rect),
            "state": self.state,
            "last_successful_frame": self.last_successful_frame,
        }
