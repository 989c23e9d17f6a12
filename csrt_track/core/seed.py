"""Initial track description"""

from dataclasses import dataclass
from typing import Tuple

Rect = Tuple[int, int, int, int]
Color = Tuple[int, int, int]


@dataclass
class TrackSeed:
    """Object to track, given in coordinates normalized to the frame size"""

    name: str
    box: Tuple[float, float, float, float]  # [x, y, w, h] in 0..1
    color: Color = (0, 255, 0)  # RGB

    def to_pixels(self, width: int, height: int) -> Rect:
        """Resolve the normalized box against a frame of the given size"""
        x, y, w, h = self.box
        return (
            int(round(x * width)),
            int(round(y * height)),
            int(round(w * width)),
            int(round(h * height)),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary representation"""
        return {
            "name": self.name,
            "box": list(self.box),
            "color": list(self.color),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TrackSeed":
        """Create from dictionary representation"""
        if "name" not in data or "box" not in data:
            raise ValueError(f"Track entry needs 'name' and 'box': {data}")

        box = tuple(float(v) for v in data["box"])
        if len(box) != 4:
            raise ValueError(f"Track '{data['name']}' box must have 4 values, got {len(box)}")

        color = tuple(int(v) for v in data.get("color", (0, 255, 0)))
        if len(color) != 3:
            raise ValueError(f"Track '{data['name']}' color must have 3 values, got {len(color)}")

        return cls(name=str(data["name"]), box=box, color=color)
