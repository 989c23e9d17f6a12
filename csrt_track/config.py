# csrt_track/config.py

"""Configuration for playback and tracking"""

from dataclasses import dataclass, field
from typing import List, Tuple

from .core.seed import TrackSeed


@dataclass
class PlaybackConfig:
    """Configuration for a playback session"""

    # === DISPLAY ===
    window_title: str = "CSRT Example"
    max_display_width: int = 1024  # Larger frames get zoomed out
    max_display_height: int = 768

    # === PACING ===
    min_wait_ms: int = 1  # Wait used when the loop is behind schedule
    pause_on_first_frame: bool = True  # Wait for a key before playing
    pause_on_last_frame: bool = True  # Wait for a key after the last frame

    # === TRACK MANAGEMENT ===
    loss_grace_seconds: int = 3  # Seconds a lost track may stay lost

    # === DRAWING ===
    box_thickness: int = 2
    show_labels: bool = True

    # === INITIAL TRACKS ===
    tracks: List[TrackSeed] = field(default_factory=list)

    @property
    def max_display_size(self) -> Tuple[int, int]:
        return (self.max_display_width, self.max_display_height)

    @classmethod
    def create_for_batch(cls) -> "PlaybackConfig":
        """Create configuration that never blocks waiting for a key"""
        return cls(
            pause_on_first_frame=False,
            pause_on_last_frame=False,
        )

    @classmethod
    def from_dict(cls, data: dict) -> "PlaybackConfig":
        """Create from dictionary representation, converting track entries"""
        values = dict(data)
        values["tracks"] = [
            seed if isinstance(seed, TrackSeed) else TrackSeed.from_dict(seed)
            for seed in values.get("tracks") or []
        ]
        return cls(**values)
