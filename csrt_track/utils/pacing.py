"""Frame-rate pacing"""

import time
from typing import Callable, Optional

NANOSECONDS_PER_SECOND = 1_000_000_000
NANOSECONDS_PER_MILLISECOND = 1_000_000


def frame_period_ns(fps: float) -> int:
    """Length of one frame in nanoseconds"""
    if fps <= 0:
        raise ValueError(f"fps must be positive, got {fps}")
    return int(round(NANOSECONDS_PER_SECOND / fps))


class PlaybackPacer:
    """
    Schedules when each frame should be shown

    The deadline moves forward by exactly one frame period per shown frame,
    however long the frame actually took, so timing jitter never
    accumulates. A loop that falls behind is not compensated: it gets a
    minimum wait and playback simply runs slower.
    """

    def __init__(self,
                 period_ns: int,
                 clock: Callable[[], int] = time.perf_counter_ns,
                 min_wait_ms: int = 1):
        """
        Initialize the pacer

        Args:
            period_ns: Frame period in nanoseconds
            clock: Monotonic clock returning nanoseconds
            min_wait_ms: Wait returned when the deadline has already passed
        """
        self.period_ns = period_ns
        self.clock = clock
        self.min_wait_ms = min_wait_ms
        self.next_deadline_ns = clock()

    def milliseconds_until_deadline(self) -> int:
        """Signed time left before the next frame is due"""
        return int((self.next_deadline_ns - self.clock()) / NANOSECONDS_PER_MILLISECOND)

    def wait_ms(self, remaining_ms: Optional[int] = None) -> int:
        """
        How long to wait for a key before showing the current frame

        Args:
            remaining_ms: Time left before the deadline, read from the clock if not given
        """
        if remaining_ms is None:
            remaining_ms = self.milliseconds_until_deadline()
        if remaining_ms > 0:
            return remaining_ms
        return self.min_wait_ms

    def advance(self) -> None:
        """Schedule the next frame, regardless of how long this one took"""
        self.next_deadline_ns += self.period_ns

    def reset(self) -> None:
        """Restart the schedule from now, e.g. after a pause"""
        self.next_deadline_ns = self.clock()
