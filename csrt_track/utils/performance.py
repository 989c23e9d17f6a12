"""
Performance monitoring for the playback loop
"""

import time
from dataclasses import dataclass
from typing import Callable, List, Optional


@dataclass
class PerformanceMetrics:
    """Metrics for one reporting interval"""
    fps: float = 0.0
    average_wait_ms: float = 0.0
    frame_count: int = 0


class PerformanceMonitor:
    """Measure displayed frame rate and pacing waits between progress reports"""

    def __init__(self, clock: Callable[[], float] = time.perf_counter):
        self.clock = clock
        self.interval_start: Optional[float] = None
        self.wait_times_ms: List[int] = []
        self.frame_count = 0

    def record_frame(self, wait_ms: int):
        """Record one shown frame and the time that was left before its deadline"""
        if self.interval_start is None:
            self.interval_start = self.clock()
        self.wait_times_ms.append(wait_ms)
        self.frame_count += 1

    def get_metrics(self) -> PerformanceMetrics:
        """Metrics since the last reset"""
        metrics = PerformanceMetrics(frame_count=self.frame_count)
        if self.wait_times_ms:
            metrics.average_wait_ms = sum(self.wait_times_ms) / len(self.wait_times_ms)
        if self.interval_start is not None:
            elapsed = self.clock() - self.interval_start
            if elapsed > 0:
                metrics.fps = self.frame_count / elapsed
        return metrics

    def reset(self):
        """Start a new reporting interval"""
        self.interval_start = self.clock()
        self.wait_times_ms.clear()
        self.frame_count = 0
