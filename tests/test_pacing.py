"""Test module for frame pacing"""

import pytest

from csrt_track.utils.pacing import PlaybackPacer, frame_period_ns
from csrt_track.utils.performance import PerformanceMonitor


class TestFramePeriod:
    """Test frame period calculation"""

    def test_common_rates(self):
        assert frame_period_ns(30.0) == 33333333
        assert frame_period_ns(25.0) == 40000000
        assert frame_period_ns(29.97) == 33366700

    def test_invalid_rate(self):
        with pytest.raises(ValueError):
            frame_period_ns(0)


class TestPlaybackPacer:
    """Test PlaybackPacer class"""

    def test_deadline_does_not_drift(self, fake_clock):
        """Deadline after N frames is start + N periods whatever the delays"""
        fake_clock.now = 1_000
        period = 33333333
        pacer = PlaybackPacer(period, clock=fake_clock)
        start = pacer.next_deadline_ns

        delays = [0, 5_000_000, 40_000_000, 1, 100_000_000, 33333333, 7]
        for n, delay in enumerate(delays, start=1):
            fake_clock.now += delay
            pacer.wait_ms()
            pacer.advance()
            assert pacer.next_deadline_ns == start + n * period

    def test_wait_until_deadline(self, fake_clock):
        """Time left before the deadline is waited, in whole milliseconds"""
        pacer = PlaybackPacer(40_000_000, clock=fake_clock)
        pacer.advance()

        fake_clock.now = 10_000_000
        assert pacer.wait_ms() == 30

        fake_clock.now = 39_500_000
        # less than a millisecond left counts as behind schedule
        assert pacer.wait_ms() == 1

    def test_behind_schedule_gets_minimum_wait(self, fake_clock):
        """A late loop still yields briefly but is not compensated"""
        pacer = PlaybackPacer(40_000_000, clock=fake_clock, min_wait_ms=1)
        fake_clock.now = 500_000_000

        assert pacer.milliseconds_until_deadline() == -500
        assert pacer.wait_ms() == 1
        assert pacer.wait_ms(-500) == 1
        assert pacer.wait_ms(25) == 25

        pacer.advance()
        assert pacer.next_deadline_ns == 40_000_000

    def test_reset_restarts_from_now(self, fake_clock):
        """After a pause the schedule restarts from the current time"""
        pacer = PlaybackPacer(40_000_000, clock=fake_clock)
        pacer.advance()
        pacer.advance()

        fake_clock.now = 9_000_000_000
        pacer.reset()
        assert pacer.next_deadline_ns == 9_000_000_000

        pacer.advance()
        assert pacer.next_deadline_ns == 9_040_000_000


class TestPerformanceMonitor:
    """Test PerformanceMonitor class"""

    def test_interval_metrics(self):
        times = iter([0.0, 2.0])
        monitor = PerformanceMonitor(clock=lambda: next(times))
        monitor.reset()

        for wait in (10, 20, 30, 40):
            monitor.record_frame(wait)

        metrics = monitor.get_metrics()
        assert metrics.frame_count == 4
        assert metrics.average_wait_ms == 25.0
        assert metrics.fps == pytest.approx(2.0)

    def test_reset_clears_interval(self):
        monitor = PerformanceMonitor()
        monitor.record_frame(5)
        monitor.reset()

        metrics = monitor.get_metrics()
        assert metrics.frame_count == 0
        assert metrics.average_wait_ms == 0.0
