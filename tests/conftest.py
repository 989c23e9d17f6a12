"""
Pytest configuration file
"""

import pytest
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


class FakeClock:
    """Nanosecond clock that only moves when told to"""

    def __init__(self, now: int = 0):
        self.now = now

    def __call__(self) -> int:
        return self.now


class FakeDisplay:
    """Stands in for DisplayWindow, replaying scripted key presses"""

    def __init__(self, window_name, keys=None, on_wait_forever=None):
        self.window_name = window_name
        self.keys = list(keys or [])
        self.on_wait_forever = on_wait_forever
        self.shown = []
        self.waits = []
        self.closed = False

    def show(self, frame):
        self.shown.append(frame)

    def wait_key(self, milliseconds=0):
        self.waits.append(milliseconds)
        if milliseconds == 0 and self.on_wait_forever is not None:
            self.on_wait_forever()
        return self.keys.pop(0) if self.keys else -1

    def close(self):
        self.closed = True


class ScriptedEngine:
    """Tracker engine whose update results are given up front"""

    def __init__(self, results=None, default=True, step=(0, 0)):
        self.results = list(results or [])
        self.default = default
        self.step = step
        self.init_calls = []
        self.update_calls = 0
        self.rect = None

    def init(self, frame, rect):
        self.init_calls.append((frame.shape, tuple(rect)))
        self.rect = tuple(rect)

    def update(self, frame):
        self.update_calls += 1
        ok = self.results.pop(0) if self.results else self.default
        if not ok:
            return False, (-1, -1, -1, -1)
        x, y, w, h = self.rect
        self.rect = (x + self.step[0], y + self.step[1], w, h)
        return True, self.rect


@pytest.fixture
def fake_clock():
    """Provide a controllable nanosecond clock"""
    return FakeClock()


@pytest.fixture
def display_factory():
    """Provide a factory creating FakeDisplay windows, remembering the last one"""

    class Factory:
        def __init__(self):
            self.keys = []
            self.on_wait_forever = None
            self.created = []

        def __call__(self, window_name):
            display = FakeDisplay(window_name, self.keys, self.on_wait_forever)
            self.created.append(display)
            return display

        @property
        def display(self):
            return self.created[-1]

    return Factory()


@pytest.fixture
def engine_factory():
    """Provide a factory creating ScriptedEngine instances"""

    class Factory:
        def __init__(self):
            self.results = []
            self.default = True
            self.engines = []

        def __call__(self):
            engine = ScriptedEngine(self.results, self.default)
            self.engines.append(engine)
            return engine

    return Factory()


@pytest.fixture
def sample_seed():
    """Provide sample track seed for testing"""
    from csrt_track.core import TrackSeed

    return TrackSeed(name="car", box=(0.25, 0.25, 0.25, 0.25), color=(255, 0, 0))


@pytest.fixture
def mock_video_capture(monkeypatch):
    """Mock cv2.VideoCapture for testing

    Frame ``i`` is filled with the value ``i % 256`` so tests can tell which
    frame was read. Paths containing "missing" fail to open.
    """
    import cv2
    import numpy as np

    class MockVideoCapture:
        frame_count = 100
        fps = 30.0
        width = 640
        height = 480

        def __init__(self, path):
            self.path = path
            self.current_frame = 0
            self.released = False

        def isOpened(self):
            return "missing" not in self.path

        def read(self):
            if self.current_frame < self.frame_count:
                value = self.current_frame % 256
                self.current_frame += 1
                return True, np.full((self.height, self.width, 3), value, dtype=np.uint8)
            return False, None

        def get(self, prop):
            if prop == cv2.CAP_PROP_FPS:
                return self.fps
            elif prop == cv2.CAP_PROP_FRAME_COUNT:
                return self.frame_count
            elif prop == cv2.CAP_PROP_FRAME_WIDTH:
                return self.width
            elif prop == cv2.CAP_PROP_FRAME_HEIGHT:
                return self.height
            return 0

        def set(self, prop, value):
            if prop == cv2.CAP_PROP_POS_FRAMES:
                self.current_frame = int(value)
                return True
            return False

        def release(self):
            self.released = True

    monkeypatch.setattr('cv2.VideoCapture', MockVideoCapture)
    return MockVideoCapture
