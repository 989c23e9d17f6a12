"""End-to-end tests for the command line entry point"""

import argparse
import logging

import cv2
import pytest

from csrt_track import main as main_module
from csrt_track.main import EXIT_FAILURE, EXIT_OK, EXIT_UNKNOWN_FAILURE, main, parse_size


@pytest.fixture
def window_calls(monkeypatch):
    """Replace the OpenCV window functions, recording every call"""
    calls = {"namedWindow": [], "imshow": [], "waitKey": [], "destroyWindow": []}
    keys = []

    def wait_key(delay):
        calls["waitKey"].append(delay)
        return keys.pop(0) if keys else -1

    monkeypatch.setattr(cv2, "namedWindow", lambda name, flags=0: calls["namedWindow"].append(name))
    monkeypatch.setattr(cv2, "imshow", lambda name, frame: calls["imshow"].append(name))
    monkeypatch.setattr(cv2, "waitKey", wait_key)
    monkeypatch.setattr(cv2, "destroyWindow", lambda name: calls["destroyWindow"].append(name))
    calls["keys"] = keys
    return calls


class TestExitCodes:
    """Test process exit codes"""

    def test_missing_file_fails_without_window(self, tmp_path, window_calls, caplog):
        caplog.set_level(logging.INFO)

        code = main([str(tmp_path / "missing.mp4"), "--no-pause"])

        assert code == EXIT_FAILURE
        assert window_calls["namedWindow"] == []
        assert "ERROR: failed to open" in caplog.text

    def test_no_argument_fails_at_open(self, window_calls, caplog):
        caplog.set_level(logging.INFO)

        assert main([]) == EXIT_FAILURE
        assert window_calls["namedWindow"] == []
        assert "ERROR: failed to open" in caplog.text

    def test_escape_quits_with_failure(self, mock_video_capture, window_calls, caplog):
        caplog.set_level(logging.INFO)
        window_calls["keys"].extend([-1, 27])

        code = main(["clip.mp4", "--no-pause"])

        assert code == EXIT_FAILURE
        assert "user requested to quit" in caplog.text
        assert len(window_calls["imshow"]) == 1
        assert window_calls["destroyWindow"] == ["CSRT Example (640 x 480 @ 100%)"]

    def test_completed_playback(self, mock_video_capture, window_calls, caplog):
        caplog.set_level(logging.INFO)
        mock_video_capture.frame_count = 5

        assert main(["clip.mp4", "--no-pause"]) == EXIT_OK
        assert len(window_calls["imshow"]) == 5
        assert "No tracks given" in caplog.text

    def test_start_pause_escape(self, mock_video_capture, window_calls):
        """ESC on the start screen quits before playback"""
        window_calls["keys"].append(27)

        assert main(["clip.mp4"]) == EXIT_FAILURE
        assert window_calls["waitKey"] == [0]

    def test_unknown_failure(self, mock_video_capture, window_calls, monkeypatch, caplog):
        caplog.set_level(logging.INFO)

        class Unexpected(Exception):
            pass

        def explode(self, video_path, seeds=None):
            raise Unexpected("boom")

        monkeypatch.setattr(main_module.PlaybackSession, "run", explode)

        assert main(["clip.mp4"]) == EXIT_UNKNOWN_FAILURE
        assert "ERROR: unknown exception caught" in caplog.text

    def test_invalid_tracks_file(self, tmp_path, mock_video_capture, window_calls, caplog):
        caplog.set_level(logging.INFO)
        tracks = tmp_path / "tracks.yaml"
        tracks.write_text("tracks:\n  - name: car\n")

        assert main(["clip.mp4", "--tracks", str(tracks)]) == EXIT_FAILURE
        assert window_calls["namedWindow"] == []

    def test_tracks_file_is_validated(self, tmp_path, mock_video_capture, window_calls, caplog):
        """Seeds from --tracks get the same checks as seeds in --config"""
        caplog.set_level(logging.INFO)
        tracks = tmp_path / "tracks.yaml"
        tracks.write_text(
            "tracks:\n"
            "  - {name: car, box: [0.9, 0.9, 0.5, 0.5]}\n"
            "  - {name: car, box: [0.1, 0.1, 0.2, 0.2]}\n"
        )

        assert main(["clip.mp4", "--tracks", str(tracks), "--no-pause"]) == EXIT_FAILURE
        assert window_calls["namedWindow"] == []
        assert "extends past the frame edge" in caplog.text
        assert "duplicated: car" in caplog.text

    def test_tracking_with_file(self,tmp_path, mock_video_capture, window_calls, monkeypatch):
        class StillEngine:
            def init(self, frame, rect):
                self.rect = rect

            def update(self, frame):
                return True, self.rect

        monkeypatch.setattr("csrt_track.session.CSRTEngine", StillEngine)
        mock_video_capture.frame_count = 3
        tracks = tmp_path / "tracks.json"
        tracks.write_text('[{"name": "car", "box": [0.1, 0.1, 0.2, 0.2], "color": [255, 0, 0]}]')

        assert main(["clip.mp4", "--tracks", str(tracks), "--no-pause"]) == EXIT_OK
        assert len(window_calls["imshow"]) == 3


class TestParseSize:
    """Test --max-size parsing"""

    def test_valid(self):
        assert parse_size("1280x720") == (1280, 720)
        assert parse_size("800X600") == (800, 600)

    def test_invalid(self):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_size("large")
