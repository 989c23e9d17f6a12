"""Basic tracking example"""

import sys

from csrt_track import PlaybackConfig, PlaybackResult, PlaybackSession
from csrt_track.utils import load_track_seeds, setup_logging


def main():
    """Track the demo objects in a video file"""
    setup_logging()

    video_path = sys.argv[1] if len(sys.argv) > 1 else "input/test_video.mp4"
    seeds = load_track_seeds("examples/tracks.yaml")

    config = PlaybackConfig(max_display_width=1280, max_display_height=720)
    session = PlaybackSession(config)
    result = session.run(video_path, seeds)

    stats = session.registry.get_statistics()
    print(f"Playback {result.value}")
    print(f"Tracked {stats['total']} objects, {stats['deactivated']} given up")
    return 0 if result is PlaybackResult.COMPLETED else 1


if __name__ == "__main__":
    sys.exit(main())
