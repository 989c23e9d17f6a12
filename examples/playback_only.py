"""Play a video at its native frame rate without tracking"""

import sys

from csrt_track import PlaybackConfig, PlaybackSession
from csrt_track.utils import setup_logging


def main():
    setup_logging()
    session = PlaybackSession(PlaybackConfig.create_for_batch())
    session.run(sys.argv[1] if len(sys.argv) > 1 else "")


if __name__ == "__main__":
    main()
