# csrt_track/main.py

import argparse
import logging
import sys
import traceback
from typing import List, Optional, Tuple

from csrt_track import __version__
from csrt_track.exceptions import CsrtTrackError
from csrt_track.session import PlaybackResult, PlaybackSession
from csrt_track.utils import load_track_seeds, setup_logging
from csrt_track.utils.config_validator import ConfigLoader

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_UNKNOWN_FAILURE = 2


def parse_size(value: str) -> Tuple[int, int]:
    """Parse a WIDTHxHEIGHT argument"""
    try:
        width, height = (int(part) for part in value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got '{value}'")
    return width, height


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=f"CSRT Track: real-time object tracking playback v{__version__}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Play a video at its native frame rate
    csrt-track input.mp4

    # Track the objects listed in a file
    csrt-track input.mp4 --tracks examples/tracks.yaml

Controls:
    ESC quits, any other key pauses until the next key press.
        """,
    )

    # An empty path is accepted here and rejected when the video is opened
    parser.add_argument("input_video", nargs="?", default="", help="Path to input video file")

    parser.add_argument("--tracks", type=str, help="YAML or JSON file listing the objects to track")
    parser.add_argument("--config", type=str, help="YAML or JSON playback configuration file")
    parser.add_argument(
        "--max-size",
        type=parse_size,
        help="Largest frame shown without zooming, as WIDTHxHEIGHT (default: 1024x768)",
    )
    parser.add_argument(
        "--no-pause",
        action="store_true",
        help="Do not wait for a key before the first and after the last frame",
    )

    # Logging
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--log-file", type=str, help="Path to log file")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Play a video with CSRT tracking; returns the process exit code"""
    args = build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    setup_logging(log_file=args.log_file, level=log_level)
    logger = logging.getLogger(__name__)

    try:
        overrides = {}
        if args.max_size:
            overrides["max_display_width"], overrides["max_display_height"] = args.max_size
        if args.no_pause:
            overrides["pause_on_first_frame"] = False
            overrides["pause_on_last_frame"] = False

        if args.tracks:
            overrides["tracks"] = load_track_seeds(args.tracks)

        config = ConfigLoader.create_playback_config(args.config, overrides)

        seeds = config.tracks
        if seeds:
            logger.info(f"🎯 Tracking {len(seeds)} objects: {', '.join(s.name for s in seeds)}")
        else:
            logger.info("📺 No tracks given, playing video only")

        session = PlaybackSession(config)
        result = session.run(args.input_video, seeds)

        if result is PlaybackResult.CANCELLED:
            logger.info("❌ user requested to quit")
            return EXIT_FAILURE

        return EXIT_OK

    except (CsrtTrackError, ValueError, RuntimeError, OSError) as e:
        logger.error(f"ERROR: {e}")
        return EXIT_FAILURE
    except Exception:
        logger.error("ERROR: unknown exception caught")
        logger.debug(traceback.format_exc())
        return EXIT_UNKNOWN_FAILURE


if __name__ == "__main__":
    sys.exit(main())
