# csrt_track/utils/io.py

"""I/O utilities for logging setup and track lists"""

import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

import yaml

from ..core import TrackSeed
from ..exceptions import ConfigurationError


def setup_logging(log_file: Optional[str] = None,
                 level: int = logging.INFO) -> None:
    """
    Setup logging configuration

    Progress goes to stdout, where the user watches it alongside the window.

    Args:
        log_file: Optional log file path
        level: Logging level
    """
    handlers = [logging.StreamHandler(sys.stdout)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def load_structured_file(filepath: str) -> Any:
    """
    Load a YAML or JSON document

    Args:
        filepath: Path to a .yaml, .yml or .json file

    Returns:
        Parsed document
    """
    path = Path(filepath)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {filepath}")

    if path.suffix in ['.yaml', '.yml']:
        with open(path, 'r') as f:
            return yaml.safe_load(f)
    elif path.suffix == '.json':
        with open(path, 'r') as f:
            return json.load(f)
    else:
        raise ConfigurationError(f"Unsupported file format: {path.suffix}")


def load_track_seeds(filepath: str) -> List[TrackSeed]:
    """
    Load the initial tracks from file

    The file holds either a list of entries or a mapping with a ``tracks``
    list. Each entry has a ``name``, a normalized ``box`` [x, y, w, h] and
    an optional RGB ``color``.

    Args:
        filepath: Path to the track list

    Returns:
        List of track seeds
    """
    data = load_structured_file(filepath)

    if isinstance(data, dict):
        data = data.get('tracks')
    if not isinstance(data, list):
        raise ConfigurationError(f"{filepath} does not contain a list of tracks")

    try:
        seeds = [TrackSeed.from_dict(entry) for entry in data]
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid track in {filepath}: {e}") from e

    logging.info(f"Loaded {len(seeds)} tracks from {filepath}")
    return seeds


def save_track_seeds(seeds: List[TrackSeed], output_path: str) -> None:
    """
    Save track seeds to a YAML or JSON file

    Args:
        seeds: Seeds to save
        output_path: Path for output file
    """
    document = {'tracks': [seed.to_dict() for seed in seeds]}

    with open(output_path, 'w') as f:
        if Path(output_path).suffix == '.json':
            json.dump(document, f, indent=2)
        else:
            yaml.safe_dump(document, f, sort_keys=False)

    logging.info(f"Saved {len(seeds)} tracks to {output_path}")
