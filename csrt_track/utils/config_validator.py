"""Configuration validation utilities"""

from dataclasses import fields
from typing import Any, Dict, List, Optional

from ..config import PlaybackConfig
from ..core import TrackSeed
from ..exceptions import ConfigurationError
from .io import load_structured_file


class ConfigValidator:
    """Validate and sanitize configuration parameters"""

    @staticmethod
    def validate_playback_config(config: PlaybackConfig) -> List[str]:
        """
        Validate playback configuration

        Args:
            config: PlaybackConfig instance

        Returns:
            List of validation errors
        """
        errors = []

        if config.max_display_width < 1 or config.max_display_height < 1:
            errors.append(
                f"max display size must be positive, got "
                f"{config.max_display_width}x{config.max_display_height}"
            )

        if config.min_wait_ms < 1:
            errors.append(f"min_wait_ms must be at least 1, got {config.min_wait_ms}")

        if config.loss_grace_seconds < 0:
            errors.append(f"loss_grace_seconds must be non-negative, got {config.loss_grace_seconds}")

        if config.box_thickness < 1:
            errors.append(f"box_thickness must be at least 1, got {config.box_thickness}")

        for seed in config.tracks:
            errors.extend(ConfigValidator.validate_track_seed(seed))

        names = [seed.name for seed in config.tracks]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            errors.append(f"track names must be unique, duplicated: {', '.join(duplicates)}")

        return errors

    @staticmethod
    def validate_track_seed(seed: TrackSeed) -> List[str]:
        """
        Validate one initial track

        Args:
            seed: TrackSeed instance

        Returns:
            List of validation errors
        """
        errors = []
        x, y, w, h = seed.box

        if not (0 <= x <= 1 and 0 <= y <= 1):
            errors.append(f"track '{seed.name}' position must be within 0..1, got ({x}, {y})")

        if not (0 < w <= 1 and 0 < h <= 1):
            errors.append(f"track '{seed.name}' size must be within (0, 1], got ({w}, {h})")

        if x + w > 1 or y + h > 1:
            errors.append(f"track '{seed.name}' extends past the frame edge")

        if any(not 0 <= c <= 255 for c in seed.color):
            errors.append(f"track '{seed.name}' color components must be 0..255, got {seed.color}")

        return errors

    @staticmethod
    def sanitize_config(config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Drop keys PlaybackConfig does not know about

        Args:
            config_dict: Raw configuration dictionary

        Returns:
            Sanitized configuration dictionary
        """
        valid_fields = {f.name for f in fields(PlaybackConfig)}
        return {k: v for k, v in config_dict.items() if k in valid_fields}

    @staticmethod
    def merge_configs(base_config: Dict[str, Any],
                     override_config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge two configuration dictionaries

        Args:
            base_config: Base configuration
            override_config: Override configuration

        Returns:
            Merged configuration
        """
        merged = base_config.copy()

        for key, value in override_config.items():
            if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
                merged[key] = ConfigValidator.merge_configs(merged[key], value)
            else:
                merged[key] = value

        return merged


class ConfigLoader:
    """Load and validate configuration from various sources"""

    @staticmethod
    def create_playback_config(config_source: Optional[str] = None,
                               overrides: Optional[Dict[str, Any]] = None) -> PlaybackConfig:
        """
        Create validated PlaybackConfig

        Args:
            config_source: Path to a YAML or JSON configuration file
            overrides: Dictionary of override values

        Returns:
            Validated PlaybackConfig instance
        """
        if config_source:
            config_dict = load_structured_file(config_source) or {}
            if not isinstance(config_dict, dict):
                raise ConfigurationError(f"{config_source} must contain a mapping")
        else:
            config_dict = {}

        if overrides:
            config_dict = ConfigValidator.merge_configs(config_dict, overrides)

        config_dict = ConfigValidator.sanitize_config(config_dict)

        try:
            config = PlaybackConfig.from_dict(config_dict)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

        errors = ConfigValidator.validate_playback_config(config)
        if errors:
            raise ConfigurationError(f"Configuration validation failed: {'; '.join(errors)}")

        return config
