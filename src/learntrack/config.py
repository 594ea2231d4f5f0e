"""Configuration loading for LearnTrack.

Settings are read once at start-up. Identifier ranges cannot change while the
process runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from learntrack.id_allocator import (
    DEFAULT_RANGES,
    DEFAULT_WARNING_THRESHOLD,
    EntityKind,
    IdRange,
    check_disjoint,
)

CONFIG_FILE_NAME = "learntrack.yaml"


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""


@dataclass
class LoggingConfig:
    """Logging settings."""

    level: str = "INFO"
    dir: str = "logs"
    file: str = "learntrack.log"
    max_bytes: int = 5 * 1024 * 1024
    backup_count: int = 3


@dataclass
class Settings:
    """LearnTrack settings.

    Attributes:
        id_ranges: Identifier range per entity kind.
        warning_threshold: Usage fraction at which capacity warnings start.
        logging: Logging settings.
    """

    id_ranges: dict[EntityKind, IdRange] = field(default_factory=lambda: dict(DEFAULT_RANGES))
    warning_threshold: float = DEFAULT_WARNING_THRESHOLD
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        """Create settings from a dictionary.

        Kinds missing from ``id_ranges`` keep their default range.

        Args:
            data: Configuration dictionary from YAML.

        Returns:
            Parsed settings.

        Raises:
            ConfigError: If any value is malformed or ranges overlap.
        """
        id_ranges = dict(DEFAULT_RANGES)
        ranges_data = data.get("id_ranges") or {}
        if not isinstance(ranges_data, dict):
            raise ConfigError("'id_ranges' must be a mapping of kind to {start, end}")
        for name, bounds in ranges_data.items():
            id_ranges[_parse_kind(name)] = _parse_range(name, bounds)

        try:
            check_disjoint(id_ranges)
        except ValueError as e:
            raise ConfigError(str(e)) from e

        threshold = data.get("warning_threshold", DEFAULT_WARNING_THRESHOLD)
        if isinstance(threshold, bool) or not isinstance(threshold, int | float):
            raise ConfigError(f"'warning_threshold' must be a number, got {threshold!r}")
        if not 0 < threshold <= 1:
            raise ConfigError(f"'warning_threshold' must be in (0, 1], got {threshold}")

        logging_config = _parse_logging(data.get("logging") or {})

        return cls(
            id_ranges=id_ranges,
            warning_threshold=float(threshold),
            logging=logging_config,
        )


def _parse_kind(name: Any) -> EntityKind:
    try:
        return EntityKind(str(name).lower())
    except ValueError:
        valid = ", ".join(kind.value for kind in EntityKind)
        raise ConfigError(f"Unknown entity kind '{name}' (expected one of: {valid})") from None


def _parse_range(name: Any, bounds: Any) -> IdRange:
    if not isinstance(bounds, dict) or "start" not in bounds or "end" not in bounds:
        raise ConfigError(f"Range for '{name}' must have 'start' and 'end'")
    start, end = bounds["start"], bounds["end"]
    if any(isinstance(v, bool) or not isinstance(v, int) for v in (start, end)):
        raise ConfigError(f"Range for '{name}' must use integer bounds")
    try:
        return IdRange(start, end)
    except ValueError as e:
        raise ConfigError(f"Invalid range for '{name}': {e}") from e


def _parse_logging(data: Any) -> LoggingConfig:
    if not isinstance(data, dict):
        raise ConfigError("'logging' must be a mapping")
    defaults = LoggingConfig()
    for key in ("max_bytes", "backup_count"):
        value = data.get(key, getattr(defaults, key))
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ConfigError(f"'logging.{key}' must be a non-negative integer, got {value!r}")
    return LoggingConfig(
        level=str(data.get("level", defaults.level)),
        dir=str(data.get("dir", defaults.dir)),
        file=str(data.get("file", defaults.file)),
        max_bytes=data.get("max_bytes", defaults.max_bytes),
        backup_count=data.get("backup_count", defaults.backup_count),
    )


def load_config(config_path: Path | str) -> Settings:
    """Load LearnTrack settings from a YAML file.

    Args:
        config_path: Path to learntrack.yaml file.

    Returns:
        Parsed settings.

    Raises:
        ConfigError: If file doesn't exist or is invalid.
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a YAML mapping, got {type(data).__name__}")

    return Settings.from_dict(data)


def find_config(start_path: Path | str | None = None) -> Path | None:
    """Find learntrack.yaml by walking up the directory tree.

    Args:
        start_path: Starting directory. Defaults to current directory.

    Returns:
        Path to the config file, or None if there is none.
    """
    current = Path.cwd() if start_path is None else Path(start_path)
    current = current.resolve()

    for directory in (current, *current.parents):
        config_path = directory / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path
    return None
