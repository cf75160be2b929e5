"""Configuration management for the latest-file search."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

if TYPE_CHECKING:
    import argparse

_CUTOFF_FORMAT = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TRUE_VALUES = frozenset({"true", "yes", "on", "1"})
_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class ConfigError(ValueError):
    """Raised when the search configuration is invalid."""


def parse_bool(value: Any, default: bool) -> bool:
    """Interpret a YAML/CLI value as a boolean.

    Args:
        value: Raw value (bool, int, str or None).
        default: Returned when value is None.

    Returns:
        Parsed boolean.

    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    return str(value).strip().lower() in _TRUE_VALUES


def parse_cutoff_date(text: str) -> date:
    """Parse a ``YYYY-MM-DD`` cutoff date.

    Args:
        text: Date string from the command line or config file.

    Returns:
        Parsed calendar date.

    Raises:
        ConfigError: If the string is not a valid ``YYYY-MM-DD`` date.

    """
    text = str(text).strip()
    if not _CUTOFF_FORMAT.match(text):
        raise ConfigError(f"Invalid date format: {text!r} (expected YYYY-MM-DD)")
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError as e:
        raise ConfigError(f"Invalid date: {text!r} ({e})") from e


@dataclass
class SearchConfig:
    """Configuration for a single latest-file search."""

    # Directory to search
    root_path: Path | None = None

    # Entries whose effective time is before local midnight of this date are not candidates
    cutoff_date: date | None = None

    # Entries whose name contains this literal substring are not candidates
    exclude_pattern: str | None = None

    # Print "entering <path>" before descending into each subdirectory
    verbose: bool = False

    # Logging
    log_level: str = "WARNING"
    log_file: Path | None = None

    @classmethod
    def get_config_path(cls) -> Path:
        """Get the default configuration file path."""
        return Path.home() / ".config/latest-file/config.yaml"

    @classmethod
    def load(cls, config_path: Path | None = None) -> SearchConfig:
        """Load defaults from a YAML file.

        Args:
            config_path: Path to config file. Uses default if None.

        Returns:
            Loaded configuration.

        Raises:
            ConfigError: If the file cannot be read or parsed.

        """
        if config_path is None:
            config_path = cls.get_config_path()

        if not config_path.exists():
            return cls()

        try:
            with config_path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot read config file {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {config_path} must contain a mapping")

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> SearchConfig:
        """Create config from dictionary."""
        config = cls()

        if data.get("before"):
            config.cutoff_date = parse_cutoff_date(data["before"])
        if data.get("exclude"):
            config.exclude_pattern = str(data["exclude"])
        config.verbose = parse_bool(data.get("verbose"), config.verbose)

        if "logging" in data:
            logging_cfg = data["logging"] or {}
            if not isinstance(logging_cfg, dict):
                raise ConfigError("Config key 'logging' must be a mapping")
            if "level" in logging_cfg:
                config.log_level = str(logging_cfg["level"]).upper()
            if logging_cfg.get("file"):
                config.log_file = Path(os.path.expanduser(logging_cfg["file"]))

        return config

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> SearchConfig:
        """Build a validated config from parsed CLI arguments.

        Values given on the command line override the config file.

        Raises:
            ConfigError: If any value is invalid.

        """
        config = cls.load(args.config)

        config.root_path = args.path
        if args.before is not None:
            config.cutoff_date = parse_cutoff_date(args.before)
        if args.exclude is not None:
            config.exclude_pattern = args.exclude or None
        if args.verbose:
            config.verbose = True
        if args.log_level is not None:
            config.log_level = args.log_level.upper()

        config.validate()
        return config

    def validate(self) -> None:
        """Check the configuration before any walk begins.

        Raises:
            ConfigError: If the root path is missing or the log level is unknown.

        """
        if self.root_path is None:
            raise ConfigError("Path is required")
        if self.log_level not in _LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {self.log_level}")

    @property
    def numeric_log_level(self) -> int:
        """The log level as a ``logging`` constant."""
        return getattr(logging, self.log_level)
