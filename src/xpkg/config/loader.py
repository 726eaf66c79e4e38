"""Config loading and normalization for xpkg."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from xpkg.config.model import XpkgConfig
from xpkg.constants.config import (
    CONFIG_FILENAME,
    DEFAULT_EXTENSION,
    DEFAULT_MAX_HASH_LENGTH,
    DEFAULT_MAX_PACKAGE_LENGTH,
)
from xpkg.exceptions import ConfigError
from xpkg.utils.paths import validate_extension

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> XpkgConfig:
    """Load and validate naming config from ``xpkg.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        logger.debug("No config file at %s, using defaults", path)
        return XpkgConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    extension = raw.get("extension", DEFAULT_EXTENSION)
    if not isinstance(extension, str):
        raise ConfigError("extension must be a string")
    try:
        validate_extension(extension)
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc

    config = XpkgConfig(
        max_package_length=_ensure_length(
            raw.get("max_package_length", DEFAULT_MAX_PACKAGE_LENGTH),
            "max_package_length",
        ),
        max_hash_length=_ensure_length(
            raw.get("max_hash_length", DEFAULT_MAX_HASH_LENGTH),
            "max_hash_length",
        ),
        extension=extension,
    )
    logger.debug("Loaded config from %s: %s", path, config)
    return config


def _ensure_length(value: Any, key_name: str) -> int:
    """Return ``value`` if it is a positive integer, raising ConfigError otherwise."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigError(f"{key_name} must be a positive integer")
    return value
