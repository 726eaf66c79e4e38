"""Configuration loading and validation for xpkg naming."""

from __future__ import annotations

from xpkg.config.loader import load_config
from xpkg.config.model import XpkgConfig
from xpkg.config.validator import validate_config_file

__all__ = ["XpkgConfig", "load_config", "validate_config_file"]
