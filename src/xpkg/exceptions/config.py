"""Configuration-related exceptions."""

from __future__ import annotations

from xpkg.exceptions.base import XpkgError


class ConfigError(XpkgError, ValueError):
    """Raised when naming configuration is invalid."""
