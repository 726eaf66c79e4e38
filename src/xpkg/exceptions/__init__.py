"""Shared exception hierarchy for xpkg."""

from __future__ import annotations

from .base import XpkgError
from .config import ConfigError
from .validation import ValidationError, format_errors, sort_errors

__all__ = ["ConfigError", "ValidationError", "XpkgError", "format_errors", "sort_errors"]
