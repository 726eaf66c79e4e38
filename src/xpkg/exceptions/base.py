"""Base exception for xpkg."""

from __future__ import annotations


class XpkgError(Exception):
    """Base class for all xpkg errors."""
