"""Xpkg package naming helpers."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from xpkg.utils import build_path, friendly_id

__all__ = ["__version__", "build_path", "friendly_id"]

try:
    __version__ = version("xpkg")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
