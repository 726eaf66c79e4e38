"""Shared utility helpers."""

from __future__ import annotations

from .naming import friendly_id, truncate
from .paths import build_path, strip_extension

__all__ = ["build_path", "friendly_id", "strip_extension", "truncate"]
