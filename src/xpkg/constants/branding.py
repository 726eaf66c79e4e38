"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "xpkg"
CLI_DESCRIPTION: str = f"{BRAND_NAME} package naming helpers: friendly identifiers and build paths"
