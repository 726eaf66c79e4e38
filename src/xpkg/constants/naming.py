"""Constants for friendly identifiers and package build paths."""

from __future__ import annotations

MAX_PACKAGE_NAME_LENGTH: int = 50
MAX_HASH_LENGTH: int = 12
FRIENDLY_ID_SEPARATOR: str = "-"

XPKG_EXTENSION: str = "xpkg"
EXTENSION_SEPARATOR: str = "."
