"""Configuration defaults and filenames."""

from __future__ import annotations

from xpkg.constants.naming import MAX_HASH_LENGTH, MAX_PACKAGE_NAME_LENGTH, XPKG_EXTENSION

CONFIG_FILENAME: str = "xpkg.yaml"

DEFAULT_MAX_PACKAGE_LENGTH: int = MAX_PACKAGE_NAME_LENGTH
DEFAULT_MAX_HASH_LENGTH: int = MAX_HASH_LENGTH
DEFAULT_EXTENSION: str = XPKG_EXTENSION

LENGTH_CONFIG_KEYS: tuple[str, ...] = ("max_package_length", "max_hash_length")
