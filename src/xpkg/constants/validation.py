"""Stable validation error codes and allowed keys for config validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown top-level key
CFG005: str = "CFG005"  # invalid value type
CFG007: str = "CFG007"  # value out of range
CFG010: str = "CFG010"  # root directory not found
CFG011: str = "CFG011"  # invalid package extension

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "max_package_length",
        "max_hash_length",
        "extension",
    }
)
