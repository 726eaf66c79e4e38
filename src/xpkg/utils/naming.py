"""Friendly identifier helpers for packaged artifacts."""

from __future__ import annotations

import logging

from xpkg.constants.naming import (
    FRIENDLY_ID_SEPARATOR,
    MAX_HASH_LENGTH,
    MAX_PACKAGE_NAME_LENGTH,
)

logger = logging.getLogger(__name__)


def truncate(value: str, limit: int) -> str:
    """Return at most the first ``limit`` characters of ``value``."""
    if limit < 0:
        raise ValueError(f"truncation limit must be non-negative, got {limit}")
    if len(value) <= limit:
        return value
    logger.debug("Truncating %r from %d to %d characters", value, len(value), limit)
    return value[:limit]


def friendly_id(
    package: str,
    digest: str,
    *,
    max_package_length: int = MAX_PACKAGE_NAME_LENGTH,
    max_hash_length: int = MAX_HASH_LENGTH,
) -> str:
    """Build a bounded-length identifier from a package name and a content hash.

    Both parts are right-truncated to their limits and joined with ``-``.
    Input format is not validated; empty strings yield a degenerate but
    well-formed identifier.
    """
    return FRIENDLY_ID_SEPARATOR.join(
        (
            truncate(package, max_package_length),
            truncate(digest, max_hash_length),
        )
    )
