"""Config data model for xpkg naming."""

from __future__ import annotations

from dataclasses import dataclass

from xpkg.constants.config import (
    DEFAULT_EXTENSION,
    DEFAULT_MAX_HASH_LENGTH,
    DEFAULT_MAX_PACKAGE_LENGTH,
)
from xpkg.constants.naming import FRIENDLY_ID_SEPARATOR
from xpkg.utils.naming import friendly_id
from xpkg.utils.paths import build_path


@dataclass(frozen=True)
class XpkgConfig:
    """Resolved naming config."""

    max_package_length: int = DEFAULT_MAX_PACKAGE_LENGTH
    max_hash_length: int = DEFAULT_MAX_HASH_LENGTH
    extension: str = DEFAULT_EXTENSION

    @property
    def max_identifier_length(self) -> int:
        """Upper bound on the length of any identifier built with this config."""
        return self.max_package_length + len(FRIENDLY_ID_SEPARATOR) + self.max_hash_length

    def friendly_id(self, package: str, digest: str) -> str:
        """Build a friendly identifier using this config's limits."""
        return friendly_id(
            package,
            digest,
            max_package_length=self.max_package_length,
            max_hash_length=self.max_hash_length,
        )

    def build_path(self, directory: str, name: str = "") -> str:
        """Build a package path using this config's extension."""
        return build_path(directory, name, extension=self.extension)
