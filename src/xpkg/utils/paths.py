"""Build-path helpers for packaged artifacts."""

from __future__ import annotations

import os

from xpkg.constants.naming import EXTENSION_SEPARATOR, XPKG_EXTENSION

_SEPARATORS: tuple[str, ...] = tuple(sep for sep in (os.sep, os.altsep) if sep)


def _final_segment_start(path: str) -> int:
    """Index where the last path segment of ``path`` begins."""
    return max(path.rfind(sep) for sep in _SEPARATORS) + 1


def strip_extension(path: str) -> str:
    """Remove the last extension from the final segment of ``path``.

    Only one extension is removed (``a.tar.gz`` -> ``a.tar``). A dot in a
    parent directory is never treated as an extension.
    """
    start = _final_segment_start(path)
    dot = path.rfind(EXTENSION_SEPARATOR, start)
    if dot < 0:
        return path
    return path[:dot]


def _join(directory: str, name: str) -> str:
    """Append ``name`` under ``directory``; an absolute ``name`` never discards ``directory``."""
    if not directory:
        return name
    return directory.rstrip("".join(_SEPARATORS)) + os.sep + name.lstrip("".join(_SEPARATORS))


def validate_extension(extension: str) -> str:
    """Return ``extension`` if usable as a single package file extension."""
    if not extension:
        raise ValueError("package extension must not be empty")
    if EXTENSION_SEPARATOR in extension or any(sep in extension for sep in _SEPARATORS):
        raise ValueError(f"package extension must be a bare suffix, got {extension!r}")
    return extension


def build_path(directory: str, name: str, *, extension: str = XPKG_EXTENSION) -> str:
    """Return the path a package named ``name`` is written to under ``directory``.

    Any existing extension on ``name`` is replaced by ``extension``. When
    ``name`` is empty the extension of ``directory`` itself is replaced and
    no separator is added.
    """
    suffix = EXTENSION_SEPARATOR + validate_extension(extension)
    if name:
        return _join(directory, strip_extension(name)) + suffix
    return strip_extension(directory) + suffix
