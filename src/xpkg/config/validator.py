"""Config file validation for xpkg."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from xpkg.constants.config import CONFIG_FILENAME, LENGTH_CONFIG_KEYS
from xpkg.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG007,
    CFG011,
)
from xpkg.exceptions.validation import ValidationError
from xpkg.utils.paths import validate_extension


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate an xpkg.yaml file and return all validation errors.

    This is the collect-all counterpart of :func:`load_config` used by
    ``xpkg validate-config``. It never raises; all problems are returned as
    :class:`ValidationError` instances.
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message="invalid YAML",
                hint=str(getattr(exc, "problem", "") or ""),
                line=mark.line + 1 if mark is not None else None,
                column=mark.column + 1 if mark is not None else None,
            )
        )
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(raw.keys(), key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=str(key),
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(str(key), ALLOWED_CONFIG_KEYS),
                )
            )

    for key in LENGTH_CONFIG_KEYS:
        if key in raw:
            _validate_length(raw[key], key, path_str, errors)

    if "extension" in raw:
        _validate_extension(raw["extension"], path_str, errors)

    return errors


def _validate_length(value: Any, key: str, path_str: str, errors: list[ValidationError]) -> None:
    """Validate a truncation limit value."""
    if isinstance(value, bool) or not isinstance(value, int):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field=key,
                message=f"invalid type for `{key}`",
                hint="expected a positive integer",
            )
        )
    elif value <= 0:
        errors.append(
            ValidationError(
                code=CFG007,
                path=path_str,
                field=key,
                message=f"`{key}` must be a positive integer, got {value}",
            )
        )


def _validate_extension(value: Any, path_str: str, errors: list[ValidationError]) -> None:
    """Validate the package file extension."""
    if not isinstance(value, str):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="extension",
                message="invalid type for `extension`",
                hint="expected a string",
            )
        )
        return
    try:
        validate_extension(value)
    except ValueError as exc:
        errors.append(
            ValidationError(
                code=CFG011,
                path=path_str,
                field="extension",
                message=str(exc),
                hint="use a bare suffix such as `xpkg`",
            )
        )


def _suggest_key(key: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean' hint for a misspelled key."""
    matches = difflib.get_close_matches(key, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
