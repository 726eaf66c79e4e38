"""Tests for collect-all config validation (error codes, messages, ordering)."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from xpkg.config import validate_config_file
from xpkg.constants.validation import (
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG007,
    CFG010,
    CFG011,
)
from xpkg.exceptions.validation import ValidationError, format_errors, sort_errors
from xpkg.validation import preflight_validate


def _codes(errors: list[ValidationError]) -> list[str]:
    return [error.code for error in errors]


def test_valid_config_has_no_errors(write_config: Callable[[str], Path], tmp_path: Path) -> None:
    write_config("max_package_length: 40\nmax_hash_length: 8\nextension: xpkg\n")

    assert validate_config_file(tmp_path) == []


def test_missing_default_config_is_fine(tmp_path: Path) -> None:
    assert validate_config_file(tmp_path) == []


def test_missing_explicit_config(tmp_path: Path) -> None:
    errors = validate_config_file(tmp_path, tmp_path / "nope.yaml", config_explicit=True)

    assert _codes(errors) == [CFG001]


def test_invalid_yaml_reports_location(write_config: Callable[[str], Path], tmp_path: Path) -> None:
    write_config("max_hash_length: 12\nextension: [xpkg\n")

    errors = validate_config_file(tmp_path)

    assert _codes(errors) == [CFG002]
    assert errors[0].line is not None
    assert errors[0].column is not None


def test_not_a_mapping(write_config: Callable[[str], Path], tmp_path: Path) -> None:
    write_config("- 1\n")

    errors = validate_config_file(tmp_path)

    assert _codes(errors) == [CFG003]
    assert "list" in errors[0].message


def test_unknown_key_suggests_close_match(write_config: Callable[[str], Path], tmp_path: Path) -> None:
    write_config("max_hash_lenght: 12\n")

    errors = validate_config_file(tmp_path)

    assert _codes(errors) == [CFG004]
    assert errors[0].field == "max_hash_lenght"
    assert errors[0].hint == "did you mean `max_hash_length`?"


def test_unknown_key_without_close_match(write_config: Callable[[str], Path], tmp_path: Path) -> None:
    write_config("registry: example.com\n")

    errors = validate_config_file(tmp_path)

    assert _codes(errors) == [CFG004]
    assert errors[0].hint == ""


@pytest.mark.parametrize(
    ("content", "code", "field"),
    [
        pytest.param("max_package_length: abc\n", CFG005, "max_package_length", id="length-type"),
        pytest.param("max_hash_length: false\n", CFG005, "max_hash_length", id="length-bool"),
        pytest.param("max_hash_length: -1\n", CFG007, "max_hash_length", id="length-negative"),
        pytest.param("max_package_length: 0\n", CFG007, "max_package_length", id="length-zero"),
        pytest.param("extension: [a]\n", CFG005, "extension", id="extension-type"),
        pytest.param("extension: tar.gz\n", CFG011, "extension", id="extension-compound"),
    ],
)
def test_invalid_values(
    write_config: Callable[[str], Path],
    tmp_path: Path,
    content: str,
    code: str,
    field: str,
) -> None:
    write_config(content)

    errors = validate_config_file(tmp_path)

    assert [(e.code, e.field) for e in errors] == [(code, field)]


def test_collects_all_errors(write_config: Callable[[str], Path], tmp_path: Path) -> None:
    write_config("extension: ''\nmax_hash_length: 0\nbogus: 1\n")

    errors = sort_errors(validate_config_file(tmp_path))

    assert _codes(errors) == [CFG004, CFG007, CFG011]


def test_preflight_missing_root(tmp_path: Path) -> None:
    errors = preflight_validate(tmp_path / "missing")

    assert _codes(errors) == [CFG010]


def test_preflight_sorts_errors(write_config: Callable[[str], Path], tmp_path: Path) -> None:
    write_config("zzz: 1\nmax_hash_length: 0\naaa: 2\n")

    errors = preflight_validate(tmp_path)

    assert [(e.code, e.field) for e in errors] == [(CFG004, "aaa"), (CFG004, "zzz"), (CFG007, "max_hash_length")]


class TestValidationErrorFormatting:
    """ValidationError renders a stable single-line message."""

    def test_format_with_location_and_hint(self) -> None:
        error = ValidationError(
            code=CFG005,
            path="xpkg.yaml",
            field="extension",
            message="invalid type for `extension`",
            hint="expected a string",
            line=3,
            column=12,
        )

        assert error.format() == "[CFG005] xpkg.yaml:3:12 `extension`: invalid type for `extension` (expected a string)"

    def test_format_without_optional_parts(self) -> None:
        error = ValidationError(code=CFG001, path="xpkg.yaml", field="", message="config file not found")

        assert error.format() == "[CFG001] xpkg.yaml: config file not found"

    def test_format_errors_sorted(self) -> None:
        errors = [
            ValidationError(code=CFG007, path="a", field="x", message="second"),
            ValidationError(code=CFG004, path="a", field="y", message="first"),
        ]

        assert format_errors(errors).splitlines() == ["[CFG004] a `y`: first", "[CFG007] a `x`: second"]
