"""JSON output shapes emitted by the CLI."""

from __future__ import annotations

from typing import Any

ID_OUTPUT_KEY: str = "id"
PATH_OUTPUT_KEY: str = "path"

ID_OUTPUT_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": [ID_OUTPUT_KEY],
    "additionalProperties": False,
    "properties": {ID_OUTPUT_KEY: {"type": "string", "minLength": 1}},
}

PATH_OUTPUT_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": [PATH_OUTPUT_KEY],
    "additionalProperties": False,
    "properties": {PATH_OUTPUT_KEY: {"type": "string", "pattern": r"\.[^./\\]+$"}},
}
