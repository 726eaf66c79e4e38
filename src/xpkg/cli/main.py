"""CLI entrypoint for xpkg naming helpers."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from xpkg import __version__
from xpkg.config import load_config
from xpkg.constants.branding import CLI_DESCRIPTION
from xpkg.constants.output import ID_OUTPUT_KEY, PATH_OUTPUT_KEY
from xpkg.exceptions import ConfigError
from xpkg.exceptions.validation import format_errors
from xpkg.validation import preflight_validate


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding xpkg.yaml")
    common.add_argument("-c", "--config", type=Path, help="Explicit config file")
    common.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    parser = argparse.ArgumentParser(prog="xpkg", description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    ident = subparsers.add_parser("id", parents=[common], help="Print a friendly identifier for a package")
    ident.add_argument("package", help="Package reference name")
    ident.add_argument("digest", help="Content hash of the package")
    ident.add_argument("--json", action="store_true", help="Emit a JSON object instead of plain text")

    path = subparsers.add_parser("path", parents=[common], help="Print the build path for a package")
    path.add_argument("directory", help="Target directory (or file path when NAME is omitted)")
    path.add_argument("name", nargs="?", default="", help="Package file base name")
    path.add_argument("--json", action="store_true", help="Emit a JSON object instead of plain text")

    subparsers.add_parser("validate-config", parents=[common], help="Validate configuration only")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    validation_errors = preflight_validate(root=args.root, config_path=args.config)
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return 2

    if args.command == "validate-config":
        print("Configuration is valid.")
        return 0

    try:
        config = load_config(args.root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    if args.command == "id":
        _emit(ID_OUTPUT_KEY, config.friendly_id(args.package, args.digest), as_json=args.json)
    elif args.command == "path":
        _emit(PATH_OUTPUT_KEY, config.build_path(args.directory, args.name), as_json=args.json)
    else:
        parser.error(f"Unsupported command: {args.command}")

    return 0


def _emit(key: str, value: str, *, as_json: bool) -> None:
    """Write a single result to stdout."""
    if as_json:
        print(json.dumps({key: value}))
    else:
        print(value)


if __name__ == "__main__":
    raise SystemExit(main())
