"""Command line interface: SQL statements for records in a definition file."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from sqlmarshal.config import get_settings
from sqlmarshal.drivers import get_driver, list_dialects
from sqlmarshal.errors import SQLMarshalError
from sqlmarshal.logging import configure_logging, get_logger
from sqlmarshal.marshaller import Marshaller
from sqlmarshal.parsing import parse_file

logger = get_logger(__name__)


def _add_record_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "file",
        type=Path,
        help="Path to a record definition file",
    )
    parser.add_argument(
        "record",
        help="Name of the record to generate the statement for",
    )


def _add_values_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-V", "--values",
        required=True,
        help='Record values as a JSON object, e.g. \'{"ID": 1, "Ref": {"ID": 2}}\'',
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser, with defaults taken from settings."""
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="sqlmarshal",
        description="Generate SQL statements from record definitions",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Log level (default: %(default)s)",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=settings.log_json,
        help="Render log events as JSON",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    list_parser = commands.add_parser("list", help="List the records in a file")
    list_parser.add_argument("file", type=Path, help="Path to a record definition file")

    create_parser = commands.add_parser("create", help="Print a CREATE TABLE statement")
    _add_record_arguments(create_parser)
    create_parser.add_argument(
        "-d", "--dialect",
        choices=list_dialects(),
        default=settings.dialect,
        help="SQL dialect (default: %(default)s)",
    )

    insert_parser = commands.add_parser("insert", help="Print an INSERT statement")
    _add_record_arguments(insert_parser)
    _add_values_argument(insert_parser)

    update_parser = commands.add_parser(
        "update", help="Print an UPDATE statement keyed on the primary key"
    )
    _add_record_arguments(update_parser)
    _add_values_argument(update_parser)

    return parser


def run(args: argparse.Namespace) -> str:
    """Run a parsed command and return its output."""
    registry = parse_file(args.file)
    if args.command == "list":
        return "\n".join(registry.list_records())

    marshaller = Marshaller.new(registry.tokenize(args.record))
    if args.command == "create":
        return marshaller.create(get_driver(args.dialect))

    values = json.loads(args.values)
    if not isinstance(values, dict):
        raise ValueError("--values must be a JSON object")
    if args.command == "insert":
        return marshaller.insert(values)
    return marshaller.update_primary_key(values)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    try:
        parser = build_parser()
    except ValidationError as e:
        print(f"Error: Invalid settings: {e}", file=sys.stderr)
        return 1

    args = parser.parse_args(argv)
    configure_logging(args.log_level, json=args.log_json)

    if not args.file.exists():
        print(f"Error: File not found: {args.file}", file=sys.stderr)
        return 1

    try:
        output = run(args)
    except (SQLMarshalError, SyntaxError, KeyError, ValueError, OSError) as e:
        logger.debug("command_failed", command=args.command, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
