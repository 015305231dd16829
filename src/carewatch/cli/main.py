"""CLI entrypoint for Carewatch."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from carewatch import __version__
from carewatch.cli.handlers import (
    handle_add,
    handle_classify,
    handle_delete,
    handle_duplicates,
    handle_edit,
    handle_list,
    handle_stats,
    handle_validate_config,
)
from carewatch.config import load_config
from carewatch.constants.branding import CLI_DESCRIPTION
from carewatch.constants.cases import DEFAULT_DOCUMENT_TYPE, VALID_DOCUMENT_TYPES
from carewatch.exceptions import CarewatchError, ConfigError

HANDLERS = {
    "classify": handle_classify,
    "add": handle_add,
    "list": handle_list,
    "edit": handle_edit,
    "delete": handle_delete,
    "stats": handle_stats,
    "duplicates": handle_duplicates,
    "validate-config": handle_validate_config,
}


def _add_case_fields(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-t",
        "--type",
        dest="doc_type",
        choices=sorted(VALID_DOCUMENT_TYPES),
        default=DEFAULT_DOCUMENT_TYPE,
        help="Document type (default: case_note)",
    )
    parser.add_argument("--name", required=True, help="Child's name")
    parser.add_argument("--age", required=True, help="Child's age in years")
    parser.add_argument("--gender", required=True, help="Child's gender")
    parser.add_argument("--content", required=True, help="Free-text observation")


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-r", "--root", type=Path, default=Path.cwd(), help="Directory holding carewatch.yaml")
    common.add_argument("-c", "--config", type=Path, help="Explicit config file")
    common.add_argument("--no-color", action="store_true", help="Disable colored output")
    common.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")

    session = argparse.ArgumentParser(add_help=False, parents=[common])
    session.add_argument("-u", "--username", required=True, help="Account username")
    session.add_argument("-p", "--password", required=True, help="Account password")
    session.add_argument("-s", "--store", type=Path, default=None, help="Case store JSON file (default from config)")

    parser = argparse.ArgumentParser(
        prog="carewatch",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    classify = subparsers.add_parser("classify", parents=[common], help="Classify a piece of text")
    classify.add_argument("text", help="Observation text to classify")

    add = subparsers.add_parser("add", parents=[session], help="Submit a new case")
    _add_case_fields(add)

    subparsers.add_parser("list", parents=[session], help="List cases visible to your role")

    edit = subparsers.add_parser("edit", parents=[session], help="Edit an existing case (admin/organization)")
    edit.add_argument("case_id", type=int, help="Case id")
    _add_case_fields(edit)

    delete = subparsers.add_parser("delete", parents=[session], help="Delete a case (admin/organization)")
    delete.add_argument("case_id", type=int, help="Case id")

    subparsers.add_parser("stats", parents=[session], help="Show statistics over visible cases")

    duplicates = subparsers.add_parser("duplicates", parents=[session], help="Find cases about the same child")
    duplicates.add_argument("--name", required=True, help="Child's name")
    duplicates.add_argument("--age", type=int, required=True, help="Child's age in years")
    duplicates.add_argument("--gender", required=True, help="Child's gender")
    duplicates.add_argument("--exclude", type=int, default=None, help="Case id to leave out")

    subparsers.add_parser("validate-config", parents=[common], help="Validate configuration")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    handler = HANDLERS.get(args.command)
    if handler is None:
        parser.error(f"Unsupported command: {args.command}")

    try:
        config = load_config(args.root, args.config)
        return handler(args, config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except CarewatchError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
