"""Command-line interface for nestpath."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

from nestpath.diff import diff_paths
from nestpath.errors import NestPathError
from nestpath.extract import extract_paths
from nestpath.flatten import flatten
from nestpath.io import load_document
from nestpath.keys import to_dotted
from nestpath.logging import get_logger, level_from_env, set_global_log_level
from nestpath.resolve import resolve_dotted

logger = get_logger(__name__)

ROOT_LABEL = "<root>"

_DIFF_MARKERS = {"added": "+", "removed": "-", "changed": "~"}


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 8,
    max_col_width: Optional[int] = None,
) -> str:
    """Format rows as a plain ASCII table.

    Args:
        headers: Column headers.
        rows: Data rows.
        min_width: Minimum column width.
        max_col_width: Clip cells longer than this, with a ``...`` suffix.

    Returns:
        Table text, or ``""`` when there are no rows.
    """
    if not rows:
        return ""

    def clip(val: Any) -> str:
        s = str(val)
        if max_col_width is not None and len(s) > max_col_width:
            return s[: max_col_width - 3] + "..."
        return s

    clipped_headers = [clip(h) for h in headers]
    clipped_rows = [[clip(item) for item in row] for row in rows]

    all_data = [clipped_headers] + clipped_rows
    col_widths = [
        max(max(len(row[col]) for row in all_data), min_width)
        for col in range(len(clipped_headers))
    ]

    def format_row(row_data: List[str]) -> str:
        return " | ".join(
            f"{item:<{col_widths[i]}}" for i, item in enumerate(row_data)
        ).rstrip()

    lines = [format_row(clipped_headers)]
    lines.append("-+-".join("-" * width for width in col_widths))
    lines.extend(format_row(row) for row in clipped_rows)
    return "\n".join(lines)


def _dump(value: Any) -> str:
    """Render a value as compact JSON, falling back to ``str``."""
    return json.dumps(value, ensure_ascii=False, default=str)


def _load(path: Path) -> Any:
    try:
        return load_document(path)
    except FileNotFoundError:
        logger.error(f"File not found: {path}")
        sys.exit(1)
    except OSError as exc:
        logger.error(f"Cannot read {path}: {exc}")
        sys.exit(1)
    except ValueError as exc:
        logger.error(f"Failed to parse {path}: {exc}")
        sys.exit(1)


def _print_paths(
    path: Path, max_depth: Optional[int], sort_keys: bool, sep: Optional[str]
) -> None:
    data = _load(path)
    try:
        paths = extract_paths(data, max_depth=max_depth, sort_keys=sort_keys)
    except (NestPathError, TypeError) as exc:
        logger.error(f"Cannot extract paths from {path}: {exc}")
        sys.exit(1)
    for segments in paths:
        print(to_dotted(segments, sep) or ROOT_LABEL)
    logger.debug(f"{len(paths)} paths in {path}")


def _print_value(path: Path, dotted: str, sep: Optional[str]) -> None:
    data = _load(path)
    try:
        value = resolve_dotted(data, dotted, sep)
    except NestPathError as exc:
        logger.error(str(exc))
        sys.exit(1)
    print(_dump(value))


def _print_flat(path: Path, sep: Optional[str], as_json: bool) -> None:
    data = _load(path)
    try:
        record = flatten(data, sep=sep)
    except (NestPathError, TypeError, ValueError) as exc:
        logger.error(f"Cannot flatten {path}: {exc}")
        sys.exit(1)
    if as_json:
        print(json.dumps(record, indent=2, ensure_ascii=False, default=str))
        return
    rows = [[key or ROOT_LABEL, _dump(value)] for key, value in record.items()]
    table = _format_table(["path", "value"], rows, max_col_width=60)
    if table:
        print(table)


def _print_diff(old_path: Path, new_path: Path, sep: Optional[str]) -> None:
    old = _load(old_path)
    new = _load(new_path)
    try:
        changes = diff_paths(old, new)
    except (NestPathError, TypeError) as exc:
        logger.error(f"Cannot compare documents: {exc}")
        sys.exit(1)
    for change in changes:
        label = to_dotted(change.path, sep) or ROOT_LABEL
        if change.kind == "changed":
            detail = f"{_dump(change.old)} -> {_dump(change.new)}"
        elif change.kind == "added":
            detail = _dump(change.new)
        else:
            detail = _dump(change.old)
        print(f"{_DIFF_MARKERS[change.kind]} {label}: {detail}")
    if changes:
        logger.debug(f"{len(changes)} differing leaves")
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``nestpath`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="nestpath",
        description="Inspect leaf paths of JSON and YAML documents.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{paths,get,flatten,diff}",
        help="Available commands",
    )

    paths_parser = subparsers.add_parser("paths", help="List the path of every leaf")
    paths_parser.add_argument("document", type=Path, help="JSON or YAML file")
    paths_parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Fail when a path would be longer than this",
    )
    paths_parser.add_argument(
        "--sort-keys",
        action="store_true",
        help="Visit mapping keys in sorted order instead of document order",
    )

    get_parser = subparsers.add_parser("get", help="Print the value at a dotted path")
    get_parser.add_argument("document", type=Path, help="JSON or YAML file")
    get_parser.add_argument("path", help="Dotted path, e.g. user.hobbies.0")

    flatten_parser = subparsers.add_parser(
        "flatten", help="Print every leaf with its dotted path"
    )
    flatten_parser.add_argument("document", type=Path, help="JSON or YAML file")
    flatten_parser.add_argument(
        "--json", action="store_true", help="Print a JSON object instead of a table"
    )

    diff_parser = subparsers.add_parser(
        "diff", help="List leaves that differ between two documents"
    )
    diff_parser.add_argument("old", type=Path, help="Previous document")
    diff_parser.add_argument("new", type=Path, help="Current document")

    for p in (paths_parser, get_parser, flatten_parser, diff_parser):
        p.add_argument(
            "--sep",
            default=None,
            help="Segment separator for dotted paths (default: '.')",
        )

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(level_from_env())

    if args.sep == "":
        parser.error("--sep must not be empty")

    if args.command == "paths":
        if args.max_depth is not None and args.max_depth < 0:
            parser.error("--max-depth must be non-negative")
        _print_paths(args.document, args.max_depth, args.sort_keys, args.sep)
    elif args.command == "get":
        _print_value(args.document, args.path, args.sep)
    elif args.command == "flatten":
        _print_flat(args.document, args.sep, args.json)
    elif args.command == "diff":
        _print_diff(args.old, args.new, args.sep)


if __name__ == "__main__":
    main()
