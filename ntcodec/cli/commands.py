"""Command implementations for nt2json and json2nt."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from ..config import NEWLINES, DumpOptions, ParseOptions
from ..formatting import serialize
from ..parser import parse
from .errors import CLIInputError

logger = logging.getLogger(__name__)


def read_input(path: Optional[str]) -> str:
    """
    Read the whole input as text, keeping line terminators untouched.

    Args:
        path: File to read; None or ``-`` reads standard input

    Raises:
        CLIInputError: If the file is missing, unreadable or not UTF-8
    """
    if path is None or path == "-":
        stream = sys.stdin
        buffer = getattr(stream, "buffer", None)
        if buffer is None:
            return stream.read()
        data = buffer.read()
        source = "<stdin>"
    else:
        file_path = Path(path)
        try:
            data = file_path.read_bytes()
        except FileNotFoundError:
            raise CLIInputError(f"File not found: {path}", hint="Check the path and try again")
        except OSError as exc:
            raise CLIInputError(f"Cannot read {path}: {exc.strerror or exc}")
        source = path

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise CLIInputError(f"{source} is not valid UTF-8: {exc.reason}")


def cmd_nt2json(args: argparse.Namespace) -> int:
    """Convert NestedText to JSON."""
    text = read_input(args.file)
    value = parse(text, ParseOptions.from_env())
    logger.debug("Writing JSON for %s", type(value).__name__)
    sys.stdout.write(json.dumps(value, indent=args.json_indent, ensure_ascii=False))
    sys.stdout.write("\n")
    return 0


def cmd_json2nt(args: argparse.Namespace) -> int:
    """Convert JSON to NestedText."""
    text = read_input(args.file)
    try:
        value: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CLIInputError(
            f"Invalid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})"
        )

    options = DumpOptions.from_env(
        indent=" " * args.indent if args.indent else None,
        newline=NEWLINES[args.newline] if args.newline else None,
    )
    sys.stdout.write(serialize(value, options))
    return 0


def add_nt2json_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("file", nargs="?", help="NestedText file to read (default: standard input)")
    parser.add_argument(
        "--json-indent",
        type=int,
        default=4,
        help="Indentation of the JSON output (default: 4)",
    )
    parser.add_argument("--debug", action="store_true", help="Show a traceback on errors")
    parser.set_defaults(func=cmd_nt2json)


def add_json2nt_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("file", nargs="?", help="JSON file to read (default: standard input)")
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Spaces per nesting level (default: 4, or NTCODEC_INDENT)",
    )
    parser.add_argument(
        "--newline",
        choices=sorted(NEWLINES),
        default=None,
        help="Line terminator to write (default: lf, or NTCODEC_NEWLINE)",
    )
    parser.add_argument("--debug", action="store_true", help="Show a traceback on errors")
    parser.set_defaults(func=cmd_json2nt)


__all__ = [
    "read_input",
    "cmd_nt2json",
    "cmd_json2nt",
    "add_nt2json_arguments",
    "add_json2nt_arguments",
]
