"""
ntcodec CLI entry points.

Three console scripts share one implementation:

    ntcodec nt2json [FILE]     NestedText -> JSON
    ntcodec json2nt [FILE]     JSON -> NestedText
    nt2json [FILE] / json2nt [FILE]

FILE defaults to standard input. Errors are reported on standard error with
exit status 1; ``--debug`` (or NTCODEC_DEBUG / DEBUG in the environment) adds
a traceback.
"""

import argparse
import logging
from typing import Callable, List, Optional

from ntcodec import __version__

from .commands import add_json2nt_arguments, add_nt2json_arguments
from .errors import cli_debug_enabled, handle_cli_exception


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ntcodec",
        description="Convert between NestedText and JSON",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    nt2json_parser = subparsers.add_parser("nt2json", help="Convert NestedText to JSON")
    add_nt2json_arguments(nt2json_parser)

    json2nt_parser = subparsers.add_parser("json2nt", help="Convert JSON to NestedText")
    add_json2nt_arguments(json2nt_parser)

    return parser


def _run(parser: argparse.ArgumentParser, argv: Optional[List[str]]) -> int:
    args = parser.parse_args(argv)
    debug = cli_debug_enabled(args.debug)
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except Exception as exc:
        handle_cli_exception(exc, debug=debug)
        return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for ``ntcodec`` and ``python -m ntcodec.cli``."""
    return _run(build_parser(), argv)


def _single_command(prog: str, description: str, add_arguments: Callable) -> Callable:
    def entry(argv: Optional[List[str]] = None) -> int:
        parser = argparse.ArgumentParser(prog=prog, description=description)
        add_arguments(parser)
        return _run(parser, argv)

    entry.__name__ = f"{prog}_main"
    entry.__doc__ = f"Entry point for the ``{prog}`` console script."
    return entry


nt2json_main = _single_command("nt2json", "Convert NestedText to JSON", add_nt2json_arguments)
json2nt_main = _single_command("json2nt", "Convert JSON to NestedText", add_json2nt_arguments)


__all__ = ["main", "build_parser", "nt2json_main", "json2nt_main"]
