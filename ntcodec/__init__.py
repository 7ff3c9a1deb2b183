"""
ntcodec: a reader and writer for NestedText.

NestedText is a line-oriented format for nested strings, lists and
dictionaries. It has no quoting or escaping and never converts types: every
leaf is a string. Structure comes from indentation and a handful of line
prefixes:

* ``key: value`` and ``key:`` followed by an indented block for dictionaries
* ``- item`` for lists
* ``> text`` for (multi-line) strings
* ``: key`` for keys that cannot be written bare
* ``[a, b]`` and ``{a: b}`` for small inline collections

The package is organised as:

* ``parser``: scanner, inline grammar, continuation merger and tree builder
  behind ``parse()``.
* ``formatting``: the serializer behind ``serialize()``.
* ``cli``: ``nt2json`` and ``json2nt`` command line tools.
"""

import re
from pathlib import Path
from importlib import metadata as _metadata

from .config import DumpOptions, ParseOptions
from .errors import (
    NTDuplicateKeyError,
    NTError,
    NTIndentationError,
    NTSerializeError,
    NTSyntaxError,
)
from .formatting import serialize
from .parser import parse, parse_minimal

load = parse
dump = serialize


def _local_version() -> str | None:
    root = Path(__file__).resolve().parents[1]
    pyproject = root / "pyproject.toml"
    if not pyproject.exists():
        return None
    try:
        text = pyproject.read_text(encoding="utf-8")
    except OSError:  # pragma: no cover - IO errors should not break imports
        return None
    match = re.search(r"^version\s*=\s*\"([^\"]+)\"", text, flags=re.MULTILINE)
    if match:
        return match.group(1)
    return None


try:  # pragma: no cover - metadata fallback for editable installs
    __version__ = _metadata.version("ntcodec")
except _metadata.PackageNotFoundError:  # pragma: no cover - source tree
    __version__ = _local_version() or "0.1.0"

__all__ = [
    "__version__",
    "parse",
    "parse_minimal",
    "serialize",
    "load",
    "dump",
    "ParseOptions",
    "DumpOptions",
    "NTError",
    "NTSyntaxError",
    "NTIndentationError",
    "NTDuplicateKeyError",
    "NTSerializeError",
]
