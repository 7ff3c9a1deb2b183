"""Parse and dump configuration for ntcodec."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_INDENT = "    "
DEFAULT_NEWLINE = "\n"
DEFAULT_MAX_DEPTH = 200
# Highest depth the recursive parser and serializer can reach within the
# default interpreter recursion limit
MAX_DEPTH_LIMIT = 250

# Names accepted by NTCODEC_NEWLINE and the CLI --newline flag
NEWLINES = {
    "lf": "\n",
    "crlf": "\r\n",
    "cr": "\r",
}


@dataclass
class ParseOptions:
    """Options controlling how documents are parsed."""

    # Deepest nesting (blocks and inline brackets) accepted before failing
    max_depth: int = DEFAULT_MAX_DEPTH
    # Restrict input to the minimal dialect: no inline lines, no key items
    minimal: bool = False

    def __post_init__(self) -> None:
        _check_max_depth(self.max_depth)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "ParseOptions":
        """Build options from defaults, NTCODEC_* variables and explicit overrides."""
        env = os.environ if environ is None else environ
        values = {}
        max_depth = _env_int(env, "NTCODEC_MAX_DEPTH", upper=MAX_DEPTH_LIMIT)
        if max_depth is not None:
            values["max_depth"] = max_depth
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)


@dataclass
class DumpOptions:
    """Options controlling how trees are rendered."""

    indent: str = DEFAULT_INDENT
    newline: str = DEFAULT_NEWLINE
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        # Empty values fall back to the defaults
        if not self.indent:
            self.indent = DEFAULT_INDENT
        if not self.newline:
            self.newline = DEFAULT_NEWLINE
        if self.indent.strip(" "):
            raise ValueError(f"indent may only contain spaces, got {self.indent!r}")
        if self.newline not in NEWLINES.values():
            raise ValueError(f"newline must be one of '\\n', '\\r\\n' or '\\r', got {self.newline!r}")
        _check_max_depth(self.max_depth)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "DumpOptions":
        """Build options from defaults, NTCODEC_* variables and explicit overrides."""
        env = os.environ if environ is None else environ
        values = {}

        width = _env_int(env, "NTCODEC_INDENT")
        if width is not None:
            values["indent"] = " " * width

        newline_name = env.get("NTCODEC_NEWLINE")
        if newline_name:
            newline = NEWLINES.get(newline_name.strip().lower())
            if newline is None:
                logger.warning("Ignoring NTCODEC_NEWLINE=%r; expected one of %s", newline_name, ", ".join(NEWLINES))
            else:
                values["newline"] = newline

        max_depth = _env_int(env, "NTCODEC_MAX_DEPTH", upper=MAX_DEPTH_LIMIT)
        if max_depth is not None:
            values["max_depth"] = max_depth

        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)


def _check_max_depth(max_depth: int) -> None:
    if not 1 <= max_depth <= MAX_DEPTH_LIMIT:
        raise ValueError(f"max_depth must be between 1 and {MAX_DEPTH_LIMIT}, got {max_depth}")


def _env_int(env: Mapping[str, str], name: str, *, upper: Optional[int] = None) -> Optional[int]:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r; expected a positive integer", name, raw)
        return None
    if value < 1:
        logger.warning("Ignoring %s=%r; expected a positive integer", name, raw)
        return None
    if upper is not None and value > upper:
        logger.warning("Ignoring %s=%r; the largest supported value is %d", name, raw, upper)
        return None
    return value


__all__ = [
    "ParseOptions",
    "DumpOptions",
    "NEWLINES",
    "DEFAULT_INDENT",
    "DEFAULT_NEWLINE",
    "DEFAULT_MAX_DEPTH",
    "MAX_DEPTH_LIMIT",
]
