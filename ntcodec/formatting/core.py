"""Serializer rendering nested values as NestedText."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any, List, Optional

from ..config import DumpOptions
from ..errors import NTSerializeError

logger = logging.getLogger(__name__)

_NEWLINE_SPLIT_RE = re.compile(r"\r\n|\r|\n")
# Two-character sequences that would be read back as line syntax
_KEY_HAZARD_RE = re.compile(r"[-#>:] ")


def has_newlines(text: str) -> bool:
    return "\n" in text or "\r" in text


def needs_key_item(key: str) -> bool:
    """Check whether a key must be written in the ``: key`` form to survive a round trip."""
    if not key or has_newlines(key):
        return True
    if key[0] in "[{#" or key[0].isspace() or key[-1].isspace():
        return True
    return _KEY_HAZARD_RE.search(key) is not None


class TreeFormatter:
    """
    Renders a tree of strings, lists and mappings.

    Block style is chosen per node: multi-line strings become ``>`` lines,
    awkward keys become ``:`` lines, empty collections become ``[]``/``{}``.
    """

    def __init__(self, options: Optional[DumpOptions] = None):
        self.options = options or DumpOptions()

    def format(self, value: Any) -> str:
        lines: List[str] = []
        self._format_value(value, "", value, 1, lines)
        newline = self.options.newline
        return "".join(line + newline for line in lines)

    def _check_depth(self, depth: int, culprit: Any) -> None:
        if depth > self.options.max_depth:
            raise NTSerializeError(
                message=f"Maximum nesting depth of {self.options.max_depth} exceeded",
                culprit=culprit,
            )

    def _format_value(self, value: Any, indent: str, culprit: Any, depth: int, lines: List[str]) -> None:
        if isinstance(value, str):
            self._format_string(value, indent, lines)
        elif isinstance(value, (list, tuple)):
            self._check_depth(depth, culprit)
            self._format_list(value, indent, depth, lines)
        elif isinstance(value, Mapping):
            self._check_depth(depth, culprit)
            self._format_dict(value, indent, depth, lines)
        else:
            raise NTSerializeError(message="Invalid value", culprit=culprit)

    @staticmethod
    def _tagged_lines(text: str, indent: str, token: str, lines: List[str]) -> None:
        for part in _NEWLINE_SPLIT_RE.split(text):
            lines.append(f"{indent}{token} {part}" if part else f"{indent}{token}")

    def _format_string(self, value: str, indent: str, lines: List[str]) -> None:
        self._tagged_lines(value, indent, ">", lines)

    def _format_list(self, value, indent: str, depth: int, lines: List[str]) -> None:
        if not value:
            lines.append(f"{indent}[]")
            return

        nested_indent = indent + self.options.indent
        for item in value:
            if isinstance(item, str) and not has_newlines(item):
                lines.append(f"{indent}- {item}" if item else f"{indent}-")
            else:
                lines.append(f"{indent}-")
                self._format_value(item, nested_indent, item, depth + 1, lines)

    def _format_dict(self, value: Mapping, indent: str, depth: int, lines: List[str]) -> None:
        if not value:
            lines.append(f"{indent}{{}}")
            return

        nested_indent = indent + self.options.indent
        for key, item in value.items():
            if not isinstance(key, str):
                raise NTSerializeError(message="Invalid key", culprit=key)

            if needs_key_item(key):
                self._tagged_lines(key, indent, ":", lines)
                self._format_value(item, nested_indent, key, depth + 1, lines)
            elif not isinstance(item, str) or has_newlines(item):
                lines.append(f"{indent}{key}:")
                self._format_value(item, nested_indent, key, depth + 1, lines)
            else:
                lines.append(f"{indent}{key}: {item}" if item else f"{indent}{key}:")


def serialize(
    tree: Any,
    options: Optional[DumpOptions] = None,
    *,
    indent: Optional[str] = None,
    newline: Optional[str] = None,
) -> str:
    """
    Render a tree of strings, lists and mappings as NestedText.

    Args:
        tree: The value to render
        options: Optional dump options
        indent: Overrides ``options.indent``
        newline: Overrides ``options.newline``

    Returns:
        The document text; every line, including the last, ends with the
        configured newline

    Raises:
        NTSerializeError: If a node is not a string, list, tuple or mapping;
            ``culprit`` holds the offending key or value
        ValueError: If ``indent`` is not made of spaces or ``newline`` is not
            one of ``"\n"``, ``"\r\n"`` or ``"\r"``
    """
    options = options or DumpOptions()
    if indent is not None or newline is not None:
        options = DumpOptions(
            indent=options.indent if indent is None else indent,
            newline=options.newline if newline is None else newline,
            max_depth=options.max_depth,
        )
    text = TreeFormatter(options).format(tree)
    logger.debug("Serialized %s into %d characters", type(tree).__name__, len(text))
    return text


__all__ = ["TreeFormatter", "serialize", "needs_key_item", "has_newlines"]
