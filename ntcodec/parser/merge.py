"""Cleanup passes between scanning and tree building.

``filter_lines`` drops everything that carries no content. ``merge_continuations``
joins consecutive ``>`` lines into one multi-line string and consecutive ``:``
lines into one multi-line key, and rejects indentation that cannot belong to
any valid structure.
"""

from __future__ import annotations

import dataclasses
from typing import Iterable, List

from ..errors import create_indentation_error, create_syntax_error
from .lines import CONTENT_KINDS, Line, LineKind


def filter_lines(lines: Iterable[Line]) -> List[Line]:
    """Return the records that carry content (no blanks, no comments)."""
    return [line for line in lines if line.kind in CONTENT_KINDS]


def merge_continuations(lines: Iterable[Line]) -> List[Line]:
    """Return a new record list with continuation lines merged."""
    merged: List[Line] = []
    for line in lines:
        if merged and _continues(merged[-1], line):
            merged[-1] = _join(merged[-1], line)
        else:
            merged.append(line)
    return merged


def _join(before: Line, after: Line) -> Line:
    return dataclasses.replace(
        before,
        value=before.value + before.newline + after.value,
        newline=after.newline,
    )


def _continues(before: Line, after: Line) -> bool:
    """Check the pair for indentation problems; True when ``after`` extends ``before``."""
    if before.kind is LineKind.KEY_ITEM:
        if after.indent < before.indent:
            raise create_syntax_error("Expected value", line=before.lineno, column=before.indent_column)
        return after.kind is LineKind.KEY_ITEM and after.indent == before.indent

    if before.kind is LineKind.STRING_ITEM and after.kind is LineKind.STRING_ITEM:
        if after.indent > before.indent:
            raise create_indentation_error(
                "Unexpected indentation",
                line=after.lineno,
                column=before.indent_column,
            )
        if after.indent < before.indent:
            raise create_indentation_error("Unexpected indentation", line=after.lineno, column=1)
        return True

    if before.kind is LineKind.LIST_ITEM:
        if after.kind is LineKind.LIST_ITEM and after.indent > before.indent and before.value:
            raise create_indentation_error(
                "Unexpected indentation",
                line=after.lineno,
                column=before.indent_column,
            )
        if after.indent == before.indent and after.kind is not LineKind.LIST_ITEM:
            raise create_syntax_error(
                "Incorrect type embedded within a list",
                line=after.lineno,
                column=after.indent_column,
            )

    return False


__all__ = ["filter_lines", "merge_continuations"]
