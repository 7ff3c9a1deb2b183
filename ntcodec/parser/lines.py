"""Line records produced by the scanner.

Each physical source line becomes exactly one record. Records are frozen;
later passes build new records instead of editing existing ones.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, List, Optional, Union


class LineKind(Enum):
    """Classification of a source line."""

    BLANK = "B"
    COMMENT = "C"
    DICT_ITEM = "D"
    INLINE = "I"
    LIST_ITEM = "L"
    STRING_ITEM = "S"
    KEY_ITEM = "K"


@dataclass(frozen=True)
class Line:
    """A classified source line with position information."""

    indent: int
    lineno: int
    # Offset of the first character of the line in the source
    start: int
    # Terminator found at the end of the line, "" at end of input
    newline: str

    kind: ClassVar[LineKind]

    def column(self, offset: int) -> int:
        """1-based column of a source offset that lies on this line."""
        return offset - self.start + 1

    @property
    def indent_column(self) -> int:
        return self.indent + 1


@dataclass(frozen=True)
class BlankLine(Line):
    kind: ClassVar[LineKind] = LineKind.BLANK


@dataclass(frozen=True)
class CommentLine(Line):
    kind: ClassVar[LineKind] = LineKind.COMMENT


@dataclass(frozen=True)
class StringItem(Line):
    """``> text``: one line of a multi-line string."""

    value: str
    kind: ClassVar[LineKind] = LineKind.STRING_ITEM


@dataclass(frozen=True)
class ListItem(Line):
    """``- text``: a list entry, possibly followed by a nested block."""

    value: str
    kind: ClassVar[LineKind] = LineKind.LIST_ITEM


@dataclass(frozen=True)
class KeyItem(Line):
    """``: text``: one line of a multi-line mapping key."""

    value: str
    kind: ClassVar[LineKind] = LineKind.KEY_ITEM


@dataclass(frozen=True)
class DictItem(Line):
    """``key: text`` or ``key:``.

    ``value`` is None when the colon ends the line, which lets a nested block
    on the following deeper lines supply the value.
    """

    key: str
    value: Optional[str]
    kind: ClassVar[LineKind] = LineKind.DICT_ITEM


@dataclass(frozen=True)
class InlineItem(Line):
    """``[...]`` or ``{...}`` already parsed by the inline grammar."""

    value: Union[List, Dict]
    kind: ClassVar[LineKind] = LineKind.INLINE


CONTENT_KINDS = frozenset(
    {
        LineKind.DICT_ITEM,
        LineKind.INLINE,
        LineKind.LIST_ITEM,
        LineKind.STRING_ITEM,
        LineKind.KEY_ITEM,
    }
)


__all__ = [
    "LineKind",
    "Line",
    "BlankLine",
    "CommentLine",
    "StringItem",
    "ListItem",
    "KeyItem",
    "DictItem",
    "InlineItem",
    "CONTENT_KINDS",
]
