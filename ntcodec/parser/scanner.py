"""Line scanner: classifies each physical line of a document.

The scanner walks the source once, left to right. Every call to
``next_line`` consumes one line (including its terminator) and returns the
classified record together with the offset at which the next line starts.
"""

from __future__ import annotations

import re
from typing import Iterator, List, Tuple

from ..config import DEFAULT_MAX_DEPTH
from ..errors import create_indentation_error, create_syntax_error
from .inline import InlineParser
from .lines import (
    BlankLine,
    CommentLine,
    DictItem,
    InlineItem,
    KeyItem,
    Line,
    ListItem,
    StringItem,
)

_LINE_END_RE = re.compile(r"[\r\n]")
# A colon ends a key only when a space or the end of the line follows it
_KEY_END_RE = re.compile(r":(?= |\Z)")

_TAGGED_ITEMS = {
    ">": StringItem,
    "-": ListItem,
    ":": KeyItem,
}


def _is_line_end(char: str) -> bool:
    return char in ("\r", "\n", "")


class LineScanner:
    """Tokenizer producing one ``Line`` record per source line."""

    def __init__(self, source: str, *, minimal: bool = False, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self.source = source
        self.minimal = minimal
        self.max_depth = max_depth

    def __iter__(self) -> Iterator[Line]:
        index = 0
        lineno = 1
        while True:
            line, index = self.next_line(index, lineno)
            yield line
            if not line.newline:
                return
            lineno += 1

    def scan(self) -> List[Line]:
        """Classify every line of the source."""
        return list(self)

    def _peek(self, index: int) -> str:
        if index < len(self.source):
            return self.source[index]
        return ""

    def _line_end(self, index: int) -> int:
        match = _LINE_END_RE.search(self.source, index)
        return match.start() if match else len(self.source)

    def _conclude(self, index: int) -> Tuple[str, int]:
        """Consume the terminator at ``index``; return it and the next offset."""
        if self.source.startswith("\r\n", index):
            return "\r\n", index + 2
        char = self._peek(index)
        return char, index + len(char)

    def next_line(self, index: int, lineno: int) -> Tuple[Line, int]:
        """Classify the line starting at ``index``."""
        start = index
        while self._peek(index) == " ":
            index += 1
        indent = index - start
        char = self._peek(index)

        if char.isspace() and not _is_line_end(char):
            raise create_indentation_error(
                f"Only ASCII spaces are allowed as indentation, not {char!r}",
                line=lineno,
                column=index - start + 1,
            )

        if _is_line_end(char):
            newline, next_index = self._conclude(index)
            return BlankLine(indent=indent, lineno=lineno, start=start, newline=newline), next_index

        if char == "#":
            newline, next_index = self._conclude(self._line_end(index))
            return CommentLine(indent=indent, lineno=lineno, start=start, newline=newline), next_index

        following = self._peek(index + 1)
        if char in _TAGGED_ITEMS and (following == " " or _is_line_end(following)):
            if self.minimal and char == ":":
                raise create_syntax_error(
                    "Key items are not supported",
                    line=lineno,
                    column=index - start + 1,
                )
            end = self._line_end(index)
            value = self.source[index + 2:end] if following == " " else ""
            newline, next_index = self._conclude(end)
            record = _TAGGED_ITEMS[char](
                indent=indent,
                lineno=lineno,
                start=start,
                newline=newline,
                value=value,
            )
            return record, next_index

        if char in ("[", "{"):
            return self._scan_inline(index, start, indent, lineno)

        return self._scan_dict_item(index, start, indent, lineno)

    def _scan_inline(self, index: int, start: int, indent: int, lineno: int) -> Tuple[Line, int]:
        if self.minimal:
            raise create_syntax_error(
                "Inline lists and dictionaries are not supported",
                line=lineno,
                column=index - start + 1,
            )

        parser = InlineParser(self.source, lineno=lineno, start=start, max_depth=self.max_depth)
        value, index = parser.parse(index)

        if not _is_line_end(self._peek(index)):
            raise create_syntax_error(
                "Expected newline or end of file",
                line=lineno,
                column=index - start + 1,
            )

        newline, next_index = self._conclude(index)
        return InlineItem(indent=indent, lineno=lineno, start=start, newline=newline, value=value), next_index

    def _scan_dict_item(self, index: int, start: int, indent: int, lineno: int) -> Tuple[Line, int]:
        end = self._line_end(index)
        match = _KEY_END_RE.search(self.source, index, end)
        if match is None:
            raise create_syntax_error("Expected ':'", line=lineno, column=indent + 1)

        key = self.source[index:match.start()].strip()
        colon = match.start()
        if self._peek(colon + 1) == " ":
            value = self.source[colon + 2:end]
        else:
            value = None

        newline, next_index = self._conclude(end)
        record = DictItem(
            indent=indent,
            lineno=lineno,
            start=start,
            newline=newline,
            key=key,
            value=value,
        )
        return record, next_index


__all__ = ["LineScanner"]
