"""Tree builder: turns merged line records into a nested value.

Indentation alone decides nesting. The builder keeps a cursor into the
record list and never modifies the list itself.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from ..config import DEFAULT_MAX_DEPTH
from ..errors import NTDuplicateKeyError, create_indentation_error, create_syntax_error
from ..types import NestedText
from .lines import Line, LineKind


class TreeBuilder:
    """Recursive descent over merged records."""

    def __init__(self, lines: Sequence[Line], *, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self.lines = lines
        self.pos = 0
        self.max_depth = max_depth

    def peek(self) -> Optional[Line]:
        if self.pos < len(self.lines):
            return self.lines[self.pos]
        return None

    def advance(self) -> Line:
        line = self.lines[self.pos]
        self.pos += 1
        return line

    def build(self) -> Optional[NestedText]:
        """Build the document value; None when there are no records."""
        first = self.peek()
        if first is None:
            return None

        if first.indent:
            raise create_indentation_error("Unexpected indentation", line=first.lineno, column=1)

        if first.kind is LineKind.INLINE:
            self.advance()
            self._expect_end("Unexpected line after inline")
            return first.value

        if first.kind is LineKind.STRING_ITEM:
            self.advance()
            self._expect_end("Unexpected line after string")
            return first.value

        result = self.collect(0, 1)
        self._expect_end("Unexpected line after dictionary or list")
        return result

    def _expect_end(self, message: str) -> None:
        line = self.peek()
        if line is not None:
            raise create_syntax_error(message, line=line.lineno)

    def collect(self, level: int, depth: int) -> NestedText:
        """Collect the block whose first record is at the cursor."""
        line = self.peek()
        if depth > self.max_depth:
            raise create_indentation_error(
                f"Maximum nesting depth of {self.max_depth} exceeded",
                line=line.lineno,
                column=line.indent_column,
            )

        if line.kind is LineKind.LIST_ITEM:
            return self._collect_list(level, depth)
        if line.kind in (LineKind.DICT_ITEM, LineKind.KEY_ITEM):
            return self._collect_dict(level, depth)
        if line.kind in (LineKind.STRING_ITEM, LineKind.INLINE):
            return self.advance().value
        raise create_syntax_error(
            "Expected dictionary, list, string, or inline",
            line=line.lineno,
            column=1,
        )

    def _collect_nested(self, level: int, depth: int) -> NestedText:
        value = self.collect(self.peek().indent, depth + 1)
        following = self.peek()
        if following is not None and following.indent > level:
            raise create_indentation_error("Unexpected indentation", line=following.lineno, column=1)
        return value

    def _collect_list(self, level: int, depth: int) -> List[NestedText]:
        result: List[NestedText] = []

        while self.pos < len(self.lines):
            line = self.lines[self.pos]
            if line.indent < level:
                break
            if line.kind is not LineKind.LIST_ITEM:
                raise create_syntax_error("Expected list item", line=line.lineno, column=1)

            self.advance()
            value: NestedText = line.value
            following = self.peek()
            if not value and following is not None and following.indent > line.indent:
                value = self._collect_nested(level, depth)
            result.append(value)

        return result

    def _collect_dict(self, level: int, depth: int) -> Dict[str, NestedText]:
        result: Dict[str, NestedText] = {}

        while self.pos < len(self.lines):
            line = self.lines[self.pos]
            if line.indent < level:
                break
            if line.indent > level:
                raise create_indentation_error("Unexpected indentation", line=line.lineno, column=1)

            if line.kind is LineKind.DICT_ITEM:
                key, value = line.key, line.value
            elif line.kind is LineKind.KEY_ITEM:
                key, value = line.value, None
            else:
                raise create_syntax_error("Expected dictionary key", line=line.lineno, column=1)

            self.advance()
            following = self.peek()
            if value is None and following is not None and following.indent > level:
                value = self._collect_nested(level, depth)

            if key in result:
                raise NTDuplicateKeyError(
                    message=f"Duplicate key '{key}'",
                    line=line.lineno,
                    column=line.indent_column,
                    key=key,
                )
            result[key] = "" if value is None else value

        return result


__all__ = ["TreeBuilder"]
