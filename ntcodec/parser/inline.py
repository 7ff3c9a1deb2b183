"""Inline (flow style) grammar for ``[...]`` lists and ``{...}`` mappings.

Grammar:
    InlineList  = "[" , [ Value , { "," , Value } ] , "]" ;
    InlineDict  = "{" , [ Pair , { "," , Pair } ] , "}" ;
    Pair        = Text , ":" , Value ;
    Value       = Text | InlineList | InlineDict ;

Text is everything up to the next delimiter, trimmed. There is no escaping,
so delimiters can never appear inside inline text.
"""

from __future__ import annotations

from typing import Dict, List, Tuple, Union

from ..errors import NTDuplicateKeyError, NTSyntaxError, create_syntax_error

_LIST_STOP = frozenset(",[]{}\r\n")
_DICT_STOP = frozenset(",[]{}:\r\n")
_LINE_END = frozenset("\r\n")


class InlineParser:
    """Recursive descent parser over a cursor into the source text.

    One instance serves a single source line; ``start`` is the offset of that
    line so errors can report columns.
    """

    def __init__(self, source: str, *, lineno: int, start: int, max_depth: int) -> None:
        self.source = source
        self.lineno = lineno
        self.start = start
        self.max_depth = max_depth

    def parse(self, index: int) -> Tuple[Union[List, Dict], int]:
        """Parse the collection opening at ``index``.

        Returns the value and the offset just past it (and past any trailing
        spaces).
        """
        if self._peek(index) == "[":
            return self._parse_list(index, 1)
        return self._parse_dict(index, 1)

    def _peek(self, index: int) -> str:
        if index < len(self.source):
            return self.source[index]
        return ""

    def _error(self, message: str, index: int) -> NTSyntaxError:
        return create_syntax_error(message, line=self.lineno, column=index - self.start + 1)

    def _check_depth(self, index: int, depth: int) -> None:
        if depth > self.max_depth:
            raise self._error(f"Maximum nesting depth of {self.max_depth} exceeded", index)

    def _read_text(self, index: int, stop: frozenset) -> Tuple[str, int]:
        source = self.source
        end = index
        length = len(source)
        while end < length and source[end] not in stop:
            end += 1
        return source[index:end].strip(), end

    def _skip_trailing(self, index: int) -> int:
        source = self.source
        while index < len(source) and source[index] not in _LINE_END and source[index].isspace():
            index += 1
        return index

    def _parse_list(self, index: int, depth: int) -> Tuple[List, int]:
        self._check_depth(index, depth)
        items: List = []
        index += 1

        if self._peek(index) == "]":
            return items, self._skip_trailing(index + 1)

        while True:
            text, index = self._read_text(index, _LIST_STOP)
            char = self._peek(index)

            if not text and char == "[":
                value, index = self._parse_list(index, depth + 1)
            elif not text and char == "{":
                value, index = self._parse_dict(index, depth + 1)
            elif char in ("[", "{", "}"):
                raise self._error(f"Unexpected '{char}'", index)
            else:
                value = text

            items.append(value)
            char = self._peek(index)

            if char == "]":
                return items, self._skip_trailing(index + 1)
            if char != ",":
                raise self._error("Expected ',' or ']'", index)
            index += 1

    def _parse_dict(self, index: int, depth: int) -> Tuple[Dict, int]:
        self._check_depth(index, depth)
        result: Dict = {}
        index += 1

        if self._peek(index) == "}":
            return result, self._skip_trailing(index + 1)

        while True:
            key_start = index
            key, index = self._read_text(index, _DICT_STOP)

            if self._peek(index) != ":":
                raise self._error("Expected ':'", index)

            if key in result:
                while self.source[key_start].isspace():
                    key_start += 1
                raise NTDuplicateKeyError(
                    message=f"Duplicate key '{key}'",
                    line=self.lineno,
                    column=key_start - self.start + 1,
                    key=key,
                )

            text, index = self._read_text(index + 1, _DICT_STOP)
            char = self._peek(index)

            if not text and char == "[":
                value, index = self._parse_list(index, depth + 1)
            elif not text and char == "{":
                value, index = self._parse_dict(index, depth + 1)
            elif char in ("[", "]", "{"):
                raise self._error(f"Unexpected '{char}'", index)
            else:
                value = text

            result[key] = value
            char = self._peek(index)

            if char == "}":
                return result, self._skip_trailing(index + 1)
            if char != ",":
                raise self._error("Expected ',' or '}'", index)
            index += 1


__all__ = ["InlineParser"]
