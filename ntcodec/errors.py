"""Unified error handling for ntcodec.

Every error carries its location (or culprit) as a native field:
- 1-based line numbers and column positions for parse errors
- The offending node for serialization errors
- Error codes for programmatic handling
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class NTError(Exception):
    """Base class for all ntcodec errors."""

    message: str
    line: Optional[int] = None
    column: Optional[int] = None
    code: str = "NT_ERROR"

    def __post_init__(self) -> None:
        super().__init__(self.message)

    @property
    def lineno(self) -> Optional[int]:
        """Zero-based line number, as used by the official NestedText tests."""
        return self.line - 1 if self.line is not None else None

    @property
    def colno(self) -> Optional[int]:
        """Zero-based column number, or None when only the line is known."""
        return self.column - 1 if self.column is not None else None

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        if self.column is None:
            return f"Line {self.line}: {self.message}"
        return f"Line {self.line}, column {self.column}: {self.message}"


@dataclass(eq=False)
class NTSyntaxError(NTError):
    """Structural error found while parsing a document."""

    code: str = "SYNTAX_ERROR"


@dataclass(eq=False)
class NTIndentationError(NTSyntaxError):
    """Indentation error: tabs, partial dedents or runaway nesting."""

    code: str = "INDENTATION_ERROR"


@dataclass(eq=False)
class NTDuplicateKeyError(NTSyntaxError):
    """A mapping key was seen twice at the same level."""

    key: Optional[str] = None
    code: str = "DUPLICATE_KEY"


@dataclass(eq=False)
class NTSerializeError(NTError):
    """A value that cannot be represented reached the serializer."""

    culprit: Any = None
    code: str = "INVALID_NODE"

    def __str__(self) -> str:
        return f"{self.message}\n  Culprit: {self.culprit!r}"


def create_syntax_error(
    message: str,
    *,
    line: int,
    column: Optional[int] = None,
) -> NTSyntaxError:
    """Create a syntax error at a source position."""
    return NTSyntaxError(message=message, line=line, column=column)


def create_indentation_error(
    message: str,
    *,
    line: int,
    column: Optional[int] = None,
) -> NTIndentationError:
    """Create an indentation error at a source position."""
    return NTIndentationError(message=message, line=line, column=column)


__all__ = [
    "NTError",
    "NTSyntaxError",
    "NTIndentationError",
    "NTDuplicateKeyError",
    "NTSerializeError",
    "create_syntax_error",
    "create_indentation_error",
]
