"""NestedText parser package.

Public API:
    parse(source, options) -> tree or None
    parse_minimal(source) -> tree or None
    NTParser - the parser class driving the pipeline

Error types:
    NTSyntaxError, NTIndentationError, NTDuplicateKeyError
"""

from typing import Optional

from ..config import ParseOptions
from ..errors import NTDuplicateKeyError, NTIndentationError, NTSyntaxError
from ..types import NestedText
from .parse import NTParser


def parse(source: str, options: Optional[ParseOptions] = None) -> Optional[NestedText]:
    """
    Parse a NestedText document into strings, lists and dicts.

    Args:
        source: Complete document text
        options: Optional parse options (depth limit, minimal dialect)

    Returns:
        The document value, or None if the document holds only blank lines
        and comments

    Raises:
        NTSyntaxError: If the document is malformed; ``line`` and ``column``
            locate the problem

    Example:
        ```python
        parse("name: Ada\\nlanguages:\\n    - English\\n")
        # {"name": "Ada", "languages": ["English"]}
        ```
    """
    return NTParser(source, options=options).parse()


def parse_minimal(source: str) -> Optional[NestedText]:
    """Parse a document written in the minimal dialect (no inline or key items)."""
    return NTParser(source, options=ParseOptions(minimal=True)).parse()


__all__ = [
    "parse",
    "parse_minimal",
    "NTParser",
    "NTSyntaxError",
    "NTIndentationError",
    "NTDuplicateKeyError",
]
