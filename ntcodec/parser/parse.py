"""Recursive descent parser for NestedText documents.

Parsing runs as an explicit pipeline, each stage producing a new sequence:

    scan -> filter -> merge -> build
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ..config import ParseOptions
from ..types import NestedText
from .builder import TreeBuilder
from .lines import Line
from .merge import filter_lines, merge_continuations
from .scanner import LineScanner

logger = logging.getLogger(__name__)


class NTParser:
    """Parser for a single NestedText document."""

    def __init__(self, source: str, *, options: Optional[ParseOptions] = None) -> None:
        if not isinstance(source, str):
            raise TypeError(f"source must be str, not {type(source).__name__}")
        self.source = source
        self.options = options or ParseOptions()

    def scan(self) -> List[Line]:
        """Classify every physical line."""
        scanner = LineScanner(
            self.source,
            minimal=self.options.minimal,
            max_depth=self.options.max_depth,
        )
        return scanner.scan()

    def records(self) -> List[Line]:
        """Content records after filtering and merging continuations."""
        lines = self.scan()
        content = filter_lines(lines)
        merged = merge_continuations(content)
        logger.debug(
            "Scanned %d lines: %d content records, %d after merging",
            len(lines),
            len(content),
            len(merged),
        )
        return merged

    def parse(self) -> Optional[NestedText]:
        """Parse the whole document; None when it holds no content."""
        builder = TreeBuilder(self.records(), max_depth=self.options.max_depth)
        result = builder.build()
        logger.debug("Parsed document into %s", type(result).__name__)
        return result


__all__ = ["NTParser"]
