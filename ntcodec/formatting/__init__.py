"""NestedText serialization."""

from .core import TreeFormatter, has_newlines, needs_key_item, serialize

__all__ = ["TreeFormatter", "serialize", "needs_key_item", "has_newlines"]
