"""Value model shared by the parser and the serializer."""

from __future__ import annotations

from typing import Dict, List, Union

NestedText = Union[str, List["NestedText"], Dict[str, "NestedText"]]
NestedTextList = List[NestedText]
NestedTextDict = Dict[str, NestedText]

__all__ = ["NestedText", "NestedTextList", "NestedTextDict"]
