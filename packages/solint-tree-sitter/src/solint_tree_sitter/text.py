"""Offset bookkeeping between tree-sitter and Python strings.

Tree-sitter reports byte offsets and byte columns over the UTF-8 encoding of the
source. Diagnostics and fix edits use ``str`` indices instead, so every position
handed to a rule goes through :class:`SourceText`.
"""

import re
from typing import List, Tuple

from tree_sitter import Node

from .node_types import Position, TextRange


class SourceText:
    """UTF-8 view of a source string with byte -> character conversions"""

    def __init__(self, content: str):
        self.content = content
        self.data = content.encode("utf-8")
        self._ascii = len(self.data) == len(content)
        self._line_starts: List[int] = [0] + [m.end() for m in re.finditer(b"\n", self.data)]

    def offset(self, byte_offset: int) -> int:
        """Convert a byte offset into a ``str`` index."""
        if self._ascii:
            return byte_offset
        return len(self.data[:byte_offset].decode("utf-8", errors="replace"))

    def column(self, point: Tuple[int, int]) -> int:
        """Convert a tree-sitter ``(row, byte_column)`` point into a character column."""
        row, byte_column = point
        if self._ascii:
            return byte_column
        start = self._line_starts[row]
        return len(self.data[start : start + byte_column].decode("utf-8", errors="replace"))

    def position(self, point: Tuple[int, int], byte_offset: int) -> Position:
        return Position(line=point[0], column=self.column(point), offset=self.offset(byte_offset))

    def node_range(self, node: Node) -> TextRange:
        return TextRange(
            start=self.position(node.start_point, node.start_byte),
            end=self.position(node.end_point, node.end_byte),
        )

    def node_text(self, node: Node) -> str:
        return self.data[node.start_byte : node.end_byte].decode("utf-8", errors="replace")

    @property
    def line_count(self) -> int:
        return len(self._line_starts)
