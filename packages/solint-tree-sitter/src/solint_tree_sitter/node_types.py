from dataclasses import dataclass, field
from typing import List, Optional

from tree_sitter import Node


@dataclass(frozen=True)
class Position:
    """A 0-based location in a source file.

    ``column`` counts characters from the start of the line and ``offset`` is a
    ``str`` index into the whole content, so both survive non-ASCII text.
    """

    line: int
    column: int
    offset: int


@dataclass(frozen=True)
class TextRange:
    start: Position
    end: Position


@dataclass
class SyntaxIssue:
    """A syntax error reported by the parser"""

    message: str
    text_range: TextRange


@dataclass
class QueryMatch:
    """Result of a tree-sitter query match"""

    pattern_index: int
    captures: dict[str, List[Node]] = field(default_factory=dict)

    def first(self, name: str) -> Optional[Node]:
        nodes = self.captures.get(name)
        return nodes[0] if nodes else None


@dataclass
class Definition:
    """A named declaration found in a compiled unit"""

    name: str
    kind: str
    node: Node
    name_node: Node
