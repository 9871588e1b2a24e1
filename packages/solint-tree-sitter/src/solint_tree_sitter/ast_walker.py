from typing import Callable, Iterator, List, Optional

from tree_sitter import Node


class ASTWalker:
    """Utilities for traversing and searching the Solidity AST"""

    @staticmethod
    def iter_nodes(node: Node, skip: Callable[[Node], bool] | None = None) -> Iterator[Node]:
        """Yield ``node`` and its descendants in document order.

        Children of a node for which ``skip`` returns True are not visited.
        """
        stack = [node]
        while stack:
            current = stack.pop()
            yield current
            if skip is not None and skip(current):
                continue
            stack.extend(reversed(current.children))

    @staticmethod
    def find_parent_of_type(node: Node, *type_names: str) -> Optional[Node]:
        """Find the first parent node of one of the given types"""
        current = node.parent
        while current:
            if current.type in type_names:
                return current
            current = current.parent
        return None

    @staticmethod
    def get_child_of_type(node: Node, type_name: str) -> Optional[Node]:
        """Find the first direct child of a specific type"""
        for child in node.children:
            if child.type == type_name:
                return child
        return None

    @staticmethod
    def find_all_by_type(node: Node, *type_names: str) -> List[Node]:
        """Find all descendant nodes of the given types, in document order"""
        return [n for n in ASTWalker.iter_nodes(node) if n.type in type_names]

    @staticmethod
    def get_text(node: Node, source: bytes | str) -> str:
        if isinstance(source, str):
            source = source.encode("utf-8")
        return source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")
