"""Name-based binding graph over a single compiled unit.

Definitions are indexed by name; every other ``identifier`` is a reference.
Resolution picks the definition whose scope most tightly encloses the reference,
which is enough for single-file rules (unused variables, shadowing, denylists).
"""

from collections import defaultdict
from typing import Dict, List, Optional, Tuple

from tree_sitter import Node

from .ast_walker import ASTWalker
from .node_types import Definition
from .sol_patterns import DEFINITION_KINDS, LOCAL_KINDS, SolidityPatterns
from .text import SourceText


_LOCAL_SCOPES = ("function_definition", "modifier_definition", "constructor_definition", "fallback_receive_definition")


def _key(node: Node) -> Tuple[int, int]:
    return node.start_byte, node.end_byte


class BindingGraph:
    def __init__(self, root: Node, source: SourceText):
        self.source = source
        self._definitions: Dict[str, List[Definition]] = defaultdict(list)
        self._references: Dict[str, List[Node]] = defaultdict(list)
        self._build(root)

    def _build(self, root: Node):
        name_nodes = set()
        for node in ASTWalker.iter_nodes(root):
            if node.type not in DEFINITION_KINDS and node.type not in LOCAL_KINDS:
                continue
            name_node = SolidityPatterns.get_name_node(node)
            if name_node is None:
                continue
            name = self.source.node_text(name_node)
            self._definitions[name].append(Definition(name=name, kind=node.type, node=node, name_node=name_node))
            name_nodes.add(_key(name_node))

        for node in ASTWalker.find_all_by_type(root, "identifier"):
            if _key(node) in name_nodes:
                continue
            self._references[self.source.node_text(node)].append(node)

    def definitions(self, name: str) -> List[Definition]:
        return list(self._definitions.get(name, []))

    def references(self, name: str) -> List[Node]:
        return list(self._references.get(name, []))

    def all_definitions(self) -> List[Definition]:
        found = [d for defs in self._definitions.values() for d in defs]
        return sorted(found, key=lambda d: d.node.start_byte)

    def resolve(self, reference: Node) -> Optional[Definition]:
        """Find the definition an identifier most likely refers to."""
        candidates = self._definitions.get(self.source.node_text(reference))
        if not candidates:
            return None

        best = None
        best_width = None
        for definition in candidates:
            scope = definition.node.parent
            if definition.kind in LOCAL_KINDS:
                scope = ASTWalker.find_parent_of_type(definition.node, *_LOCAL_SCOPES) or scope
            if scope is None:
                continue
            if scope.start_byte <= reference.start_byte and reference.end_byte <= scope.end_byte:
                width = scope.end_byte - scope.start_byte
                if best_width is None or width < best_width:
                    best, best_width = definition, width
        return best or candidates[0]
