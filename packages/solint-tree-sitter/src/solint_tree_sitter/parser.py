"""
Solidity compiled-unit provider using Tree-sitter.
Parses one file into an immutable unit exposing syntax errors, the tree,
structural queries and a binding graph.
"""

import logging
from dataclasses import dataclass, field
from functools import cached_property
from typing import List, Optional

import tree_sitter_solidity as tss
from tree_sitter import Language, Node, Parser, Tree, TreeCursor

from .ast_walker import ASTWalker
from .bindings import BindingGraph
from .node_types import QueryMatch, SyntaxIssue, TextRange
from .queries import QueryHelper
from .text import SourceText
from .version import infer_language_version

logger = logging.getLogger(__name__)


@dataclass
class CompiledUnit:
    """One parsed source file. Never mutated after construction."""

    id: str
    content: str
    language_version: str
    tree: Tree
    source: SourceText
    queries: QueryHelper = field(repr=False)

    @property
    def root(self) -> Node:
        return self.tree.root_node

    def cursor(self) -> TreeCursor:
        return self.tree.walk()

    @cached_property
    def bindings(self) -> BindingGraph:
        return BindingGraph(self.root, self.source)

    @cached_property
    def _errors(self) -> List[SyntaxIssue]:
        if not self.root.has_error:
            return []

        issues = []
        for node in ASTWalker.iter_nodes(self.root, skip=lambda n: n.is_error):
            if node.is_missing:
                message = f"Missing '{node.type}'"
            elif node.is_error:
                snippet = self.source.node_text(node).strip().splitlines()
                message = f"Unexpected '{snippet[0][:20]}'" if snippet else "Unexpected input"
            else:
                continue
            issues.append(SyntaxIssue(message=message, text_range=self.source.node_range(node)))

        if not issues:
            issues.append(SyntaxIssue(message="Invalid syntax", text_range=self.source.node_range(self.root)))
        return issues

    def errors(self) -> List[SyntaxIssue]:
        return list(self._errors)

    def find_all(self, *types: str, node: Optional[Node] = None) -> List[Node]:
        return ASTWalker.find_all_by_type(node or self.root, *types)

    def query(self, source: str, node: Optional[Node] = None) -> List[QueryMatch]:
        return self.queries.matches(node or self.root, source)

    def text(self, node: Node) -> str:
        return self.source.node_text(node)

    def range(self, node: Node) -> TextRange:
        return self.source.node_range(node)


class SolidityParser:
    """Builds compiled units for Solidity source text"""

    def __init__(self):
        self.language = Language(tss.language())
        self.parser = Parser(self.language)
        self.queries = QueryHelper(self.language)

    def compile(self, file_path: str, content: str, language_version: Optional[str] = None) -> CompiledUnit:
        if language_version is None:
            language_version = infer_language_version(file_path, content)

        source = SourceText(content)
        tree = self.parser.parse(source.data)
        logger.debug("parsed %s (solidity %s, %d bytes)", file_path, language_version, len(source.data))

        return CompiledUnit(
            id=file_path,
            content=content,
            language_version=language_version,
            tree=tree,
            source=source,
            queries=self.queries,
        )
