from typing import List

from tree_sitter import Language, Node, Query, QueryCursor

from .node_types import QueryMatch


class QueryHelper:
    """Runs tree-sitter structural queries (v0.25+ API with QueryCursor)"""

    def __init__(self, language: Language):
        self.language = language
        self._compiled: dict[str, Query] = {}

    def compile(self, source: str) -> Query:
        query = self._compiled.get(source)
        if query is None:
            query = Query(self.language, source)
            self._compiled[source] = query
        return query

    def matches(self, node: Node, source: str) -> List[QueryMatch]:
        cursor = QueryCursor(self.compile(source))
        return [
            QueryMatch(pattern_index=pattern_index, captures=dict(captures_dict))
            for pattern_index, captures_dict in cursor.matches(node)
        ]
