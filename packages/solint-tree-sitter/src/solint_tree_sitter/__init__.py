from .ast_walker import ASTWalker
from .bindings import BindingGraph
from .node_types import Definition, Position, QueryMatch, SyntaxIssue, TextRange
from .parser import CompiledUnit, SolidityParser
from .queries import QueryHelper
from .sol_patterns import SolidityPatterns
from .text import SourceText
from .version import LATEST_VERSION, LanguageVersionError, infer_language_version

__all__ = [
    "ASTWalker",
    "BindingGraph",
    "CompiledUnit",
    "Definition",
    "LATEST_VERSION",
    "LanguageVersionError",
    "Position",
    "QueryHelper",
    "QueryMatch",
    "SolidityParser",
    "SolidityPatterns",
    "SourceText",
    "SyntaxIssue",
    "TextRange",
    "infer_language_version",
]
