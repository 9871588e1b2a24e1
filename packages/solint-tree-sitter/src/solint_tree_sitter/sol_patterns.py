"""Solidity-specific AST pattern recognition."""

from tree_sitter import Node

from .ast_walker import ASTWalker

CONTRACT_KINDS = ("contract_declaration", "interface_declaration", "library_declaration")

DEFINITION_KINDS = CONTRACT_KINDS + (
    "struct_declaration",
    "enum_declaration",
    "event_definition",
    "error_declaration",
    "function_definition",
    "modifier_definition",
    "state_variable_declaration",
    "constant_variable_declaration",
    "user_defined_type_definition",
)

# Scoped declarations that are bindings but not top-level definitions.
LOCAL_KINDS = ("parameter", "variable_declaration")


class SolidityPatterns:
    """Recognize Solidity-specific patterns in the AST."""

    @staticmethod
    def get_name_node(node: Node) -> Node | None:
        """Return the identifier naming a declaration, if any."""
        name = node.child_by_field_name("name")
        if name is not None:
            return name
        return ASTWalker.get_child_of_type(node, "identifier")

    @staticmethod
    def is_contract_like(node: Node) -> bool:
        return node.type in CONTRACT_KINDS

    @staticmethod
    def enclosing_contract(node: Node) -> Node | None:
        return ASTWalker.find_parent_of_type(node, *CONTRACT_KINDS)

    @staticmethod
    def state_variables(contract: Node) -> list[Node]:
        """State variable declarations that belong directly to ``contract``.

        Declarations of nested contracts are not counted.
        """
        result = []
        for node in ASTWalker.find_all_by_type(contract, "state_variable_declaration"):
            if SolidityPatterns.enclosing_contract(node) == contract:
                result.append(node)
        return result

    @staticmethod
    def is_member_access(node: Node, source: bytes | str, obj: str, prop: str | None = None) -> bool:
        """Check for ``obj.prop`` (or ``obj.<anything>`` when ``prop`` is None)."""
        if node.type != "member_expression":
            return False
        text = "".join(ASTWalker.get_text(node, source).split())
        head, _, tail = text.partition(".")
        if head != obj or not tail:
            return False
        return prop is None or tail == prop
