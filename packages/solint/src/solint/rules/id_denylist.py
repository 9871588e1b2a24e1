from typing import List

from solint_tree_sitter.sol_patterns import DEFINITION_KINDS

from ..models import Diagnostic
from .base import BaseRule, RuleContext, RuleDefinition

DEFAULT_DENYLIST = ["I", "l", "O"]


class IdDenylistRule(BaseRule):
    def run(self, context: RuleContext) -> List[Diagnostic]:
        diagnostics = []
        for definition in context.bindings.all_definitions():
            if definition.kind not in DEFINITION_KINDS:
                continue
            if definition.name in self.config:
                diagnostics.append(
                    self._create_diagnostic(
                        context, definition.name_node, f"Identifier '{definition.name}' is restricted"
                    )
                )
        return diagnostics


IdDenylist = RuleDefinition(
    name="id-denylist",
    create=IdDenylistRule,
    recommended=True,
    description="Disallow specific names for declarations",
    config_schema=List[str],
    config_default=DEFAULT_DENYLIST,
)
