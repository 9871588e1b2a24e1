from typing import List

from solint_tree_sitter import SolidityPatterns

from ..models import Diagnostic
from .base import BaseRule, RuleContext, RuleDefinition

DEFAULT_MAX_STATE_VARIABLES = 15


class MaxStateVarsRule(BaseRule):
    def run(self, context: RuleContext) -> List[Diagnostic]:
        diagnostics = []
        for contract in context.find_all("contract_declaration"):
            name_node = SolidityPatterns.get_name_node(contract)
            if name_node is None:
                continue

            count = len(SolidityPatterns.state_variables(contract))
            if count > self.config:
                diagnostics.append(
                    self._create_diagnostic(
                        context,
                        name_node,
                        f"Contract '{context.text(name_node)}' has more than {self.config} state variables",
                    )
                )
        return diagnostics


MaxStateVars = RuleDefinition(
    name="max-state-vars",
    create=MaxStateVarsRule,
    recommended=True,
    description="Limit the number of state variables per contract",
    config_schema=int,
    config_default=DEFAULT_MAX_STATE_VARIABLES,
)
