from typing import List

from solint_tree_sitter import SolidityPatterns

from ..models import Diagnostic
from .base import BaseRule, RuleContext, RuleDefinition


class NoTxOriginRule(BaseRule):
    def run(self, context: RuleContext) -> List[Diagnostic]:
        data = context.unit.source.data
        return [
            self._create_diagnostic(context, node, "Avoid using tx.origin")
            for node in context.find_all("member_expression")
            if SolidityPatterns.is_member_access(node, data, "tx", "origin")
        ]


NoTxOrigin = RuleDefinition(
    name="no-tx-origin",
    create=NoTxOriginRule,
    recommended=True,
    description="Disallow tx.origin",
)
