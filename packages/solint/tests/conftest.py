from typing import Dict, List

import pytest

from solint import BasicConfigLoader, Linter, RuleRegistry
from solint.models import Diagnostic, Edit
from solint.rules import BaseRule, RuleContext, RuleDefinition, get_all_rules


class ForbiddenIdentifiersRule(BaseRule):
    """Reports configured identifiers, fixing each to its mapped replacement"""

    def run(self, context: RuleContext) -> List[Diagnostic]:
        diagnostics = []
        for node in context.find_all("identifier"):
            name = context.text(node)
            if name not in self.config:
                continue
            text_range = context.range(node)
            diagnostics.append(
                self._create_diagnostic(
                    context,
                    node,
                    f"Forbidden identifier '{name}'",
                    fix=[Edit((text_range.start.offset, text_range.end.offset), self.config[name])],
                )
            )
        return diagnostics


class BreakUintRule(BaseRule):
    """Offers a fix that turns every ``uint256`` into invalid syntax"""

    def run(self, context: RuleContext) -> List[Diagnostic]:
        diagnostics = []
        for node in context.find_all("primitive_type"):
            if context.text(node) != "uint256":
                continue
            text_range = context.range(node)
            diagnostics.append(
                self._create_diagnostic(
                    context,
                    node,
                    "uint256 is not allowed",
                    fix=[Edit((text_range.start.offset, text_range.end.offset), "1nvalidType")],
                )
            )
        return diagnostics


class SwapStateVarsRule(BaseRule):
    """Swaps the first two state variables while the first one mentions ``foo``"""

    def run(self, context: RuleContext) -> List[Diagnostic]:
        declarations = context.find_all("state_variable_declaration")
        if len(declarations) < 2:
            return []

        first, second = declarations[0], declarations[1]
        first_text, second_text = context.text(first), context.text(second)
        if "foo" not in first_text:
            return []

        first_range, second_range = context.range(first), context.range(second)
        return [
            self._create_diagnostic(
                context,
                first,
                "State variables are out of order",
                fix=[
                    Edit((first_range.start.offset, first_range.end.offset), second_text),
                    Edit((second_range.start.offset, second_range.end.offset), first_text),
                ],
            )
        ]


ForbiddenIdentifiers = RuleDefinition(
    name="forbidden-identifiers",
    create=ForbiddenIdentifiersRule,
    config_schema=Dict[str, str],
    config_default={},
)
BreakUint = RuleDefinition(name="break-uint", create=BreakUintRule)
SwapStateVars = RuleDefinition(name="swap-state-vars", create=SwapStateVarsRule)

STUB_RULES = [ForbiddenIdentifiers, BreakUint, SwapStateVars]


def build_linter(rules: Dict[str, object]) -> Linter:
    registry = RuleRegistry(get_all_rules() + STUB_RULES)
    return Linter(BasicConfigLoader.create({"rules": rules}), registry=registry)


@pytest.fixture
def make_linter():
    return build_linter


@pytest.fixture
def parser():
    from solint_tree_sitter import SolidityParser

    return SolidityParser()


@pytest.fixture
def break_uint_rule():
    return BreakUint
