from typing import List, Literal

from ..models import Diagnostic, Edit
from .base import BaseRule, RuleContext, RuleDefinition

IMPLICIT_TO_EXPLICIT = {
    "uint": "uint256",
    "int": "int256",
    "ufixed": "ufixed128x18",
    "fixed": "fixed128x18",
}
EXPLICIT_TO_IMPLICIT = {v: k for k, v in IMPLICIT_TO_EXPLICIT.items()}


class ExplicitTypesRule(BaseRule):
    """Enforce (``always``) or forbid (``never``) explicit numeric type sizes."""

    def run(self, context: RuleContext) -> List[Diagnostic]:
        always = self.config == "always"
        replacements = IMPLICIT_TO_EXPLICIT if always else EXPLICIT_TO_IMPLICIT
        kind = "implicit" if always else "explicit"

        diagnostics = []
        for node in context.find_all("primitive_type"):
            type_text = context.text(node)
            replacement = replacements.get(type_text)
            if replacement is None:
                continue

            text_range = context.range(node)
            diagnostics.append(
                self._create_diagnostic(
                    context,
                    node,
                    f"{kind} type '{type_text}' should be avoided",
                    fix=[Edit((text_range.start.offset, text_range.end.offset), replacement)],
                )
            )
        return diagnostics


ExplicitTypes = RuleDefinition(
    name="explicit-types",
    create=ExplicitTypesRule,
    recommended=True,
    description="Enforce or forbid aliases like 'uint' for sized numeric types",
    config_schema=Literal["always", "never"],
    config_default="always",
)
