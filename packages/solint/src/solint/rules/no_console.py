import re
from typing import List

from ..models import Diagnostic, Edit
from .base import BaseRule, RuleContext, RuleDefinition

FORBIDDEN_IMPORT_PATHS = {
    "hardhat/console.sol",
    "forge-std/console.sol",
    "forge-std/console2.sol",
    "forge-std/safeconsole.sol",
    "forge-std/src/console.sol",
    "forge-std/src/console2.sol",
    "forge-std/src/safeconsole.sol",
}

_IMPORT_PATH_RE = re.compile(r"""["']([^"']+)["']""")


class NoConsoleRule(BaseRule):
    """Flag console imports (removable by autofix) and ``console.log*`` calls."""

    def run(self, context: RuleContext) -> List[Diagnostic]:
        return self._console_imports(context) + self._console_usages(context)

    def _console_imports(self, context: RuleContext) -> List[Diagnostic]:
        diagnostics = []
        for node in context.find_all("import_directive"):
            match = _IMPORT_PATH_RE.search(context.text(node))
            if match is None or match.group(1) not in FORBIDDEN_IMPORT_PATHS:
                continue

            text_range = context.range(node)
            end = text_range.end.offset
            if context.content[end : end + 1] == "\n":
                end += 1
            diagnostics.append(
                self._create_diagnostic(
                    context,
                    node,
                    "Unexpected import of console",
                    fix=[Edit((text_range.start.offset, end), "")],
                )
            )
        return diagnostics

    def _console_usages(self, context: RuleContext) -> List[Diagnostic]:
        diagnostics = []
        for node in context.find_all("member_expression"):
            head, _, member = "".join(context.text(node).split()).partition(".")
            if head == "console" and member.startswith("log"):
                diagnostics.append(self._create_diagnostic(context, node, "Unexpected console.* usage"))
        return diagnostics


NoConsole = RuleDefinition(
    name="no-console",
    create=NoConsoleRule,
    recommended=True,
    description="Disallow console imports and console.log calls",
)
