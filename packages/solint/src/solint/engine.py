import logging
from typing import List, Optional, Sequence, Tuple

from solint_tree_sitter import CompiledUnit, LanguageVersionError, SolidityParser

from .autofix import fix_content
from .config import ConfigLoader, ResolvedConfig
from .directives import extract_directives
from .errors import (
    CantInferSolidityVersionError,
    FixProducesInvalidSyntaxError,
    RuleNotRegisteredError,
    TooManyFixIterationsError,
)
from .models import Diagnostic, LintResult, ReportedSeverity, SourceFile
from .registry import RuleRegistry
from .rules.base import Rule, RuleContext, RuleDefinition
from .suppression import apply_directives

logger = logging.getLogger(__name__)

MAX_FIX_ITERATIONS = 10


class Linter:
    """Core engine for Solidity linting"""

    def __init__(
        self,
        config_loader: ConfigLoader,
        registry: Optional[RuleRegistry] = None,
        parser: Optional[SolidityParser] = None,
    ):
        self.config_loader = config_loader
        self.registry = registry if registry is not None else RuleRegistry()
        self.parser = parser or SolidityParser()

    def add_rule(self, rule: RuleDefinition):
        self.registry.register(rule)

    def lint_files(self, files: Sequence[SourceFile], fix: bool = False) -> List[LintResult]:
        """Lint each file; results are in the same order as ``files``."""
        return [self.lint_text(f.content, f.file_path, fix=fix) for f in files]

    def lint_text(self, content: str, file_path: str, fix: bool = False) -> LintResult:
        """Lint one file, optionally applying fixes until the text stops changing.

        ``fixed_content`` is only set when the final text differs from ``content``.
        Ignored files are not compiled and produce an empty result.
        """
        config = self.config_loader.load_config(file_path)
        if config is None:
            return LintResult()

        current = content

        for iteration in range(MAX_FIX_ITERATIONS):
            unit = self.compile(file_path, current)

            errors = unit.errors()
            if errors:
                if iteration > 0:
                    # the previous round's fixes broke the file
                    raise FixProducesInvalidSyntaxError(file_path)
                start = errors[0].text_range.start
                return LintResult(
                    diagnostics=[
                        Diagnostic(
                            source_id=unit.id,
                            rule=None,
                            line=start.line,
                            column=start.column,
                            message="Parsing error",
                            severity="error",
                        )
                    ]
                )

            unfiltered = self.get_diagnostics(unit, config)
            diagnostics = apply_directives(unfiltered, extract_directives(unit), unit.id).all()

            if not fix:
                logger.debug("autofix is disabled, returning diagnostics only")
                return LintResult(diagnostics=diagnostics)

            logger.debug("applying fixes to %s, iteration %d", file_path, iteration)
            fixed = fix_content(current, diagnostics)
            if fixed == current:
                return LintResult(diagnostics=diagnostics, fixed_content=None if fixed == content else fixed)
            current = fixed

        raise TooManyFixIterationsError(file_path, MAX_FIX_ITERATIONS)

    def compile(self, file_path: str, content: str) -> CompiledUnit:
        try:
            return self.parser.compile(file_path, content)
        except LanguageVersionError as e:
            raise CantInferSolidityVersionError(file_path) from e

    def build_rules(self, config: ResolvedConfig) -> List[Tuple[Rule, ReportedSeverity]]:
        """Create configured rule instances, in config order, skipping ``off`` rules."""
        for rule_name in config.rules:
            if rule_name not in self.registry:
                raise RuleNotRegisteredError(rule_name)

        rules = []
        for rule_name, setting in config.rules.items():
            severity, options = setting[0], setting[1:]
            if severity == "off":
                continue
            rules.append((self.registry.get(rule_name).build(options), severity))
        return rules

    def get_diagnostics(self, unit: CompiledUnit, config: ResolvedConfig) -> List[Diagnostic]:
        context = RuleContext(unit=unit)
        diagnostics: List[Diagnostic] = []
        for rule, severity in self.build_rules(config):
            found = rule.run(context)
            logger.debug("rule %s reported %d problems in %s", rule.name, len(found), unit.id)
            diagnostics.extend(d.with_severity(severity) for d in found)
        return diagnostics
