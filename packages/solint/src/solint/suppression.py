"""Apply comment directives to a file's diagnostics.

Every diagnostic replays the whole directive list in source order, tracking which
directive (if any) currently silences it; the last matching directive wins and an
``Enable`` resets it. Line directives compare lines only, range directives compare
positions, so the outcome depends on directive order and not just on positions.

Directives that silenced nothing are reported back as warnings.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from .directives import DISABLE_MARKER, Directive, Disable, Enable, LineDirective, RangeDirective
from .models import Diagnostic


def _rule_matches(rules: Sequence[str], diagnostic: Diagnostic) -> bool:
    return len(rules) == 0 or (diagnostic.rule is not None and diagnostic.rule in rules)


def _is_at_or_after(diagnostic: Diagnostic, directive: RangeDirective) -> bool:
    return diagnostic.line > directive.end_line or (
        diagnostic.line == directive.end_line and diagnostic.column >= directive.end_column
    )


def replay_directives(diagnostic: Diagnostic, directives: Sequence[Directive]) -> Optional[Directive]:
    """Return the directive silencing ``diagnostic`` after the full replay, or None."""
    disabled_by: Optional[Directive] = None
    for directive in directives:
        if isinstance(directive, LineDirective):
            if diagnostic.line == directive.disabled_line and _rule_matches(directive.rules, diagnostic):
                disabled_by = directive
        elif isinstance(directive, Disable):
            if _is_at_or_after(diagnostic, directive) and _rule_matches(directive.rules, diagnostic):
                disabled_by = directive
        elif isinstance(directive, Enable):
            if _is_at_or_after(diagnostic, directive) and _rule_matches(directive.rules, diagnostic):
                disabled_by = None
    return disabled_by


def used_enable_directives(directives: Sequence[Directive]) -> Dict[Enable, List[str]]:
    """Map each ``Enable`` closing some ``Disable`` to the rule names it re-enabled.

    An empty-list ``Enable`` that closes a ``Disable`` maps to an empty list.
    """
    used: Dict[Enable, List[str]] = {}

    for i, disable in enumerate(directives):
        if not isinstance(disable, Disable):
            continue

        following = [d for d in directives[i + 1 :] if isinstance(d, Enable)]

        if not disable.rules:
            enabled = set()
            for enable in following:
                if not enable.rules:
                    used.setdefault(enable, [])
                    break
                for rule in enable.rules:
                    if rule not in enabled:
                        enabled.add(rule)
                        used.setdefault(enable, []).append(rule)
        else:
            still_disabled = set(disable.rules)
            for enable in following:
                if not still_disabled:
                    break
                if not enable.rules:
                    used.setdefault(enable, [])
                    break
                for rule in enable.rules:
                    if rule in still_disabled:
                        still_disabled.discard(rule)
                        used.setdefault(enable, []).append(rule)

    return used


def format_rule_list(rules: Sequence[str]) -> str:
    """``'a'``, ``'a' or 'b'``, ``'a', 'b' or 'c'``"""
    fragment = f"'{rules[0]}'"
    for rule in rules[1:-1]:
        fragment += f", '{rule}'"
    if len(rules) > 1:
        fragment += f" or '{rules[-1]}'"
    return fragment


@dataclass
class SuppressionResult:
    diagnostics: List[Diagnostic] = field(default_factory=list)
    warnings: List[Diagnostic] = field(default_factory=list)

    def all(self) -> List[Diagnostic]:
        return self.diagnostics + self.warnings


class _WarningBuilder:
    def __init__(self, source_id: str):
        self.source_id = source_id
        self.warnings: List[Diagnostic] = []

    def add(self, directive: Directive, detail: str):
        start = directive.text_range.start
        self.warnings.append(
            Diagnostic(
                source_id=self.source_id,
                rule=None,
                line=start.line,
                column=start.column,
                message=f"Unused {directive.marker} directive ({detail})",
                severity="warn",
            )
        )


def apply_directives(
    diagnostics: Sequence[Diagnostic], directives: Sequence[Directive], source_id: str
) -> SuppressionResult:
    statuses = [(diagnostic, replay_directives(diagnostic, directives)) for diagnostic in diagnostics]
    result = SuppressionResult(diagnostics=[d for d, disabled_by in statuses if disabled_by is None])

    used: Dict[Directive, List[str]] = {}
    for diagnostic, disabled_by in statuses:
        if disabled_by is not None and diagnostic.rule is not None:
            used.setdefault(disabled_by, []).append(diagnostic.rule)

    used_enables = used_enable_directives(directives)
    warnings = _WarningBuilder(source_id)

    for directive in directives:
        if isinstance(directive, Enable):
            enabled = used_enables.get(directive)
            if not directive.rules:
                if enabled is None:
                    warnings.add(directive, f"no matching {DISABLE_MARKER} directives were found")
                continue

            unused = [rule for rule in directive.rules if rule not in (enabled or [])]
            if unused:
                warnings.add(
                    directive,
                    f"no matching {DISABLE_MARKER} directives were found for {format_rule_list(unused)}",
                )
            continue

        used_by = used.get(directive, [])
        if not directive.rules:
            if not used_by:
                warnings.add(directive, "no problems were reported")
            continue

        unused = [rule for rule in directive.rules if rule not in used_by]
        if unused:
            warnings.add(directive, f"no problems were reported from {format_rule_list(unused)}")

    result.warnings = warnings.warnings
    return result


def filter_by_directives(
    diagnostics: Sequence[Diagnostic], directives: Sequence[Directive], source_id: str
) -> List[Diagnostic]:
    """Kept diagnostics followed by unused-directive warnings."""
    return apply_directives(diagnostics, directives, source_id).all()
