from solint.models import Diagnostic

from .models import LintIssue, Severity


def diagnostic_to_lint_issue(diagnostic: Diagnostic, file_path: str) -> LintIssue:
    """Convert an internal dataclass diagnostic to an external Pydantic issue"""
    return LintIssue(
        severity=Severity.ERROR if diagnostic.severity == "error" else Severity.WARNING,
        file_path=file_path,
        line_number=diagnostic.line + 1,
        column=diagnostic.column + 1,
        rule_id=diagnostic.rule,
        message=diagnostic.message,
        auto_fixable=bool(diagnostic.fix),
    )
