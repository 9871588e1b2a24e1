import json
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import typer
from pydantic import TypeAdapter

from solint.models import Diagnostic

from .converters import diagnostic_to_lint_issue
from .models import LintIssue

Echo = Callable[[str], None]

_ISSUES = TypeAdapter(List[LintIssue])


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def format_and_print_stylish(
    diagnostics: Sequence[Diagnostic],
    source_id_to_absolute_path: Dict[str, str],
    echo: Echo = typer.echo,
    color: bool = True,
) -> None:
    """Print diagnostics grouped by file, followed by a one-line summary.

    Prints nothing when there are no diagnostics.
    """
    if not diagnostics:
        return

    def style(text: str, **kwargs) -> str:
        return typer.style(text, **kwargs) if color else text

    grouped: Dict[str, List[Tuple[str, str, str, Optional[str]]]] = {}
    for d in diagnostics:
        path = source_id_to_absolute_path.get(d.source_id, d.source_id)
        row = (f"{d.line + 1}:{d.column + 1}", "error" if d.severity == "error" else "warning", d.message, d.rule)
        grouped.setdefault(path, []).append(row)

    error_count = sum(1 for d in diagnostics if d.severity == "error")
    warning_count = len(diagnostics) - error_count

    rows = [row for file_rows in grouped.values() for row in file_rows]
    position_width = max(len(r[0]) for r in rows)
    severity_width = max(len(r[1]) for r in rows)
    message_width = max(len(r[2]) for r in rows)

    echo("")
    first = True
    for path, file_rows in grouped.items():
        if not first:
            echo("")
        first = False
        echo(style(path, underline=True))

        for position, severity, message, rule in file_rows:
            line = "  " + style(position.ljust(position_width), dim=True)
            line += "  " + style(
                severity.ljust(severity_width),
                fg=typer.colors.RED if severity == "error" else typer.colors.YELLOW,
            )
            line += "  " + message.ljust(message_width)
            if rule is not None:
                line += "  " + style(f"[{rule}]", dim=True)
            echo(line.rstrip())

    echo("")
    summary = (
        f"✖ {_plural(len(diagnostics), 'problem', 'problems')} "
        f"({_plural(error_count, 'error', 'errors')}, {_plural(warning_count, 'warning', 'warnings')})"
    )
    echo(style(summary, bold=True, fg=typer.colors.RED if error_count else typer.colors.YELLOW))


def format_and_print_json(
    diagnostics: Sequence[Diagnostic],
    source_id_to_absolute_path: Dict[str, str],
    echo: Echo = typer.echo,
) -> None:
    issues = [
        diagnostic_to_lint_issue(d, source_id_to_absolute_path.get(d.source_id, d.source_id)) for d in diagnostics
    ]
    echo(json.dumps(_ISSUES.dump_python(issues, mode="json"), indent=2, ensure_ascii=False))
