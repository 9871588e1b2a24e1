import json

from solint.models import Diagnostic, Edit
from solint_cli.converters import diagnostic_to_lint_issue
from solint_cli.formatter import format_and_print_json, format_and_print_stylish


def _collect():
    lines = []
    return lines, lines.append


def _diagnostics():
    return [
        Diagnostic("a.sol", "explicit-types", 1, 4, "implicit type 'uint' should be avoided", "warn"),
        Diagnostic("a.sol", "no-tx-origin", 10, 15, "Avoid using tx.origin", "error"),
        Diagnostic("b.sol", None, 0, 0, "Parsing error", "error"),
    ]


def test_stylish_groups_by_file_and_pads_columns():
    lines, echo = _collect()

    format_and_print_stylish(_diagnostics(), {"a.sol": "/abs/a.sol"}, echo=echo, color=False)

    assert lines == [
        "",
        "/abs/a.sol",
        "  2:5    warning  implicit type 'uint' should be avoided  [explicit-types]",
        "  11:16  error    Avoid using tx.origin                   [no-tx-origin]",
        "",
        "b.sol",
        "  1:1    error    Parsing error",
        "",
        "✖ 3 problems (2 errors, 1 warning)",
    ]


def test_stylish_singular_summary():
    lines, echo = _collect()

    format_and_print_stylish(_diagnostics()[:1], {}, echo=echo, color=False)

    assert lines[-1] == "✖ 1 problem (0 errors, 1 warning)"


def test_stylish_prints_nothing_without_diagnostics():
    lines, echo = _collect()

    format_and_print_stylish([], {}, echo=echo, color=False)

    assert lines == []


def test_json_uses_one_based_positions():
    lines, echo = _collect()

    format_and_print_json(_diagnostics()[1:2], {"a.sol": "/abs/a.sol"}, echo=echo)

    assert json.loads(lines[0]) == [
        {
            "severity": "error",
            "file_path": "/abs/a.sol",
            "line_number": 11,
            "column": 16,
            "rule_id": "no-tx-origin",
            "message": "Avoid using tx.origin",
            "auto_fixable": False,
        }
    ]


def test_converter_marks_fixable_diagnostics():
    diagnostic = Diagnostic("a.sol", "r", 0, 0, "m", "warn", fix=[Edit((0, 1), "x")])

    issue = diagnostic_to_lint_issue(diagnostic, "a.sol")

    assert issue.auto_fixable is True
    assert issue.severity.value == "warning"
    assert (issue.line_number, issue.column) == (1, 1)
