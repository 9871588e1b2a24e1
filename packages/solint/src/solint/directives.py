"""Comment directives that silence diagnostics.

Five markers are recognized, in ``//`` or ``/* */`` comments::

    // solint-disable-next-line rule-a, rule-b
    uint x; // solint-disable-line
    // solint-disable-previous-line rule-a
    /* solint-disable rule-a */ ... /* solint-enable rule-a */

Text after the marker's first whitespace is a comma-separated rule list; an empty
list means every rule. Directives are returned in source order, which the
suppression replay depends on.
"""

import re
from dataclasses import dataclass
from typing import List, Tuple, Union

from solint_tree_sitter import CompiledUnit, TextRange

DISABLE_NEXT_LINE_MARKER = "solint-disable-next-line"
DISABLE_LINE_MARKER = "solint-disable-line"
DISABLE_PREVIOUS_LINE_MARKER = "solint-disable-previous-line"
DISABLE_MARKER = "solint-disable"
ENABLE_MARKER = "solint-enable"


@dataclass(frozen=True, eq=False)
class LineDirective:
    """Silences diagnostics on ``disabled_line`` only"""

    disabled_line: int
    rules: Tuple[str, ...]
    text_range: TextRange

    marker = ""


@dataclass(frozen=True, eq=False)
class DisableNextLine(LineDirective):
    marker = DISABLE_NEXT_LINE_MARKER


@dataclass(frozen=True, eq=False)
class DisableLine(LineDirective):
    marker = DISABLE_LINE_MARKER


@dataclass(frozen=True, eq=False)
class DisablePreviousLine(LineDirective):
    marker = DISABLE_PREVIOUS_LINE_MARKER


@dataclass(frozen=True, eq=False)
class RangeDirective:
    """Takes effect for everything at or after (``end_line``, ``end_column``)"""

    end_line: int
    end_column: int
    rules: Tuple[str, ...]
    text_range: TextRange

    marker = ""


@dataclass(frozen=True, eq=False)
class Disable(RangeDirective):
    marker = DISABLE_MARKER


@dataclass(frozen=True, eq=False)
class Enable(RangeDirective):
    marker = ENABLE_MARKER


Directive = Union[DisableNextLine, DisableLine, DisablePreviousLine, Disable, Enable]

_WHITESPACE_RE = re.compile(r"\s")


def comment_body(comment: str) -> str:
    body = comment[2:].strip()
    if comment.startswith("/*"):
        body = body[:-2].strip()
    return body


def parse_rule_list(body: str) -> Tuple[str, ...]:
    first_space = _WHITESPACE_RE.search(body)
    if first_space is None:
        return ()
    names = (name.strip() for name in body[first_space.start() + 1 :].split(","))
    return tuple(name for name in names if name)


def parse_directive(comment: str, text_range: TextRange) -> Directive | None:
    """Turn one comment into a directive, or None if it carries no marker."""
    body = comment_body(comment)
    rules = parse_rule_list(body)
    start, end = text_range.start, text_range.end

    # longer markers share a prefix with "solint-disable", so they go first
    if body.startswith(DISABLE_NEXT_LINE_MARKER):
        return DisableNextLine(end.line + 1, rules, text_range)
    if body.startswith(DISABLE_LINE_MARKER):
        return DisableLine(start.line, rules, text_range)
    if body.startswith(DISABLE_PREVIOUS_LINE_MARKER):
        return DisablePreviousLine(start.line - 1, rules, text_range)
    if body.startswith(DISABLE_MARKER):
        return Disable(end.line, end.column, rules, text_range)
    if body.startswith(ENABLE_MARKER):
        return Enable(end.line, end.column, rules, text_range)
    return None


def extract_directives(unit: CompiledUnit) -> List[Directive]:
    directives = []
    for node in unit.find_all("comment"):
        directive = parse_directive(unit.text(node), unit.range(node))
        if directive is not None:
            directives.append(directive)
    return directives
