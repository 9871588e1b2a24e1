import logging
from typing import List, Sequence

from .models import Diagnostic, Edit, Fix, Range

logger = logging.getLogger(__name__)


def ranges_overlap(a: Range, b: Range) -> bool:
    """Half-open interval intersection; touching ranges do not overlap."""
    return a[0] < b[1] and b[0] < a[1]


def fixes_overlap(fix_a: Fix, fix_b: Fix) -> bool:
    return any(ranges_overlap(a.range, b.range) for a in fix_a for b in fix_b)


def select_fixes(fixes: Sequence[Fix]) -> List[Fix]:
    """Pick a maximal set of mutually non-overlapping fixes.

    Edits inside each fix are ordered by descending start, then fixes are ordered
    by the start of their first edit, descending. The first fix is always kept;
    each later one is kept only if it overlaps none of the kept ones.
    """
    ordered = [sorted(fix, key=lambda edit: edit.start, reverse=True) for fix in fixes if fix]
    ordered.sort(key=lambda fix: fix[0].start, reverse=True)

    selected: List[Fix] = ordered[:1]
    for fix in ordered[1:]:
        if any(fixes_overlap(fix, kept) for kept in selected):
            continue
        selected.append(fix)
    return selected


def apply_fixes(content: str, fixes: Sequence[Fix]) -> str:
    """Splice non-overlapping fixes into ``content``.

    Edits are applied from the end of the text backwards so offsets of the
    remaining edits stay valid. At a shared start the wider edit goes first, so an
    insertion lands before the text another edit replaces.
    """
    edits: List[Edit] = sorted(
        (edit for fix in fixes for edit in fix), key=lambda e: (e.start, e.end), reverse=True
    )

    parts: List[str] = []
    end = len(content)
    for edit in edits:
        parts.append(content[edit.end : end])
        parts.append(edit.replacement)
        end = edit.start
    parts.append(content[:end])
    parts.reverse()
    return "".join(parts)


def fix_content(content: str, diagnostics: Sequence[Diagnostic]) -> str:
    """Apply the selectable fixes carried by ``diagnostics`` and return the new text."""
    all_fixes = [d.fix for d in diagnostics if d.fix]
    logger.debug("found %d fixes", len(all_fixes))
    if not all_fixes:
        return content

    fixes = select_fixes(all_fixes)
    logger.debug("applying %d fixes of %d", len(fixes), len(all_fixes))
    return apply_fixes(content, fixes)
