from dataclasses import dataclass, field, replace
from typing import List, Literal, Optional, Tuple

Severity = Literal["off", "warn", "error"]
ReportedSeverity = Literal["warn", "error"]

SEVERITIES: Tuple[Severity, ...] = ("off", "warn", "error")

Range = Tuple[int, int]


@dataclass(frozen=True)
class Edit:
    """Replace the half-open ``range`` of the text with ``replacement``.

    Offsets are ``str`` indices into the snapshot the producing rule ran against.
    """

    range: Range
    replacement: str

    @property
    def start(self) -> int:
        return self.range[0]

    @property
    def end(self) -> int:
        return self.range[1]


# One atomic correction: non-empty, edits pairwise non-overlapping.
Fix = List[Edit]


@dataclass
class Diagnostic:
    """One reported problem. ``rule`` is None for engine-generated diagnostics."""

    source_id: str
    rule: Optional[str]
    line: int
    column: int
    message: str
    severity: Optional[ReportedSeverity] = None
    fix: Optional[Fix] = None

    def with_severity(self, severity: ReportedSeverity) -> "Diagnostic":
        return replace(self, severity=severity)


@dataclass
class SourceFile:
    file_path: str
    content: str


@dataclass
class LintResult:
    diagnostics: List[Diagnostic] = field(default_factory=list)
    fixed_content: Optional[str] = None
