from enum import Enum
from typing import Optional

from pydantic import BaseModel


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class LintIssue(BaseModel):
    """A diagnostic as reported to the user (1-based positions)"""

    severity: Severity
    file_path: str
    line_number: int
    column: int
    rule_id: Optional[str] = None
    message: str
    auto_fixable: bool = False
