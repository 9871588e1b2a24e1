"""Lint a single file in isolation, suitable for a process pool.

Known errors are returned as values so they survive pickling back to the parent.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

from solint.engine import Linter
from solint.errors import SolintError, SourceFileNotFoundError
from solint.models import Diagnostic

from .config import create_config_loader


@dataclass
class RunLinterSuccess:
    lint_results: List[Diagnostic]
    source_id_to_absolute_path: Dict[str, str] = field(default_factory=dict)
    fixed: bool = False


@dataclass
class RunLinterError:
    code: str
    message: str
    hint: Optional[str] = None


RunLinterResult = Union[RunLinterSuccess, RunLinterError]


def run_linter(source_id: str, cwd: str, fix: bool = False) -> RunLinterResult:
    try:
        return _run_linter(source_id, Path(cwd), fix)
    except SolintError as e:
        return RunLinterError(code=e.code.value, message=e.message, hint=e.hint)


def _run_linter(source_id: str, cwd: Path, fix: bool) -> RunLinterSuccess:
    linter = Linter(create_config_loader(cwd))

    absolute_path = (cwd / source_id).resolve()
    try:
        content = absolute_path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise SourceFileNotFoundError(source_id) from e

    result = linter.lint_text(content, source_id, fix=fix)
    if result.fixed_content is not None:
        absolute_path.write_text(result.fixed_content, encoding="utf-8")

    return RunLinterSuccess(
        lint_results=result.diagnostics,
        source_id_to_absolute_path={source_id: str(absolute_path)},
        fixed=result.fixed_content is not None,
    )
