import glob
import logging
import os
from concurrent.futures import ProcessPoolExecutor
from enum import Enum
from pathlib import Path
from typing import Dict, List

import typer

from solint.errors import DirectoriesNotSupportedError, SolintError, UnmatchedPatternError
from solint.models import Diagnostic
from solint.registry import RuleRegistry

from .formatter import format_and_print_json, format_and_print_stylish
from .init import init_config
from .worker import RunLinterError, RunLinterResult, run_linter

app = typer.Typer(help="solint - a linter for Solidity source files")


class OutputFormat(str, Enum):
    STYLISH = "stylish"
    JSON = "json"


def _print_error(message: str, hint: str | None = None):
    typer.echo(f"[solint] {message}", err=True)
    if hint:
        typer.echo(f"Hint: {hint}", err=True)


def expand_patterns(patterns: List[str], cwd: Path) -> List[str]:
    """Expand glob patterns to unique, cwd-relative file paths, in order of first match"""
    source_ids: Dict[str, None] = {}
    for pattern in patterns:
        if (cwd / pattern).is_dir():
            raise DirectoriesNotSupportedError(pattern)

        matches = sorted(glob.glob(pattern, root_dir=cwd, recursive=True))
        files = [m for m in matches if (cwd / m).is_file()]
        if not files:
            raise UnmatchedPatternError(pattern)

        for f in files:
            source_ids.setdefault(os.path.normpath(f), None)
    return list(source_ids)


def _run_all(source_ids: List[str], cwd: Path, fix: bool, jobs: int) -> List[RunLinterResult]:
    if jobs <= 1 or len(source_ids) <= 1:
        return [run_linter(source_id, str(cwd), fix) for source_id in source_ids]

    with ProcessPoolExecutor(max_workers=jobs) as pool:
        return list(pool.map(run_linter, source_ids, [str(cwd)] * len(source_ids), [fix] * len(source_ids)))


@app.command()
def lint(
    patterns: List[str] = typer.Argument(..., help="Files or glob patterns to lint"),
    fix: bool = typer.Option(False, "--fix", help="Automatically fix problems"),
    output_format: OutputFormat = typer.Option(OutputFormat.STYLISH, "--format", help="Output format"),
    jobs: int = typer.Option(1, "--jobs", "-j", min=1, help="Number of files to lint in parallel"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Run the linter on Solidity files"""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    cwd = Path.cwd()
    try:
        source_ids = expand_patterns(patterns, cwd)
    except SolintError as e:
        _print_error(e.message, e.hint)
        raise typer.Exit(code=1) from e

    diagnostics: List[Diagnostic] = []
    paths: Dict[str, str] = {}
    try:
        results = _run_all(source_ids, cwd, fix, jobs)
    except Exception as e:
        _print_error(f"Unexpected error: {e}")
        raise

    for result in results:
        if isinstance(result, RunLinterError):
            _print_error(result.message, result.hint)
            raise typer.Exit(code=1)
        diagnostics.extend(result.lint_results)
        paths.update(result.source_id_to_absolute_path)
        if result.fixed:
            for absolute_path in result.source_id_to_absolute_path.values():
                typer.echo(f"[solint] Fixed {absolute_path}", err=True)

    diagnostics.sort(key=lambda d: (d.source_id, d.line, d.column))

    if output_format == OutputFormat.JSON:
        format_and_print_json(diagnostics, paths)
    else:
        format_and_print_stylish(diagnostics, paths)

    if any(d.severity == "error" for d in diagnostics):
        raise typer.Exit(code=1)


@app.command()
def init():
    """Create a solint.toml in the current directory"""
    try:
        config_path = init_config(Path.cwd())
    except SolintError as e:
        _print_error(e.message, e.hint)
        raise typer.Exit(code=1) from e

    typer.echo(typer.style("[solint]", fg=typer.colors.GREEN) + f" Created configuration file at {config_path}")


@app.command()
def rules():
    """List the available rules"""
    for rule in sorted(RuleRegistry().get_all_rules(), key=lambda r: r.name):
        marker = "*" if rule.recommended else " "
        line = f"{marker} {rule.name}"
        if rule.description:
            line += f"  {rule.description}"
        typer.echo(line)


if __name__ == "__main__":
    app()
