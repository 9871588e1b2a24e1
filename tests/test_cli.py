import json
from pathlib import Path

from typer.testing import CliRunner

from solint_cli.main import app

runner = CliRunner()

CONFIG = """
[rules]
"no-tx-origin" = "error"
"explicit-types" = "warn"
"""

SOURCE = """contract Wallet {
    uint owner;

    function check() public view returns (bool) {
        return tx.origin == msg.sender;
    }
}
"""


def _project(tmp_path, monkeypatch, config=CONFIG, files=None):
    (tmp_path / "solint.toml").write_text(config)
    for name, content in (files or {"Wallet.sol": SOURCE}).items():
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    monkeypatch.chdir(tmp_path)


def test_cli_lint_help():
    result = runner.invoke(app, ["lint", "--help"])
    assert result.exit_code == 0
    assert "Run the linter on Solidity files" in result.output


def test_cli_lint_reports_problems(tmp_path, monkeypatch):
    _project(tmp_path, monkeypatch)

    result = runner.invoke(app, ["lint", "Wallet.sol"])

    assert result.exit_code == 1
    assert "implicit type 'uint' should be avoided" in result.output
    assert "[no-tx-origin]" in result.output
    assert "2:5" in result.output
    assert "✖ 2 problems (1 error, 1 warning)" in result.output


def test_cli_lint_warnings_only_exit_zero(tmp_path, monkeypatch):
    _project(tmp_path, monkeypatch, config='[rules]\n"explicit-types" = "warn"\n')

    result = runner.invoke(app, ["lint", "Wallet.sol"])

    assert result.exit_code == 0
    assert "✖ 1 problem (0 errors, 1 warning)" in result.output


def test_cli_lint_clean_file_prints_nothing(tmp_path, monkeypatch):
    _project(tmp_path, monkeypatch, files={"Clean.sol": "contract Clean {}\n"})

    result = runner.invoke(app, ["lint", "Clean.sol"])

    assert result.exit_code == 0
    assert result.output == ""


def test_cli_lint_fix_writes_file(tmp_path, monkeypatch):
    _project(tmp_path, monkeypatch)

    result = runner.invoke(app, ["lint", "--fix", "Wallet.sol"])

    assert result.exit_code == 1
    assert "    uint256 owner;" in (tmp_path / "Wallet.sol").read_text()
    assert "explicit-types" not in result.output


def test_cli_lint_json_output(tmp_path, monkeypatch):
    _project(tmp_path, monkeypatch)

    result = runner.invoke(app, ["lint", "--format", "json", "Wallet.sol"])

    issues = json.loads(result.output)
    assert [(i["rule_id"], i["severity"], i["line_number"]) for i in issues] == [
        ("explicit-types", "warning", 2),
        ("no-tx-origin", "error", 5),
    ]
    assert issues[0]["auto_fixable"] is True
    assert issues[0]["file_path"] == str((tmp_path / "Wallet.sol").resolve())


def test_cli_lint_glob_and_dedup(tmp_path, monkeypatch):
    _project(
        tmp_path,
        monkeypatch,
        files={"src/A.sol": SOURCE, "src/nested/B.sol": SOURCE, "README.md": "hi"},
    )

    result = runner.invoke(app, ["lint", "--format", "json", "src/**/*.sol", "src/A.sol"])

    paths = {issue["file_path"] for issue in json.loads(result.output)}
    assert len(paths) == 2
    assert len(json.loads(result.output)) == 4


def test_cli_lint_unmatched_pattern(tmp_path, monkeypatch):
    _project(tmp_path, monkeypatch)

    result = runner.invoke(app, ["lint", "missing/*.sol"])

    assert result.exit_code == 1
    assert "[solint] No files matched the pattern: 'missing/*.sol'" in result.output


def test_cli_lint_directory_not_supported(tmp_path, monkeypatch):
    _project(tmp_path, monkeypatch, files={"src/A.sol": SOURCE})

    result = runner.invoke(app, ["lint", "src"])

    assert result.exit_code == 1
    assert "Directories are not supported" in result.output


def test_cli_lint_without_config(tmp_path, monkeypatch):
    (tmp_path / "A.sol").write_text(SOURCE)
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["lint", "A.sol"])

    assert result.exit_code == 1
    assert "Hint: Run 'solint init' to create a configuration file." in result.output


def test_cli_lint_unknown_rule(tmp_path, monkeypatch):
    _project(tmp_path, monkeypatch, config='[rules]\n"no-such-rule" = "error"\n')

    result = runner.invoke(app, ["lint", "Wallet.sol"])

    assert result.exit_code == 1
    assert "[solint] Rule 'no-such-rule' does not exist" in result.output


def test_cli_lint_pyproject_config(tmp_path, monkeypatch):
    _project(tmp_path, monkeypatch)
    (tmp_path / "solint.toml").unlink()
    (tmp_path / "pyproject.toml").write_text('[tool.solint.rules]\n"no-tx-origin" = "warn"\n')

    result = runner.invoke(app, ["lint", "Wallet.sol"])

    assert result.exit_code == 0
    assert "Avoid using tx.origin" in result.output
    assert "explicit-types" not in result.output


def test_cli_lint_config_list(tmp_path, monkeypatch):
    config = """
[[config]]
rules = { "no-tx-origin" = "error" }

[[config]]
files = ["test/**"]
rules = { "no-tx-origin" = "off" }
"""
    _project(tmp_path, monkeypatch, config=config, files={"src/A.sol": SOURCE, "test/A.sol": SOURCE})

    result = runner.invoke(app, ["lint", "--format", "json", "src/A.sol", "test/A.sol"])

    issues = json.loads(result.output)
    assert len(issues) == 1
    assert Path(issues[0]["file_path"]).parts[-2:] == ("src", "A.sol")


def test_cli_lint_parallel_jobs(tmp_path, monkeypatch):
    _project(tmp_path, monkeypatch, files={"A.sol": SOURCE, "B.sol": SOURCE})

    result = runner.invoke(app, ["lint", "--jobs", "2", "--format", "json", "*.sol"])

    issues = json.loads(result.output)
    assert [(i["file_path"].endswith("A.sol"), i["line_number"]) for i in issues] == [
        (True, 2),
        (True, 5),
        (False, 2),
        (False, 5),
    ]


def test_cli_init_creates_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["init"])

    assert result.exit_code == 0
    assert "[solint]" in result.output
    text = (tmp_path / "solint.toml").read_text()
    assert text.startswith("[rules]\n")
    assert '"explicit-types" = "error"' in text
    assert text.index("explicit-types") < text.index("no-tx-origin")


def test_cli_init_refuses_existing_config(tmp_path, monkeypatch):
    _project(tmp_path, monkeypatch)

    result = runner.invoke(app, ["init"])

    assert result.exit_code == 1
    assert "Configuration file already exists" in result.output


def test_cli_rules_lists_builtins():
    result = runner.invoke(app, ["rules"])

    assert result.exit_code == 0
    assert "no-tx-origin" in result.output
    assert "explicit-types" in result.output


def test_cli_lint_fix_reports_fixed_files(tmp_path, monkeypatch):
    _project(tmp_path, monkeypatch, files={"Wallet.sol": SOURCE, "Clean.sol": "contract Clean {}\n"})

    result = runner.invoke(app, ["lint", "--fix", "Wallet.sol", "Clean.sol"])

    assert f"[solint] Fixed {(tmp_path / 'Wallet.sol').resolve()}" in result.output
    assert "Clean.sol" not in result.output


def test_cli_lint_skips_ignored_files(tmp_path, monkeypatch):
    config = '[[config]]\n[config.rules]\n"no-tx-origin" = "error"\n\n[[config]]\nignores = ["vendor/**"]\n'
    _project(tmp_path, monkeypatch, config=config, files={"vendor/Wallet.sol": SOURCE})

    result = runner.invoke(app, ["lint", "**/*.sol"])

    assert result.exit_code == 0
    assert result.output == ""


def test_cli_lint_unexpected_error(tmp_path, monkeypatch):
    _project(tmp_path, monkeypatch)

    def broken_linter(source_id, cwd, fix):
        raise RuntimeError("boom")

    monkeypatch.setattr("solint_cli.main.run_linter", broken_linter)

    result = runner.invoke(app, ["lint", "Wallet.sol"])

    assert result.exit_code == 1
    assert "[solint] Unexpected error: boom" in result.output
    assert isinstance(result.exception, RuntimeError)
