from pathlib import Path

from solint.errors import ConfigAlreadyExistsError
from solint.registry import RuleRegistry

from .config import CONFIG_FILE_NAME, find_config_path


def render_default_config(registry: RuleRegistry) -> str:
    lines = ["[rules]"]
    for rule in sorted(registry.get_all_rules(), key=lambda r: r.name):
        severity = "error" if rule.recommended else "off"
        lines.append(f'"{rule.name}" = "{severity}"')
    return "\n".join(lines) + "\n"


def init_config(cwd: Path) -> Path:
    """Write a ``solint.toml`` enabling every recommended rule"""
    existing = find_config_path(cwd)
    if existing is not None:
        raise ConfigAlreadyExistsError(str(existing))

    config_path = cwd.resolve() / CONFIG_FILE_NAME
    config_path.write_text(render_default_config(RuleRegistry()), encoding="utf-8")
    return config_path
