import tomllib
from pathlib import Path
from typing import Any

from solint.config import BasicConfigLoader
from solint.errors import ConfigLoadingError, ConfigNotFoundError

CONFIG_FILE_NAME = "solint.toml"
PYPROJECT_FILE_NAME = "pyproject.toml"


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigLoadingError(str(path), str(e)) from e


def _has_tool_section(pyproject: Path) -> bool:
    return "solint" in _read_toml(pyproject).get("tool", {})


def find_config_path(cwd: Path) -> Path | None:
    """Closest ``solint.toml``, or ``pyproject.toml`` with a ``[tool.solint]`` table"""
    current = cwd.resolve()
    while True:
        config_path = current / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path
        pyproject = current / PYPROJECT_FILE_NAME
        if pyproject.exists() and _has_tool_section(pyproject):
            return pyproject
        if current.parent == current:
            return None
        current = current.parent


def load_user_config(config_path: Path) -> Any:
    """Raw user config from a config file.

    ``solint.toml`` holds one config object at the top level, or several as
    ``[[config]]`` tables. In ``pyproject.toml`` the same shape lives under
    ``[tool.solint]``.
    """
    data = _read_toml(config_path)
    if config_path.name == PYPROJECT_FILE_NAME:
        data = data.get("tool", {}).get("solint")
    if isinstance(data, dict) and list(data) == ["config"]:
        return data["config"]
    return data


def create_config_loader(cwd: Path) -> BasicConfigLoader:
    config_path = find_config_path(cwd)
    if config_path is None:
        raise ConfigNotFoundError()
    return BasicConfigLoader.create(load_user_config(config_path), str(config_path))
