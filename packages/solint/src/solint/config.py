"""Normalization and validation of user configuration.

A user config is either one config object or a list of them. Each object may
restrict itself to some ``files``, exclude some ``ignores`` and set ``rules``::

    {"rules": {"explicit-types": "error", "max-state-vars": ["warn", 20]}}

Rules resolve to ``[severity]`` or ``[severity, options]``. An object without
``files`` ignores the paths matching its ``ignores`` altogether: such files are
not linted at all.
"""

import fnmatch
import logging
from dataclasses import dataclass, field
from typing import Annotated, Any, Dict, List, Mapping, Optional, Protocol, Sequence

from pydantic import AfterValidator, BaseModel, ConfigDict, TypeAdapter, ValidationError
from pydantic_core import PydanticCustomError

from .errors import InvalidConfigError
from .models import SEVERITIES

logger = logging.getLogger(__name__)

INVALID_SEVERITY = 'Invalid option: expected severity to be "off", "warn", or "error"'
LEVEL_AS_SEVERITY = (
    'Invalid option: severity can\'t be specified as a number, use one of "off", "warn", or "error"'
)


def _is_level(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and 0 <= value <= 2


def validate_rule_config(config: Any) -> Optional[str]:
    """Return a problem description for a single rule setting, or None if it is valid."""
    if isinstance(config, str):
        return None if config in SEVERITIES else INVALID_SEVERITY

    if not isinstance(config, (list, tuple)):
        if _is_level(config):
            return LEVEL_AS_SEVERITY
        return "Invalid option: expected a string or an array"

    if len(config) == 0:
        return "Invalid option: expected a non-empty array"

    if len(config) > 2:
        return "Invalid option: expected an array with at most two elements"

    severity = config[0]
    if not isinstance(severity, str):
        if _is_level(severity):
            return LEVEL_AS_SEVERITY
        return "Invalid option: expected the first element to be a string"

    if severity not in SEVERITIES:
        return INVALID_SEVERITY
    return None


def _check_rule_config(value: Any) -> Any:
    problem = validate_rule_config(value)
    if problem is not None:
        raise PydanticCustomError("rule_config", problem)
    return value


RuleSetting = Annotated[Any, AfterValidator(_check_rule_config)]


class ConfigObject(BaseModel):
    model_config = ConfigDict(extra="forbid")

    files: Optional[List[str]] = None
    ignores: Optional[List[str]] = None
    rules: Optional[Dict[str, RuleSetting]] = None


_CONFIG_LIST = TypeAdapter(List[ConfigObject])


def _format_location(loc: Sequence[Any]) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        elif not path:
            path = str(part)
        elif str(part).isidentifier():
            path += f".{part}"
        else:
            path += f'["{part}"]'
    return path


def prettify_validation_error(error: ValidationError) -> str:
    lines = []
    for problem in error.errors():
        loc = list(problem["loc"])
        if problem["type"] == "extra_forbidden":
            lines.append(f'✖ Unrecognized key: "{loc[-1]}"')
            loc = loc[:-1]
        else:
            lines.append(f"✖ {problem['msg']}")
        if loc:
            lines.append(f"  → at {_format_location(loc)}")
    return "\n".join(lines)


def validate_user_config(user_config: Any, config_path: str) -> List[ConfigObject]:
    """Validate a raw user config and return its config objects in order."""
    if user_config is None:
        raise InvalidConfigError(
            config_path,
            "Configuration must be an object",
            hint="Did you forget to add a [tool.solint] section?",
        )

    try:
        if isinstance(user_config, Mapping):
            return [ConfigObject.model_validate(user_config)]
        if isinstance(user_config, (list, tuple)):
            return _CONFIG_LIST.validate_python(list(user_config))
    except ValidationError as e:
        raise InvalidConfigError(config_path, "\n\n" + prettify_validation_error(e)) from e

    raise InvalidConfigError(config_path, "Configuration must be an object or a list of objects")


def resolve_rule_config(setting: Any) -> List[Any]:
    """Normalize ``"error"`` / ``["error", opts]`` into ``[severity, *options]``."""
    if isinstance(setting, str):
        return [setting]
    return list(setting)


def _glob_match(path: str, pattern: str) -> bool:
    if fnmatch.fnmatchcase(path, pattern):
        return True
    # "**/" may also stand for no directory at all
    return "**/" in pattern and fnmatch.fnmatchcase(path, pattern.replace("**/", ""))


def matches_any(file_path: str, patterns: Sequence[str]) -> bool:
    """True when a positive pattern matches and no ``!``-negated pattern does."""
    path = file_path.replace("\\", "/")
    positives = [p for p in patterns if not p.startswith("!")]
    negatives = [p[1:] for p in patterns if p.startswith("!")]
    if not any(_glob_match(path, p) for p in positives):
        return False
    return not any(_glob_match(path, p) for p in negatives)


@dataclass
class ResolvedConfig:
    rules: Dict[str, List[Any]] = field(default_factory=dict)


class ConfigLoader(Protocol):
    def load_config(self, file_path: str) -> Optional[ResolvedConfig]: ...


class BasicConfigLoader:
    """Resolves the effective rule config for each file from ordered config objects"""

    def __init__(self, configs: List[ConfigObject]):
        self.configs = configs

    @classmethod
    def create(cls, user_config: Any, config_path: str = "<inline>") -> "BasicConfigLoader":
        return cls(validate_user_config(user_config, config_path))

    def is_ignored(self, file_path: str) -> bool:
        """True when an object without ``files`` lists the path in its ``ignores``."""
        return any(
            not config.files and config.ignores and matches_any(file_path, config.ignores)
            for config in self.configs
        )

    def load_config(self, file_path: str) -> Optional[ResolvedConfig]:
        """Merged rules for ``file_path``, or None when the file is ignored."""
        if self.is_ignored(file_path):
            logger.debug("%s is ignored", file_path)
            return None

        rules: Dict[str, List[Any]] = {}
        for config in self.configs:
            if config.files and not matches_any(file_path, config.files):
                continue
            # ignores next to files only exclude paths from this object
            if config.ignores and matches_any(file_path, config.ignores):
                continue
            for rule_name, setting in (config.rules or {}).items():
                # later objects replace the whole setting, options are never merged
                rules[rule_name] = resolve_rule_config(setting)
        return ResolvedConfig(rules=rules)
