from .config import BasicConfigLoader, ConfigLoader, ResolvedConfig
from .engine import MAX_FIX_ITERATIONS, Linter
from .errors import SolintError
from .models import Diagnostic, Edit, Fix, LintResult, SourceFile
from .registry import RuleRegistry
from .rules import RuleContext, RuleDefinition, get_all_rules

__version__ = "0.3.0"

__all__ = [
    "BasicConfigLoader",
    "ConfigLoader",
    "Diagnostic",
    "Edit",
    "Fix",
    "LintResult",
    "Linter",
    "MAX_FIX_ITERATIONS",
    "ResolvedConfig",
    "RuleContext",
    "RuleDefinition",
    "RuleRegistry",
    "SolintError",
    "SourceFile",
    "get_all_rules",
]
