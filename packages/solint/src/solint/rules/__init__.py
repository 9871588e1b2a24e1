from .base import BaseRule, Rule, RuleContext, RuleDefinition
from .explicit_types import ExplicitTypes
from .id_denylist import IdDenylist
from .max_state_vars import MaxStateVars
from .no_console import NoConsole
from .no_tx_origin import NoTxOrigin


def get_all_rules() -> list[RuleDefinition]:
    return [
        ExplicitTypes,
        IdDenylist,
        MaxStateVars,
        NoConsole,
        NoTxOrigin,
    ]


__all__ = [
    "BaseRule",
    "Rule",
    "RuleContext",
    "RuleDefinition",
    "get_all_rules",
]
