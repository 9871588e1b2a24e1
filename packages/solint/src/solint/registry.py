from typing import Dict, Iterable, List, Optional

from .rules.base import RuleDefinition


class RuleRegistry:
    """Registry for looking up rule definitions by name"""

    def __init__(self, rules: Optional[Iterable[RuleDefinition]] = None):
        self._rules: Dict[str, RuleDefinition] = {}
        if rules is None:
            self._load_builtin_rules()
        else:
            for rule in rules:
                self.register(rule)

    def register(self, rule: RuleDefinition):
        self._rules[rule.name] = rule

    def get(self, name: str) -> Optional[RuleDefinition]:
        return self._rules.get(name)

    def get_all_rules(self) -> List[RuleDefinition]:
        return list(self._rules.values())

    def names(self) -> List[str]:
        return sorted(self._rules)

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def _load_builtin_rules(self):
        from .rules import get_all_rules

        for rule in get_all_rules():
            self.register(rule)
