import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Protocol, Sequence

from pydantic import TypeAdapter, ValidationError
from solint_tree_sitter import BindingGraph, CompiledUnit, QueryMatch, TextRange
from tree_sitter import Node, TreeCursor

from ..config import prettify_validation_error
from ..errors import RuleConfigError
from ..models import Diagnostic, Fix

_NO_DEFAULT = object()


@dataclass
class RuleContext:
    """Read-only view of one compiled file handed to every rule"""

    unit: CompiledUnit

    @property
    def source_id(self) -> str:
        return self.unit.id

    @property
    def content(self) -> str:
        return self.unit.content

    @property
    def bindings(self) -> BindingGraph:
        return self.unit.bindings

    def cursor(self) -> TreeCursor:
        return self.unit.cursor()

    def find_all(self, *types: str, node: Optional[Node] = None) -> List[Node]:
        return self.unit.find_all(*types, node=node)

    def query(self, source: str, node: Optional[Node] = None) -> List[QueryMatch]:
        return self.unit.query(source, node=node)

    def text(self, node: Node) -> str:
        return self.unit.text(node)

    def range(self, node: Node) -> TextRange:
        return self.unit.range(node)


class Rule(Protocol):
    """A configured rule instance, built by a :class:`RuleDefinition`"""

    name: str

    def run(self, context: RuleContext) -> List[Diagnostic]: ...


@dataclass(frozen=True)
class RuleDefinition:
    """Registry entry for a rule: metadata plus a factory.

    ``config_schema`` is any type pydantic can validate; rules without one accept
    no options. ``config_default`` is used when the user gives a severity only.
    """

    name: str
    create: Callable[..., Rule]
    recommended: bool = False
    description: str = ""
    config_schema: Any = None
    config_default: Any = _NO_DEFAULT

    @property
    def configurable(self) -> bool:
        return self.config_schema is not None

    def validate_config(self, raw: Any = None) -> Any:
        if raw is None and self.config_default is not _NO_DEFAULT:
            raw = copy.deepcopy(self.config_default)
        try:
            return TypeAdapter(self.config_schema).validate_python(raw)
        except ValidationError as e:
            raise RuleConfigError(self.name, "\n\n" + prettify_validation_error(e)) from e

    def build(self, options: Sequence[Any] = ()) -> Rule:
        """Validate ``options`` (everything after the severity) and create the rule."""
        if not self.configurable:
            if options:
                raise RuleConfigError(
                    self.name,
                    "Rule requires no configuration, but received an array with more than one element.",
                )
            return self.create(self.name)

        config = self.validate_config(options[0] if options else None)
        return self.create(self.name, config)


class BaseRule(ABC):
    """Base class for rule implementations"""

    def __init__(self, name: str, config: Any = None):
        self.name = name
        self.config = config

    @abstractmethod
    def run(self, context: RuleContext) -> List[Diagnostic]:
        pass

    # Helper method for consistent diagnostic creation
    def _create_diagnostic(
        self,
        context: RuleContext,
        node: Node,
        message: str,
        fix: Optional[Fix] = None,
    ) -> Diagnostic:
        start = context.range(node).start
        return Diagnostic(
            source_id=context.source_id,
            rule=self.name,
            line=start.line,
            column=start.column,
            message=message,
            fix=fix,
        )
