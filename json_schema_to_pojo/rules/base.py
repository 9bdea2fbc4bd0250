"""
Base class for schema rules.

Every rule has the same capability: transform a target (class, field,
method, doc block) according to one schema keyword, given a ``RuleContext``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ..config import GenerationConfig
from ..model.class_model import ClassModel, CodeModel
from ..schema.nodes import Schema, SchemaNode

if TYPE_CHECKING:
    from .factory import RuleFactory

T = TypeVar("T")
R = TypeVar("R")

# Marks an argument of RuleContext.with_node that keeps the current value
_KEEP: Any = object()


@dataclass
class PropertyHandles:
    """Members generated for one property, as returned by the property rule."""

    class_index: int = 0
    field_index: int = 0
    getter_index: int | None = None
    setter_index: int | None = None
    builder_index: int | None = None

    # Index of the class holding the builder method (the builder class for inner builders)
    builder_class_index: int | None = None


@dataclass
class GenerationPass:
    """State owned by one generation of one schema document."""

    code_model: CodeModel = field(default_factory=CodeModel)

    # (class index, raw property name) -> generated members
    properties: dict[tuple[int, str], PropertyHandles] = field(default_factory=dict)

    # $ref targets whose type is being inferred, outermost first
    typing_refs: list[Schema] = field(default_factory=list)

    def record(self, name: str, handles: PropertyHandles) -> None:
        self.properties[(handles.class_index, name)] = handles

    def lookup(self, class_index: int, name: str) -> PropertyHandles | None:
        return self.properties.get((class_index, name))


@dataclass(frozen=True)
class RuleContext:
    """Everything a rule needs to know about where it is applied."""

    node_name: str
    node: SchemaNode | None
    parent: SchemaNode | None
    schema: Schema
    config: GenerationConfig
    generation: GenerationPass

    # Class the rule is generating members for, when there is one
    class_index: int | None = None

    def current_class(self) -> ClassModel | None:
        if self.class_index is None:
            return None
        return self.generation.code_model.get(self.class_index)

    def with_node(self, node: SchemaNode | None, parent: SchemaNode | None = _KEEP, schema: Schema | None = None, node_name: str | None = None) -> RuleContext:
        """A copy of this context pointing at another node.

        ``parent`` keeps the current parent unless given; pass None to clear it.
        """
        return replace(
            self,
            node=node,
            parent=self.parent if parent is _KEEP else parent,
            schema=schema if schema is not None else self.schema,
            node_name=node_name if node_name is not None else self.node_name,
        )


class Rule(ABC, Generic[T, R]):
    """A schema rule: ``apply(context, target) -> result``."""

    def __init__(self, rule_factory: RuleFactory):
        self.rule_factory = rule_factory

    @property
    def config(self) -> GenerationConfig:
        return self.rule_factory.config

    @abstractmethod
    def apply(self, ctx: RuleContext, target: T) -> R:
        """
        Apply this rule.

        Args:
            ctx: Where in the schema the rule is applied
            target: The model element to transform

        Returns:
            The transformed target (usually the same object)
        """
