"""
Rule factory: creates the rules of one generation and holds the
collaborators they share.
"""

from __future__ import annotations

from ..config import GenerationConfig
from ..schema.store import SchemaStore
from .annotator import Annotator, create_annotator
from .constraints import (
    DefaultRule,
    DigitsRule,
    FormatRule,
    MinimumMaximumRule,
    MinItemsMaxItemsRule,
    MinLengthMaxLengthRule,
    PatternRule,
    ValidRule,
)
from .documentation import CommentRule, DescriptionRule, JavaNameRule, NotRequiredRule, RequiredRule, TitleRule
from .enum_rule import EnumRule
from .naming import NameHelper
from .object_rule import ObjectRule
from .property_rule import PropertyRule
from .reference_resolver import ReferenceResolver
from .required_array_rule import RequiredArrayRule
from .type_rule import TypeRule


class RuleFactory:
    """
    Provides every rule with the configuration, annotator, schema store and
    naming strategy of the current generation.

    Args:
        config: Generation options; defaults to ``GenerationConfig()``
        annotator: Serialization annotator; defaults to the one selected by
            ``config.annotation_style``
        schema_store: Store for $ref targets; a fresh store by default
        name_helper: Naming strategy; defaults to ``NameHelper(config)``
    """

    def __init__(
        self,
        config: GenerationConfig | None = None,
        annotator: Annotator | None = None,
        schema_store: SchemaStore | None = None,
        name_helper: NameHelper | None = None,
    ):
        self.config = config or GenerationConfig()
        self.annotator = annotator or create_annotator(self.config)
        self.schema_store = schema_store or SchemaStore()
        self.name_helper = name_helper or NameHelper(self.config)
        self.reference_resolver = ReferenceResolver(self.schema_store, self.config.ref_fragment_path_delimiters)

    # Structure

    def type_rule(self) -> TypeRule:
        return TypeRule(self)

    def object_rule(self) -> ObjectRule:
        return ObjectRule(self)

    def enum_rule(self) -> EnumRule:
        return EnumRule(self)

    def property_rule(self) -> PropertyRule:
        return PropertyRule(self)

    def required_array_rule(self) -> RequiredArrayRule:
        return RequiredArrayRule(self)

    # Documentation

    def title_rule(self) -> TitleRule:
        return TitleRule(self)

    def java_name_rule(self) -> JavaNameRule:
        return JavaNameRule(self)

    def description_rule(self) -> DescriptionRule:
        return DescriptionRule(self)

    def comment_rule(self) -> CommentRule:
        return CommentRule(self)

    def required_rule(self) -> RequiredRule:
        return RequiredRule(self)

    def not_required_rule(self) -> NotRequiredRule:
        return NotRequiredRule(self)

    # Constraints

    def pattern_rule(self) -> PatternRule:
        return PatternRule(self)

    def format_rule(self) -> FormatRule:
        return FormatRule(self)

    def default_rule(self) -> DefaultRule:
        return DefaultRule(self)

    def minimum_maximum_rule(self) -> MinimumMaximumRule:
        return MinimumMaximumRule(self)

    def min_items_max_items_rule(self) -> MinItemsMaxItemsRule:
        return MinItemsMaxItemsRule(self)

    def min_length_max_length_rule(self) -> MinLengthMaxLengthRule:
        return MinLengthMaxLengthRule(self)

    def digits_rule(self) -> DigitsRule:
        return DigitsRule(self)

    def valid_rule(self) -> ValidRule:
        return ValidRule(self)
