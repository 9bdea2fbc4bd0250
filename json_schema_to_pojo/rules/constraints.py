"""
Constraint rules: Bean Validation annotations and initializers driven by
validation keywords of a property schema.

Every rule takes the ``FieldMember`` generated for the property and returns
it. A rule that cannot use the field's type category leaves the field alone.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from ..model.class_model import NOT_NULL_FAMILY, ClassKind, ConstraintKind, FieldMember
from ..model.types import TypeCategory, TypeHandle
from ..schema.nodes import SchemaNode
from .base import Rule, RuleContext
from .enum_rule import enum_literal

logger = logging.getLogger(__name__)


def field_label(node: SchemaNode | None, field_name: str) -> str:
    """Description of the property, or the field name when it has none."""
    description = node.get("description") if node is not None else None
    return description if isinstance(description, str) and description else field_name


def required_message(node: SchemaNode | None, field_name: str) -> str:
    return f"{field_label(node, field_name)} must not be empty"


def format_message(node: SchemaNode | None, field_name: str) -> str:
    return f"{field_label(node, field_name)} is invalid"


def not_null_family_kind(type_: TypeHandle | None) -> ConstraintKind:
    """Required constraint matching the category of ``type_``."""
    if type_ is None:
        return ConstraintKind.NOT_NULL
    if type_.category is TypeCategory.STRING:
        return ConstraintKind.NOT_BLANK
    if type_.category is TypeCategory.COLLECTION:
        return ConstraintKind.NOT_EMPTY
    return ConstraintKind.NOT_NULL


def attach_required_constraint(field: FieldMember, message: str) -> None:
    """Replace any not-null style constraint of ``field`` with the one for its type."""
    field.remove_constraints(NOT_NULL_FAMILY)
    field.add_constraint(not_null_family_kind(field.type), message=message)


def _category(field: FieldMember) -> TypeCategory | None:
    return field.type.category if field.type is not None else None


def _number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _decimal_text(value: int | float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class PatternRule(Rule[FieldMember, FieldMember]):
    """Adds ``@Pattern`` for the ``pattern`` keyword on string fields."""

    def apply(self, ctx: RuleContext, target: FieldMember) -> FieldMember:
        pattern = ctx.node.get("pattern")
        if not self.config.include_jsr303_annotations or not isinstance(pattern, str):
            return target
        if _category(target) is not TypeCategory.STRING:
            logger.debug("Skipping pattern on non-string field '%s'", target.name)
            return target
        target.add_constraint(
            ConstraintKind.PATTERN,
            regexp=pattern,
            message=f"must match the regular expression: {pattern}",
        )
        return target


class FormatRule(Rule[FieldMember, FieldMember]):
    """Handles the ``format`` keyword: date/time annotations, email and URL checks."""

    def apply(self, ctx: RuleContext, target: FieldMember) -> FieldMember:
        format_ = ctx.node.text("format")
        cls = ctx.current_class()
        annotator = self.rule_factory.annotator

        if format_ == "date-time":
            annotator.date_time_field(target, cls, ctx.node)
        elif format_ == "date":
            annotator.date_field(target, cls, ctx.node)
        elif format_ == "time":
            annotator.time_field(target, cls, ctx.node)
        elif format_ == "email":
            self._attach(target, ConstraintKind.EMAIL, ctx.node)
        elif format_ == "uri":
            self._attach(target, ConstraintKind.URL, ctx.node)
        elif format_:
            logger.debug("No format handling for '%s' on field '%s'", format_, target.name)
        return target

    @staticmethod
    def _attach(field: FieldMember, kind: ConstraintKind, node: SchemaNode) -> None:
        if _category(field) is not TypeCategory.STRING:
            logger.debug("Skipping %s on non-string field '%s'", kind.simple_name, field.name)
            return
        if not field.has_constraint(kind):
            field.add_constraint(kind, message=format_message(node, field.name))


class DefaultRule(Rule[FieldMember, FieldMember]):
    """Field initializer from ``default``, or an empty collection."""

    def apply(self, ctx: RuleContext, target: FieldMember) -> FieldMember:
        type_ = target.type
        if type_ is None:
            return target

        if not ctx.node.has("default"):
            if type_.category is TypeCategory.COLLECTION and self.config.initialize_collections:
                target.initializer = self._new_collection(target, type_)
            return target

        value = ctx.node.get("default")
        if type_.category is TypeCategory.COLLECTION:
            if not isinstance(value, list):
                logger.debug("Ignoring non-array default of field '%s'", target.name)
                return target
            item = type_.type_args[0] if type_.type_args else None
            literals = [self._literal(ctx, v, item) for v in value]
            if any(literal is None for literal in literals):
                logger.debug("Ignoring default of field '%s': unsupported item values", target.name)
                return target
            collection = self._new_collection(target, type_, bare=True)
            if literals:
                target.initializer_imports.append("java.util.Arrays")
                target.initializer = f"{collection}(Arrays.asList({', '.join(literals)}))"
            else:
                target.initializer = f"{collection}()"
            return target

        literal = self._literal(ctx, value, type_)
        if literal is None:
            logger.debug("Ignoring default of field '%s' of type %s", target.name, type_.name)
            return target
        target.initializer = literal
        return target

    @staticmethod
    def _new_collection(field: FieldMember, type_: TypeHandle, bare: bool = False) -> str:
        implementation = "LinkedHashSet" if type_.name.startswith("Set<") else "ArrayList"
        field.initializer_imports.append(f"java.util.{implementation}")
        return f"new {implementation}<>" if bare else f"new {implementation}<>()"

    def _literal(self, ctx: RuleContext, value: Any, type_: TypeHandle | None) -> str | None:
        """Java literal for ``value`` as a ``type_`` value, or None when there is none."""
        if type_ is None or value is None:
            return None

        if type_.class_index is not None:
            cls = ctx.generation.code_model.get(type_.class_index)
            if cls.kind is ClassKind.ENUM and not isinstance(value, (dict, list)):
                return f"{type_.name}.fromValue({enum_literal(value, cls.enum_value_type)})"
            return None

        if type_.category is TypeCategory.STRING:
            return json.dumps(str(value) if not isinstance(value, bool) else ("true" if value else "false"))

        boxed = type_.boxed().name
        if boxed == "Boolean" and isinstance(value, bool):
            return "true" if value else "false"
        if not _number(value):
            return None
        if boxed == "Integer" and isinstance(value, int):
            return str(value)
        if boxed == "Long" and isinstance(value, int):
            return f"{value}L"
        if boxed == "Double":
            return f"{float(value)}D"
        if boxed == "BigDecimal":
            return f'new BigDecimal("{_decimal_text(value)}")'
        return None


class MinimumMaximumRule(Rule[FieldMember, FieldMember]):
    """``@DecimalMin`` / ``@DecimalMax`` for ``minimum`` / ``maximum``."""

    def apply(self, ctx: RuleContext, target: FieldMember) -> FieldMember:
        if not self.config.include_jsr303_annotations:
            return target
        minimum = ctx.node.get("minimum")
        maximum = ctx.node.get("maximum")
        if not _number(minimum) and not _number(maximum):
            return target
        if not self._applicable(target.type):
            logger.debug("Skipping minimum/maximum on field '%s'", target.name)
            return target

        if _number(minimum):
            target.add_constraint(ConstraintKind.DECIMAL_MIN, value=_decimal_text(minimum))
        if _number(maximum):
            target.add_constraint(ConstraintKind.DECIMAL_MAX, value=_decimal_text(maximum))
        return target

    def _applicable(self, type_: TypeHandle | None) -> bool:
        if type_ is None:
            return False
        if type_.category is TypeCategory.STRING:
            return True
        if type_.json_type == "integer":
            return True
        return type_.json_type == "number" and self.config.use_big_decimals


class _SizeRule(Rule[FieldMember, FieldMember]):
    min_keyword = ""
    max_keyword = ""
    categories: frozenset = frozenset()

    def apply(self, ctx: RuleContext, target: FieldMember) -> FieldMember:
        if not self.config.include_jsr303_annotations:
            return target
        params = {}
        minimum = ctx.node.get(self.min_keyword)
        maximum = ctx.node.get(self.max_keyword)
        if isinstance(minimum, int) and not isinstance(minimum, bool):
            params["min"] = minimum
        if isinstance(maximum, int) and not isinstance(maximum, bool):
            params["max"] = maximum
        if not params:
            return target
        if _category(target) not in self.categories:
            logger.debug("Skipping %s/%s on field '%s'", self.min_keyword, self.max_keyword, target.name)
            return target
        target.add_constraint(ConstraintKind.SIZE, **params)
        return target


class MinItemsMaxItemsRule(_SizeRule):
    """``@Size`` for ``minItems`` / ``maxItems`` on collections."""

    min_keyword = "minItems"
    max_keyword = "maxItems"
    categories = frozenset({TypeCategory.COLLECTION})


class MinLengthMaxLengthRule(_SizeRule):
    """``@Size`` for ``minLength`` / ``maxLength`` on strings and collections."""

    min_keyword = "minLength"
    max_keyword = "maxLength"
    categories = frozenset({TypeCategory.STRING, TypeCategory.COLLECTION})


class DigitsRule(Rule[FieldMember, FieldMember]):
    """``@Digits`` for ``integerDigits`` / ``fractionalDigits``."""

    def apply(self, ctx: RuleContext, target: FieldMember) -> FieldMember:
        if not self.config.include_jsr303_annotations:
            return target
        integer_digits = ctx.node.get("integerDigits")
        if not isinstance(integer_digits, int) or isinstance(integer_digits, bool):
            return target
        type_ = target.type
        if type_ is None or not (type_.is_numeric or type_.category is TypeCategory.STRING):
            logger.debug("Skipping digits on field '%s'", target.name)
            return target
        fraction = ctx.node.get("fractionalDigits")
        if not isinstance(fraction, int) or isinstance(fraction, bool):
            fraction = 0
        target.add_constraint(ConstraintKind.DIGITS, integer=integer_digits, fraction=fraction)
        return target


class ValidRule(Rule[FieldMember, FieldMember]):
    """``@Valid`` so validation cascades into nested objects and collections."""

    def apply(self, ctx: RuleContext, target: FieldMember) -> FieldMember:
        if self.config.include_jsr303_annotations and not target.has_constraint(ConstraintKind.VALID):
            target.add_constraint(ConstraintKind.VALID)
        return target
