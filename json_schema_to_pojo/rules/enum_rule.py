"""
Enum rule: generates a Java enum for a schema with an ``enum`` keyword.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from ..model.class_model import ClassKind, EnumConstant, MethodKind, MethodMember, Parameter, Visibility
from ..model.types import STRING, TypeCategory, TypeHandle, generated_class
from ..utils import make_java_identifier
from .base import Rule, RuleContext
from .object_rule import add_generated_annotation

logger = logging.getLogger(__name__)

_INTEGER = TypeHandle("Integer", TypeCategory.REFERENCE, "integer")
_DOUBLE = TypeHandle("Double", TypeCategory.REFERENCE, "number")
_BOOLEAN = TypeHandle("Boolean", TypeCategory.REFERENCE, "boolean")


class EnumRule(Rule[str, TypeHandle]):
    """
    Creates an enum class in the given package.

    Constants are named from ``javaEnumNames`` when it has one name per value,
    otherwise from the values themselves. The enum keeps the JSON value of
    each constant and maps values back with ``fromValue``.
    """

    def apply(self, ctx: RuleContext, target: str) -> TypeHandle:
        node = ctx.node
        values = []
        for value in node.get("enum") or []:
            if isinstance(value, (dict, list)):
                logger.debug("Ignoring non-scalar enum value %r of %s", value, ctx.node_name)
            elif value is not None:
                values.append(value)
        name_helper = self.rule_factory.name_helper

        code_model = ctx.generation.code_model
        name = code_model.unique_class_name(name_helper.get_class_name(ctx.node_name, node), target)
        cls = code_model.add_class(name, target, ClassKind.ENUM)
        type_ = generated_class(name, target, cls.index, json_type=node.type_name() or "string")
        if node.content is ctx.schema.content:
            ctx.schema.java_type = type_

        for key in ("title", "description"):
            text = node.text(key)
            if text:
                cls.javadoc.append("\n" + text)
        add_generated_annotation(cls, self.config)

        cls.enum_value_type = self._value_type(node.type_name(), values)

        java_names = node.get("javaEnumNames")
        if not isinstance(java_names, list) or len(java_names) != len(values):
            java_names = None
        used: set[str] = set()
        for position, value in enumerate(values):
            if java_names:
                constant = make_java_identifier(str(java_names[position]))
            else:
                constant = name_helper.get_enum_constant_name(value)
            unique = constant
            suffix = 1
            while unique in used:
                suffix += 1
                unique = f"{constant}_{suffix}"
            used.add(unique)
            cls.enum_constants.append(EnumConstant(name=unique, value=value))

        self._add_members(cls, name, type_)
        logger.debug("Generated enum %s with %d constants", cls.qualified_name, len(cls.enum_constants))
        return type_

    @staticmethod
    def _value_type(json_type: str, values: list[Any]) -> TypeHandle:
        """Value type shared by every value; String when the values mix types."""
        if not values:
            return {"integer": _INTEGER, "number": _DOUBLE, "boolean": _BOOLEAN}.get(json_type, STRING)
        if all(isinstance(v, bool) for v in values):
            return _BOOLEAN
        if any(isinstance(v, bool) or not isinstance(v, (int, float)) for v in values):
            return STRING
        if json_type != "number" and all(isinstance(v, int) for v in values):
            return _INTEGER
        return _DOUBLE

    def _add_members(self, cls, name: str, type_: TypeHandle) -> None:
        value_type = cls.enum_value_type
        value_field = cls.fields[cls.add_field("value", value_type)]
        value_field.final = True

        cls.add_method(
            MethodMember(
                name=name,
                kind=MethodKind.CONSTRUCTOR,
                visibility=Visibility.PRIVATE,
                params=[Parameter("value", value_type)],
                body=["this.value = value;"],
            )
        )
        to_string = MethodMember(name="toString", kind=MethodKind.GETTER, return_type=STRING, body=["return String.valueOf(this.value);"])
        to_string.annotate("java.lang.Override")
        cls.add_method(to_string)

        getter = MethodMember(name="value", kind=MethodKind.GETTER, return_type=value_type, field_name="value", body=["return this.value;"])
        self.rule_factory.annotator.enum_value(getter, cls)
        cls.add_method(getter)

        from_value = MethodMember(
            name="fromValue",
            kind=MethodKind.BUILD,
            return_type=type_,
            static=True,
            params=[Parameter("value", value_type)],
            body=[
                f"for ({name} constant : {name}.values()) {{",
                "    if (constant.value.equals(value)) {",
                "        return constant;",
                "    }",
                "}",
                "throw new IllegalArgumentException(String.valueOf(value));",
            ],
        )
        self.rule_factory.annotator.enum_creator(from_value, cls)
        cls.add_method(from_value)


def enum_literal(value: Any, value_type: TypeHandle = STRING) -> str:
    """Java literal of an enum constant's JSON value, as a ``value_type`` value."""
    if value_type.name == "String":
        return json.dumps(value if isinstance(value, str) else json.dumps(value))
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return json.dumps(value)
    if isinstance(value, int):
        return str(value)
    return f"{float(value)}D"
