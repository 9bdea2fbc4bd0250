"""
Naming strategy: derives Java identifiers from raw schema names.
"""

from __future__ import annotations

from ..config import GenerationConfig
from ..model.types import TypeHandle, simple_name
from ..schema.nodes import SchemaNode
from ..utils import capitalize, make_java_identifier, snake_to_pascal_case, to_camel_case, to_upper_snake_case


class NameHelper:
    """Property, accessor, builder and class names for schema nodes."""

    def __init__(self, config: GenerationConfig):
        self.config = config

    def normalize_name(self, name: str) -> str:
        """lowerCamelCase Java identifier for an arbitrary property name."""
        return make_java_identifier(to_camel_case(name))

    def get_property_name(self, json_property_name: str, node: SchemaNode | None) -> str:
        """Field name; the ``javaName`` keyword overrides the derived name."""
        java_name = node.get("javaName") if node is not None else None
        if isinstance(java_name, str) and java_name:
            json_property_name = java_name
        return self.normalize_name(json_property_name)

    def get_getter_name(self, json_property_name: str, type_: TypeHandle | None, node: SchemaNode | None) -> str:
        prefix = "is" if type_ is not None and type_.name == "boolean" else "get"
        return prefix + self._accessor_suffix(json_property_name, node)

    def get_setter_name(self, json_property_name: str, node: SchemaNode | None) -> str:
        return "set" + self._accessor_suffix(json_property_name, node)

    def get_builder_name(self, json_property_name: str, node: SchemaNode | None) -> str:
        return "with" + self._accessor_suffix(json_property_name, node)

    def get_class_name(self, node_name: str, node: SchemaNode | None) -> str:
        """Class name for an object/enum schema; ``javaType`` gives the simple name."""
        java_type = node.get("javaType") if node is not None else None
        if isinstance(java_type, str) and java_type:
            return simple_name(java_type)
        name = snake_to_pascal_case(node_name) or "Object"
        if name[0].isdigit():
            name = "_" + name
        return name

    def get_enum_constant_name(self, value: object) -> str:
        name = to_upper_snake_case(str(value)) if value is not None else "NULL"
        if not name:
            name = "_EMPTY"
        if name[0].isdigit():
            name = "_" + name
        return name

    def _accessor_suffix(self, json_property_name: str, node: SchemaNode | None) -> str:
        return capitalize(self.get_property_name(json_property_name, node))
