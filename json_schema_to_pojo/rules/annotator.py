"""
Annotators add serialization-library annotations to the class model.

The rules call the annotator at fixed points (class created, field created,
accessor created, date/time format found); what gets added is up to the
annotator, so a different JSON library can be supported by another
subclass.
"""

from __future__ import annotations

from ..config import AnnotationStyle, GenerationConfig
from ..model.class_model import ClassModel, FieldMember, JavaExpression, MethodMember
from ..schema.nodes import SchemaNode

JSON_PROPERTY = "com.fasterxml.jackson.annotation.JsonProperty"
JSON_PROPERTY_ORDER = "com.fasterxml.jackson.annotation.JsonPropertyOrder"
JSON_PROPERTY_DESCRIPTION = "com.fasterxml.jackson.annotation.JsonPropertyDescription"
JSON_INCLUDE = "com.fasterxml.jackson.annotation.JsonInclude"
JSON_FORMAT = "com.fasterxml.jackson.annotation.JsonFormat"
JSON_VALUE = "com.fasterxml.jackson.annotation.JsonValue"
JSON_CREATOR = "com.fasterxml.jackson.annotation.JsonCreator"


class Annotator:
    """Annotator that adds nothing; subclasses override the hooks they need."""

    def __init__(self, config: GenerationConfig):
        self.config = config

    def property_order(self, cls: ClassModel, properties: list[str]) -> None:
        pass

    def property_inclusion(self, cls: ClassModel) -> None:
        pass

    def property_field(self, field: FieldMember, cls: ClassModel, property_name: str, node: SchemaNode) -> None:
        pass

    def property_getter(self, getter: MethodMember, cls: ClassModel, property_name: str) -> None:
        pass

    def property_setter(self, setter: MethodMember, cls: ClassModel, property_name: str) -> None:
        pass

    def date_time_field(self, field: FieldMember, cls: ClassModel, node: SchemaNode) -> None:
        pass

    def date_field(self, field: FieldMember, cls: ClassModel, node: SchemaNode) -> None:
        pass

    def time_field(self, field: FieldMember, cls: ClassModel, node: SchemaNode) -> None:
        pass

    def enum_value(self, method: MethodMember, cls: ClassModel) -> None:
        pass

    def enum_creator(self, method: MethodMember, cls: ClassModel) -> None:
        pass


class NoopAnnotator(Annotator):
    """Generates plain classes without serialization annotations."""


class Jackson2Annotator(Annotator):
    """Adds Jackson 2.x annotations."""

    def property_order(self, cls: ClassModel, properties: list[str]) -> None:
        if properties:
            cls.annotate(JSON_PROPERTY_ORDER, value=list(properties))

    def property_inclusion(self, cls: ClassModel) -> None:
        cls.annotate(JSON_INCLUDE, value=JavaExpression("JsonInclude.Include.NON_NULL"))

    def property_field(self, field: FieldMember, cls: ClassModel, property_name: str, node: SchemaNode) -> None:
        field.annotate(JSON_PROPERTY, value=property_name)
        description = node.get("description")
        if isinstance(description, str):
            field.annotate(JSON_PROPERTY_DESCRIPTION, value=description)

    def property_getter(self, getter: MethodMember, cls: ClassModel, property_name: str) -> None:
        getter.annotate(JSON_PROPERTY, value=property_name)

    def property_setter(self, setter: MethodMember, cls: ClassModel, property_name: str) -> None:
        setter.annotate(JSON_PROPERTY, value=property_name)

    def date_time_field(self, field: FieldMember, cls: ClassModel, node: SchemaNode) -> None:
        pattern = node.get("customDateTimePattern") or (self.config.custom_date_time_pattern if self.config.format_date_times else None)
        if pattern:
            self._format(field, pattern, node.get("customTimezone") or "UTC")

    def date_field(self, field: FieldMember, cls: ClassModel, node: SchemaNode) -> None:
        pattern = node.get("customPattern") or (self.config.custom_date_pattern if self.config.format_dates else None)
        if pattern:
            self._format(field, pattern)

    def time_field(self, field: FieldMember, cls: ClassModel, node: SchemaNode) -> None:
        pattern = node.get("customPattern") or (self.config.custom_time_pattern if self.config.format_times else None)
        if pattern:
            self._format(field, pattern)

    def enum_value(self, method: MethodMember, cls: ClassModel) -> None:
        method.annotate(JSON_VALUE)

    def enum_creator(self, method: MethodMember, cls: ClassModel) -> None:
        method.annotate(JSON_CREATOR)

    @staticmethod
    def _format(field: FieldMember, pattern: str, timezone: str | None = None) -> None:
        params = {"shape": JavaExpression("JsonFormat.Shape.STRING"), "pattern": pattern}
        if timezone:
            params["timezone"] = timezone
        field.annotate(JSON_FORMAT, **params)


def create_annotator(config: GenerationConfig) -> Annotator:
    """The annotator selected by ``config.annotation_style``."""
    if config.annotation_style is AnnotationStyle.NONE:
        return NoopAnnotator(config)
    return Jackson2Annotator(config)
