"""
Property rule: field, accessors, builder method and constraints for one
property of an object schema.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from ..model.class_model import ClassModel, FieldMember, MethodKind, MethodMember, Parameter, Visibility
from ..model.types import TypeCategory, TypeHandle, generated_class
from ..schema.nodes import SchemaNode
from .base import PropertyHandles, Rule, RuleContext
from .object_rule import create_inner_builder

logger = logging.getLogger(__name__)


class PropertyRule(Rule[ClassModel, ClassModel]):
    """
    Applies one entry of a ``properties`` map to the class being generated.

    The context's ``node_name`` is the raw property name, ``node`` its schema
    and ``parent`` the object schema declaring it. The members created are
    recorded as ``PropertyHandles`` in the generation pass so the required
    array can be applied to them afterwards.
    """

    def apply(self, ctx: RuleContext, target: ClassModel) -> ClassModel:
        factory = self.rule_factory
        config = self.config
        ctx = replace(ctx, class_index=target.index)
        property_name = ctx.node_name

        name_node = ctx.node
        field_name = factory.name_helper.get_property_name(property_name, name_node)
        type_ = factory.type_rule().apply(ctx, target.package)

        resolved, schema = factory.reference_resolver.resolve(ctx.node, ctx.schema)
        ctx = ctx.with_node(resolved, schema=schema)
        required = resolved.flag("required") or self._in_required_array(ctx)

        visibility = Visibility.PRIVATE if config.include_getters or config.include_setters or config.include_lombok else Visibility.PUBLIC
        field_index = target.add_field(field_name, type_, visibility)
        field = target.fields[field_index]
        self._document(ctx, field)
        factory.annotator.property_field(field, target, property_name, resolved)

        handles = PropertyHandles(class_index=target.index, field_index=field_index)

        if config.include_getters:
            handles.getter_index = self._add_getter(ctx, target, field, required, name_node)
        if config.include_setters:
            handles.setter_index = self._add_setter(ctx, target, field, name_node)
        if config.generate_builders:
            handles.builder_class_index, handles.builder_index = self._add_builder(ctx, target, field, name_node)

        if resolved.has("pattern"):
            factory.pattern_rule().apply(ctx, field)
        factory.default_rule().apply(ctx, field)
        factory.minimum_maximum_rule().apply(ctx, field)
        factory.min_items_max_items_rule().apply(ctx, field)
        factory.min_length_max_length_rule().apply(ctx, field)
        factory.digits_rule().apply(ctx, field)
        if resolved.type_name() in ("object", "array"):
            factory.valid_rule().apply(ctx, field)
        factory.format_rule().apply(ctx, field)

        ctx.generation.record(property_name, handles)
        logger.debug("Generated property %s.%s (%s)", target.name, field_name, type_.name)
        return target

    def _add_getter(self, ctx: RuleContext, cls: ClassModel, field: FieldMember, required: bool, name_node: SchemaNode) -> int:
        type_ = field.type
        getter_name = self.rule_factory.name_helper.get_getter_name(ctx.node_name, type_, name_node)
        if self._use_optional(ctx) and not required and type_.category is not TypeCategory.PRIMITIVE:
            return_type = type_.optional()
            body = [f"return Optional.ofNullable(this.{field.name});"]
        else:
            return_type = type_
            body = [f"return this.{field.name};"]

        getter = MethodMember(name=getter_name, kind=MethodKind.GETTER, return_type=return_type, body=body, field_name=field.name)
        self._document(ctx, getter)
        self.rule_factory.annotator.property_getter(getter, cls, ctx.node_name)
        return cls.add_method(getter)

    def _add_setter(self, ctx: RuleContext, cls: ClassModel, field: FieldMember, name_node: SchemaNode) -> int:
        setter = MethodMember(
            name=self.rule_factory.name_helper.get_setter_name(ctx.node_name, name_node),
            kind=MethodKind.SETTER,
            params=[Parameter(field.name, field.type)],
            body=[f"this.{field.name} = {field.name};"],
            field_name=field.name,
        )
        self._document(ctx, setter)
        self.rule_factory.annotator.property_setter(setter, cls, ctx.node_name)
        return cls.add_method(setter)

    def _add_builder(self, ctx: RuleContext, cls: ClassModel, field: FieldMember, name_node: SchemaNode) -> tuple[int, int]:
        """Adds the ``withX`` method; returns (class index, method index)."""
        builder_name = self.rule_factory.name_helper.get_builder_name(ctx.node_name, name_node)
        class_type = generated_class(cls.name, cls.package, cls.index)

        if self.config.use_inner_class_builders:
            owner = create_inner_builder(ctx, cls, class_type)
            return_type: TypeHandle = generated_class(owner.name, owner.package, owner.index)
            body = [f"this.instance.{field.name} = {field.name};", "return this;"]
        else:
            owner = cls
            return_type = class_type
            body = [f"this.{field.name} = {field.name};", "return this;"]

        method = MethodMember(
            name=builder_name,
            kind=MethodKind.BUILDER,
            return_type=return_type,
            params=[Parameter(field.name, field.type)],
            body=body,
            field_name=field.name,
        )
        return owner.index, owner.add_method(method)

    def _use_optional(self, ctx: RuleContext) -> bool:
        if self.config.use_optional_for_getters or ctx.node.flag("javaOptional"):
            return True
        declared = ctx.parent.get("javaOptional") if ctx.parent is not None else None
        return isinstance(declared, list) and ctx.node_name in declared

    @staticmethod
    def _in_required_array(ctx: RuleContext) -> bool:
        required = ctx.parent.get("required") if ctx.parent is not None else None
        return isinstance(required, list) and ctx.node_name in required

    def _document(self, ctx: RuleContext, target) -> None:
        factory = self.rule_factory
        factory.title_rule().apply(ctx, target)
        if ctx.node.has("javaName"):
            factory.java_name_rule().apply(ctx, target)
        factory.description_rule().apply(ctx, target)
        factory.comment_rule().apply(ctx, target)
        if ctx.node.flag("required"):
            factory.required_rule().apply(ctx, target)
        else:
            factory.not_required_rule().apply(ctx, target)
