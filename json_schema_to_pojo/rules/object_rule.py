"""
Object rule: one class per object schema.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from ..config import GenerationConfig
from ..model.class_model import ClassKind, ClassModel, MethodKind, MethodMember, Visibility
from ..model.types import TypeHandle, generated_class
from .base import Rule, RuleContext

logger = logging.getLogger(__name__)

LOMBOK_DATA = "lombok.Data"
GENERATED_JDK8 = "javax.annotation.Generated"
GENERATED_JDK9 = "javax.annotation.processing.Generated"
GENERATOR_NAME = "json_schema_to_pojo"


class ObjectRule(Rule[str, TypeHandle]):
    """
    Creates a class for an object schema and generates its members.

    Every property goes through the property rule in declaration order;
    the ``required`` array is applied once afterwards. The class type is
    cached on the schema before the properties are visited, so a property
    that refers back to its own schema gets the class being built.
    """

    def apply(self, ctx: RuleContext, target: str) -> TypeHandle:
        node = ctx.node
        package = target
        java_type = node.get("javaType")
        if isinstance(java_type, str) and "." in java_type:
            package = java_type.rsplit(".", 1)[0]

        code_model = ctx.generation.code_model
        name = code_model.unique_class_name(self.rule_factory.name_helper.get_class_name(ctx.node_name, node), package)
        cls = code_model.add_class(name, package)
        type_ = generated_class(name, package, cls.index)
        if node.content is ctx.schema.content:
            ctx.schema.java_type = type_
        logger.debug("Generating class %s", cls.qualified_name)

        self._document(ctx, cls)
        add_generated_annotation(cls, self.config)
        if self.config.include_lombok:
            cls.annotate(LOMBOK_DATA)

        annotator = self.rule_factory.annotator
        annotator.property_inclusion(cls)
        annotator.property_order(cls, [name for name, _ in node.properties()])

        if self.config.generate_builders and self.config.use_inner_class_builders:
            create_inner_builder(ctx, cls, type_)

        class_ctx = replace(ctx, class_index=cls.index)
        property_rule = self.rule_factory.property_rule()
        for property_name, property_node in node.properties():
            property_rule.apply(class_ctx.with_node(property_node, parent=node, node_name=property_name), cls)

        required = node.child("required")
        if required is not None and isinstance(required.content, list):
            self.rule_factory.required_array_rule().apply(class_ctx.with_node(required, parent=node, node_name="required"), cls)

        return type_

    @staticmethod
    def _document(ctx: RuleContext, cls: ClassModel) -> None:
        title = ctx.node.text("title")
        if title:
            cls.javadoc.append(title + "\n<p>\n")
        description = ctx.node.text("description")
        if description:
            cls.javadoc.append("\n" + description)
        comment = ctx.node.text("$comment")
        if comment:
            cls.javadoc.append("\n" + comment)


def add_generated_annotation(cls: ClassModel, config: GenerationConfig) -> None:
    """``@Generated("json_schema_to_pojo")`` when enabled, in the package of the target Java version."""
    if not config.include_generated_annotation:
        return
    version = config.target_version.strip()
    major = version[2:] if version.startswith("1.") else version
    major = major.split(".")[0]
    type_name = GENERATED_JDK9 if major.isdigit() and int(major) >= 9 else GENERATED_JDK8
    cls.annotate(type_name, value=GENERATOR_NAME)


def create_inner_builder(ctx: RuleContext, cls: ClassModel, type_: TypeHandle) -> ClassModel:
    """Nested ``<Class>Builder`` holding the instance under construction."""
    if cls.builder_index is not None:
        return ctx.generation.code_model.get(cls.builder_index)

    builder = ctx.generation.code_model.add_class(f"{cls.name}Builder", cls.package, ClassKind.BUILDER, outer_index=cls.index)
    cls.builder_index = builder.index
    builder.javadoc.append(f"Builder for {cls.name}.")
    builder.add_field("instance", type_, Visibility.PROTECTED)

    builder.add_method(
        MethodMember(name=builder.name, kind=MethodKind.CONSTRUCTOR, body=[f"this.instance = new {cls.name}();"])
    )
    builder.add_method(
        MethodMember(
            name="build",
            kind=MethodKind.BUILD,
            return_type=type_,
            body=[f"{cls.name} result;", "result = this.instance;", "this.instance = null;", "return result;"],
        )
    )
    return builder
