"""
Documentation rules: Javadoc driven by title, javaName, description,
$comment and the property's own required flag.

Each rule takes a member with a ``javadoc`` block (field or method) and
returns it.
"""

from __future__ import annotations

from typing import Union

from ..model.class_model import ConstraintKind, FieldMember, MethodMember
from .base import Rule, RuleContext
from .constraints import attach_required_constraint, required_message

REQUIRED_COMMENT_TEXT = "\n(Required)"
NULLABLE = "javax.annotation.Nullable"

DocTarget = Union[FieldMember, MethodMember]


class TitleRule(Rule[DocTarget, DocTarget]):
    """Puts the schema title at the top of the Javadoc."""

    def apply(self, ctx: RuleContext, target: DocTarget) -> DocTarget:
        title = ctx.node.text("title")
        if title:
            target.javadoc.prepend(title + "\n<p>\n")
        return target


class JavaNameRule(Rule[DocTarget, DocTarget]):
    """Notes the original JSON property name when ``javaName`` renamed it."""

    def apply(self, ctx: RuleContext, target: DocTarget) -> DocTarget:
        target.javadoc.append(f'\nCorresponds to the "{ctx.node_name}" property.')
        return target


class DescriptionRule(Rule[DocTarget, DocTarget]):
    def apply(self, ctx: RuleContext, target: DocTarget) -> DocTarget:
        description = ctx.node.text("description")
        if description:
            target.javadoc.append("\n" + description)
        return target


class CommentRule(Rule[DocTarget, DocTarget]):
    def apply(self, ctx: RuleContext, target: DocTarget) -> DocTarget:
        comment = ctx.node.text("$comment")
        if comment:
            target.javadoc.append("\n" + comment)
        return target


class RequiredRule(Rule[DocTarget, DocTarget]):
    """Handles a property marked ``"required": true`` on its own node."""

    def apply(self, ctx: RuleContext, target: DocTarget) -> DocTarget:
        if not ctx.node.flag("required"):
            return target

        if REQUIRED_COMMENT_TEXT not in target.javadoc:
            target.javadoc.append(REQUIRED_COMMENT_TEXT)

        if isinstance(target, FieldMember):
            if self.config.include_jsr303_annotations:
                attach_required_constraint(target, required_message(ctx.node, target.name))
            if self.config.include_jsr305_annotations and not target.has_constraint(ConstraintKind.NONNULL):
                target.add_constraint(ConstraintKind.NONNULL)
        return target


class NotRequiredRule(Rule[DocTarget, DocTarget]):
    """Marks fields that no ``required`` declaration lists as nullable."""

    def apply(self, ctx: RuleContext, target: DocTarget) -> DocTarget:
        required = ctx.parent.get("required") if ctx.parent is not None else None
        if isinstance(required, list) and ctx.node_name in required:
            return target

        if isinstance(target, FieldMember) and self.config.include_jsr305_annotations:
            if not target.has_annotation(NULLABLE):
                target.annotate(NULLABLE)
        return target
