"""
Required array rule: applies an object schema's ``required`` array to the
members the property rule generated.
"""

from __future__ import annotations

import logging

from ..model.class_model import ClassModel, ConstraintKind
from .base import Rule, RuleContext
from .constraints import attach_required_constraint, required_message
from .documentation import REQUIRED_COMMENT_TEXT

logger = logging.getLogger(__name__)


class RequiredArrayRule(Rule[ClassModel, ClassModel]):
    """
    Marks the properties listed in ``required`` as required.

    The context's ``node`` is the ``required`` array and ``parent`` the
    object schema holding it. Fields and accessors are found through the
    handles recorded by the property rule; names without a generated field
    are skipped.
    """

    def apply(self, ctx: RuleContext, target: ClassModel) -> ClassModel:
        config = self.config
        pending: set[int] = set()

        for name in ctx.node.elements():
            if not isinstance(name, str) or not name:
                continue

            handles = ctx.generation.lookup(target.index, name)
            if handles is None:
                logger.debug("Required property '%s' has no generated field in %s", name, target.qualified_name)
                continue

            field = target.fields[handles.field_index]
            if REQUIRED_COMMENT_TEXT not in field.javadoc:
                field.javadoc.append(REQUIRED_COMMENT_TEXT)

            if config.include_jsr303_annotations:
                attach_required_constraint(field, required_message(self._property_node(ctx, name), field.name))
            if config.include_jsr305_annotations and not field.has_constraint(ConstraintKind.NONNULL):
                field.add_constraint(ConstraintKind.NONNULL)

            for index in (handles.getter_index, handles.setter_index):
                if index is not None:
                    pending.add(index)

        for index, method in enumerate(target.methods):
            if index in pending and REQUIRED_COMMENT_TEXT not in method.javadoc:
                method.javadoc.append(REQUIRED_COMMENT_TEXT)

        return target

    def _property_node(self, ctx: RuleContext, name: str):
        """Schema of property ``name``, through $ref; None when it is not declared."""
        properties = ctx.parent.child("properties") if ctx.parent is not None else None
        node = properties.child(name) if properties is not None else None
        if node is None:
            return None
        resolved, _ = self.rule_factory.reference_resolver.resolve(node, ctx.schema)
        return resolved
