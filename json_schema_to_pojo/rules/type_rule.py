"""
Type rule: infers the Java type of a schema node.

Object and enum schemas allocate new classes in the code model; arrays
recurse into their ``items``; ``$ref`` targets are typed once and the type is
cached on the target ``Schema``.
"""

from __future__ import annotations

import logging
import re
from pathlib import PurePosixPath
from urllib.parse import urldefrag, urlparse

from ..errors import CyclicReferenceError
from ..model.types import OBJECT, STRING, TypeCategory, TypeHandle, collection_of, external_type
from ..schema.nodes import SchemaNode
from ..utils import singularize
from .base import Rule, RuleContext

logger = logging.getLogger(__name__)

# Types used for string formats when format_type_mapping has no entry
DEFAULT_FORMAT_TYPES = {
    "date-time": "java.util.Date",
    "uuid": "java.util.UUID",
    "regex": "java.util.regex.Pattern",
}

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class TypeRule(Rule[str, TypeHandle]):
    """
    Maps a schema node to a ``TypeHandle``.

    The target is the package new classes are generated in.
    """

    def apply(self, ctx: RuleContext, target: str) -> TypeHandle:
        node = ctx.node
        if node is None or not node.is_object():
            return OBJECT

        if node.has("$ref"):
            return self._ref_type(ctx, target)

        if node.has("enum"):
            return self.rule_factory.enum_rule().apply(ctx, target)

        json_type = node.type_name()
        if not json_type and node.has("properties"):
            json_type = "object"

        java_type = node.get("javaType")
        if json_type == "object" and (node.has("properties") or not isinstance(java_type, str)):
            return self.rule_factory.object_rule().apply(ctx, target)
        if isinstance(java_type, str) and java_type:
            return external_type(java_type, json_type)

        if json_type == "array":
            return self._array_type(ctx, target)
        if json_type == "string":
            return self._string_type(node.text("format"))
        if json_type == "integer":
            return self._integer_type(node.get("minimum"), node.get("maximum"))
        if json_type == "number":
            return self._number_type()
        if json_type == "boolean":
            if self.config.use_primitives:
                return TypeHandle("boolean", TypeCategory.PRIMITIVE, "boolean")
            return TypeHandle("Boolean", TypeCategory.REFERENCE, "boolean")
        return OBJECT

    def _ref_type(self, ctx: RuleContext, package: str) -> TypeHandle:
        ref = ctx.node.get("$ref")
        resolved, schema = self.rule_factory.reference_resolver.resolve(ctx.node, ctx.schema)
        if schema.is_generated():
            logger.debug("Reusing type %s for $ref %s", schema.java_type.name, ref)
            return schema.java_type

        # Re-entering a target terminates only if a class was cached on the way back to it
        typing = ctx.generation.typing_refs
        starts = [i for i, s in enumerate(typing) if s is schema]
        if starts:
            loop = typing[starts[0]:]
            if not any(s.is_generated() for s in loop[1:]):
                raise CyclicReferenceError([s.id for s in loop] + [schema.id])

        name = self._name_from_ref(ref, ctx.node_name)
        typing.append(schema)
        try:
            type_ = self.apply(ctx.with_node(resolved, parent=None, schema=schema, node_name=name), package)
        finally:
            typing.pop()
        if schema.java_type is None:
            schema.java_type = type_
        return type_

    def _name_from_ref(self, ref, fallback: str) -> str:
        """Class name hint for a $ref: its last fragment segment, else the document name."""
        if not isinstance(ref, str):
            return fallback
        path, fragment = urldefrag(ref)
        if fragment:
            delimiters = re.escape(self.config.ref_fragment_path_delimiters)
            segments = [s for s in re.split(f"[{delimiters}]", fragment) if s]
            if segments:
                return segments[-1]
        if path:
            stem = PurePosixPath(urlparse(path).path).name.split(".")[0]
            if stem:
                return stem
        return fallback

    def _array_type(self, ctx: RuleContext, package: str) -> TypeHandle:
        node = ctx.node
        items = node.child("items")
        if items is not None and isinstance(items.content, list):
            items = SchemaNode(items.content[0], items, items.schema) if items.content else None
        if items is None or not items.is_object():
            item_type = OBJECT
        else:
            item_ctx = ctx.with_node(items, parent=node, node_name=singularize(ctx.node_name))
            item_type = self.apply(item_ctx, package)
        return collection_of(item_type, unique=node.flag("uniqueItems"))

    def _string_type(self, format_: str) -> TypeHandle:
        if not format_:
            return STRING
        mapped = self.config.format_type_mapping.get(format_) or DEFAULT_FORMAT_TYPES.get(format_)
        if not mapped:
            return STRING
        return external_type(mapped, "string")

    def _integer_type(self, minimum, maximum) -> TypeHandle:
        long_range = any(
            isinstance(v, (int, float)) and not isinstance(v, bool) and not _INT_MIN <= v <= _INT_MAX
            for v in (minimum, maximum)
        )
        is_long = self.config.use_long_integers or long_range
        if self.config.use_primitives:
            return TypeHandle("long" if is_long else "int", TypeCategory.PRIMITIVE, "integer")
        return TypeHandle("Long" if is_long else "Integer", TypeCategory.REFERENCE, "integer")

    def _number_type(self) -> TypeHandle:
        if self.config.use_big_decimals:
            return TypeHandle("BigDecimal", TypeCategory.REFERENCE, "number", imports=("java.math.BigDecimal",))
        if self.config.use_primitives:
            return TypeHandle("double", TypeCategory.PRIMITIVE, "number")
        return TypeHandle("Double", TypeCategory.REFERENCE, "number")

