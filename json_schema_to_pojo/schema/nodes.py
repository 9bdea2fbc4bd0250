"""
Schema and schema-node definitions.

A ``Schema`` is a resolved document or ``$ref`` target, identified by its
resolved URI. A ``SchemaNode`` is an immutable view over one JSON value
inside a schema, with a pointer to its parent node.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterator
from urllib.parse import urldefrag

if TYPE_CHECKING:
    from ..model.types import TypeHandle


@dataclass(eq=False)
class Schema:
    """A schema document (or a fragment of one) reached through a $ref."""

    id: str = ""  # Resolved URI, including the fragment
    content: Any = None  # Raw JSON value
    parent: Schema | None = None  # Document root this fragment belongs to

    # Type generated for this schema, set once by the type rule
    java_type: TypeHandle | None = field(default=None, repr=False)

    @property
    def base_uri(self) -> str:
        """URI of the containing document, without fragment."""
        return urldefrag(self.id)[0]

    @property
    def document(self) -> Schema:
        """Root schema of the document this schema lives in."""
        return self.parent if self.parent is not None else self

    def is_generated(self) -> bool:
        return self.java_type is not None

    def node(self) -> SchemaNode:
        """Root node view over this schema's content."""
        return SchemaNode(self.content, None, self)


@dataclass(frozen=True, eq=False)
class SchemaNode:
    """Immutable view over a JSON value plus its parent and owning schema."""

    content: Any = None
    parent: SchemaNode | None = None
    schema: Schema | None = None

    def is_object(self) -> bool:
        return isinstance(self.content, dict)

    def has(self, key: str) -> bool:
        return isinstance(self.content, dict) and key in self.content

    def get(self, key: str, default: Any = None) -> Any:
        """Raw JSON value of ``key`` (not wrapped)."""
        if isinstance(self.content, dict):
            return self.content.get(key, default)
        return default

    def child(self, key: str) -> SchemaNode | None:
        """Wrapped child node, or None when the key is absent."""
        if not self.has(key):
            return None
        return SchemaNode(self.content[key], self, self.schema)

    def text(self, key: str) -> str:
        """Value of ``key`` as text, "" when absent (like Jackson's ``path().asText()``)."""
        value = self.get(key)
        if value is None:
            return ""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (dict, list)):
            return ""
        return str(value)

    def flag(self, key: str) -> bool:
        """True only when ``key`` holds a JSON true."""
        return self.get(key) is True

    def elements(self) -> Iterator[Any]:
        """Iterate the raw values of an array node."""
        if isinstance(self.content, list):
            yield from self.content

    def properties(self) -> Iterator[tuple[str, SchemaNode]]:
        """Iterate ``(name, node)`` pairs of this node's ``properties`` map, in order."""
        props = self.child("properties")
        if props is None or not props.is_object():
            return
        for name in props.content:
            yield name, SchemaNode(props.content[name], props, self.schema)

    def type_name(self) -> str:
        """The ``type`` keyword, taking the first non-null entry of a type list."""
        value = self.get("type")
        if isinstance(value, list):
            non_null = [t for t in value if t != "null"]
            value = non_null[0] if non_null else "null"
        return value if isinstance(value, str) else ""
