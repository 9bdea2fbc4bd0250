"""
Reference resolver for $ref resolution.

Follows a chain of $ref keywords until a node without $ref is reached.
"""

from __future__ import annotations

import logging

from ..errors import CyclicReferenceError, UnresolvableReferenceError
from ..schema.nodes import Schema, SchemaNode
from ..schema.store import SchemaStore

logger = logging.getLogger(__name__)


class ReferenceResolver:
    """Dereferences $ref schema nodes."""

    def __init__(self, schema_store: SchemaStore, delimiters: str = "#/."):
        """
        Initialize the resolver.

        Args:
            schema_store: Store used to fetch and cache referenced schemas
            delimiters: Characters separating $ref fragment path segments
        """
        self.schema_store = schema_store
        self.delimiters = delimiters

    def resolve(self, node: SchemaNode, schema: Schema) -> tuple[SchemaNode, Schema]:
        """
        Resolve ``node`` to the first node in its $ref chain that has no $ref.

        Args:
            node: The node to resolve
            schema: The schema ``node`` belongs to

        Returns:
            ``(node, schema)`` unchanged when ``node`` has no $ref, else the
            target node and the schema it belongs to

        Raises:
            CyclicReferenceError: If the chain revisits a schema
            UnresolvableReferenceError: If a target does not exist
        """
        chain: list[str] = []
        seen = {schema.id} if node.content is schema.content else set()
        while node.has("$ref"):
            ref = node.get("$ref")
            if not isinstance(ref, str):
                raise UnresolvableReferenceError(str(ref), "$ref must be a string")
            target = self.schema_store.create(schema, ref, self.delimiters)
            chain.append(ref)
            if target.id in seen:
                raise CyclicReferenceError(chain)
            seen.add(target.id)
            logger.debug("Following $ref %s -> %s", ref, target.id)
            schema = target
            node = target.node()
        return node, schema
