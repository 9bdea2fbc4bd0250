"""
Schema module.

Contains the schema document/node views and the $ref-aware schema store.
"""

from __future__ import annotations

from .nodes import Schema, SchemaNode
from .store import SchemaStore

__all__ = [
    "Schema",
    "SchemaNode",
    "SchemaStore",
]
