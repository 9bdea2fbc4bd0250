"""
Schema store: fetches $ref targets and caches them by resolved URI.

Documents are loaded from the local filesystem (``file:`` URIs and plain
paths). The same reference always resolves to the same ``Schema`` object,
so type information cached on a schema is shared by every path that
reaches it.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any
from urllib.parse import unquote, urldefrag, urljoin, urlparse
from urllib.request import url2pathname

from ..errors import UnresolvableReferenceError
from .nodes import Schema

logger = logging.getLogger(__name__)


class SchemaStore:
    """Creates and caches ``Schema`` instances for documents and fragments."""

    def __init__(self, base_path: str | Path | None = None):
        """
        Initialize the store.

        Args:
            base_path: Directory used to resolve relative document paths
                when the referring schema has no base URI of its own
        """
        self.base_path = Path(base_path) if base_path else None
        self._schemas: dict[str, Schema] = {}
        self._documents: dict[str, Any] = {}

    def create_from_content(self, content: Any, base_uri: str = "") -> Schema:
        """Register an already-parsed root document."""
        schema_id = f"{base_uri}#"
        if schema_id in self._schemas:
            return self._schemas[schema_id]
        self._documents[base_uri] = content
        schema = Schema(id=schema_id, content=content)
        self._schemas[schema_id] = schema
        return schema

    def create_from_path(self, path: str | Path) -> Schema:
        """Load a root document from disk."""
        uri = Path(path).resolve().as_uri()
        content = self._load_document(uri, uri)
        return self.create_from_content(content, uri)

    def create(self, parent: Schema | None, ref: str, delimiters: str = "#/.") -> Schema:
        """
        Resolve ``ref`` relative to ``parent`` and return the target schema.

        Args:
            parent: Schema the reference appears in
            ref: The $ref value
            delimiters: Characters separating fragment path segments

        Returns:
            The (cached) target Schema

        Raises:
            UnresolvableReferenceError: If the document or fragment does not exist
        """
        base = parent.base_uri if parent is not None else ""
        if ref.startswith("#"):
            full = base + ref
        else:
            full = urljoin(base, ref) if base else ref
        doc_uri, fragment = urldefrag(full)
        fragment = self._normalize_fragment(fragment, delimiters)
        schema_id = f"{doc_uri}#{fragment}"

        cached = self._schemas.get(schema_id)
        if cached is not None:
            return cached

        document = self._get_document(doc_uri, ref)
        root = self._schemas.get(f"{doc_uri}#")
        if root is None:
            root = Schema(id=f"{doc_uri}#", content=document)
            self._schemas[root.id] = root
        if not fragment:
            return root

        content = self._select(document, fragment, delimiters, ref)
        schema = Schema(id=schema_id, content=content, parent=root)
        self._schemas[schema_id] = schema
        logger.debug("Resolved $ref %s to %s", ref, schema_id)
        return schema

    def clear_cache(self) -> None:
        self._schemas.clear()
        self._documents.clear()

    @staticmethod
    def _normalize_fragment(fragment: str, delimiters: str) -> str:
        """Strip leading delimiters so "#", "#/" and "" all mean the document root."""
        return fragment.lstrip(delimiters)

    def _get_document(self, doc_uri: str, ref: str) -> Any:
        if doc_uri in self._documents:
            return self._documents[doc_uri]
        return self._load_document(doc_uri, ref)

    def _load_document(self, doc_uri: str, ref: str) -> Any:
        parsed = urlparse(doc_uri)
        if parsed.scheme == "file":
            path = Path(url2pathname(parsed.path))
        elif parsed.scheme == "":
            path = Path(doc_uri)
            if not path.is_absolute() and self.base_path is not None:
                path = self.base_path / path
        else:
            raise UnresolvableReferenceError(ref, f"unsupported URI scheme '{parsed.scheme}'")

        if not path.is_file():
            raise UnresolvableReferenceError(ref, f"document {path} does not exist")
        try:
            with open(path, encoding="utf-8") as f:
                document = json.load(f)
        except json.JSONDecodeError as e:
            raise UnresolvableReferenceError(ref, f"document {path} is not valid JSON: {e}") from e

        self._documents[doc_uri] = document
        logger.debug("Loaded schema document %s", path)
        return document

    def _select(self, document: Any, fragment: str, delimiters: str, ref: str) -> Any:
        """Walk ``fragment`` path segments down from the document root."""
        segments = [s for s in re.split("[" + re.escape(delimiters) + "]", fragment) if s]
        current = document
        for raw in segments:
            segment = unquote(raw).replace("~1", "/").replace("~0", "~")
            if isinstance(current, dict) and segment in current:
                current = current[segment]
            elif isinstance(current, list) and segment.isdigit() and int(segment) < len(current):
                current = current[int(segment)]
            else:
                raise UnresolvableReferenceError(ref, f"path segment '{segment}' not found")
        return current
