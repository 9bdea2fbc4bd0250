"""
Schema mapper: entry point that turns one schema document into a class model.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .config import GenerationConfig
from .rules.base import GenerationPass, RuleContext
from .rules.factory import RuleFactory

logger = logging.getLogger(__name__)


class SchemaMapper:
    """Generates the classes of a schema document with a ``RuleFactory``."""

    def __init__(self, rule_factory: RuleFactory | None = None):
        self.rule_factory = rule_factory or RuleFactory()

    @property
    def config(self) -> GenerationConfig:
        return self.rule_factory.config

    def generate(self, class_name: str, package: str, source: dict[str, Any] | str | Path, base_uri: str = "") -> GenerationPass:
        """
        Generate the class model for a schema.

        Args:
            class_name: Name of the class generated for the root schema
            package: Java package of the generated classes
            source: Parsed schema content, or the path of a schema file
            base_uri: URI relative $refs of in-memory content are resolved against

        Returns:
            The generation pass holding the code model and property handles

        Raises:
            GenerationError: If the document references something that
                cannot be resolved, or declares a member twice
        """
        store = self.rule_factory.schema_store
        if isinstance(source, (str, Path)):
            schema = store.create_from_path(source)
        else:
            schema = store.create_from_content(source, base_uri)

        generation = GenerationPass()
        ctx = RuleContext(
            node_name=class_name,
            node=schema.node(),
            parent=None,
            schema=schema,
            config=self.config,
            generation=generation,
        )
        self.rule_factory.type_rule().apply(ctx, package)
        logger.info("Generated %d classes for %s", len(generation.code_model), class_name)
        return generation
