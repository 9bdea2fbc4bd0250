"""JSON Schema to POJO Generator

A Python package for generating Java bean classes from JSON Schema
definitions: fields, accessors, builders, Bean Validation constraints and
Jackson annotations, one rule per schema keyword.
"""

__version__ = "1.0.1"

from .config import AnnotationStyle, GenerationConfig
from .errors import CyclicReferenceError, DuplicateMemberError, GenerationError, UnresolvableReferenceError
from .mapper import SchemaMapper
from .rules import GenerationPass, RuleFactory

__all__ = [
    "AnnotationStyle",
    "CyclicReferenceError",
    "DuplicateMemberError",
    "GenerationConfig",
    "GenerationError",
    "GenerationPass",
    "RuleFactory",
    "SchemaMapper",
    "UnresolvableReferenceError",
]
