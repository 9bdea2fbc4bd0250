"""
Rules module.

One rule per schema keyword; ``RuleFactory`` wires them together.
"""

from __future__ import annotations

from .annotator import Annotator, Jackson2Annotator, NoopAnnotator, create_annotator
from .base import GenerationPass, PropertyHandles, Rule, RuleContext
from .factory import RuleFactory
from .naming import NameHelper
from .reference_resolver import ReferenceResolver

__all__ = [
    "Annotator",
    "GenerationPass",
    "Jackson2Annotator",
    "NameHelper",
    "NoopAnnotator",
    "PropertyHandles",
    "ReferenceResolver",
    "Rule",
    "RuleContext",
    "RuleFactory",
    "create_annotator",
]
