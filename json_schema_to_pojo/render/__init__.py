"""
Render module.

Turns the class model into Java source files.
"""

from __future__ import annotations

from .java_renderer import JavaRenderer, render_annotation, render_value
from .writer import AtomicWriter, validate_java

__all__ = ["AtomicWriter", "JavaRenderer", "render_annotation", "render_value", "validate_java"]
