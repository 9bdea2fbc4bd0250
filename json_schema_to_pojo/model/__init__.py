"""
Model module.

Contains the class-model arena and the type handles carried by its fields.
"""

from __future__ import annotations

from .class_model import (
    NOT_NULL_FAMILY,
    Annotation,
    ClassKind,
    ClassModel,
    CodeModel,
    Constraint,
    ConstraintKind,
    DocComment,
    EnumConstant,
    FieldMember,
    JavaExpression,
    MethodKind,
    MethodMember,
    Parameter,
    Visibility,
)
from .types import TypeCategory, TypeHandle

__all__ = [
    "Annotation",
    "ClassKind",
    "ClassModel",
    "CodeModel",
    "Constraint",
    "ConstraintKind",
    "DocComment",
    "EnumConstant",
    "FieldMember",
    "JavaExpression",
    "MethodKind",
    "MethodMember",
    "NOT_NULL_FAMILY",
    "Parameter",
    "TypeCategory",
    "TypeHandle",
    "Visibility",
]
