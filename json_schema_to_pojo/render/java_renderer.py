"""
Java source rendering of a generated class model.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import jinja2

from ..model.class_model import (
    Annotation,
    ClassKind,
    ClassModel,
    CodeModel,
    DocComment,
    FieldMember,
    JavaExpression,
    MethodKind,
    MethodMember,
)
from ..model.types import TypeHandle
from ..rules.base import GenerationPass
from ..rules.enum_rule import enum_literal
from .writer import AtomicWriter

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent.parent.resolve().absolute() / "templates" / "java"


def render_value(value: Any) -> str:
    """Java source for an annotation parameter value."""
    if isinstance(value, JavaExpression):
        return str(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return json.dumps(value)
    if isinstance(value, (list, tuple)):
        return "{" + ", ".join(render_value(v) for v in value) + "}"
    raise TypeError(f"Unsupported annotation value: {value!r}")


def render_annotation(annotation: Annotation) -> str:
    """``@Name``, ``@Name(value)`` or ``@Name(key = value, ...)``."""
    params = annotation.params
    if not params:
        return f"@{annotation.simple_name}"
    if list(params) == ["value"]:
        return f"@{annotation.simple_name}({render_value(params['value'])})"
    args = ", ".join(f"{key} = {render_value(value)}" for key, value in params.items())
    return f"@{annotation.simple_name}({args})"


def render_javadoc(doc: DocComment) -> list[str]:
    lines = doc.lines()
    if not lines:
        return []
    return ["/**"] + [f" * {line}" if line else " *" for line in lines] + [" */"]


class JavaRenderer:
    """
    Renders top-level classes (with their nested builders) to Java source.

    Args:
        generation_comment: First line of every file, e.g. the command line
            that produced it; omitted when empty
    """

    def __init__(self, generation_comment: str = ""):
        self.generation_comment = generation_comment
        self.jinja_env = jinja2.Environment(lstrip_blocks=True, trim_blocks=True)
        self.prefix = self.jinja_env.from_string((TEMPLATES_DIR / "prefix.java.jinja2").read_text())
        self.class_model = self.jinja_env.from_string((TEMPLATES_DIR / "class.java.jinja2").read_text())

    def render(self, cls: ClassModel, code_model: CodeModel) -> str:
        """Complete source file of a top-level class."""
        out = self.prefix.render(
            generation_comment=self.generation_comment,
            package=cls.package,
            imports=self._imports(cls, code_model),
        )
        out += self._render_class(cls, code_model)
        return out + "\n"

    def render_all(self, generation: GenerationPass) -> dict[str, str]:
        """Source of every top-level class, keyed by qualified class name."""
        code_model = generation.code_model
        return {cls.qualified_name: self.render(cls, code_model) for cls in code_model.top_level_classes()}

    def write(self, generation: GenerationPass, output_dir: str | Path) -> list[Path]:
        """Write one ``<Class>.java`` per top-level class under its package directory."""
        writer = AtomicWriter()
        written = []
        for cls in generation.code_model.top_level_classes():
            path = Path(output_dir).joinpath(*cls.package.split(".")) if cls.package else Path(output_dir)
            path = path / f"{cls.name}.java"
            if writer.write(path, self.render(cls, generation.code_model)):
                logger.info("Wrote %s", path)
            written.append(path)
        return written

    def _render_class(self, cls: ClassModel, code_model: CodeModel) -> str:
        nested = [self._render_class(n, code_model) for n in code_model.nested_classes(cls.index)]
        return self.class_model.render(
            class_javadoc=render_javadoc(cls.javadoc),
            annotations=[render_annotation(a) for a in cls.annotations],
            declaration=self._declaration(cls),
            is_enum=cls.kind is ClassKind.ENUM,
            constants=[f"{c.name}({enum_literal(c.value, cls.enum_value_type)})" for c in cls.enum_constants],
            fields=[self._field_view(f) for f in cls.fields],
            methods=[self._method_view(m) for m in cls.methods],
            nested_classes=nested,
        )

    @staticmethod
    def _declaration(cls: ClassModel) -> str:
        match cls.kind:
            case ClassKind.ENUM:
                return f"public enum {cls.name}"
            case ClassKind.BUILDER:
                return f"public static class {cls.name}"
            case _:
                return f"public class {cls.name}"

    @staticmethod
    def _field_view(field: FieldMember) -> dict[str, Any]:
        modifiers = [field.visibility.value]
        if field.static:
            modifiers.append("static")
        if field.final:
            modifiers.append("final")
        declaration = f"{' '.join(modifiers)} {field.type.name} {field.name}"
        if field.initializer:
            declaration += f" = {field.initializer}"
        annotations = [render_annotation(a) for a in field.annotations]
        annotations += [render_annotation(c.as_annotation()) for c in field.constraints]
        return {"javadoc": render_javadoc(field.javadoc), "annotations": annotations, "declaration": declaration + ";"}

    @staticmethod
    def _method_view(method: MethodMember) -> dict[str, Any]:
        modifiers = [method.visibility.value]
        if method.static:
            modifiers.append("static")
        params = ", ".join(f"{p.type.name} {p.name}" for p in method.params)
        if method.kind is MethodKind.CONSTRUCTOR:
            signature = f"{' '.join(modifiers)} {method.name}({params})"
        else:
            return_type = method.return_type.name if method.return_type is not None else "void"
            signature = f"{' '.join(modifiers)} {return_type} {method.name}({params})"
        return {
            "javadoc": render_javadoc(method.javadoc),
            "annotations": [render_annotation(a) for a in method.annotations],
            "signature": signature,
            "body": list(method.body),
        }

    def _imports(self, cls: ClassModel, code_model: CodeModel) -> list[str]:
        names: set[str] = set()
        for c in [cls] + code_model.nested_classes(cls.index):
            names.update(a.type_name for a in c.annotations)
            if c.enum_value_type is not None:
                names |= self._type_imports(c.enum_value_type, code_model)
            for f in c.fields:
                names |= self._type_imports(f.type, code_model)
                names.update(a.type_name for a in f.annotations)
                names.update(constraint.kind.value for constraint in f.constraints)
                names.update(f.initializer_imports)
            for m in c.methods:
                names.update(a.type_name for a in m.annotations)
                if m.return_type is not None:
                    names |= self._type_imports(m.return_type, code_model)
                for p in m.params:
                    names |= self._type_imports(p.type, code_model)
        return sorted(n for n in names if self._needs_import(n, cls.package))

    def _type_imports(self, type_: TypeHandle | None, code_model: CodeModel) -> set[str]:
        if type_ is None:
            return set()
        names = set(type_.imports)
        if type_.class_index is not None:
            target = code_model.get(type_.class_index)
            if target.outer_index is None:
                names.add(target.qualified_name)
        for arg in type_.type_args:
            names |= self._type_imports(arg, code_model)
        return names

    @staticmethod
    def _needs_import(name: str, package: str) -> bool:
        if "." not in name:
            return False
        owner = name.rsplit(".", 1)[0]
        return owner != "java.lang" and owner != package
