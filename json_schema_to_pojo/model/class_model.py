"""
Class model node definitions.

These nodes represent the Java classes under construction. All classes of
one generation pass live in a ``CodeModel`` arena and are addressed by a
stable integer index; fields and methods are addressed by their position
inside their class.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Iterator

from ..errors import DuplicateMemberError
from .types import TypeHandle, simple_name


class Visibility(str, Enum):
    """Java access modifiers."""

    PUBLIC = "public"
    PRIVATE = "private"
    PROTECTED = "protected"


class ClassKind(str, Enum):
    """Kind of generated type."""

    CLASS = "class"
    ENUM = "enum"
    BUILDER = "builder"  # Static nested builder of its outer class


class MethodKind(str, Enum):
    """Role of a generated method."""

    GETTER = "getter"
    SETTER = "setter"
    BUILDER = "builder"
    CONSTRUCTOR = "constructor"
    BUILD = "build"


class ConstraintKind(str, Enum):
    """Validation constraints, by the annotation that renders them."""

    PATTERN = "javax.validation.constraints.Pattern"
    NOT_BLANK = "javax.validation.constraints.NotBlank"
    NOT_EMPTY = "javax.validation.constraints.NotEmpty"
    NOT_NULL = "javax.validation.constraints.NotNull"
    EMAIL = "javax.validation.constraints.Email"
    URL = "org.hibernate.validator.constraints.URL"
    SIZE = "javax.validation.constraints.Size"
    DECIMAL_MIN = "javax.validation.constraints.DecimalMin"
    DECIMAL_MAX = "javax.validation.constraints.DecimalMax"
    DIGITS = "javax.validation.constraints.Digits"
    VALID = "javax.validation.Valid"
    NONNULL = "javax.annotation.Nonnull"

    @property
    def simple_name(self) -> str:
        return simple_name(self.value)


# Constraints added for a required property; a field carries at most one
NOT_NULL_FAMILY = frozenset({ConstraintKind.NOT_BLANK, ConstraintKind.NOT_EMPTY, ConstraintKind.NOT_NULL})


class JavaExpression(str):
    """An annotation parameter rendered verbatim instead of as a string literal."""


@dataclass
class Annotation:
    """A Java annotation use, e.g. ``@JsonProperty("name")``."""

    type_name: str = ""  # Fully-qualified annotation type
    params: dict[str, Any] = field(default_factory=dict)

    @property
    def simple_name(self) -> str:
        return simple_name(self.type_name)


@dataclass
class Constraint:
    """A validation rule attached to a field."""

    kind: ConstraintKind = ConstraintKind.NOT_NULL
    params: dict[str, Any] = field(default_factory=dict)

    def as_annotation(self) -> Annotation:
        return Annotation(type_name=self.kind.value, params=dict(self.params))


@dataclass
class DocComment:
    """A Javadoc block built up by successive appends."""

    parts: list[str] = field(default_factory=list)

    def append(self, text: str) -> None:
        self.parts.append(text)

    def prepend(self, text: str) -> None:
        self.parts.insert(0, text)

    @property
    def text(self) -> str:
        return "".join(self.parts).strip("\n")

    def lines(self) -> list[str]:
        return self.text.split("\n") if self.parts else []

    def __contains__(self, text: str) -> bool:
        return text in "".join(self.parts)


@dataclass
class Parameter:
    """A method parameter."""

    name: str = ""
    type: TypeHandle | None = None


@dataclass
class FieldMember:
    """A class field."""

    name: str = ""
    type: TypeHandle | None = None
    visibility: Visibility = Visibility.PRIVATE
    constraints: list[Constraint] = field(default_factory=list)
    annotations: list[Annotation] = field(default_factory=list)
    javadoc: DocComment = field(default_factory=DocComment)
    initializer: str | None = None
    initializer_imports: list[str] = field(default_factory=list)
    final: bool = False
    static: bool = False

    def annotate(self, type_name: str, **params: Any) -> Annotation:
        annotation = Annotation(type_name=type_name, params=params)
        self.annotations.append(annotation)
        return annotation

    def add_constraint(self, kind: ConstraintKind, **params: Any) -> Constraint:
        constraint = Constraint(kind=kind, params=params)
        self.constraints.append(constraint)
        return constraint

    def constraints_of(self, kind: ConstraintKind) -> list[Constraint]:
        return [c for c in self.constraints if c.kind is kind]

    def has_constraint(self, kind: ConstraintKind) -> bool:
        return any(c.kind is kind for c in self.constraints)

    def remove_constraints(self, kinds: Iterable[ConstraintKind]) -> None:
        kinds = set(kinds)
        self.constraints = [c for c in self.constraints if c.kind not in kinds]

    def has_annotation(self, type_name: str) -> bool:
        return any(a.type_name == type_name for a in self.annotations)


@dataclass
class MethodMember:
    """A class method (accessor, builder method, constructor)."""

    name: str = ""
    kind: MethodKind = MethodKind.GETTER
    return_type: TypeHandle | None = None  # None renders as void (or nothing, for constructors)
    visibility: Visibility = Visibility.PUBLIC
    params: list[Parameter] = field(default_factory=list)
    body: list[str] = field(default_factory=list)
    field_name: str | None = None  # The field this method wraps
    static: bool = False
    javadoc: DocComment = field(default_factory=DocComment)
    annotations: list[Annotation] = field(default_factory=list)

    def annotate(self, type_name: str, **params: Any) -> Annotation:
        annotation = Annotation(type_name=type_name, params=params)
        self.annotations.append(annotation)
        return annotation


@dataclass
class EnumConstant:
    """An enum constant and the JSON value it stands for."""

    name: str = ""
    value: Any = None


@dataclass
class ClassModel:
    """A class (or enum) under construction."""

    index: int = 0
    name: str = ""
    package: str = ""
    kind: ClassKind = ClassKind.CLASS
    javadoc: DocComment = field(default_factory=DocComment)
    annotations: list[Annotation] = field(default_factory=list)
    fields: list[FieldMember] = field(default_factory=list)
    methods: list[MethodMember] = field(default_factory=list)

    # Enums
    enum_constants: list[EnumConstant] = field(default_factory=list)
    enum_value_type: TypeHandle | None = None

    # Builder classes are nested in their outer class
    outer_index: int | None = None
    builder_index: int | None = None

    _field_index: dict[str, int] = field(default_factory=dict, repr=False)

    @property
    def qualified_name(self) -> str:
        return f"{self.package}.{self.name}" if self.package else self.name

    def add_field(self, name: str, type_: TypeHandle, visibility: Visibility = Visibility.PRIVATE) -> int:
        """Add a field and return its index."""
        if name in self._field_index:
            raise DuplicateMemberError(f"Field '{name}' already exists in class {self.qualified_name}")
        self.fields.append(FieldMember(name=name, type=type_, visibility=visibility))
        self._field_index[name] = len(self.fields) - 1
        return len(self.fields) - 1

    def field_named(self, name: str) -> FieldMember | None:
        index = self._field_index.get(name)
        return self.fields[index] if index is not None else None

    def add_method(self, method: MethodMember) -> int:
        """Add a method and return its index."""
        signature = (method.name, tuple(p.type.name if p.type else "" for p in method.params))
        for existing in self.methods:
            if (existing.name, tuple(p.type.name if p.type else "" for p in existing.params)) == signature:
                raise DuplicateMemberError(f"Method '{method.name}' already exists in class {self.qualified_name}")
        self.methods.append(method)
        return len(self.methods) - 1

    def methods_named(self, name: str) -> list[MethodMember]:
        return [m for m in self.methods if m.name == name]

    def annotate(self, type_name: str, **params: Any) -> Annotation:
        annotation = Annotation(type_name=type_name, params=params)
        self.annotations.append(annotation)
        return annotation

    def has_annotation(self, type_name: str) -> bool:
        return any(a.type_name == type_name for a in self.annotations)


class CodeModel:
    """Arena of every class created during one generation pass."""

    def __init__(self):
        self.classes: list[ClassModel] = []
        self._by_qualified_name: dict[str, int] = {}

    def add_class(self, name: str, package: str = "", kind: ClassKind = ClassKind.CLASS, outer_index: int | None = None) -> ClassModel:
        """Allocate a new class; names must be unique per package (and per outer class)."""
        key = self._key(name, package, outer_index)
        if key in self._by_qualified_name:
            raise DuplicateMemberError(f"Class '{key}' already exists")
        cls = ClassModel(index=len(self.classes), name=name, package=package, kind=kind, outer_index=outer_index)
        self.classes.append(cls)
        self._by_qualified_name[key] = cls.index
        return cls

    def unique_class_name(self, name: str, package: str = "") -> str:
        """``name``, or ``name`` with a numeric suffix if it is taken."""
        candidate = name
        suffix = 1
        while self._key(candidate, package, None) in self._by_qualified_name:
            suffix += 1
            candidate = f"{name}{suffix}"
        return candidate

    def get(self, index: int) -> ClassModel:
        return self.classes[index]

    def find(self, qualified_name: str) -> ClassModel | None:
        index = self._by_qualified_name.get(qualified_name)
        return self.classes[index] if index is not None else None

    def top_level_classes(self) -> list[ClassModel]:
        return [c for c in self.classes if c.outer_index is None]

    def nested_classes(self, outer_index: int) -> list[ClassModel]:
        return [c for c in self.classes if c.outer_index == outer_index]

    def __iter__(self) -> Iterator[ClassModel]:
        return iter(self.classes)

    def __len__(self) -> int:
        return len(self.classes)

    def _key(self, name: str, package: str, outer_index: int | None) -> str:
        if outer_index is not None:
            return f"{self.classes[outer_index].qualified_name}.{name}"
        return f"{package}.{name}" if package else name
