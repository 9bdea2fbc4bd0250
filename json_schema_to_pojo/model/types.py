"""
Type handles produced by the type rule.

A ``TypeHandle`` carries the rendered Java type together with a small,
closed category. Constraint rules switch on the category instead of
inspecting rendered type names.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum


class TypeCategory(Enum):
    """Broad value category of a generated field type."""

    STRING = "string"  # java.lang.String
    COLLECTION = "collection"  # List<T>, Set<T>
    PRIMITIVE = "primitive"  # int, long, double, boolean
    REFERENCE = "reference"  # Any other object type, generated classes included


@dataclass(frozen=True)
class TypeHandle:
    """A resolved target type."""

    name: str = "Object"  # Rendered simple name, e.g. "List<String>"
    category: TypeCategory = TypeCategory.REFERENCE
    json_type: str = ""  # Schema "type" this was inferred from
    imports: tuple[str, ...] = ()  # Fully-qualified names needed by ``name``
    type_args: tuple[TypeHandle, ...] = ()

    # Arena index of the generated class, when this type is one
    class_index: int | None = None

    # Fully-qualified name for generated or custom types
    qualified_name: str = field(default="", compare=False)

    @property
    def is_primitive(self) -> bool:
        return self.category is TypeCategory.PRIMITIVE

    @property
    def is_numeric(self) -> bool:
        return self.json_type in ("integer", "number")

    @property
    def is_boolean(self) -> bool:
        return self.json_type == "boolean"

    def all_imports(self) -> set[str]:
        """Imports needed by this type and its type arguments."""
        result = set(self.imports)
        for arg in self.type_args:
            result |= arg.all_imports()
        return result

    def boxed(self) -> TypeHandle:
        """The wrapper type of a primitive, or self."""
        if not self.is_primitive:
            return self
        return replace(self, name=BOXED_NAMES.get(self.name, self.name), category=TypeCategory.REFERENCE)

    def optional(self) -> TypeHandle:
        """``Optional<T>`` wrapping this type."""
        return TypeHandle(
            name=f"Optional<{self.boxed().name}>",
            category=TypeCategory.REFERENCE,
            json_type=self.json_type,
            imports=("java.util.Optional",),
            type_args=(self.boxed(),),
        )


BOXED_NAMES = {
    "int": "Integer",
    "long": "Long",
    "double": "Double",
    "boolean": "Boolean",
}

STRING = TypeHandle("String", TypeCategory.STRING, "string")
OBJECT = TypeHandle("Object", TypeCategory.REFERENCE, "any")


def simple_name(qualified_name: str) -> str:
    return qualified_name.rsplit(".", 1)[-1]


def external_type(qualified_name: str, json_type: str = "") -> TypeHandle:
    """A type given by its fully-qualified name (``javaType``, format mappings)."""
    if qualified_name in ("String", "java.lang.String"):
        return replace(STRING, json_type=json_type or "string")
    if qualified_name in BOXED_NAMES:
        return TypeHandle(qualified_name, TypeCategory.PRIMITIVE, json_type)
    imports = () if qualified_name.startswith("java.lang.") or "." not in qualified_name else (qualified_name,)
    return TypeHandle(
        name=simple_name(qualified_name),
        category=TypeCategory.REFERENCE,
        json_type=json_type,
        imports=imports,
        qualified_name=qualified_name,
    )


def collection_of(item: TypeHandle, unique: bool = False) -> TypeHandle:
    """``List<T>`` or ``Set<T>`` of the boxed item type."""
    container = "Set" if unique else "List"
    boxed = item.boxed()
    return TypeHandle(
        name=f"{container}<{boxed.name}>",
        category=TypeCategory.COLLECTION,
        json_type="array",
        imports=(f"java.util.{container}",),
        type_args=(boxed,),
    )


def generated_class(name: str, package: str, index: int, json_type: str = "object") -> TypeHandle:
    """Reference to a class allocated in the code model."""
    return TypeHandle(
        name=name,
        category=TypeCategory.REFERENCE,
        json_type=json_type,
        class_index=index,
        qualified_name=f"{package}.{name}" if package else name,
    )
