"""
Configuration for the class-model generator.

Option names follow the jsonschema2pojo conventions. ``from_dict`` accepts
both the snake_case attribute names and their camelCase spelling so that
existing configuration files keep working.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum


class AnnotationStyle(str, Enum):
    """Serialization annotations added by the annotator."""

    JACKSON2 = "jackson2"
    NONE = "none"


@dataclass
class GenerationConfig:
    """Configuration options for class generation."""

    # Accessors and builders
    include_getters: bool = True
    include_setters: bool = True
    generate_builders: bool = False
    use_inner_class_builders: bool = False

    # Annotate the class with lombok instead of relying on hand-written accessors
    include_lombok: bool = False

    # Bean Validation (javax.validation) constraints
    include_jsr303_annotations: bool = False

    # javax.annotation.Nonnull / Nullable markers
    include_jsr305_annotations: bool = False

    # Wrap getters of non-required reference fields in java.util.Optional
    use_optional_for_getters: bool = False

    # Characters that separate segments of a $ref fragment path
    ref_fragment_path_delimiters: str = "#/."

    # Type inference
    use_primitives: bool = False
    use_long_integers: bool = False
    use_big_decimals: bool = False
    format_type_mapping: dict[str, str] = field(default_factory=dict)

    # Initialize collection fields with empty instances
    initialize_collections: bool = True

    # Serialization annotations
    annotation_style: AnnotationStyle = AnnotationStyle.JACKSON2
    format_date_times: bool = False
    format_dates: bool = False
    format_times: bool = False
    custom_date_time_pattern: str = "yyyy-MM-dd'T'HH:mm:ss.SSSXXX"
    custom_date_pattern: str = "yyyy-MM-dd"
    custom_time_pattern: str = "HH:mm:ss.SSS"

    # Add generation comment at top of each file
    add_generation_comment: bool = True

    # @Generated on every generated class; javax.annotation.processing.Generated from Java 9 on
    include_generated_annotation: bool = False
    target_version: str = "1.8"

    def __post_init__(self):
        if isinstance(self.annotation_style, str) and not isinstance(self.annotation_style, AnnotationStyle):
            self.annotation_style = AnnotationStyle(self.annotation_style.lower())

    @staticmethod
    def from_dict(d: dict) -> GenerationConfig:
        """Create a config from a dictionary."""
        config = GenerationConfig()
        known = {f.name for f in fields(config)}
        for k, v in d.items():
            name = k if k in known else _camel_to_snake(k)
            if name not in known:
                continue
            setattr(config, name, v)
        config.__post_init__()
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "include_getters": self.include_getters,
            "include_setters": self.include_setters,
            "generate_builders": self.generate_builders,
            "use_inner_class_builders": self.use_inner_class_builders,
            "include_lombok": self.include_lombok,
            "include_jsr303_annotations": self.include_jsr303_annotations,
            "include_jsr305_annotations": self.include_jsr305_annotations,
            "use_optional_for_getters": self.use_optional_for_getters,
            "ref_fragment_path_delimiters": self.ref_fragment_path_delimiters,
            "use_primitives": self.use_primitives,
            "use_long_integers": self.use_long_integers,
            "use_big_decimals": self.use_big_decimals,
            "format_type_mapping": dict(self.format_type_mapping),
            "initialize_collections": self.initialize_collections,
            "annotation_style": self.annotation_style.value,
            "format_date_times": self.format_date_times,
            "format_dates": self.format_dates,
            "format_times": self.format_times,
            "custom_date_time_pattern": self.custom_date_time_pattern,
            "custom_date_pattern": self.custom_date_pattern,
            "custom_time_pattern": self.custom_time_pattern,
            "add_generation_comment": self.add_generation_comment,
            "include_generated_annotation": self.include_generated_annotation,
            "target_version": self.target_version,
        }


def _camel_to_snake(name: str) -> str:
    """Convert ``includeJsr303Annotations`` to ``include_jsr303_annotations``."""
    out = []
    for i, ch in enumerate(name):
        if ch.isupper() and i > 0:
            out.append("_")
        out.append(ch.lower())
    return "".join(out)
