import pytest

from json_schema_to_pojo.config import AnnotationStyle, GenerationConfig


def test_defaults():
    config = GenerationConfig()
    assert config.include_getters and config.include_setters
    assert not config.generate_builders
    assert not config.include_jsr303_annotations
    assert config.ref_fragment_path_delimiters == "#/."
    assert config.annotation_style is AnnotationStyle.JACKSON2
    assert not config.include_generated_annotation
    assert config.target_version == "1.8"


@pytest.mark.parametrize(
    "data",
    [
        {"includeJsr303Annotations": True, "useInnerClassBuilders": True},
        {"include_jsr303_annotations": True, "use_inner_class_builders": True},
    ],
)
def test_from_dict_accepts_both_spellings(data):
    config = GenerationConfig.from_dict(data)
    assert config.include_jsr303_annotations
    assert config.use_inner_class_builders


def test_from_dict_ignores_unknown_keys():
    assert GenerationConfig.from_dict({"targetLanguage": "scala"}) == GenerationConfig()


@pytest.mark.parametrize("value", ["none", "NONE", AnnotationStyle.NONE])
def test_annotation_style(value):
    assert GenerationConfig(annotation_style=value).annotation_style is AnnotationStyle.NONE
    assert GenerationConfig.from_dict({"annotationStyle": value}).annotation_style is AnnotationStyle.NONE


def test_to_dict_round_trip():
    config = GenerationConfig(use_big_decimals=True, format_type_mapping={"date": "java.time.LocalDate"})
    data = config.to_dict()
    assert data["annotation_style"] == "jackson2"
    assert GenerationConfig.from_dict(data) == config


def test_bad_annotation_style():
    with pytest.raises(ValueError):
        GenerationConfig(annotation_style="gson")
