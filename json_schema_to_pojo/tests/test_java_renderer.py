"""
Tests for Java source rendering.
"""

import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from json_schema_to_pojo.config import GenerationConfig
from json_schema_to_pojo.errors import GenerationError
from json_schema_to_pojo.mapper import SchemaMapper
from json_schema_to_pojo.model import Annotation, JavaExpression
from json_schema_to_pojo.render import AtomicWriter, JavaRenderer, render_annotation, render_value, validate_java
from json_schema_to_pojo.rules import RuleFactory

TEST_DATA = Path(__file__).parent / "test_data"


def generate(name, schema, **options):
    factory = RuleFactory(GenerationConfig(**options))
    return SchemaMapper(factory).generate(name, "com.example", schema)


def render(name, schema, comment="", **options):
    generation = generate(name, schema, **options)
    return JavaRenderer(comment).render_all(generation)


class TestValues(unittest.TestCase):
    def test_render_value(self):
        self.assertEqual(render_value("a\"b"), '"a\\"b"')
        self.assertEqual(render_value(True), "true")
        self.assertEqual(render_value(3), "3")
        self.assertEqual(render_value(["a", "b"]), '{"a", "b"}')
        self.assertEqual(render_value(JavaExpression("JsonInclude.Include.NON_NULL")), "JsonInclude.Include.NON_NULL")

    def test_render_annotation(self):
        self.assertEqual(render_annotation(Annotation("java.lang.Override")), "@Override")
        self.assertEqual(
            render_annotation(Annotation("com.fasterxml.jackson.annotation.JsonProperty", {"value": "first_name"})),
            '@JsonProperty("first_name")',
        )
        self.assertEqual(
            render_annotation(Annotation("javax.validation.constraints.Size", {"min": 1, "max": 10})),
            "@Size(min = 1, max = 10)",
        )


class TestClassRendering(unittest.TestCase):
    def test_plain_class(self):
        sources = render("Person", {"type": "object", "properties": {"name": {"type": "string"}}}, annotation_style="none")
        expected = (
            "package com.example;\n"
            "\n"
            "public class Person {\n"
            "\n"
            "    private String name;\n"
            "\n"
            "    public String getName() {\n"
            "        return this.name;\n"
            "    }\n"
            "\n"
            "    public void setName(String name) {\n"
            "        this.name = name;\n"
            "    }\n"
            "}\n"
        )
        self.assertEqual(sources["com.example.Person"], expected)

    def test_generation_comment_comes_first(self):
        sources = render("Person", {"type": "object", "properties": {}}, comment="// Generated by test")
        self.assertTrue(sources["com.example.Person"].startswith("// Generated by test\n\npackage com.example;\n"))

    def test_javadoc_annotations_and_imports(self):
        schema = {
            "type": "object",
            "title": "A person",
            "properties": {
                "email": {"type": "string", "description": "Contact address"},
                "tags": {"type": "array", "items": {"type": "string"}},
                "born": {"type": "string", "format": "date-time"},
            },
            "required": ["email"],
        }
        source = render("Person", schema, include_jsr303_annotations=True)["com.example.Person"]

        self.assertIn(
            "import com.fasterxml.jackson.annotation.JsonInclude;\n"
            "import com.fasterxml.jackson.annotation.JsonProperty;\n",
            source,
        )
        for name in ("java.util.ArrayList", "java.util.Date", "java.util.List", "javax.validation.constraints.NotBlank"):
            self.assertIn(f"import {name};\n", source)
        self.assertNotIn("import java.lang.", source)

        self.assertIn("/**\n * A person\n * <p>\n */\n@JsonInclude(JsonInclude.Include.NON_NULL)\n", source)
        self.assertIn('@JsonPropertyOrder({"email", "tags", "born"})\npublic class Person {\n', source)
        self.assertIn(
            "    /**\n"
            "     * Contact address\n"
            "     * (Required)\n"
            "     */\n"
            '    @JsonProperty("email")\n'
            '    @JsonPropertyDescription("Contact address")\n'
            '    @NotBlank(message = "Contact address must not be empty")\n'
            "    private String email;\n",
            source,
        )
        self.assertIn("    private List<String> tags = new ArrayList<>();\n", source)

    def test_nested_class_is_imported_only_from_other_packages(self):
        schema = {
            "type": "object",
            "properties": {
                "address": {"type": "object", "properties": {}},
                "money": {"type": "object", "javaType": "com.acme.Money", "properties": {}},
            },
        }
        sources = render("Holder", schema)
        self.assertEqual(set(sources), {"com.example.Holder", "com.example.Address", "com.acme.Money"})
        holder = sources["com.example.Holder"]
        self.assertIn("import com.acme.Money;\n", holder)
        self.assertNotIn("import com.example.Address;", holder)
        self.assertTrue(sources["com.acme.Money"].startswith("package com.acme;\n"))


class TestGeneratedAnnotation(unittest.TestCase):
    SCHEMA = {"type": "object", "properties": {"color": {"type": "string", "enum": ["red"]}}}

    def test_absent_by_default(self):
        sources = render("Person", self.SCHEMA)
        for source in sources.values():
            self.assertNotIn("Generated", source)

    def test_java_8(self):
        sources = render("Person", self.SCHEMA, annotation_style="none", include_generated_annotation=True)
        person = sources["com.example.Person"]
        self.assertIn("import javax.annotation.Generated;\n", person)
        self.assertIn('@Generated("json_schema_to_pojo")\npublic class Person {\n', person)
        self.assertIn('@Generated("json_schema_to_pojo")\npublic enum Color {\n', sources["com.example.Color"])

    def test_java_9_and_later(self):
        for version in ("9", "11", "17.0.2"):
            person = render("Person", self.SCHEMA, include_generated_annotation=True, target_version=version)["com.example.Person"]
            self.assertIn("import javax.annotation.processing.Generated;\n", person)
            self.assertNotIn("import javax.annotation.Generated;", person)

    def test_builder_class_is_not_annotated(self):
        schema = {"type": "object", "properties": {"name": {"type": "string"}}}
        generation = generate(
            "Person", schema, include_generated_annotation=True, generate_builders=True, use_inner_class_builders=True
        )
        person = generation.code_model.find("com.example.Person")
        builder = generation.code_model.get(person.builder_index)
        self.assertTrue(person.has_annotation("javax.annotation.Generated"))
        self.assertEqual(builder.annotations, [])


class TestEnumRendering(unittest.TestCase):
    def test_enum(self):
        source = render("Color", {"type": "string", "enum": ["red", "dark green"]})["com.example.Color"]
        self.assertIn("public enum Color {\n\n    RED(\"red\"),\n    DARK_GREEN(\"dark green\");\n", source)
        self.assertIn("    private final String value;\n", source)
        self.assertIn("    private Color(String value) {\n        this.value = value;\n    }\n", source)
        self.assertIn("    @Override\n    public String toString() {\n", source)
        self.assertIn("    @JsonValue\n    public String value() {\n", source)
        self.assertIn("    @JsonCreator\n    public static Color fromValue(String value) {\n", source)
        self.assertIn("        for (Color constant : Color.values()) {\n            if (constant.value.equals(value)) {\n", source)
        self.assertIn("import com.fasterxml.jackson.annotation.JsonCreator;\n", source)
        self.assertNotIn("import java.lang.Override;", source)

    def test_integer_enum(self):
        source = render("Level", {"type": "integer", "enum": [1, 2]}, annotation_style="none")["com.example.Level"]
        self.assertIn("    _1(1),\n    _2(2);\n", source)
        self.assertIn("    public static Level fromValue(Integer value) {\n", source)
        self.assertNotIn("@JsonCreator", source)

    def test_mixed_values_are_strings(self):
        source = render("Mixed", {"enum": [1, "a", True]}, annotation_style="none")["com.example.Mixed"]
        self.assertIn('    _1("1"),\n    A("a"),\n    TRUE("true");\n', source)
        self.assertIn("    private final String value;\n", source)
        validate_java(source)

    def test_number_values(self):
        source = render("Ratio", {"type": "number", "enum": [1, 2.5]}, annotation_style="none")["com.example.Ratio"]
        self.assertIn("    _1(1.0D),\n    _2_5(2.5D);\n", source)
        self.assertIn("    private final Double value;\n", source)

    def test_non_scalar_values_are_dropped(self):
        sources = render("Holder", {"type": "object", "properties": {"e": {"enum": [{"a": 1}, [1], "x"]}}})
        source = sources["com.example.E"]
        self.assertIn('    X("x");\n', source)
        self.assertNotIn("{a", source)

        source = render("Holder", {"type": "object", "properties": {"e": {"enum": [{"a": 1}, [1]]}}})["com.example.E"]
        self.assertIn("public enum E {\n\n    ;\n", source)
        validate_java(source)

    def test_default_of_mixed_enum_is_quoted(self):
        schema = {"type": "object", "properties": {"e": {"enum": [1, "a"], "default": 1}}}
        source = render("Holder", schema, annotation_style="none")["com.example.Holder"]
        self.assertIn('    private E e = E.fromValue("1");\n', source)


class TestBuilderRendering(unittest.TestCase):
    def test_inner_builder_is_nested(self):
        schema = {"type": "object", "properties": {"name": {"type": "string"}}}
        sources = render("Person", schema, annotation_style="none", generate_builders=True, use_inner_class_builders=True)
        self.assertEqual(list(sources), ["com.example.Person"])
        source = sources["com.example.Person"]
        self.assertIn(
            "\n"
            "    /**\n"
            "     * Builder for Person.\n"
            "     */\n"
            "    public static class PersonBuilder {\n"
            "\n"
            "        protected Person instance;\n"
            "\n"
            "        public PersonBuilder() {\n"
            "            this.instance = new Person();\n"
            "        }\n",
            source,
        )
        self.assertIn(
            "        public PersonBuilder withName(String name) {\n"
            "            this.instance.name = name;\n"
            "            return this;\n"
            "        }\n"
            "    }\n"
            "}\n",
            source,
        )

    def test_builder_method_on_class(self):
        schema = {"type": "object", "properties": {"name": {"type": "string"}}}
        source = render("Person", schema, annotation_style="none", generate_builders=True)["com.example.Person"]
        self.assertIn("    public Person withName(String name) {\n        this.name = name;\n        return this;\n    }\n", source)


class TestWrite(unittest.TestCase):
    def test_files_are_written_per_package(self):
        generation = SchemaMapper(RuleFactory()).generate("Person", "com.example", TEST_DATA / "schemas" / "person.schema.json")
        with TemporaryDirectory() as out:
            written = JavaRenderer().write(generation, out)
            names = sorted(p.relative_to(out).as_posix() for p in written)
            self.assertEqual(names, ["com/example/Address.java", "com/example/Color.java", "com/example/Person.java"])

            person = (Path(out) / "com" / "example" / "Person.java").read_text(encoding="utf-8")
            self.assertIn("    private Address home;\n", person)
            self.assertIn('    private Color color = Color.fromValue("red");\n', person)
            self.assertEqual(list(Path(out, "com", "example").glob(".*.tmp")), [])

    def test_unpackaged_class_goes_to_output_root(self):
        generation = SchemaMapper().generate("Thing", "", {"type": "object", "properties": {}})
        with TemporaryDirectory() as out:
            written = JavaRenderer().write(generation, out)
            self.assertEqual(written, [Path(out) / "Thing.java"])
            self.assertFalse(written[0].read_text(encoding="utf-8").startswith("package"))


class TestAtomicWriter(unittest.TestCase):
    SOURCE = 'package a;\n\n/**\n * Uses { in docs\n */\npublic class A {\n    private String p = "}";\n}\n'

    def test_write_and_skip_unchanged(self):
        with TemporaryDirectory() as out:
            path = Path(out) / "a" / "A.java"
            writer = AtomicWriter()
            self.assertTrue(writer.write(path, self.SOURCE))
            self.assertFalse(writer.write(path, self.SOURCE))
            self.assertEqual(path.read_text(encoding="utf-8"), self.SOURCE)
            self.assertEqual([p.name for p in path.parent.iterdir()], ["A.java"])

    def test_validation(self):
        validate_java(self.SOURCE)
        with self.assertRaises(GenerationError):
            validate_java("package a;\n")
        with self.assertRaises(GenerationError):
            validate_java("public class A {\n    void f() {\n}\n")

    def test_rejected_content_leaves_target_untouched(self):
        with TemporaryDirectory() as out:
            path = Path(out) / "A.java"
            path.write_text(self.SOURCE, encoding="utf-8")
            with self.assertRaises(GenerationError):
                AtomicWriter().write(path, "public class A {")
            self.assertEqual(path.read_text(encoding="utf-8"), self.SOURCE)
            self.assertFalse(AtomicWriter(validate=False).write(path, self.SOURCE))


if __name__ == "__main__":
    unittest.main()
