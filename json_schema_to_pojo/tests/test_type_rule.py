import pytest

from json_schema_to_pojo.config import GenerationConfig
from json_schema_to_pojo.errors import CyclicReferenceError, UnresolvableReferenceError
from json_schema_to_pojo.mapper import SchemaMapper
from json_schema_to_pojo.model import ClassKind, TypeCategory
from json_schema_to_pojo.rules import RuleFactory
from json_schema_to_pojo.rules.type_rule import TypeRule


def generate(schema, **options):
    factory = RuleFactory(GenerationConfig(**options))
    return SchemaMapper(factory).generate("Holder", "com.example", schema)


def field_type(prop, **options):
    generation = generate({"type": "object", "properties": {"value": prop}}, **options)
    return generation.code_model.find("com.example.Holder").field_named("value").type


@pytest.mark.parametrize(
    "prop, options, name, category",
    [
        ({"type": "string"}, {}, "String", TypeCategory.STRING),
        ({"type": ["string", "null"]}, {}, "String", TypeCategory.STRING),
        ({"type": "integer"}, {}, "Integer", TypeCategory.REFERENCE),
        ({"type": "integer"}, {"use_primitives": True}, "int", TypeCategory.PRIMITIVE),
        ({"type": "integer"}, {"use_long_integers": True}, "Long", TypeCategory.REFERENCE),
        ({"type": "integer", "maximum": 3000000000}, {}, "Long", TypeCategory.REFERENCE),
        ({"type": "number"}, {}, "Double", TypeCategory.REFERENCE),
        ({"type": "number"}, {"use_primitives": True}, "double", TypeCategory.PRIMITIVE),
        ({"type": "number"}, {"use_big_decimals": True}, "BigDecimal", TypeCategory.REFERENCE),
        ({"type": "boolean"}, {}, "Boolean", TypeCategory.REFERENCE),
        ({"type": "boolean"}, {"use_primitives": True}, "boolean", TypeCategory.PRIMITIVE),
        ({"type": "string", "format": "date-time"}, {}, "Date", TypeCategory.REFERENCE),
        ({"type": "string", "format": "uuid"}, {}, "UUID", TypeCategory.REFERENCE),
        ({"type": "string", "format": "uri"}, {}, "String", TypeCategory.STRING),
        ({"type": "string", "format": "date"}, {"format_type_mapping": {"date": "java.time.LocalDate"}}, "LocalDate", TypeCategory.REFERENCE),
        ({"type": "array", "items": {"type": "string"}}, {}, "List<String>", TypeCategory.COLLECTION),
        ({"type": "array", "uniqueItems": True, "items": {"type": "integer"}}, {}, "Set<Integer>", TypeCategory.COLLECTION),
        ({"type": "array", "items": {"type": "integer"}}, {"use_primitives": True}, "List<Integer>", TypeCategory.COLLECTION),
        ({"type": "array"}, {}, "List<Object>", TypeCategory.COLLECTION),
        ({"javaType": "com.acme.Money"}, {}, "Money", TypeCategory.REFERENCE),
        ({"type": "string", "javaType": "java.lang.String"}, {}, "String", TypeCategory.STRING),
        ({}, {}, "Object", TypeCategory.REFERENCE),
        ({"type": "null"}, {}, "Object", TypeCategory.REFERENCE),
    ],
)
def test_field_types(prop, options, name, category):
    type_ = field_type(prop, **options)
    assert type_.name == name
    assert type_.category is category


def test_imports():
    assert field_type({"type": "string", "format": "date-time"}).imports == ("java.util.Date",)
    assert field_type({"type": "number"}, use_big_decimals=True).imports == ("java.math.BigDecimal",)
    assert field_type({"javaType": "com.acme.Money"}).imports == ("com.acme.Money",)
    assert field_type({"type": "array", "items": {"type": "string"}}).imports == ("java.util.List",)


class TestGeneratedClasses:
    def test_nested_object(self):
        generation = generate(
            {
                "type": "object",
                "properties": {"address": {"type": "object", "properties": {"street": {"type": "string"}}}},
            }
        )
        code_model = generation.code_model
        holder = code_model.find("com.example.Holder")
        address = code_model.find("com.example.Address")
        assert address is not None
        assert holder.field_named("address").type.class_index == address.index
        assert address.field_named("street").type.name == "String"

    def test_array_item_class_is_singular(self):
        generation = generate(
            {
                "type": "object",
                "properties": {"items": {"type": "array", "items": {"type": "object", "properties": {"sku": {"type": "string"}}}}},
            }
        )
        holder = generation.code_model.find("com.example.Holder")
        assert holder.field_named("items").type.name == "List<Item>"
        assert generation.code_model.find("com.example.Item") is not None

    def test_class_names_are_unique(self):
        generation = generate(
            {
                "type": "object",
                "properties": {
                    "a": {"type": "object", "properties": {"address": {"type": "object", "properties": {}}}},
                    "b": {"type": "object", "properties": {"address": {"type": "object", "properties": {}}}},
                },
            }
        )
        names = [c.name for c in generation.code_model]
        assert names == ["Holder", "A", "Address", "B", "Address2"]

    def test_java_type_on_object_sets_name_and_package(self):
        generation = generate(
            {
                "type": "object",
                "properties": {"money": {"type": "object", "javaType": "com.acme.Money", "properties": {"amount": {"type": "number"}}}},
            }
        )
        money = generation.code_model.find("com.acme.Money")
        assert money is not None
        assert money.package == "com.acme"

    def test_enum(self):
        generation = generate(
            {
                "type": "object",
                "properties": {"color": {"type": "string", "enum": ["red", "dark green"]}},
            }
        )
        color = generation.code_model.find("com.example.Color")
        assert color.kind is ClassKind.ENUM
        assert [(c.name, c.value) for c in color.enum_constants] == [("RED", "red"), ("DARK_GREEN", "dark green")]
        assert color.enum_value_type.name == "String"
        assert [m.name for m in color.methods] == ["Color", "toString", "value", "fromValue"]

    def test_enum_java_names(self):
        generation = generate(
            {
                "type": "object",
                "properties": {"level": {"type": "integer", "enum": [1, 2], "javaEnumNames": ["LOW", "HIGH"]}},
            }
        )
        level = generation.code_model.find("com.example.Level")
        assert [(c.name, c.value) for c in level.enum_constants] == [("LOW", 1), ("HIGH", 2)]
        assert level.enum_value_type.name == "Integer"


class TestReferences:
    def test_shared_definition_generates_one_class(self):
        generation = generate(
            {
                "type": "object",
                "properties": {
                    "home": {"$ref": "#/definitions/address"},
                    "work": {"$ref": "#/definitions/address"},
                },
                "definitions": {"address": {"type": "object", "properties": {"street": {"type": "string"}}}},
            }
        )
        holder = generation.code_model.find("com.example.Holder")
        assert len(generation.code_model) == 2
        assert holder.field_named("home").type == holder.field_named("work").type
        assert holder.field_named("home").type.name == "Address"

    def test_self_reference(self):
        generation = generate(
            {
                "type": "object",
                "properties": {"children": {"type": "array", "items": {"$ref": "#"}}},
            }
        )
        holder = generation.code_model.find("com.example.Holder")
        assert len(generation.code_model) == 1
        assert holder.field_named("children").type.name == "List<Holder>"

    def test_cyclic_refs_raise(self):
        schema = {
            "type": "object",
            "properties": {"loop": {"$ref": "#/definitions/a"}},
            "definitions": {"a": {"$ref": "#/definitions/b"}, "b": {"$ref": "#/definitions/a"}},
        }
        with pytest.raises(CyclicReferenceError) as excinfo:
            generate(schema)
        assert excinfo.value.chain == ["#/definitions/a", "#/definitions/b", "#/definitions/a"]

    def test_array_containing_itself_raises(self):
        schema = {
            "type": "object",
            "properties": {"tree": {"$ref": "#/definitions/list"}},
            "definitions": {"list": {"type": "array", "items": {"$ref": "#/definitions/list"}}},
        }
        with pytest.raises(CyclicReferenceError) as excinfo:
            generate(schema)
        assert len(excinfo.value.chain) == 2
        assert excinfo.value.chain[0] == excinfo.value.chain[1]

    def test_arrays_referring_to_each_other_raise(self):
        schema = {
            "type": "object",
            "properties": {"tree": {"$ref": "#/definitions/a"}},
            "definitions": {
                "a": {"type": "array", "items": {"$ref": "#/definitions/b"}},
                "b": {"type": "array", "uniqueItems": True, "items": {"$ref": "#/definitions/a"}},
            },
        }
        with pytest.raises(CyclicReferenceError) as excinfo:
            generate(schema)
        assert len(excinfo.value.chain) == 3

    def test_array_of_class_referring_back_to_array(self):
        schema = {
            "type": "object",
            "properties": {"nodes": {"$ref": "#/definitions/nodes"}},
            "definitions": {
                "nodes": {"type": "array", "items": {"$ref": "#/definitions/node"}},
                "node": {"type": "object", "properties": {"children": {"$ref": "#/definitions/nodes"}}},
            },
        }
        generation = generate(schema)
        holder = generation.code_model.find("com.example.Holder")
        node = generation.code_model.find("com.example.Node")
        assert holder.field_named("nodes").type.name == "List<Node>"
        assert node.field_named("children").type.name == "List<Node>"
        assert generation.typing_refs == []

    def test_ref_target_does_not_inherit_parent(self):
        seen = []

        class RecordingTypeRule(TypeRule):
            def apply(self, ctx, target):
                seen.append((ctx.node_name, ctx.parent))
                return super().apply(ctx, target)

        factory = RuleFactory()
        factory.type_rule = lambda: RecordingTypeRule(factory)
        schema = {
            "type": "object",
            "properties": {"home": {"$ref": "#/definitions/address"}},
            "definitions": {"address": {"type": "string"}},
        }
        SchemaMapper(factory).generate("Holder", "com.example", schema)
        parents = dict(seen)
        assert parents["home"] is not None
        assert parents["address"] is None

    def test_missing_target_raises(self):
        schema = {"type": "object", "properties": {"owner": {"$ref": "#/definitions/missing"}}, "definitions": {}}
        with pytest.raises(UnresolvableReferenceError) as excinfo:
            generate(schema)
        assert excinfo.value.ref == "#/definitions/missing"

    def test_remote_ref_raises(self):
        schema = {"type": "object", "properties": {"owner": {"$ref": "https://example.com/person.json"}}}
        with pytest.raises(UnresolvableReferenceError):
            generate(schema)


if __name__ == "__main__":
    pytest.main([__file__])
