import pytest

from json_schema_to_pojo.config import GenerationConfig
from json_schema_to_pojo.model.types import STRING, TypeCategory, TypeHandle
from json_schema_to_pojo.rules.naming import NameHelper
from json_schema_to_pojo.schema.nodes import SchemaNode
from json_schema_to_pojo.utils import make_java_identifier, singularize, snake_to_pascal_case, to_camel_case, to_upper_snake_case


@pytest.mark.parametrize(
    "text, expected",
    [
        ("first_name", "FirstName"),
        ("actionTemplate", "ActionTemplate"),
        ("first 3 rows", "First3Rows"),
        ("kebab-case", "KebabCase"),
        ("", ""),
    ],
)
def test_snake_to_pascal_case(text, expected):
    assert snake_to_pascal_case(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("first_name", "firstName"),
        ("publisherId", "publisherId"),
        ("URL", "uRL"),
        ("e-mail address", "eMailAddress"),
        ("---", ""),
    ],
)
def test_to_camel_case(text, expected):
    assert to_camel_case(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("red", "RED"),
        ("dark green", "DARK_GREEN"),
        ("camelCase", "CAMEL_CASE"),
        ("LOW", "LOW"),
        ("HTTPError", "HTTP_ERROR"),
        ("v2", "V_2"),
    ],
)
def test_to_upper_snake_case(text, expected):
    assert to_upper_snake_case(text) == expected


@pytest.mark.parametrize(
    "name, expected",
    [("class", "class_"), ("1st", "_1st"), ("", "__EMPTY__"), ("name", "name")],
)
def test_make_java_identifier(name, expected):
    assert make_java_identifier(name) == expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("addresses", "address"),
        ("categories", "category"),
        ("items", "item"),
        ("boxes", "box"),
        ("branches", "branch"),
        ("class", "class"),
        ("data", "data"),
        ("s", "s"),
    ],
)
def test_singularize(name, expected):
    assert singularize(name) == expected


class TestNameHelper:
    helper = NameHelper(GenerationConfig())

    def test_property_name(self):
        assert self.helper.get_property_name("first_name", None) == "firstName"
        assert self.helper.get_property_name("default", None) == "default_"
        assert self.helper.get_property_name("x", SchemaNode({"javaName": "renamed"})) == "renamed"

    def test_accessor_names(self):
        node = SchemaNode({"type": "string"})
        assert self.helper.get_getter_name("first_name", STRING, node) == "getFirstName"
        assert self.helper.get_setter_name("first_name", node) == "setFirstName"
        assert self.helper.get_builder_name("first_name", node) == "withFirstName"

    def test_primitive_boolean_getter(self):
        primitive = TypeHandle("boolean", TypeCategory.PRIMITIVE, "boolean")
        boxed = TypeHandle("Boolean", TypeCategory.REFERENCE, "boolean")
        assert self.helper.get_getter_name("active", primitive, None) == "isActive"
        assert self.helper.get_getter_name("active", boxed, None) == "getActive"

    def test_accessors_follow_java_name(self):
        node = SchemaNode({"javaName": "givenName"})
        assert self.helper.get_getter_name("first-name", STRING, node) == "getGivenName"

    @pytest.mark.parametrize(
        "java_name, field, getter",
        [
            ("my-name", "myName", "getMyName"),
            ("given name", "givenName", "getGivenName"),
            ("class", "class_", "getClass_"),
            ("2nd", "_2nd", "get_2nd"),
        ],
    )
    def test_java_name_is_normalized(self, java_name, field, getter):
        node = SchemaNode({"javaName": java_name})
        assert self.helper.get_property_name("x", node) == field
        assert self.helper.get_getter_name("x", STRING, node) == getter

    def test_class_name(self):
        assert self.helper.get_class_name("shipping_address", None) == "ShippingAddress"
        assert self.helper.get_class_name("x", SchemaNode({"javaType": "com.acme.Money"})) == "Money"
        assert self.helper.get_class_name("3d", None) == "_3D"
        assert self.helper.get_class_name("", None) == "Object"

    @pytest.mark.parametrize("value, expected", [("in progress", "IN_PROGRESS"), (1, "_1"), ("", "_EMPTY"), (None, "NULL")])
    def test_enum_constant_name(self, value, expected):
        assert self.helper.get_enum_constant_name(value) == expected
