import pytest

from nullable_struct.codegen import (
    NameCollisionError,
    NullableConfig,
    extract_struct,
    synthesize_names,
)
from nullable_struct.codegen.core.naming import find_collisions
from tests.helpers import make_declaration


def test_default_names_for_point(point_declaration):
    names = synthesize_names(extract_struct(point_declaration))

    assert names.wrapper_type_name == "NullablePoint"
    assert names.constructor_name == "new"
    assert names.default_constructor_name == "new_default"
    assert names.default_initializer_name == "default"

    x = names.for_field("x")
    assert x.getter_name == "x"
    assert x.optional_getter_name == "get_x"
    assert x.setter_name == "set_x"
    assert x.storage_name == "_x"


def test_unknown_field_lookup_raises(point_declaration):
    names = synthesize_names(extract_struct(point_declaration))

    with pytest.raises(KeyError):
        names.for_field("z")


def test_field_named_like_constructor_collides():
    struct = extract_struct(make_declaration("Thing", ("new", "int")))

    with pytest.raises(NameCollisionError) as excinfo:
        synthesize_names(struct)
    assert excinfo.value.identifier == "new"
    assert "constructor" in excinfo.value.roles


def test_getter_colliding_with_another_fields_accessor():
    # Field "get_x" and the optional getter of field "x" are the same name
    struct = extract_struct(make_declaration("Thing", ("x", "int"), ("get_x", "int")))

    with pytest.raises(NameCollisionError) as excinfo:
        synthesize_names(struct)
    assert excinfo.value.identifier == "get_x"


def test_storage_names_are_checked_too():
    struct = extract_struct(make_declaration("Thing", ("x", "int"), ("_x", "int")))

    with pytest.raises(NameCollisionError) as excinfo:
        synthesize_names(struct)
    assert excinfo.value.identifier == "_x"


def test_empty_prefix_makes_wrapper_equal_original(point_declaration):
    struct = extract_struct(point_declaration)

    with pytest.raises(NameCollisionError):
        synthesize_names(struct, NullableConfig(wrapper_prefix=""))


def test_keyword_method_name_is_rejected(point_declaration):
    struct = extract_struct(point_declaration)

    with pytest.raises(NameCollisionError):
        synthesize_names(struct, NullableConfig(default_initializer_name="pass"))


def test_custom_prefixes(point_declaration):
    config = NullableConfig(
        wrapper_prefix="Maybe", optional_getter_prefix="peek_", setter_prefix="put_"
    )
    names = synthesize_names(extract_struct(point_declaration), config)

    assert names.wrapper_type_name == "MaybePoint"
    assert names.for_field("y").optional_getter_name == "peek_y"
    assert names.for_field("y").setter_name == "put_y"


def test_find_collisions_is_empty_for_distinct_names(point_declaration):
    names = synthesize_names(extract_struct(point_declaration))

    assert find_collisions(names) == {}


@pytest.mark.parametrize("field_name", ["_init__", "_eq__", "_hash__", "_repr__", "_slots__", "_fields__"])
def test_storage_name_colliding_with_generated_member(field_name):
    struct = extract_struct(make_declaration("Thing", ("a", "int"), (field_name, "int")))

    with pytest.raises(NameCollisionError) as excinfo:
        synthesize_names(struct)
    assert excinfo.value.identifier == "_" + field_name
    assert "generated member" in excinfo.value.roles


def test_method_name_colliding_with_generated_member(point_declaration):
    struct = extract_struct(point_declaration)

    with pytest.raises(NameCollisionError) as excinfo:
        synthesize_names(struct, NullableConfig(default_initializer_name="__init__"))
    assert excinfo.value.identifier == "__init__"


@pytest.mark.parametrize("field_name", ["Present", "ABSENT", "Option"])
def test_field_shadowing_option_runtime_is_rejected(field_name):
    struct = extract_struct(make_declaration("Tag", (field_name, "int"), ("b", "str")))

    with pytest.raises(NameCollisionError) as excinfo:
        synthesize_names(struct)
    assert excinfo.value.identifier == field_name
    assert "option runtime" in excinfo.value.roles
