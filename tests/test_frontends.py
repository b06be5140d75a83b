import json
import typing
from dataclasses import InitVar, dataclass
from typing import Annotated, Dict, List, Optional

import pytest

from nullable_struct.codegen import (
    DeclarationError,
    declarations_from_json,
    declarations_from_source,
    from_class,
    from_mapping,
    from_source,
)
from nullable_struct.codegen.frontends import format_annotation

SOURCE = '''
class Point:
    """A point."""

    x: int
    y: "list[str]"


class _Private:
    value: Optional[int]


class Pair:
    int
    str


def helper():
    pass
'''


def test_format_annotation_of_builtin_and_generic():
    assert format_annotation(int) == ("int", "int", int)
    assert format_annotation(List[int])[:2] == ("list[int]", "list")
    assert format_annotation(Dict[str, List[int]])[0] == "dict[str, list[int]]"
    assert format_annotation(typing.Callable[[int], str])[0].startswith("Callable")


def test_format_annotation_of_union_and_annotated():
    expression, origin, runtime = format_annotation(Optional[int])
    assert expression == "int | None"
    assert origin == "Union"
    assert runtime is None

    assert format_annotation(Annotated[int, "meta"])[0] == "int"
    assert format_annotation("Forward")[0] == "Forward"


def test_from_class_reads_dataclass_fields_in_order():
    @dataclass
    class Point:
        """A point."""

        x: int
        y: List[str]

    declaration = from_class(Point)

    assert declaration.name == "Point"
    assert [f.name for f in declaration.fields] == ["x", "y"]
    assert declaration.fields[1].type.expression == "list[str]"
    assert declaration.fields[0].type.runtime is int
    assert declaration.docstring == "A point."
    assert declaration.visibility == "public"


def test_from_class_keeps_init_var_so_it_can_be_rejected():
    @dataclass
    class WithInit:
        a: int
        seed: InitVar[int]

    declaration = from_class(WithInit)

    assert declaration.fields[1].type.origin == "InitVar"


def test_from_class_rejects_non_class():
    with pytest.raises(DeclarationError):
        from_class(object())


def test_from_class_falls_back_to_unresolved_annotations():
    class Later:
        ref: "DoesNotExist"  # noqa: F821

    declaration = from_class(Later)

    assert declaration.fields[0].type.expression == "DoesNotExist"


def test_source_front_end_reads_every_class():
    declarations = declarations_from_source(SOURCE, module="shapes")

    assert [d.name for d in declarations] == ["Point", "_Private", "Pair"]

    point = declarations[0]
    assert point.module == "shapes"
    assert point.docstring == "A point."
    assert [(f.name, f.type.expression) for f in point.fields] == [
        ("x", "int"),
        ("y", "list[str]"),
    ]

    assert declarations[1].visibility == "private"
    assert [f.name for f in declarations[2].fields] == [None, None]


def test_source_front_end_filters_by_name():
    assert from_source(SOURCE, "Pair").name == "Pair"

    with pytest.raises(DeclarationError):
        from_source(SOURCE, "Missing")


def test_source_front_end_rejects_syntax_errors():
    with pytest.raises(DeclarationError):
        declarations_from_source("class Broken(:\n    x: int\n")


def test_json_front_end_accepts_list_and_mapping_fields():
    text = json.dumps(
        [
            {
                "name": "Point",
                "description": "A point.",
                "fields": [{"name": "x", "type": "int"}, {"name": "y", "type": "str"}],
            },
            {"name": "Config", "fields": {"debug": "bool", "tags": "list[str]"}},
        ]
    )

    point, config = declarations_from_json(text)

    assert point.docstring == "A point."
    assert [(f.name, f.type.expression) for f in point.fields] == [("x", "int"), ("y", "str")]
    assert [f.name for f in config.fields] == ["debug", "tags"]
    assert config.fields[1].type.origin == "list"


def test_json_front_end_positional_fields():
    declaration = from_mapping({"name": "Pair", "fields": ["int", "str"]})

    assert [f.name for f in declaration.fields] == [None, None]


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"fields": []},
        {"name": "Bad", "fields": 3},
        {"name": "Bad", "fields": [{"name": "x"}]},
        {"name": "Bad", "fields": [{"name": 1, "type": "int"}]},
        {"name": "my point", "fields": {"x": "int"}},
        {"name": "class", "fields": {"x": "int"}},
    ],
)
def test_json_front_end_rejects_malformed_declarations(data):
    with pytest.raises(DeclarationError):
        from_mapping(data)


def test_json_front_end_rejects_invalid_json():
    with pytest.raises(DeclarationError):
        declarations_from_json("{not json")
