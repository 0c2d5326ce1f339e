"""Tests for loading codegen JSON schemas."""

from __future__ import annotations

import pytest

from native_module_codegen.errors import SchemaShapeError
from native_module_codegen.loader import load_schema, parse_annotation, schema_from_dict
from native_module_codegen.schema_types import (
    ArrayTypeAnnotation,
    GenericObjectTypeAnnotation,
    NumberTypeAnnotation,
    ObjectTypeAnnotation,
    PromiseTypeAnnotation,
    PropertyDescriptor,
    ReservedTypeAnnotation,
    StringTypeAnnotation,
    TypeAliasTypeAnnotation,
    UnsupportedTypeAnnotation,
)
from tests.conftest import load_fixture_schema


def test_load_sample_schema():
    modules = load_fixture_schema("sample_turbo_module.json").native_modules()

    assert list(modules) == ["SampleTurboModule"]
    methods = modules["SampleTurboModule"].methods
    assert [method.name for method in methods] == [
        "getConstants",
        "voidFunc",
        "getBool",
        "getRootTag",
        "getValue",
        "getValueWithCallback",
        "getValueWithPromise",
    ]
    assert methods[3].params[0].type_annotation == ReservedTypeAnnotation("RootTag")
    assert isinstance(methods[-1].return_type.type_annotation, PromiseTypeAnnotation)


def test_optional_properties_are_nullable():
    annotation = parse_annotation(
        {
            "type": "ObjectTypeAnnotation",
            "properties": [
                {"name": "a", "optional": True, "typeAnnotation": {"type": "StringTypeAnnotation"}},
                {"name": "b", "optional": False, "typeAnnotation": {"type": "NumberTypeAnnotation"}},
            ],
        },
        "test",
    )

    assert annotation == ObjectTypeAnnotation(
        (
            PropertyDescriptor("a", StringTypeAnnotation(), True),
            PropertyDescriptor("b", NumberTypeAnnotation(), False),
        )
    )


def test_array_element_types():
    assert parse_annotation({"type": "ArrayTypeAnnotation"}, "test") == ArrayTypeAnnotation()
    assert parse_annotation(
        {"type": "ArrayTypeAnnotation", "elementType": {"type": "GenericObjectTypeAnnotation"}}, "test"
    ) == ArrayTypeAnnotation(GenericObjectTypeAnnotation())


def test_type_alias():
    assert parse_annotation({"type": "TypeAliasTypeAnnotation", "name": "Options"}, "test") == (
        TypeAliasTypeAnnotation("Options")
    )


def test_unknown_tag_is_kept():
    assert parse_annotation({"type": "MixedTypeAnnotation"}, "test") == UnsupportedTypeAnnotation(
        "MixedTypeAnnotation"
    )


def test_component_without_native_modules():
    schema = schema_from_dict({"modules": {"View": {"components": {}}}})

    assert schema.modules == {"View": None}
    assert schema.native_modules() == {}


def test_missing_key_names_location():
    data = {"modules": {"C": {"nativeModules": {"M": {"properties": [{"name": "run"}]}}}}}

    with pytest.raises(SchemaShapeError, match=r'Missing "typeAnnotation" at modules\.C\.nativeModules\.M'):
        schema_from_dict(data)


def test_non_string_type_tag():
    data = {
        "modules": {
            "C": {
                "nativeModules": {
                    "M": {
                        "properties": [
                            {
                                "name": "run",
                                "typeAnnotation": {
                                    "type": "FunctionTypeAnnotation",
                                    "params": [{"name": "x", "typeAnnotation": {"type": ["x"]}}],
                                    "returnTypeAnnotation": {"type": "VoidTypeAnnotation"},
                                },
                            }
                        ]
                    }
                }
            }
        }
    }

    with pytest.raises(SchemaShapeError, match=r"Expected a string type tag at .*params\[0\]"):
        schema_from_dict(data)


def test_non_string_reserved_name():
    with pytest.raises(SchemaShapeError, match="Expected a string reserved type name at test"):
        parse_annotation({"type": "ReservedFunctionValueTypeAnnotation", "name": 1}, "test")


def test_missing_modules():
    with pytest.raises(SchemaShapeError, match='Missing "modules"'):
        schema_from_dict({})


def test_invalid_json(tmp_path):
    schema_path = tmp_path / "broken.json"
    schema_path.write_text("{not json")

    with pytest.raises(SchemaShapeError, match="not valid JSON"):
        load_schema(schema_path)
