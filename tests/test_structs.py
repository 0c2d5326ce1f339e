"""Tests for the struct renderer."""

from __future__ import annotations

import pytest

from native_module_codegen.errors import UnsupportedTypeError
from native_module_codegen.schema_types import (
    ArrayTypeAnnotation,
    BooleanTypeAnnotation,
    FunctionTypeAnnotation,
    GenericObjectTypeAnnotation,
    NumberTypeAnnotation,
    ObjectTypeAnnotation,
    ReservedTypeAnnotation,
    StringTypeAnnotation,
)
from native_module_codegen.structs import field_type, render_constants, render_struct, render_structs
from native_module_codegen.writer_dto import ConstantsDescriptor, StructDescriptor
from tests.conftest import MODULE_NAME, new_object, new_property


def test_render_struct():
    struct = StructDescriptor(
        "SaveOptions",
        (
            new_property("name", StringTypeAnnotation()),
            new_property("count", NumberTypeAnnotation(), nullable=True),
        ),
    )

    assert render_struct(MODULE_NAME, struct) == "\n".join(
        [
            "namespace JS {",
            "  namespace NativeSampleModule {",
            "    struct SpecSaveOptions {",
            "      NSString * name() const;",
            "      folly::Optional<double> count() const;",
            "",
            "      SpecSaveOptions(NSDictionary *const v) : _v(v) {}",
            "    private:",
            "      NSDictionary *_v;",
            "    };",
            "  }",
            "}",
            "",
            "@interface RCTCxxConvert (NativeSampleModule_SpecSaveOptions)",
            "+ (RCTManagedPointer *)JS_NativeSampleModule_SpecSaveOptions:(id)json;",
            "@end",
        ]
    )


def test_render_empty_struct():
    rendered = render_struct(MODULE_NAME, StructDescriptor("ClearItemsElement", ()))

    assert "    struct SpecClearItemsElement {\n      SpecClearItemsElement(NSDictionary *const v)" in rendered


@pytest.mark.parametrize(
    ("prop", "expected"),
    [
        (new_property("flag", BooleanTypeAnnotation()), "bool"),
        (new_property("flag", BooleanTypeAnnotation(), nullable=True), "folly::Optional<bool>"),
        (new_property("tag", ReservedTypeAnnotation("RootTag")), "double"),
        (new_property("extra", GenericObjectTypeAnnotation(), nullable=True), "id<NSObject> _Nullable"),
        (new_property("any", ArrayTypeAnnotation()), "facebook::react::LazyVector<id<NSObject>>"),
        (
            new_property("names", ArrayTypeAnnotation(StringTypeAnnotation()), nullable=True),
            "folly::Optional<facebook::react::LazyVector<NSString *>>",
        ),
        (
            new_property("items", ArrayTypeAnnotation(ObjectTypeAnnotation())),
            "facebook::react::LazyVector<JS::NativeSampleModule::SpecSaveOptionsItemsElement>",
        ),
        (
            new_property("grid", ArrayTypeAnnotation(ArrayTypeAnnotation(ObjectTypeAnnotation()))),
            "facebook::react::LazyVector<facebook::react::LazyVector<"
            "JS::NativeSampleModule::SpecSaveOptionsGridElementElement>>",
        ),
        (new_property("owner", new_object()), "JS::NativeSampleModule::SpecSaveOptionsOwner"),
        (
            new_property("owner", new_object(), nullable=True),
            "folly::Optional<JS::NativeSampleModule::SpecSaveOptionsOwner>",
        ),
    ],
)
def test_field_types(prop, expected):
    assert field_type(MODULE_NAME, "SaveOptions", prop) == expected


def test_unsupported_field_type():
    with pytest.raises(UnsupportedTypeError, match='"callback" of struct SpecSaveOptions'):
        field_type(MODULE_NAME, "SaveOptions", new_property("callback", FunctionTypeAnnotation()))


def test_render_constants():
    constants = ConstantsDescriptor(
        (
            new_property("const1", BooleanTypeAnnotation()),
            new_property("const3", StringTypeAnnotation(), nullable=True),
        )
    )

    rendered = render_constants(MODULE_NAME, constants)

    assert "    struct Constants {" in rendered
    assert "          RCTRequired<bool> const1;" in rendered
    assert "          folly::Optional<NSString *> const3;" in rendered
    assert "        Builder(const Input i);" in rendered


def test_render_structs_puts_constants_first():
    constants = ConstantsDescriptor((new_property("version", StringTypeAnnotation()),))
    structs = [StructDescriptor("First", ()), StructDescriptor("Second", ())]

    rendered = render_structs(MODULE_NAME, structs, constants)

    assert rendered.index("struct Constants {") < rendered.index("struct SpecFirst {")
    assert rendered.index("struct SpecFirst {") < rendered.index("struct SpecSecond {")


def test_render_no_structs():
    assert render_structs(MODULE_NAME, []) == ""
