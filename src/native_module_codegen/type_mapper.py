"""Objective-C type tables for schema type annotations.

Each table maps an annotation tag to a pair of tokens: (non-nullable, nullable). Structured
annotations are not part of the tables; they are turned into named structs by
`struct_collector`.
"""

from __future__ import annotations

from collections.abc import Callable

from native_module_codegen.errors import UnsupportedTypeError
from native_module_codegen.schema_types import (
    ROOT_TAG,
    AnnotationType,
    ArrayTypeAnnotation,
    FieldTypeAnnotation,
    ObjectTypeAnnotation,
    Parameter,
    ReservedTypeAnnotation,
    ReturnAnnotation,
)

TypeChoices = tuple[str, str]
ErrorMessageFactory = Callable[[str], str]

VOID_TYPE = "void"
PROMISE_RESOLVE_TYPE = "RCTPromiseResolveBlock"
PROMISE_REJECT_TYPE = "RCTPromiseRejectBlock"

_NUMBER_TAGS = (AnnotationType.NUMBER, AnnotationType.FLOAT, AnnotationType.INT32)
_DICTIONARY_TAGS = (AnnotationType.GENERIC_OBJECT, AnnotationType.TYPE_ALIAS)

PARAM_RESERVED_TYPES: dict[str, TypeChoices] = {
    ROOT_TAG: ("double", "NSNumber *"),
}

PARAM_TYPES: dict[str, TypeChoices] = {
    AnnotationType.STRING: ("NSString *", "NSString * _Nullable"),
    **{tag: ("double", "NSNumber *") for tag in _NUMBER_TAGS},
    AnnotationType.BOOLEAN: ("BOOL", "NSNumber * _Nullable"),
    **{tag: ("NSDictionary *", "NSDictionary * _Nullable") for tag in _DICTIONARY_TAGS},
    AnnotationType.ARRAY: ("NSArray *", "NSArray * _Nullable"),
    AnnotationType.FUNCTION: ("RCTResponseSenderBlock", "RCTResponseSenderBlock"),
}

RETURN_RESERVED_TYPES: dict[str, TypeChoices] = {
    ROOT_TAG: ("double", "NSNumber * _Nullable"),
}

RETURN_TYPES: dict[str, TypeChoices] = {
    AnnotationType.VOID: (VOID_TYPE, VOID_TYPE),
    AnnotationType.PROMISE: (VOID_TYPE, VOID_TYPE),
    AnnotationType.STRING: ("NSString *", "NSString * _Nullable"),
    **{tag: ("double", "NSNumber * _Nullable") for tag in _NUMBER_TAGS},
    AnnotationType.BOOLEAN: ("BOOL", "NSNumber * _Nullable"),
    **{tag: ("NSDictionary *", "NSDictionary * _Nullable") for tag in _DICTIONARY_TAGS},
    AnnotationType.ARRAY: ("NSArray<id<NSObject>> *", "NSArray<id<NSObject>> * _Nullable"),
}

# Getter types of struct fields. Arrays and nested records need the struct name and are
# resolved by the struct renderer.
FIELD_RESERVED_TYPES: dict[str, TypeChoices] = {
    ROOT_TAG: ("double", "folly::Optional<double>"),
}

FIELD_TYPES: dict[str, TypeChoices] = {
    AnnotationType.STRING: ("NSString *", "NSString * _Nullable"),
    **{tag: ("double", "folly::Optional<double>") for tag in _NUMBER_TAGS},
    AnnotationType.BOOLEAN: ("bool", "folly::Optional<bool>"),
    **{tag: ("id<NSObject>", "id<NSObject> _Nullable") for tag in _DICTIONARY_TAGS},
}


def _lookup(
    annotation: FieldTypeAnnotation,
    nullable: bool,
    table: dict[str, TypeChoices],
    reserved_table: dict[str, TypeChoices],
    create_error_message: ErrorMessageFactory,
) -> str:
    if isinstance(annotation, ReservedTypeAnnotation):
        choices = reserved_table.get(annotation.name)
        found = annotation.name
    else:
        choices = table.get(annotation.type)
        found = annotation.type

    if choices is None:
        raise UnsupportedTypeError(create_error_message(found))

    non_nullable_type, nullable_type = choices
    return nullable_type if nullable else non_nullable_type


def translate_param_type(param: Parameter, create_error_message: ErrorMessageFactory) -> str:
    """Translate a primitive-shaped parameter into its Objective-C type.

    Args:
        param (Parameter): The parameter to translate.
        create_error_message (ErrorMessageFactory): Builds the error message from the name of the
            offending tag or reserved name.

    Returns:
        str: The Objective-C type.

    Raises:
        UnsupportedTypeError: If the annotation has no parameter mapping.
    """
    return _lookup(param.type_annotation, param.nullable, PARAM_TYPES, PARAM_RESERVED_TYPES, create_error_message)


def translate_return_type(return_type: ReturnAnnotation, create_error_message: ErrorMessageFactory) -> str:
    """Translate a primitive-shaped return annotation into its Objective-C type.

    Void and promise returns both become `void`; promise results travel through the
    resolve/reject blocks instead.

    Args:
        return_type (ReturnAnnotation): The return annotation, with its own nullability.
        create_error_message (ErrorMessageFactory): Builds the error message from the name of the
            offending tag or reserved name.

    Returns:
        str: The Objective-C type.

    Raises:
        UnsupportedTypeError: If the annotation has no return mapping.
    """
    return _lookup(
        return_type.type_annotation, return_type.nullable, RETURN_TYPES, RETURN_RESERVED_TYPES, create_error_message
    )


def translate_field_type(
    annotation: FieldTypeAnnotation, nullable: bool, create_error_message: ErrorMessageFactory
) -> str:
    """Translate a primitive-shaped struct field into its getter type."""
    return _lookup(annotation, nullable, FIELD_TYPES, FIELD_RESERVED_TYPES, create_error_message)


def unsupported_field_tag(annotation: FieldTypeAnnotation) -> str | None:
    """Find the tag that makes a struct field annotation untranslatable, if any.

    Arrays are checked through their element types; records are always accepted, their own
    fields are checked when they are collected.

    Args:
        annotation (FieldTypeAnnotation): The field annotation.

    Returns:
        str | None: The offending tag or reserved name, or None if the field is supported.
    """
    if isinstance(annotation, ObjectTypeAnnotation):
        return None

    if isinstance(annotation, ArrayTypeAnnotation):
        if annotation.element_type is None:
            return None
        return unsupported_field_tag(annotation.element_type)

    if isinstance(annotation, ReservedTypeAnnotation):
        return None if annotation.name in FIELD_RESERVED_TYPES else annotation.name

    return None if annotation.type in FIELD_TYPES else annotation.type
