"""Collect the record shapes of method signatures as named struct descriptors.

Names are synthesized from the method, parameter and field names, e.g. a record parameter
`options` of method `save` becomes `SaveOptions`, the elements of its array field `items`
become `SaveOptionsItemsElement`, and a record returned by `getUser` becomes
`GetUserReturnType`. Method names are unique within a module and parameter names within a
method, so names only collide when concatenation itself is ambiguous; the collection rejects
that case.
"""

from __future__ import annotations

from collections.abc import Callable

from native_module_codegen import helper
from native_module_codegen.errors import UnsupportedTypeError
from native_module_codegen.schema_types import ArrayTypeAnnotation, Method, ObjectTypeAnnotation, Parameter
from native_module_codegen.type_mapper import unsupported_field_tag
from native_module_codegen.writer_dto import ModuleGenerationContext, StructDescriptor

# (field path, offending tag) -> message
FieldErrorMessageFactory = Callable[[str, str], str]


def _join_path(prefix: str, name: str) -> str:
    return f"{prefix}.{name}" if prefix else name


def _collect_record(
    context: ModuleGenerationContext,
    name: str,
    record: ObjectTypeAnnotation,
    path: str,
    create_error_message: FieldErrorMessageFactory,
) -> None:
    context.structs.add(StructDescriptor(name, record.properties))

    for prop in record.properties:
        prop_path = _join_path(path, prop.name)
        found = unsupported_field_tag(prop.type_annotation)
        if found is not None:
            raise UnsupportedTypeError(create_error_message(prop_path, found))

        annotation = prop.type_annotation
        if isinstance(annotation, ObjectTypeAnnotation):
            _collect_record(context, helper.struct_name(name, prop.name), annotation, prop_path, create_error_message)
        elif isinstance(annotation, ArrayTypeAnnotation):
            _collect_array(context, helper.struct_name(name, prop.name), annotation, prop_path, create_error_message)


def _collect_array(
    context: ModuleGenerationContext,
    name: str,
    array: ArrayTypeAnnotation,
    path: str,
    create_error_message: FieldErrorMessageFactory,
) -> None:
    element = array.element_type
    element_name = helper.element_struct_name(name)

    if isinstance(element, ObjectTypeAnnotation):
        _collect_record(context, element_name, element, path, create_error_message)
    elif isinstance(element, ArrayTypeAnnotation):
        _collect_array(context, element_name, element, path, create_error_message)


def _param_error_factory(method: Method, param: Parameter) -> FieldErrorMessageFactory:
    def create_error_message(path: str, found: str) -> str:
        return f'Unsupported type for field "{path}" of param "{param.name}" in {method.name}. Found: {found}'

    return create_error_message


def collect_param_struct(context: ModuleGenerationContext, method: Method, param: Parameter) -> str:
    """Register the struct of a record-shaped parameter, and everything nested in it.

    Args:
        context (ModuleGenerationContext): The context of the module being processed.
        method (Method): The method declaring the parameter.
        param (Parameter): A parameter annotated with an `ObjectTypeAnnotation`.

    Returns:
        str: The qualified struct name to use in the method signature.

    Raises:
        UnsupportedTypeError: If a (nested) field has a type that structs cannot hold.
    """
    assert isinstance(param.type_annotation, ObjectTypeAnnotation)

    name = helper.struct_name(method.name, param.name)
    _collect_record(context, name, param.type_annotation, "", _param_error_factory(method, param))
    return helper.struct_reference(context.module_name, name)


def collect_param_array_elements(context: ModuleGenerationContext, method: Method, param: Parameter) -> None:
    """Register the element struct of an array parameter, if its elements are records.

    The parameter itself keeps its plain array type; the element struct is only declared so
    that native code can convert the elements.

    Args:
        context (ModuleGenerationContext): The context of the module being processed.
        method (Method): The method declaring the parameter.
        param (Parameter): The parameter to inspect.
    """
    if not isinstance(param.type_annotation, ArrayTypeAnnotation):
        return

    name = helper.struct_name(method.name, param.name)
    _collect_array(context, name, param.type_annotation, "", _param_error_factory(method, param))


def collect_return_struct(context: ModuleGenerationContext, method: Method) -> str:
    """Register the struct of a record-shaped return value, and everything nested in it.

    Args:
        context (ModuleGenerationContext): The context of the module being processed.
        method (Method): A method whose return annotation is an `ObjectTypeAnnotation`.

    Returns:
        str: The qualified struct name to use as return type.
    """
    record = method.return_type.type_annotation
    assert isinstance(record, ObjectTypeAnnotation)

    def create_error_message(path: str, found: str) -> str:
        return f'Unsupported type for field "{path}" of the return type of {method.name}. Found: {found}'

    name = helper.return_struct_name(method.name)
    _collect_record(context, name, record, "", create_error_message)
    return helper.struct_reference(context.module_name, name)
