"""Build the Objective-C declaration of a single native module method."""

from __future__ import annotations

from native_module_codegen import helper
from native_module_codegen.errors import UnsupportedTypeError
from native_module_codegen.schema_types import GET_CONSTANTS, Method, ObjectTypeAnnotation, Parameter
from native_module_codegen.struct_collector import (
    collect_param_array_elements,
    collect_param_struct,
    collect_return_struct,
)
from native_module_codegen.templates import CONSTANTS_TEMPLATE, render_template
from native_module_codegen.type_mapper import (
    PROMISE_REJECT_TYPE,
    PROMISE_RESOLVE_TYPE,
    translate_param_type,
    translate_return_type,
    unsupported_field_tag,
)
from native_module_codegen.writer_dto import ConstantsDescriptor, ModuleGenerationContext


def _translate_param(context: ModuleGenerationContext, method: Method, param: Parameter) -> str:
    if isinstance(param.type_annotation, ObjectTypeAnnotation):
        return f"{collect_param_struct(context, method, param)}&"

    objc_type = translate_param_type(
        param,
        lambda type_name: f'Unsupported type for param "{param.name}" in {method.name}. Found: {type_name}',
    )
    collect_param_array_elements(context, method, param)
    return objc_type


def _promise_arguments(has_params: bool) -> list[str]:
    # Without other arguments the resolve block takes the unlabeled first slot.
    resolve_label = "resolve" if has_params else ""
    return [
        helper.new_argument(resolve_label, PROMISE_RESOLVE_TYPE, "resolve"),
        helper.new_argument("reject", PROMISE_REJECT_TYPE, "reject"),
    ]


def build_arguments(context: ModuleGenerationContext, method: Method) -> str:
    """Build the selector arguments of a method.

    The first argument has no label (`:(double)a`), later ones are labeled with their name
    (`b:(double)b`). Promise-returning methods get resolve and reject blocks appended.

    Args:
        context (ModuleGenerationContext): The context of the module being processed.
        method (Method): The method to build arguments for.

    Returns:
        str: The joined arguments, or an empty string for a method without arguments.
    """
    arguments = [
        helper.new_argument("" if index == 0 else param.name, _translate_param(context, method, param), param.name)
        for index, param in enumerate(method.params)
    ]
    joined = helper.join_arguments(arguments)

    if method.returns_promise:
        callbacks = helper.join_arguments(_promise_arguments(bool(method.params)))
        if method.params:
            joined = f"{joined}{helper.ARGUMENT_SEPARATOR}{callbacks}"
        else:
            joined = callbacks

    return joined


def build_return_type(context: ModuleGenerationContext, method: Method) -> str:
    """Resolve the declared return type, registering a struct for record-shaped returns."""
    if isinstance(method.return_type.type_annotation, ObjectTypeAnnotation):
        return collect_return_struct(context, method)

    return translate_return_type(
        method.return_type,
        lambda type_name: f"Unsupported return type for {method.name}. Found: {type_name}",
    )


def build_constants_accessors(context: ModuleGenerationContext, method: Method) -> str:
    """Build the `constantsToExport`/`getConstants` pair of a module.

    Parameters and the return type are not translated. A record return is kept on the context
    so that the struct renderer can declare the module's `Constants` type.

    Args:
        context (ModuleGenerationContext): The context of the module being processed.
        method (Method): The `getConstants` method.

    Returns:
        str: The two declarations, or an empty string if the method returns an empty record.
    """
    record = method.return_type.type_annotation
    if isinstance(record, ObjectTypeAnnotation):
        if not record.properties:
            return ""
        for prop in record.properties:
            found = unsupported_field_tag(prop.type_annotation)
            if found is not None:
                raise UnsupportedTypeError(
                    f'Unsupported type for constant "{prop.name}" in {context.module_name}. Found: {found}'
                )
        context.constants = ConstantsDescriptor(record.properties)

    return render_template(CONSTANTS_TEMPLATE, native_module_name=helper.native_module_name(context.module_name))


def build_method(context: ModuleGenerationContext, method: Method) -> str:
    """Build the declaration of one method.

    Args:
        context (ModuleGenerationContext): The context of the module being processed. Structs found in
            the signature are added to it.
        method (Method): The method to declare.

    Returns:
        str: The declaration, or an empty string if the method is not declared at all.

    Raises:
        UnsupportedTypeError: If a parameter or the return type cannot be translated.
    """
    if method.name == GET_CONSTANTS:
        return build_constants_accessors(context, method)

    arguments = build_arguments(context, method)
    return_type = build_return_type(context, method)
    return helper.new_method_declaration(method.name, return_type, arguments)
