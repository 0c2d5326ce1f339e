"""Assemble the Objective-C++ header of all native modules in a schema."""

from __future__ import annotations

import logging

from native_module_codegen import helper
from native_module_codegen.method_builder import build_method
from native_module_codegen.schema_types import Module, Schema
from native_module_codegen.structs import render_structs
from native_module_codegen.templates import MODULE_TEMPLATE, PROTOCOL_TEMPLATE, render_document, render_template
from native_module_codegen.writer_dto import ModuleGenerationContext

logger = logging.getLogger(__name__)

HEADER_SUFFIX = ".h"

FilesOutput = dict[str, str]


def generate_module_protocol(module: Module) -> str:
    """Generate the struct declarations and the `@protocol` block of one module.

    Methods are declared in their declared order. Methods that produce no declaration (an empty
    `getConstants`) are skipped without leaving a blank line.

    Args:
        module (Module): The module to generate.

    Returns:
        str: The protocol block, preceded by the structs it refers to.
    """
    context = ModuleGenerationContext(module.name)

    declarations = [build_method(context, method) for method in module.methods]
    methods = "\n".join(declaration for declaration in declarations if declaration)
    structs = render_structs(module.name, context.structs, context.constants)

    logger.debug(
        f"Generated module {module.name}: {len(module.methods)} method(s), {len(context.structs)} struct(s)."
    )

    return render_template(
        PROTOCOL_TEMPLATE,
        structs=structs,
        native_module_name=helper.native_module_name(module.name),
        methods=methods,
    )


def generate_module_class(module_name: str) -> str:
    """Generate the JSI class declaration of one module."""
    return render_template(
        MODULE_TEMPLATE, module_name=module_name, native_module_name=helper.native_module_name(module_name)
    )


def generate(library_name: str, schema: Schema, module_spec_name: str) -> FilesOutput:
    """Entry-point for generating the header of all native modules in a schema.

    Modules are emitted in sorted name order, independent of the order of the input, so that
    the same schema always gives the same text.

    Args:
        library_name (str): The name of the library the schema belongs to. Only used for logging.
        schema (Schema): The schema to generate the header for.
        module_spec_name (str): The name of the header, without file extension.

    Returns:
        FilesOutput: A mapping from the header file name to its content.

    Raises:
        UnsupportedTypeError: If any type in the schema cannot be translated.
        SchemaShapeError: If module or struct names collide.
    """
    native_modules = schema.native_modules()
    module_names = sorted(native_modules)

    protocols = "\n".join(generate_module_protocol(native_modules[name]) for name in module_names)
    modules = "\n".join(generate_module_class(name) for name in module_names)

    file_name = f"{module_spec_name}{HEADER_SUFFIX}"
    logger.debug(f"Generated {file_name} for library {library_name} with {len(module_names)} module(s).")

    return {file_name: render_document(protocols, modules)}
