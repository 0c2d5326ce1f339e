"""Render collected struct descriptors as C++ struct declarations.

Every struct wraps the `NSDictionary` it was converted from and exposes one const getter per
field. Field types that are records themselves, or arrays of records, refer to the structs
that `struct_collector` registered for them; both sides build those names with the same
`helper` functions.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from native_module_codegen import helper
from native_module_codegen.schema_types import ArrayTypeAnnotation, ObjectTypeAnnotation, PropertyDescriptor
from native_module_codegen.type_mapper import translate_field_type
from native_module_codegen.writer_dto import ConstantsDescriptor, StructDescriptor

logger = logging.getLogger(__name__)

LAZY_VECTOR = "facebook::react::LazyVector"
GENERIC_ELEMENT_TYPE = "id<NSObject>"
RAW_VALUE_TYPE = "NSDictionary"


def _unsupported_field(owner: str, field_name: str):
    def create_error_message(type_name: str) -> str:
        return f'Unsupported type for field "{field_name}" of struct {owner}. Found: {type_name}'

    return create_error_message


def _array_type(module_name: str, array_name: str, array: ArrayTypeAnnotation, owner: str, field_name: str) -> str:
    element = array.element_type
    element_name = helper.element_struct_name(array_name)

    if element is None:
        element_type = GENERIC_ELEMENT_TYPE
    elif isinstance(element, ObjectTypeAnnotation):
        element_type = helper.struct_reference(module_name, element_name)
    elif isinstance(element, ArrayTypeAnnotation):
        element_type = _array_type(module_name, element_name, element, owner, field_name)
    else:
        element_type = translate_field_type(element, False, _unsupported_field(owner, field_name))

    return f"{LAZY_VECTOR}<{element_type}>"


def field_type(module_name: str, struct_name: str, prop: PropertyDescriptor) -> str:
    """Getter type of a struct field.

    Args:
        module_name (str): The module the struct belongs to.
        struct_name (str): The synthesized name of the struct declaring the field.
        prop (PropertyDescriptor): The field.

    Returns:
        str: The C++ type, e.g. 'folly::Optional<double>' for a nullable number.

    Raises:
        UnsupportedTypeError: If the field type cannot be held by a struct.
    """
    annotation = prop.type_annotation
    owner = f"{helper.STRUCT_PREFIX}{struct_name}"

    if isinstance(annotation, ObjectTypeAnnotation):
        nested = helper.struct_reference(module_name, helper.struct_name(struct_name, prop.name))
        return helper.wrap_optional(nested, prop.nullable)

    if isinstance(annotation, ArrayTypeAnnotation):
        array_name = helper.struct_name(struct_name, prop.name)
        return helper.wrap_optional(_array_type(module_name, array_name, annotation, owner, prop.name), prop.nullable)

    return translate_field_type(annotation, prop.nullable, _unsupported_field(owner, prop.name))


def _open_namespaces(module_name: str) -> list[str]:
    return ["namespace JS {", f"  namespace {helper.native_module_name(module_name)} {{"]


def _close_namespaces() -> list[str]:
    return ["  }", "}"]


def render_struct(module_name: str, struct: StructDescriptor) -> str:
    """Render one struct declaration and its `RCTCxxConvert` category.

    Args:
        module_name (str): The module the struct belongs to.
        struct (StructDescriptor): The struct to render.

    Returns:
        str: The declaration text.
    """
    native_name = helper.native_module_name(module_name)
    spec_name = f"{helper.STRUCT_PREFIX}{struct.name}"

    lines = _open_namespaces(module_name)
    lines.append(f"    struct {spec_name} {{")
    for prop in struct.properties:
        lines.append(f"      {field_type(module_name, struct.name, prop)} {prop.name}() const;")
    if struct.properties:
        lines.append("")
    lines.extend(
        [
            f"      {spec_name}({RAW_VALUE_TYPE} *const v) : _v(v) {{}}",
            "    private:",
            f"      {RAW_VALUE_TYPE} *_v;",
            "    };",
        ]
    )
    lines.extend(_close_namespaces())
    lines.extend(
        [
            "",
            f"@interface RCTCxxConvert ({native_name}_{spec_name})",
            f"+ (RCTManagedPointer *)JS_{native_name}_{spec_name}:(id)json;",
            "@end",
        ]
    )
    return "\n".join(lines)


def _constants_input_type(prop: PropertyDescriptor) -> str:
    annotation = prop.type_annotation
    if isinstance(annotation, ObjectTypeAnnotation):
        base_type = f"{RAW_VALUE_TYPE} *"
    elif isinstance(annotation, ArrayTypeAnnotation):
        base_type = "NSArray *"
    else:
        base_type = translate_field_type(annotation, False, _unsupported_field("Constants", prop.name))

    if prop.nullable:
        return f"folly::Optional<{base_type}>"
    return f"RCTRequired<{base_type}>"


def render_constants(module_name: str, constants: ConstantsDescriptor) -> str:
    """Render the `Constants` struct of a module, with its typed `Builder`.

    Args:
        module_name (str): The module declaring `getConstants`.
        constants (ConstantsDescriptor): The fields of the constants record.

    Returns:
        str: The declaration text.
    """
    lines = _open_namespaces(module_name)
    lines.extend(["    struct Constants {", "", "      struct Builder {", "        struct Input {"])
    for prop in constants.properties:
        lines.append(f"          {_constants_input_type(prop)} {prop.name};")
    lines.extend(
        [
            "        };",
            "",
            "        /** Initialize with a set of values */",
            "        Builder(const Input i);",
            "        /** Initialize with an existing Constants */",
            "        Builder(Constants i);",
            "        /** Builds the object. Generally used only by the infrastructure. */",
            f"        {RAW_VALUE_TYPE} *buildUnsafeRawValue() const {{ return _factory(); }};",
            "      private:",
            f"        {RAW_VALUE_TYPE} *(^_factory)(void);",
            "      };",
            "",
            f"      static Constants fromUnsafeRawValue({RAW_VALUE_TYPE} *const v) {{ return {{v}}; }}",
            f"      {RAW_VALUE_TYPE} *unsafeRawValue() const {{ return _v; }}",
            "    private:",
            f"      Constants({RAW_VALUE_TYPE} *const v) : _v(v) {{}}",
            f"      {RAW_VALUE_TYPE} *_v;",
            "    };",
        ]
    )
    lines.extend(_close_namespaces())
    return "\n".join(lines)


def render_structs(
    module_name: str,
    structs: Iterable[StructDescriptor],
    constants: ConstantsDescriptor | None = None,
) -> str:
    """Render all struct declarations of a module, in collection order.

    The `Constants` struct, if any, comes first.

    Args:
        module_name (str): The module the structs were collected for.
        structs (Iterable[StructDescriptor]): The collected struct descriptors.
        constants (ConstantsDescriptor | None, optional): The module's constants record. Defaults to None.

    Returns:
        str: The declarations, separated by blank lines. Empty if there is nothing to declare.
    """
    blocks: list[str] = []
    if constants is not None:
        blocks.append(render_constants(module_name, constants))

    for struct in structs:
        blocks.append(render_struct(module_name, struct))

    logger.debug(f"Rendered {len(blocks)} struct declaration(s) for module {module_name}.")
    return "\n\n".join(blocks)
