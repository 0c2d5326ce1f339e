"""Load codegen JSON schemas into the typed schema model.

The expected layout is the one written by the codegen schema parsers::

    {"modules": {"<component>": {"nativeModules": {"<module>": {"properties": [<method>, ...]}}}}}

Only the structure is checked here. Tags the generator does not know are kept as
`UnsupportedTypeAnnotation`, so that translation can report them with the method and parameter
they belong to.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from native_module_codegen.errors import SchemaShapeError
from native_module_codegen.schema_types import (
    AnnotationType,
    ArrayTypeAnnotation,
    BooleanTypeAnnotation,
    FieldTypeAnnotation,
    FloatTypeAnnotation,
    FunctionTypeAnnotation,
    GenericObjectTypeAnnotation,
    Int32TypeAnnotation,
    Method,
    Module,
    NumberTypeAnnotation,
    ObjectTypeAnnotation,
    Parameter,
    PromiseTypeAnnotation,
    PropertyDescriptor,
    ReservedTypeAnnotation,
    ReturnAnnotation,
    Schema,
    StringTypeAnnotation,
    TypeAliasTypeAnnotation,
    UnsupportedTypeAnnotation,
    VoidTypeAnnotation,
)

logger = logging.getLogger(__name__)

_SIMPLE_ANNOTATIONS: dict[str, type] = {
    AnnotationType.STRING: StringTypeAnnotation,
    AnnotationType.NUMBER: NumberTypeAnnotation,
    AnnotationType.FLOAT: FloatTypeAnnotation,
    AnnotationType.INT32: Int32TypeAnnotation,
    AnnotationType.BOOLEAN: BooleanTypeAnnotation,
    AnnotationType.GENERIC_OBJECT: GenericObjectTypeAnnotation,
    AnnotationType.FUNCTION: FunctionTypeAnnotation,
    AnnotationType.VOID: VoidTypeAnnotation,
    AnnotationType.PROMISE: PromiseTypeAnnotation,
}


def _require(data: Any, key: str, where: str) -> Any:
    if not isinstance(data, dict):
        raise SchemaShapeError(f"Expected an object at {where}, found {type(data).__name__}.")
    if key not in data:
        raise SchemaShapeError(f'Missing "{key}" at {where}.')
    return data[key]


def _require_list(data: Any, key: str, where: str) -> list[Any]:
    value = _require(data, key, where)
    if not isinstance(value, list):
        raise SchemaShapeError(f'Expected "{key}" at {where} to be a list.')
    return value


def parse_annotation(data: Any, where: str) -> FieldTypeAnnotation:
    """Parse one type annotation.

    Args:
        data (Any): The JSON object of the annotation.
        where (str): Location of the annotation, used in error messages.

    Returns:
        FieldTypeAnnotation: The parsed annotation.

    Raises:
        SchemaShapeError: If the annotation is not an object or lacks required keys.
    """
    tag = _require(data, "type", where)
    if not isinstance(tag, str):
        raise SchemaShapeError(f"Expected a string type tag at {where}.")

    if tag in _SIMPLE_ANNOTATIONS:
        return _SIMPLE_ANNOTATIONS[tag]()

    if tag == AnnotationType.RESERVED:
        name = _require(data, "name", where)
        if not isinstance(name, str):
            raise SchemaShapeError(f"Expected a string reserved type name at {where}.")
        return ReservedTypeAnnotation(name)

    if tag == AnnotationType.TYPE_ALIAS:
        return TypeAliasTypeAnnotation(data.get("name", ""))

    if tag == AnnotationType.ARRAY:
        element = data.get("elementType")
        if element is None:
            return ArrayTypeAnnotation()
        return ArrayTypeAnnotation(parse_annotation(element, f"{where}.elementType"))

    if tag == AnnotationType.OBJECT:
        properties = data.get("properties") or []
        return ObjectTypeAnnotation(
            tuple(parse_property(prop, f"{where}.properties[{i}]") for i, prop in enumerate(properties))
        )

    logger.debug(f"Keeping unknown type annotation {tag!r} at {where}.")
    return UnsupportedTypeAnnotation(str(tag))


def parse_property(data: Any, where: str) -> PropertyDescriptor:
    """Parse a field of an object annotation. Fields are marked `optional` rather than `nullable`."""
    name = _require(data, "name", where)
    nullable = bool(data.get("optional", data.get("nullable", False)))
    return PropertyDescriptor(name, parse_annotation(_require(data, "typeAnnotation", where), where), nullable)


def parse_method(data: Any, where: str) -> Method:
    name = _require(data, "name", where)
    where = f"{where}({name})"
    function = _require(data, "typeAnnotation", where)

    params = tuple(
        Parameter(
            _require(param, "name", f"{where}.params[{i}]"),
            parse_annotation(_require(param, "typeAnnotation", f"{where}.params[{i}]"), f"{where}.params[{i}]"),
            bool(param.get("nullable", False)),
        )
        for i, param in enumerate(_require_list(function, "params", where))
    )

    return_data = _require(function, "returnTypeAnnotation", where)
    return_type = ReturnAnnotation(
        parse_annotation(return_data, f"{where}.returnTypeAnnotation"),
        bool(return_data.get("nullable", False)),
    )
    return Method(name, params, return_type)


def parse_module(name: str, data: Any, where: str) -> Module:
    properties = _require_list(data, "properties", where)
    return Module(name, tuple(parse_method(prop, f"{where}.properties[{i}]") for i, prop in enumerate(properties)))


def schema_from_dict(data: Any) -> Schema:
    """Build a schema from its JSON representation.

    Components without native modules (e.g. view components) are kept as empty groups.

    Args:
        data (Any): The decoded JSON document.

    Returns:
        Schema: The typed schema.

    Raises:
        SchemaShapeError: If the document does not have the expected structure.
    """
    components = _require(data, "modules", "schema")
    if not isinstance(components, dict):
        raise SchemaShapeError('Expected "modules" to be an object.')

    modules: dict[str, dict[str, Module] | None] = {}
    for component_name, component in components.items():
        where = f"modules.{component_name}"
        native_modules = component.get("nativeModules") if isinstance(component, dict) else None
        if native_modules is None:
            modules[component_name] = None
            continue
        if not isinstance(native_modules, dict):
            raise SchemaShapeError(f'Expected "nativeModules" at {where} to be an object.')

        modules[component_name] = {
            module_name: parse_module(module_name, module, f"{where}.nativeModules.{module_name}")
            for module_name, module in native_modules.items()
        }

    return Schema(modules)


def load_schema(path: str | Path) -> Schema:
    """Load a schema from a JSON file.

    Args:
        path (str | Path): The schema file.

    Returns:
        Schema: The typed schema.

    Raises:
        SchemaShapeError: If the file is not valid JSON or does not have the expected structure.
    """
    with open(path, encoding="utf8") as schema_file:
        try:
            data = json.load(schema_file)
        except json.JSONDecodeError as e:
            raise SchemaShapeError(f"Schema file '{path}' is not valid JSON: {e}") from e

    return schema_from_dict(data)
