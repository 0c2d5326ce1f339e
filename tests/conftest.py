"""Pytest configuration and fixtures for native module header generator tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from native_module_codegen.loader import load_schema
from native_module_codegen.schema_types import (
    FieldTypeAnnotation,
    Method,
    Module,
    ObjectTypeAnnotation,
    Parameter,
    PropertyDescriptor,
    ReturnAnnotation,
    ReturnTypeAnnotation,
    Schema,
    VoidTypeAnnotation,
)
from native_module_codegen.writer_dto import ModuleGenerationContext

# Test directory structure
TESTS_DIR = Path(__file__).parent
SCHEMAS_DIR = TESTS_DIR / "schemas"

MODULE_NAME = "SampleModule"


def new_param(name: str, annotation: FieldTypeAnnotation, nullable: bool = False) -> Parameter:
    return Parameter(name, annotation, nullable)


def new_property(name: str, annotation: FieldTypeAnnotation, nullable: bool = False) -> PropertyDescriptor:
    return PropertyDescriptor(name, annotation, nullable)


def new_object(*properties: PropertyDescriptor) -> ObjectTypeAnnotation:
    return ObjectTypeAnnotation(tuple(properties))


def new_method(
    name: str,
    params: list[Parameter] | None = None,
    returns: ReturnTypeAnnotation | None = None,
    nullable_return: bool = False,
) -> Method:
    """Create a method; without a return annotation the method returns void."""
    return_annotation = returns if returns is not None else VoidTypeAnnotation()
    return Method(name, tuple(params or []), ReturnAnnotation(return_annotation, nullable_return))


def new_schema(*modules: Module, component: str = "Component") -> Schema:
    return Schema({component: {module.name: module for module in modules}})


def load_fixture_schema(schema_name: str) -> Schema:
    """Load one of the JSON schemas in `tests/schemas`."""
    return load_schema(SCHEMAS_DIR / schema_name)


@pytest.fixture
def context() -> ModuleGenerationContext:
    """A fresh generation context for a module named `SampleModule`."""
    return ModuleGenerationContext(MODULE_NAME)
