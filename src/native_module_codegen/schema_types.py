"""Type definitions for native module schemas.

Annotations are modeled as one frozen dataclass per case. Every class carries the
``type`` tag used by the codegen JSON schema, so tables in `type_mapper` can be keyed
by tag. The unions at the bottom close the set of cases per position.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

from native_module_codegen.errors import SchemaShapeError

ROOT_TAG = "RootTag"
GET_CONSTANTS = "getConstants"


class AnnotationType:
    """Tags of type annotations, as they appear in the codegen schema."""

    RESERVED = "ReservedFunctionValueTypeAnnotation"
    STRING = "StringTypeAnnotation"
    NUMBER = "NumberTypeAnnotation"
    FLOAT = "FloatTypeAnnotation"
    INT32 = "Int32TypeAnnotation"
    BOOLEAN = "BooleanTypeAnnotation"
    GENERIC_OBJECT = "GenericObjectTypeAnnotation"
    ARRAY = "ArrayTypeAnnotation"
    OBJECT = "ObjectTypeAnnotation"
    FUNCTION = "FunctionTypeAnnotation"
    TYPE_ALIAS = "TypeAliasTypeAnnotation"
    VOID = "VoidTypeAnnotation"
    PROMISE = "GenericPromiseTypeAnnotation"


@dataclass(frozen=True)
class ReservedTypeAnnotation:
    name: str
    type: ClassVar[str] = AnnotationType.RESERVED


@dataclass(frozen=True)
class StringTypeAnnotation:
    type: ClassVar[str] = AnnotationType.STRING


@dataclass(frozen=True)
class NumberTypeAnnotation:
    type: ClassVar[str] = AnnotationType.NUMBER


@dataclass(frozen=True)
class FloatTypeAnnotation:
    type: ClassVar[str] = AnnotationType.FLOAT


@dataclass(frozen=True)
class Int32TypeAnnotation:
    type: ClassVar[str] = AnnotationType.INT32


@dataclass(frozen=True)
class BooleanTypeAnnotation:
    type: ClassVar[str] = AnnotationType.BOOLEAN


@dataclass(frozen=True)
class GenericObjectTypeAnnotation:
    type: ClassVar[str] = AnnotationType.GENERIC_OBJECT


@dataclass(frozen=True)
class TypeAliasTypeAnnotation:
    name: str = ""
    type: ClassVar[str] = AnnotationType.TYPE_ALIAS


@dataclass(frozen=True)
class FunctionTypeAnnotation:
    type: ClassVar[str] = AnnotationType.FUNCTION


@dataclass(frozen=True)
class VoidTypeAnnotation:
    type: ClassVar[str] = AnnotationType.VOID


@dataclass(frozen=True)
class PromiseTypeAnnotation:
    type: ClassVar[str] = AnnotationType.PROMISE


@dataclass(frozen=True)
class ArrayTypeAnnotation:
    """An array, optionally typed by its element annotation."""

    element_type: FieldTypeAnnotation | None = None
    type: ClassVar[str] = AnnotationType.ARRAY


@dataclass(frozen=True)
class PropertyDescriptor:
    """A named field of a structured (object) annotation."""

    name: str
    type_annotation: FieldTypeAnnotation
    nullable: bool = False


@dataclass(frozen=True)
class ObjectTypeAnnotation:
    """An anonymous record shape. Its fields keep their declared order."""

    properties: tuple[PropertyDescriptor, ...] = ()
    type: ClassVar[str] = AnnotationType.OBJECT


@dataclass(frozen=True)
class UnsupportedTypeAnnotation:
    """Placeholder for a tag the generator does not know.

    The loader produces it for unknown tags so that the type mapper can report the problem
    together with the method and parameter it was found in.
    """

    type: str


FieldTypeAnnotation = Union[
    ReservedTypeAnnotation,
    StringTypeAnnotation,
    NumberTypeAnnotation,
    FloatTypeAnnotation,
    Int32TypeAnnotation,
    BooleanTypeAnnotation,
    GenericObjectTypeAnnotation,
    TypeAliasTypeAnnotation,
    ArrayTypeAnnotation,
    ObjectTypeAnnotation,
    FunctionTypeAnnotation,
    VoidTypeAnnotation,
    PromiseTypeAnnotation,
    UnsupportedTypeAnnotation,
]

ParamTypeAnnotation = Union[
    ReservedTypeAnnotation,
    StringTypeAnnotation,
    NumberTypeAnnotation,
    FloatTypeAnnotation,
    Int32TypeAnnotation,
    BooleanTypeAnnotation,
    GenericObjectTypeAnnotation,
    TypeAliasTypeAnnotation,
    ArrayTypeAnnotation,
    ObjectTypeAnnotation,
    FunctionTypeAnnotation,
    UnsupportedTypeAnnotation,
]

ReturnTypeAnnotation = Union[
    ReservedTypeAnnotation,
    StringTypeAnnotation,
    NumberTypeAnnotation,
    FloatTypeAnnotation,
    Int32TypeAnnotation,
    BooleanTypeAnnotation,
    GenericObjectTypeAnnotation,
    TypeAliasTypeAnnotation,
    ArrayTypeAnnotation,
    ObjectTypeAnnotation,
    VoidTypeAnnotation,
    PromiseTypeAnnotation,
    UnsupportedTypeAnnotation,
]


@dataclass(frozen=True)
class Parameter:
    name: str
    type_annotation: ParamTypeAnnotation
    nullable: bool = False


@dataclass(frozen=True)
class ReturnAnnotation:
    type_annotation: ReturnTypeAnnotation
    nullable: bool = False


@dataclass(frozen=True)
class Method:
    """A native module method: its positional parameters and its return annotation."""

    name: str
    params: tuple[Parameter, ...]
    return_type: ReturnAnnotation

    @property
    def returns_promise(self) -> bool:
        return isinstance(self.return_type.type_annotation, PromiseTypeAnnotation)


@dataclass(frozen=True)
class Module:
    name: str
    methods: tuple[Method, ...] = ()


@dataclass(frozen=True)
class Schema:
    """Top-level schema: component name -> module group (module name -> module), if any."""

    modules: dict[str, dict[str, Module] | None] = field(default_factory=dict)

    def native_modules(self) -> dict[str, Module]:
        """Flatten all module groups into a single mapping, keyed by module name.

        Components are visited in sorted order, so the result does not depend on the
        insertion order of the input.

        Returns:
            dict[str, Module]: All native modules of the schema.

        Raises:
            SchemaShapeError: If two components declare a module with the same name.
        """
        flattened: dict[str, Module] = {}
        owners: dict[str, str] = {}

        for component_name in sorted(self.modules):
            group = self.modules[component_name]
            if group is None:
                continue

            for module_name, module in group.items():
                if module_name in flattened:
                    raise SchemaShapeError(
                        f'Native module "{module_name}" is declared by both "{owners[module_name]}" '
                        f'and "{component_name}".'
                    )
                flattened[module_name] = module
                owners[module_name] = component_name

        return flattened
