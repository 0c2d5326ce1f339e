from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import override

from native_module_codegen.errors import SchemaShapeError
from native_module_codegen.schema_types import PropertyDescriptor


@dataclass(frozen=True)
class StructDescriptor:
    """A record shape that was lifted out of a method signature and given a name.

    Attributes:
        name: The synthesized name, e.g. "SaveOptions" (rendered as "SpecSaveOptions")
        properties: The record fields, in declared order
    """

    name: str
    properties: tuple[PropertyDescriptor, ...]


@dataclass(frozen=True)
class ConstantsDescriptor:
    """The record returned by a module's `getConstants` method.

    It is rendered as the module's `Constants` struct and its `Builder`, not as a regular
    struct descriptor.
    """

    properties: tuple[PropertyDescriptor, ...]


class StructCollection:
    """Ordered collection of the struct descriptors found in one module.

    The collection is created per module, filled while method signatures are built, and handed
    to the struct renderer afterwards.
    """

    def __init__(self) -> None:
        """Initialize an empty collection."""
        self._structs: dict[str, StructDescriptor] = {}

    def add(self, descriptor: StructDescriptor) -> None:
        """Register a struct descriptor.

        Args:
            descriptor: The descriptor to add

        Raises:
            SchemaShapeError: If a struct with the same name was already registered
        """
        if descriptor.name in self._structs:
            raise SchemaShapeError(
                f'Struct name "{descriptor.name}" is synthesized twice. '
                "Rename one of the methods, parameters or fields that produce it."
            )
        self._structs[descriptor.name] = descriptor

    @property
    def names(self) -> list[str]:
        return list(self._structs)

    def __contains__(self, name: object) -> bool:
        return name in self._structs

    def __iter__(self) -> Iterator[StructDescriptor]:
        return iter(self._structs.values())

    def __len__(self) -> int:
        return len(self._structs)

    @override
    def __repr__(self) -> str:
        """Return a readable representation for debugging."""
        return f"StructCollection(structs={self.names})"


@dataclass
class ModuleGenerationContext:
    """Everything that is collected while the methods of one module are translated.

    Attributes:
        module_name: The module being processed (e.g. "SampleTurboModule")
        structs: The struct descriptors found so far
        constants: The `getConstants` record, if the module declares a non-empty one
    """

    module_name: str
    structs: StructCollection = field(default_factory=StructCollection)
    constants: ConstantsDescriptor | None = None
